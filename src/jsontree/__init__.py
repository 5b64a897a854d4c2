"""
jsontree: turn JSON documents into laid-out tree graphs and highlight
JSONPath matches.
"""

__version__ = "0.1.0"
