"""
CLI Commands package.

Each command lives in its own module for maintainability.
"""
