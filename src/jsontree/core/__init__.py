"""
Core modules for jsontree.

This package contains the transformation pipeline:
- types: Data structures (GraphNode, GraphEdge, TreeGraph)
- traverser: JSON value -> nodes and edges
- levels / layout: depth assignment and positions
- matcher: JSONPath highlight matching
- session: action boundary (generate, search, clear)
"""

from .exceptions import (
    GraphNotGeneratedError, JsonTreeError, NodeNotFoundError,
    ParseError, QueryError
)
from .graph import TreeIndex
from .layout import layout, plan_layout
from .levels import assign_levels
from .matcher import MatchOutcome, PathMatcher, match
from .pipeline import build_tree, generate_tree
from .session import TreeSession
from .traverser import Traverser, traverse
from .types import GraphEdge, GraphNode, NodeKind, Position, TreeGraph

__all__ = [
    # Types
    "GraphNode", "GraphEdge", "NodeKind", "Position", "TreeGraph",
    # Errors
    "JsonTreeError", "ParseError", "QueryError",
    "NodeNotFoundError", "GraphNotGeneratedError",
    # Pipeline
    "Traverser", "traverse", "assign_levels", "layout", "plan_layout",
    "build_tree", "generate_tree",
    # Matching
    "MatchOutcome", "PathMatcher", "match",
    # Session
    "TreeSession", "TreeIndex",
]
