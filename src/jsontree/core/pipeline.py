"""
Generation pipeline: text -> document -> nodes/edges -> positioned tree.
"""

import logging
from typing import Any

from ..config import LEVEL_HEIGHT, LEVEL_WIDTH
from .document import parse_document
from .layout import plan_layout
from .traverser import traverse
from .types import TreeGraph

logger = logging.getLogger(__name__)


def build_tree(
    document: Any,
    spacing: float = LEVEL_WIDTH,
    row_height: float = LEVEL_HEIGHT,
) -> TreeGraph:
    """Traverse a parsed document and lay it out."""
    nodes, edges = traverse(document)
    positioned = plan_layout(nodes, edges, spacing=spacing, row_height=row_height)
    return TreeGraph(nodes=positioned, edges=edges)


def generate_tree(
    text: str,
    spacing: float = LEVEL_WIDTH,
    row_height: float = LEVEL_HEIGHT,
) -> TreeGraph:
    """
    Parse JSON text and build its positioned tree.

    Raises:
        ParseError: If the text is not valid JSON. Nothing is built.
    """
    document = parse_document(text)
    graph = build_tree(document, spacing=spacing, row_height=row_height)
    logger.debug(f"Generated tree with {graph.node_count} nodes")
    return graph
