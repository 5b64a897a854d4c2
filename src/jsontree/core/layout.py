"""
Layout Planner.

Places nodes on horizontal rows, one row per level. Each row is centred
on x = 0 on its own; children are not aligned under their parent.
"""

import logging
from typing import Dict, List, Optional

from ..config import LEVEL_HEIGHT, LEVEL_WIDTH
from .levels import assign_levels, group_by_level
from .types import GraphEdge, GraphNode

logger = logging.getLogger(__name__)


def row_offsets(count: int, spacing: float) -> List[float]:
    """X coordinates for `count` nodes centred around zero."""
    start = -((count - 1) * spacing) / 2
    return [start + i * spacing for i in range(count)]


def layout(
    nodes: List[GraphNode],
    edges: List[GraphEdge],
    levels: Dict[str, int],
    spacing: float = LEVEL_WIDTH,
    row_height: float = LEVEL_HEIGHT,
) -> List[GraphNode]:
    """
    Return copies of `nodes` with `level` and `position` set.

    Row membership and order come from `levels`, which must iterate in BFS
    encounter order. Output keeps the input node order.
    """
    placed: Dict[str, GraphNode] = {}
    by_id = {node.id: node for node in nodes}

    for level, node_ids in sorted(group_by_level(levels).items()):
        y = level * row_height
        for node_id, x in zip(node_ids, row_offsets(len(node_ids), spacing)):
            node = by_id.get(node_id)
            if node is None:
                continue
            placed[node_id] = node.model_copy(update={"level": level}).with_position(x, y)

    missing = [node.id for node in nodes if node.id not in placed]
    if missing:
        logger.warning(f"{len(missing)} node(s) unreachable from root, left unplaced")

    logger.debug(f"Placed {len(placed)} nodes on {len(set(levels.values()))} levels")
    return [placed.get(node.id, node) for node in nodes]


def plan_layout(
    nodes: List[GraphNode],
    edges: List[GraphEdge],
    spacing: float = LEVEL_WIDTH,
    row_height: float = LEVEL_HEIGHT,
    root_id: Optional[str] = None,
) -> List[GraphNode]:
    """Assign levels from the root (first node by default) and lay out."""
    if not nodes:
        return []
    levels = assign_levels(root_id or nodes[0].id, edges)
    return layout(nodes, edges, levels, spacing=spacing, row_height=row_height)
