"""
Level assignment by breadth-first traversal of the edge set.
"""

from collections import defaultdict, deque
from typing import Dict, Iterable, List

from .types import GraphEdge


def assign_levels(root_id: str, edges: Iterable[GraphEdge]) -> Dict[str, int]:
    """
    Compute each node's depth from the root.

    Children are visited in edge insertion order, so the returned mapping
    iterates in BFS visitation order and is stable for identical input.
    """
    adjacency: Dict[str, List[str]] = defaultdict(list)
    for edge in edges:
        adjacency[edge.source].append(edge.target)

    levels: Dict[str, int] = {}
    queue = deque([(root_id, 0)])

    while queue:
        node_id, level = queue.popleft()
        if node_id in levels:
            continue
        levels[node_id] = level

        for child_id in adjacency.get(node_id, ()):
            if child_id not in levels:
                queue.append((child_id, level + 1))

    return levels


def group_by_level(levels: Dict[str, int]) -> Dict[int, List[str]]:
    """Node IDs per level, each group in BFS encounter order."""
    groups: Dict[int, List[str]] = defaultdict(list)
    for node_id, level in levels.items():
        groups[level].append(node_id)
    return dict(groups)
