"""
JSON Traverser.

Walks a parsed JSON value and flattens it into graph nodes and
parent -> child edges, in pre-order. Nesting depth is unbounded by the JSON
format, so the walk uses an explicit stack instead of recursion.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

from .document import compact_json
from .types import GraphEdge, GraphNode, NodeKind

logger = logging.getLogger(__name__)

ROOT_PATH = "$"
ROOT_LABEL = "root"


@dataclass(frozen=True)
class _Frame:
    """A value waiting to be turned into a node."""
    value: Any
    parent_id: Optional[str]
    parent_path: str
    key: str | int | None
    level: int


def child_path(parent_path: str, key: str | int) -> str:
    """
    Path of a child reached from `parent_path` through `key`.

    Integer keys are array indices and use bracket notation; string keys are
    object members and use dot notation.
    """
    if isinstance(key, int):
        return f"{parent_path}[{key}]"
    return f"{parent_path}.{key}"


def make_label(kind: NodeKind, key: str | int | None, value: Any) -> str:
    """Short display label: a container marker or `key: value`."""
    if kind == NodeKind.OBJECT:
        return "{}" if key is None else f"{{}} {key}"
    if kind == NodeKind.ARRAY:
        return "[]" if key is None else f"[] {key}"
    key_text = ROOT_LABEL if key is None else key
    return f"{key_text}: {compact_json(value)}"


def _children(value: Any, kind: NodeKind) -> Iterator[Tuple[str | int, Any]]:
    if kind == NodeKind.OBJECT:
        return iter(value.items())
    if kind == NodeKind.ARRAY:
        return enumerate(value)
    return iter(())


class Traverser:
    """
    Converts one JSON value into a flat node/edge list.

    Node IDs come from a counter owned by each `traverse` call, so repeated
    or interleaved traversals never share state.
    """

    def __init__(self, id_prefix: str = "node"):
        self.id_prefix = id_prefix
        self._logger = logging.getLogger(f"{__name__}.Traverser")

    def traverse(self, value: Any) -> Tuple[List[GraphNode], List[GraphEdge]]:
        counter = itertools.count()
        nodes: List[GraphNode] = []
        edges: List[GraphEdge] = []

        stack: List[_Frame] = [_Frame(value, None, ROOT_PATH, None, 0)]
        while stack:
            frame = stack.pop()
            node_id = f"{self.id_prefix}-{next(counter)}"
            kind = NodeKind.of(frame.value)
            path = ROOT_PATH if frame.key is None else child_path(frame.parent_path, frame.key)

            nodes.append(GraphNode(
                id=node_id,
                kind=kind,
                key=frame.key,
                label=make_label(kind, frame.key, frame.value),
                path=path,
                value=frame.value,
                level=frame.level,
            ))
            if frame.parent_id is not None:
                edges.append(GraphEdge.between(frame.parent_id, node_id))

            # Reversed so the first child is popped (and numbered) first.
            pending = [
                _Frame(child, node_id, path, key, frame.level + 1)
                for key, child in _children(frame.value, kind)
            ]
            stack.extend(reversed(pending))

        self._logger.debug(f"Traversed {len(nodes)} nodes, {len(edges)} edges")
        return nodes, edges


def traverse(value: Any) -> Tuple[List[GraphNode], List[GraphEdge]]:
    """Flatten a parsed JSON value into (nodes, edges)."""
    return Traverser().traverse(value)
