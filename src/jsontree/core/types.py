"""
Core type definitions for jsontree.

The node and edge models form the output contract handed to renderers:
an ordered node list and an ordered parent -> child edge list.
"""

from collections import defaultdict
from enum import StrEnum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(StrEnum):
    """Structural category of a graph node."""
    OBJECT = "object"
    ARRAY = "array"
    PRIMITIVE = "primitive"

    @classmethod
    def of(cls, value: Any) -> "NodeKind":
        """Classify a parsed JSON value. JSON null is a primitive."""
        if value is None:
            return cls.PRIMITIVE
        if isinstance(value, list):
            return cls.ARRAY
        if isinstance(value, dict):
            return cls.OBJECT
        return cls.PRIMITIVE


class Position(BaseModel):
    """Layout coordinates of a node."""
    x: float
    y: float

    model_config = ConfigDict(frozen=True)


class GraphNode(BaseModel):
    """
    One JSON value in the tree.

    `key` is the object key or array index the value was reached through,
    or None for the root.
    """
    id: str
    kind: NodeKind
    key: str | int | None = None
    label: str
    path: str
    value: Any = None
    level: int = 0
    position: Optional[Position] = None
    highlighted: bool = False

    model_config = ConfigDict(frozen=False, extra="ignore")

    def with_position(self, x: float, y: float) -> "GraphNode":
        return self.model_copy(update={"position": Position(x=x, y=y)})

    def with_highlight(self, highlighted: bool) -> "GraphNode":
        if self.highlighted == highlighted:
            return self
        return self.model_copy(update={"highlighted": highlighted})

    def __hash__(self):
        return hash(self.id)


class GraphEdge(BaseModel):
    """Directed parent -> child relationship."""
    id: str
    source: str
    target: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def between(cls, source: str, target: str) -> "GraphEdge":
        return cls(id=f"edge-{source}-{target}", source=source, target=target)


class TreeGraph(BaseModel):
    """
    A generated, positioned tree.

    Nodes are kept in traversal (pre-order) sequence and edges in emission
    order. Both lists are replaced wholesale on regeneration.
    """
    nodes: List[GraphNode] = Field(default_factory=list)
    edges: List[GraphEdge] = Field(default_factory=list)

    @property
    def root(self) -> Optional[GraphNode]:
        return self.nodes[0] if self.nodes else None

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def is_empty(self) -> bool:
        return not self.nodes

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        """Retrieve a node by ID."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def children(self, node_id: str) -> List[GraphNode]:
        """Direct children of a node, in edge order."""
        by_id = {node.id: node for node in self.nodes}
        return [by_id[e.target] for e in self.edges if e.source == node_id]

    def highlighted_ids(self) -> List[str]:
        return [node.id for node in self.nodes if node.highlighted]

    def with_nodes(self, nodes: List[GraphNode]) -> "TreeGraph":
        """Copy of this graph with a replacement node list and the same edges."""
        return TreeGraph(nodes=nodes, edges=self.edges)

    def get_stats(self) -> Dict[str, Any]:
        kind_counts: Dict[str, int] = defaultdict(int)
        level_counts: Dict[int, int] = defaultdict(int)
        for node in self.nodes:
            kind_counts[node.kind.value] += 1
            level_counts[node.level] += 1

        return {
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "nodes_by_kind": dict(kind_counts),
            "depth": max(level_counts) if level_counts else 0,
            "max_width": max(level_counts.values()) if level_counts else 0,
            "highlighted": len(self.highlighted_ids()),
        }

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain-data form of the graph.

        Node values are passed through as parsed rather than through the
        model serializer, whose nesting limit is lower than the parser's.
        """
        return {
            "nodes": [_node_dict(node) for node in self.nodes],
            "edges": [edge.model_dump(mode="json") for edge in self.edges],
            "stats": self.get_stats(),
        }


def _node_dict(node: GraphNode) -> Dict[str, Any]:
    data = node.model_dump(mode="json", exclude={"value"})
    data["value"] = node.value
    return data
