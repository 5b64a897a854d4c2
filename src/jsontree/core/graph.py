"""
Tree index backed by rustworkx.

A TreeGraph is a plain ordered list of nodes and edges, which is what
renderers want. Lookups that walk the structure (ancestor chain, subtree,
invariant checks) go through this index instead, which keeps:
- the bimap between string node IDs and rustworkx integer indices,
- the pre-order position of every node, so results come back in
  traversal order regardless of backend ordering.
"""

from typing import Dict, List, Optional, Set

import rustworkx as rx

from .exceptions import NodeNotFoundError
from .types import GraphEdge, GraphNode, TreeGraph


class TreeIndex:
    """
    Read-only structural index over one generated tree.
    """

    def __init__(self):
        self._graph = rx.PyDiGraph(multigraph=False)
        self._id_to_idx: Dict[str, int] = {}
        self._idx_to_id: Dict[int, str] = {}
        self._order: Dict[str, int] = {}

    @classmethod
    def from_graph(cls, graph: TreeGraph) -> "TreeIndex":
        index = cls()
        for node in graph.nodes:
            index.add_node(node)
        for edge in graph.edges:
            index.add_edge(edge)
        return index

    def add_node(self, node: GraphNode) -> None:
        """Add or replace a node."""
        if node.id in self._id_to_idx:
            self._graph[self._id_to_idx[node.id]] = node
            return
        idx = self._graph.add_node(node)
        self._id_to_idx[node.id] = idx
        self._idx_to_id[idx] = node.id
        self._order[node.id] = len(self._order)

    def add_edge(self, edge: GraphEdge) -> None:
        """Add a parent -> child edge. Edges to unknown nodes are ignored."""
        if edge.source not in self._id_to_idx or edge.target not in self._id_to_idx:
            return
        self._graph.add_edge(self._id_to_idx[edge.source], self._id_to_idx[edge.target], edge)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def require(self, node_id: str) -> GraphNode:
        node = self.get_node(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node

    def _sorted(self, node_ids: Set[str]) -> List[str]:
        return sorted(node_ids, key=self._order.__getitem__)

    def parent(self, node_id: str) -> Optional[GraphNode]:
        idx = self._id_to_idx[self.require(node_id).id]
        parents = self._graph.predecessor_indices(idx)
        if len(parents) == 0:
            return None
        return self._graph[parents[0]]

    def ancestors(self, node_id: str) -> List[GraphNode]:
        """Ancestor chain from the root down to the node's parent."""
        chain: List[GraphNode] = []
        current = self.parent(node_id)
        while current is not None:
            chain.append(current)
            current = self.parent(current.id)
        return list(reversed(chain))

    def descendants(self, node_id: str) -> List[str]:
        """All node IDs below `node_id`, in traversal order."""
        idx = self._id_to_idx[self.require(node_id).id]
        found = {self._idx_to_id[i] for i in rx.descendants(self._graph, idx)}
        return self._sorted(found)

    def find_nodes(self, pattern: str) -> List[str]:
        """
        Find nodes whose ID, path or label contains `pattern`.

        Case-insensitive; results in traversal order.
        """
        pattern_lower = pattern.lower()
        found = {
            node.id
            for node in self._graph.nodes()
            if pattern_lower in node.id.lower()
            or pattern_lower in node.path.lower()
            or pattern_lower in node.label.lower()
        }
        return self._sorted(found)

    def validate(self) -> List[str]:
        """
        Check the rooted-tree invariants. Returns a list of problems,
        empty when the structure is a single tree.
        """
        problems: List[str] = []
        node_count = self._graph.num_nodes()
        if node_count == 0:
            return problems

        roots = [i for i in self._graph.node_indices() if self._graph.in_degree(i) == 0]
        if len(roots) != 1:
            problems.append(f"expected 1 root, found {len(roots)}")

        shared = [
            self._idx_to_id[i]
            for i in self._graph.node_indices()
            if self._graph.in_degree(i) > 1
        ]
        if shared:
            problems.append(f"nodes with several parents: {', '.join(self._sorted(set(shared)))}")

        if self._graph.num_edges() != node_count - 1:
            problems.append(f"expected {node_count - 1} edges, found {self._graph.num_edges()}")

        if not rx.is_directed_acyclic_graph(self._graph):
            problems.append("graph contains a cycle")

        return problems

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()
