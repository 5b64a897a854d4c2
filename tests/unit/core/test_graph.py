"""Unit tests for the rustworkx-backed tree index."""

import json

import pytest

from jsontree.core.exceptions import NodeNotFoundError
from jsontree.core.graph import TreeIndex
from jsontree.core.pipeline import build_tree, generate_tree
from jsontree.core.types import GraphEdge, GraphNode, NodeKind, TreeGraph


@pytest.fixture
def index(sample_document):
    return TreeIndex.from_graph(build_tree(sample_document))


class TestTreeIndex:
    def test_counts(self, index):
        assert index.node_count == 24
        assert index.edge_count == 23

    def test_lookup(self, index):
        assert index.has_node("node-7")
        assert index.get_node("node-7").path == "$.user.address.city"
        assert index.get_node("node-999") is None
        with pytest.raises(NodeNotFoundError):
            index.require("node-999")

    def test_parent_and_ancestors(self, index):
        assert index.parent("node-0") is None
        assert index.parent("node-7").id == "node-5"
        assert [n.path for n in index.ancestors("node-7")] == ["$", "$.user", "$.user.address"]
        assert index.ancestors("node-0") == []

    def test_descendants_in_traversal_order(self, index):
        assert index.descendants("node-5") == ["node-6", "node-7", "node-8"]
        assert index.descendants("node-23") == []
        assert len(index.descendants("node-0")) == 23

    def test_find_nodes(self, index):
        assert index.find_nodes("CITY") == ["node-7"]
        assert index.find_nodes("items[0]") == ["node-14", "node-15", "node-16", "node-17"]
        assert index.find_nodes("no-such-thing") == []

    def test_valid_tree(self, index):
        assert index.validate() == []

    def test_validate_reports_problems(self):
        def node(node_id):
            return GraphNode(id=node_id, kind=NodeKind.PRIMITIVE, label=node_id, path=node_id)

        graph = TreeGraph(
            nodes=[node("a"), node("b"), node("c")],
            edges=[GraphEdge.between("a", "c"), GraphEdge.between("b", "c")],
        )
        problems = TreeIndex.from_graph(graph).validate()

        assert "expected 1 root, found 2" in problems
        assert any("several parents" in p for p in problems)

    def test_empty(self):
        assert TreeIndex.from_graph(TreeGraph()).validate() == []

    def test_add_node_replaces_existing_id(self, index):
        updated = index.get_node("node-7").with_highlight(True)
        index.add_node(updated)

        assert index.node_count == 24
        assert index.get_node("node-7").highlighted
        assert index.parent("node-7").id == "node-5"
        assert index.descendants("node-5") == ["node-6", "node-7", "node-8"]


class TestTreeGraph:
    def test_stats(self, sample_document):
        stats = build_tree(sample_document).get_stats()
        assert stats["total_nodes"] == 24
        assert stats["total_edges"] == 23
        assert stats["nodes_by_kind"] == {"object": 5, "array": 2, "primitive": 17}
        assert stats["depth"] == 3
        assert stats["max_width"] == 12

    def test_children(self, sample_document):
        graph = build_tree(sample_document)
        assert [n.path for n in graph.children("node-13")] == ["$.items[0]", "$.items[1]"]

    def test_to_dict_contract(self):
        data = build_tree({"a": None}).to_dict()
        node = data["nodes"][1]
        assert set(node) == {
            "id", "kind", "key", "label", "path", "value",
            "level", "position", "highlighted",
        }
        assert node["kind"] == "primitive"
        assert node["position"] == {"x": 0.0, "y": 120.0}
        assert data["edges"] == [{"id": "edge-node-0-node-1", "source": "node-0", "target": "node-1"}]

    def test_to_dict_deeply_nested(self):
        depth = 500
        data = generate_tree("[" * depth + "1" + "]" * depth).to_dict()

        assert len(data["nodes"]) == depth + 1
        assert data["nodes"][-1]["value"] == 1
        assert data["nodes"][-1]["level"] == depth
        encoded = json.dumps(data)
        assert encoded.count("[") >= depth
