"""
Unit tests for the session boundary (generate, search, clear).

Failure policy under test: a failed generate or search leaves the current
tree and its highlight flags exactly as they were.
"""

import json

import pytest

from jsontree.config import LayoutSettings, Settings
from jsontree.core.exceptions import (
    GraphNotGeneratedError, NodeNotFoundError, ParseError, QueryError
)
from jsontree.core.pipeline import generate_tree
from jsontree.core.session import TreeSession


@pytest.fixture
def session():
    return TreeSession()


@pytest.fixture
def sample_text(sample_document):
    return json.dumps(sample_document)


class TestGenerate:
    def test_generate_builds_positioned_tree(self, session, sample_text):
        result = session.generate(sample_text)

        assert result.is_ok()
        graph = result.unwrap()
        assert graph.node_count == 24
        assert graph.edge_count == 23
        assert all(n.position is not None for n in graph.nodes)
        assert session.has_graph
        assert session.error == ""

    def test_invalid_json_produces_nothing(self, session):
        result = session.generate("{invalid")

        assert result.is_err()
        assert isinstance(result.unwrap_err(), ParseError)
        assert session.graph.node_count == 0
        assert session.graph.edge_count == 0
        assert not session.has_graph
        assert session.error.startswith("Invalid JSON: ")
        assert "Expecting property name enclosed in double quotes" in session.error
        assert "line 1, column 2" in session.error

    def test_invalid_json_preserves_previous_tree(self, session, sample_text):
        session.generate(sample_text)
        session.search("$.user.name")
        before = session.graph

        result = session.generate("{invalid")

        assert result.is_err()
        assert session.graph is before
        assert session.graph.highlighted_ids() == ["node-2"]
        assert session.error

    def test_successful_generate_clears_error(self, session, sample_text):
        session.generate("[1,")
        assert session.error
        session.generate(sample_text)
        assert session.error == ""

    def test_regenerate_resets_highlights(self, session, sample_text):
        session.generate(sample_text)
        session.search("$.user.name")
        session.generate(sample_text)
        assert session.graph.highlighted_ids() == []
        assert session.search_message == ""
        assert session.focus_id is None

    def test_regenerate_is_idempotent(self, session, sample_text):
        first = session.generate(sample_text).unwrap()
        second = session.generate(sample_text).unwrap()
        assert first.to_dict() == second.to_dict()

    def test_settings_drive_layout(self, sample_text):
        settings = Settings(layout=LayoutSettings(spacing=100, row_height=40))
        session = TreeSession(settings)
        graph = session.generate(sample_text).unwrap()
        first_level = [n.position.x for n in graph.nodes if n.level == 1]
        assert first_level == [-150, -50, 50, 150]
        assert graph.nodes[1].position.y == 40

    def test_generate_tree_helper(self):
        graph = generate_tree('{"a": [1, 2]}')
        assert [n.path for n in graph.nodes] == ["$", "$.a", "$.a[0]", "$.a[1]"]
        with pytest.raises(ParseError):
            generate_tree("nope")


class TestSearch:
    def test_search_highlights(self, session):
        session.generate('{"a": 1, "b": 1, "c": 2}')
        result = session.search("$.a")

        assert result.is_ok()
        assert session.graph.highlighted_ids() == ["node-1", "node-2"]
        assert session.search_message == "Match found! (1 result(s))"
        assert session.focus_id == "node-1"

    def test_search_refreshes_index_in_place(self, session):
        session.generate('{"a": 1, "b": 2}')
        index = session.index
        assert not index.get_node("node-1").highlighted

        session.search("$.a")

        assert session.index is index
        assert index.get_node("node-1").highlighted
        assert not index.get_node("node-2").highlighted
        assert index.node_count == 3

    def test_search_keeps_positions_and_edges(self, session, sample_text):
        graph = session.generate(sample_text).unwrap()
        session.search("$..price")
        assert [n.position for n in session.graph.nodes] == [n.position for n in graph.nodes]
        assert session.graph.edges == graph.edges

    def test_no_match(self, session):
        session.generate('{"a": 1}')
        outcome = session.search("$.b").unwrap()
        assert outcome.match_count == 0
        assert session.search_message == "No match found"
        assert session.graph.highlighted_ids() == []

    def test_empty_query_clears(self, session):
        session.generate('{"a": 1}')
        session.search("$.a")
        assert session.graph.highlighted_ids()

        session.search("")

        assert session.graph.highlighted_ids() == []
        assert session.search_message == ""

    def test_bad_query_keeps_highlights(self, session):
        session.generate('{"a": 1, "b": 2}')
        session.search("$.b")

        result = session.search("$[")

        assert result.is_err()
        assert isinstance(result.unwrap_err(), QueryError)
        assert session.search_message.startswith("Search error: ")
        assert session.graph.highlighted_ids() == ["node-2"]

    def test_search_uses_generated_document(self, session):
        session.generate('{"a": 1}')
        session.generate("{broken")
        outcome = session.search("$.a").unwrap()
        assert outcome.match_count == 1

    def test_search_before_generate(self, session):
        result = session.search("$.a")
        assert result.is_err()
        assert isinstance(result.unwrap_err(), GraphNotGeneratedError)
        assert session.search_message.startswith("Search error: ")


class TestClearAndCopy:
    def test_clear(self, session, sample_text):
        session.generate(sample_text)
        session.search("$.user")
        session.clear()

        assert session.text == ""
        assert session.document is None
        assert session.graph.is_empty()
        assert session.query == ""
        assert session.search_message == ""
        assert not session.has_graph

    def test_copy_path(self, session, sample_text):
        session.generate(sample_text)
        assert session.copy_path("node-7") == "$.user.address.city"

    def test_copy_path_unknown_node(self, session, sample_text):
        session.generate(sample_text)
        with pytest.raises(NodeNotFoundError):
            session.copy_path("node-999")

    def test_copy_path_before_generate(self, session):
        with pytest.raises(GraphNotGeneratedError):
            session.copy_path("node-0")
