"""
Tree Session - the action boundary.

A session owns the state a viewer works with: the input text, the parsed
document, the current tree and the last messages. Each user action
(generate, search, clear) runs to completion and either replaces state or
leaves it untouched.

Failure policy: a failed generate keeps the previously generated tree and
its highlight flags; a failed search keeps the tree and flags. Only the
message fields change.
"""

import logging
from typing import Any, Optional

from ..config import Settings
from .document import parse_document
from .exceptions import (
    GraphNotGeneratedError,
    JsonTreeError,
    NodeNotFoundError,
    ParseError,
    QueryError,
)
from .graph import TreeIndex
from .matcher import MatchOutcome, PathMatcher
from .pipeline import build_tree
from .result import Err, Ok, Result
from .types import TreeGraph

logger = logging.getLogger(__name__)


class TreeSession:
    """
    Holds one document and its generated tree.

    Attributes:
        text: Last input text submitted to `generate`.
        document: Parsed document of the last successful generate.
        graph: Current positioned tree (empty before the first generate).
        error: Message from the last failed generate, "" otherwise.
        query: Last query submitted to `search`.
        search_message: Message from the last search.
        focus_id: First matched node of the last search, if any.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._matcher = PathMatcher()
        self._index: Optional[TreeIndex] = None
        self._logger = logging.getLogger(f"{__name__}.TreeSession")
        self._reset()

    def _reset(self) -> None:
        self.text: str = ""
        self.document: Any = None
        self.graph: TreeGraph = TreeGraph()
        self.error: str = ""
        self.query: str = ""
        self.search_message: str = ""
        self.focus_id: Optional[str] = None
        self._index = None
        self._generated = False

    @property
    def has_graph(self) -> bool:
        return self._generated

    @property
    def index(self) -> TreeIndex:
        if not self._generated:
            raise GraphNotGeneratedError("inspect")
        if self._index is None:
            self._index = TreeIndex.from_graph(self.graph)
        return self._index

    def generate(self, text: str) -> Result[TreeGraph, ParseError]:
        """
        Parse `text` and replace the current tree.

        Highlights and search messages are cleared on success. On failure
        the previous tree stays as it was.
        """
        self.text = text
        try:
            document = parse_document(text)
        except ParseError as e:
            self.error = f"Invalid JSON: {e}"
            self._logger.info(self.error)
            return Err(e)

        layout = self.settings.layout
        self.graph = build_tree(document, spacing=layout.spacing, row_height=layout.row_height)
        self.document = document
        self._index = None
        self._generated = True
        self.error = ""
        self.search_message = ""
        self.focus_id = None
        self._logger.debug(f"Generated {self.graph.node_count} nodes")
        return Ok(self.graph)

    def search(self, query: str) -> Result[MatchOutcome, JsonTreeError]:
        """
        Highlight nodes matching `query`.

        An empty query clears all highlights. Positions and edges never
        change.
        """
        self.query = query
        if not self._generated:
            error = GraphNotGeneratedError("search")
            self.search_message = f"Search error: {error.message}"
            return Err(error)

        try:
            outcome = self._matcher.match(self.document, query, self.graph.nodes)
        except QueryError as e:
            self.search_message = f"Search error: {e.message}"
            self._logger.info(self.search_message)
            return Err(e)

        self.graph = self.graph.with_nodes(outcome.nodes)
        if self._index is not None:
            # Same ids and edges, only highlight flags differ
            for node in outcome.nodes:
                self._index.add_node(node)
        self.search_message = outcome.message
        self.focus_id = outcome.focus_id
        return Ok(outcome)

    def clear(self) -> None:
        """Drop input, document, tree and messages."""
        self._reset()

    def copy_path(self, node_id: str) -> str:
        """
        Path of a node, the payload for clipboard copy.

        Raises:
            GraphNotGeneratedError: If nothing has been generated.
            NodeNotFoundError: If `node_id` is not in the current tree.
        """
        if not self._generated:
            raise GraphNotGeneratedError("copy a path")
        node = self.graph.get_node(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node.path
