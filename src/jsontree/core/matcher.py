"""
Path Matcher.

Evaluates a JSONPath query against the parsed document and flags every
graph node whose value equals one of the results.

Matching is by value, not by position: if two nodes hold the same value
and the query selects one of them, both are flagged. Query results carry
no reference back to graph nodes, so equal values cannot be told apart.
"""

import logging
from typing import Any, List, Optional

from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.ext import parse as parse_jsonpath
from pydantic import BaseModel, Field

from .document import canonical_json
from .exceptions import QueryError
from .types import GraphNode

logger = logging.getLogger(__name__)

NO_MATCH_MESSAGE = "No match found"


class MatchOutcome(BaseModel):
    """
    Result of one search action.

    `nodes` are copies of the input nodes with highlight flags recomputed.
    `focus_id` names the first matched node in traversal order; views use
    it as a pan/scroll target.
    """
    query: str
    match_count: int = 0
    matched_ids: List[str] = Field(default_factory=list)
    focus_id: Optional[str] = None
    message: str = ""
    nodes: List[GraphNode] = Field(default_factory=list)

    @property
    def is_reset(self) -> bool:
        return not self.query.strip()

    @property
    def found(self) -> bool:
        return self.match_count > 0


def found_message(count: int) -> str:
    return f"Match found! ({count} result(s))"


def evaluate(document: Any, query: str) -> List[Any]:
    """
    Run `query` against `document` and return matched values in order.

    Raises:
        QueryError: If the query is syntactically invalid or fails to
            evaluate against this document.
    """
    try:
        expression = parse_jsonpath(query)
    except JSONPathError as e:
        raise QueryError(query, str(e)) from e

    try:
        return [datum.value for datum in expression.find(document)]
    except (JSONPathError, TypeError, ValueError, KeyError) as e:
        raise QueryError(query, str(e)) from e
    except RecursionError as e:
        raise QueryError(query, "Document is nested too deeply to search") from e


def clear_highlights(nodes: List[GraphNode]) -> List[GraphNode]:
    return [node.with_highlight(False) for node in nodes]


class PathMatcher:
    """Flags nodes that hold a value selected by a JSONPath query."""

    def __init__(self):
        self._logger = logging.getLogger(f"{__name__}.PathMatcher")

    def match(self, document: Any, query: str, nodes: List[GraphNode]) -> MatchOutcome:
        if not query.strip():
            return MatchOutcome(query=query, nodes=clear_highlights(nodes))

        results = evaluate(document, query)
        self._logger.debug(f"Query {query!r} returned {len(results)} value(s)")

        if not results:
            return MatchOutcome(
                query=query,
                message=NO_MATCH_MESSAGE,
                nodes=clear_highlights(nodes),
            )

        updated: List[GraphNode] = []
        matched_ids: List[str] = []
        try:
            wanted = {canonical_json(value) for value in results}
            for node in nodes:
                hit = canonical_json(node.value) in wanted
                if hit:
                    matched_ids.append(node.id)
                updated.append(node.with_highlight(hit))
        except RecursionError as e:
            raise QueryError(query, "Document is nested too deeply to compare values") from e

        return MatchOutcome(
            query=query,
            match_count=len(results),
            matched_ids=matched_ids,
            focus_id=matched_ids[0] if matched_ids else None,
            message=found_message(len(results)),
            nodes=updated,
        )


def match(document: Any, query: str, nodes: List[GraphNode]) -> MatchOutcome:
    """Evaluate `query` and return updated nodes plus match details."""
    return PathMatcher().match(document, query, nodes)
