"""
Search Command - Highlight nodes matching a JSONPath query.

Builds the tree for the input, runs the query and lists the highlighted
nodes. Matching is by value: every node equal to a query result is
highlighted, wherever it sits in the tree.
"""

import contextlib
import logging
import sys
from typing import IO, List, Optional

import click
from pydantic import BaseModel, Field
from rich.console import Console

from ...core.matcher import MatchOutcome
from ..formatting import build_node_table
from ..renderers import JsonRenderer
from ..utils import echo_error, echo_info, echo_success, echo_warning, load_input, open_session

logger = logging.getLogger(__name__)

console = Console()


# --- API Models ---
class SearchSummary(BaseModel):
    query: str
    match_count: int
    matched_ids: List[str] = Field(default_factory=list)
    matched_paths: List[str] = Field(default_factory=list)
    focus_id: Optional[str] = None
    message: str = ""

    @classmethod
    def from_outcome(cls, outcome: MatchOutcome) -> "SearchSummary":
        paths = {node.id: node.path for node in outcome.nodes}
        return cls(
            query=outcome.query,
            match_count=outcome.match_count,
            matched_ids=outcome.matched_ids,
            matched_paths=[paths[node_id] for node_id in outcome.matched_ids],
            focus_id=outcome.focus_id,
            message=outcome.message,
        )


def print_outcome(outcome: MatchOutcome) -> None:
    """Human-readable search result."""
    if outcome.is_reset:
        echo_info("Empty query: highlights cleared")
        return
    if not outcome.found:
        echo_warning(outcome.message)
        return

    echo_success(outcome.message)
    matched = [node for node in outcome.nodes if node.highlighted]
    if not matched:
        # Results exist but no node holds an equal value (e.g. a slice
        # producing a new list).
        echo_info("No tree node holds a matching value")
        return
    console.print(build_node_table(matched, title=f"Highlighted ({len(matched)})"))
    if outcome.focus_id:
        echo_info(f"Focus: {outcome.focus_id}")


@click.command()
@click.argument("query")
@click.argument("source", type=click.File("r"), required=False)
@click.option("--sample", is_flag=True, help="Use the built-in sample document instead of SOURCE")
@click.option("-c", "--config", "config_path", default=None, help="Path to config.yaml")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def search(query: str, source: Optional[IO[str]], sample: bool, config_path: str, as_json: bool):
    """
    Highlight nodes matching a JSONPath QUERY (e.g. '$.user.name').

    SOURCE is a JSON file, or '-' for stdin.
    """
    renderer = JsonRenderer("search")
    text = load_input(source, sample, renderer if as_json else None)
    session = open_session(config_path)

    with renderer.capture() if as_json else contextlib.nullcontext():
        result = session.generate(text)
        if result.is_ok():
            result = session.search(query)

    if result.is_err():
        error = result.unwrap_err()
        if as_json:
            renderer.render_error(error)
        else:
            echo_error(session.error or session.search_message)
        sys.exit(1)

    outcome = result.unwrap()
    if as_json:
        renderer.render_success(SearchSummary.from_outcome(outcome))
        return
    print_outcome(outcome)
