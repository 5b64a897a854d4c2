"""
Generate Command - Build and lay out the tree for a JSON document.

Prints a node table (or nested tree view) for humans, or the full node and
edge lists as JSON for renderers.
"""

import contextlib
import logging
import sys
from typing import IO, Any, Dict, List, Optional

import click
from pydantic import BaseModel, Field
from rich.console import Console

from ...core.exceptions import JsonTreeError
from ...core.palette import legend
from ..formatting import build_node_table, build_rich_tree, format_stats
from ..renderers import JsonRenderer
from ..utils import echo_error, echo_info, echo_success, echo_warning, load_input, open_session
from .search import SearchSummary, print_outcome

logger = logging.getLogger(__name__)

console = Console()


# --- API Models ---
class GenerateResponse(BaseModel):
    """
    Core output contract plus derived data for renderers.

    Nodes are attached to the dumped payload directly; their values can
    nest deeper than the model serializer accepts.
    """
    edges: List[Dict[str, Any]]
    stats: Dict[str, Any]
    legend: Dict[str, str] = Field(default_factory=dict)
    search: Optional[SearchSummary] = None


@click.command()
@click.argument("source", type=click.File("r"), required=False)
@click.option("--sample", is_flag=True, help="Use the built-in sample document instead of SOURCE")
@click.option("-q", "--query", default=None, help="JSONPath query to highlight after generating")
@click.option("--tree", "show_tree", is_flag=True, help="Show a nested tree instead of a table")
@click.option("-c", "--config", "config_path", default=None, help="Path to config.yaml")
@click.option("--json", "as_json", is_flag=True, help="Output nodes and edges as JSON")
def generate(
    source: Optional[IO[str]],
    sample: bool,
    query: Optional[str],
    show_tree: bool,
    config_path: Optional[str],
    as_json: bool,
):
    """
    Generate a positioned tree from a JSON document.

    SOURCE is a JSON file, or '-' for stdin.

    \b
    Examples:
      jsontree generate data.json
      jsontree generate --sample --query '$.user.address.city'
      cat data.json | jsontree generate - --json
    """
    renderer = JsonRenderer("generate", indent=None)
    text = load_input(source, sample, renderer if as_json else None)
    session = open_session(config_path)

    outcome = None
    with renderer.capture() if as_json else contextlib.nullcontext():
        result = session.generate(text)
        if result.is_ok() and query is not None:
            result = session.search(query)
            if result.is_ok():
                outcome = result.unwrap()

    if result.is_err():
        error = result.unwrap_err()
        if as_json:
            renderer.render_error(error)
        else:
            echo_error(session.error or session.search_message)
        sys.exit(1)

    graph = session.graph
    problems = session.index.validate()
    for problem in problems:
        logger.error(f"Tree invariant violated: {problem}")

    if as_json:
        data = graph.to_dict()
        response = GenerateResponse(
            edges=data["edges"],
            stats=data["stats"],
            legend=legend(session.settings.theme),
            search=SearchSummary.from_outcome(outcome) if outcome else None,
        )
        try:
            renderer.render_success({"nodes": data["nodes"], **response.model_dump(mode="json")})
        except (RecursionError, ValueError) as e:
            logger.debug(f"Serializing {graph.node_count} nodes failed: {e}")
            renderer.render_error(JsonTreeError("Tree is nested too deeply to serialize as JSON"))
            sys.exit(1)
        return

    echo_success("Tree generated")
    for line in format_stats(graph):
        echo_info(line)
    if problems:
        echo_warning(f"{len(problems)} structural problem(s); run with --verbose for details")

    click.echo()
    if show_tree:
        console.print(build_rich_tree(graph))
    else:
        console.print(build_node_table(graph.nodes))

    if outcome is not None:
        click.echo()
        print_outcome(outcome)
