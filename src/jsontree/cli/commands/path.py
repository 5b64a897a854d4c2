"""
Path Command - Print the path expression of a node.

The printed path is the payload a viewer copies to the clipboard when a
node is selected. NODE may be an exact node ID or a fragment of a node's
ID, path or label.
"""

import sys
from typing import IO, Optional

import click

from ...core.exceptions import NodeNotFoundError
from ...core.session import TreeSession
from ..utils import echo_error, echo_info, open_session, read_input


def _resolve_node(session: TreeSession, ref: str) -> Optional[str]:
    """Resolve an exact ID or a fragment to a node ID."""
    index = session.index
    if index.has_node(ref):
        return ref

    # A full path is the most common thing to paste back in
    exact_path = [n.id for n in session.graph.nodes if n.path == ref]
    if exact_path:
        return exact_path[0]

    matches = index.find_nodes(ref)
    if not matches:
        return None
    if len(matches) > 1:
        click.echo(f"Ambiguous node '{ref}'. Using first match: {matches[0]}", err=True)
    return matches[0]


@click.command()
@click.argument("node_ref", metavar="NODE")
@click.argument("source", type=click.File("r"), required=False)
@click.option("--sample", is_flag=True, help="Use the built-in sample document instead of SOURCE")
@click.option("--chain", is_flag=True, help="Also show the ancestor chain")
@click.option("-c", "--config", "config_path", default=None, help="Path to config.yaml")
def path(
    node_ref: str,
    source: Optional[IO[str]],
    sample: bool,
    chain: bool,
    config_path: Optional[str],
):
    """
    Print the JSON path of NODE in SOURCE.
    """
    text = read_input(source, use_sample=sample)
    session = open_session(config_path)

    if session.generate(text).is_err():
        echo_error(session.error)
        sys.exit(1)

    node_id = _resolve_node(session, node_ref)
    if node_id is None:
        echo_error(str(NodeNotFoundError(node_ref)))
        sys.exit(1)

    click.echo(session.copy_path(node_id))

    if chain:
        for ancestor in session.index.ancestors(node_id):
            echo_info(f"{ancestor.id}  {ancestor.path}")
