"""
Terminal formatting for generated trees and search results.
"""

from typing import Dict, List

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from ..core.palette import TERMINAL_COLORS
from ..core.types import GraphNode, TreeGraph

HIGHLIGHT_MARK = "★"


def _styled_label(node: GraphNode) -> str:
    color = TERMINAL_COLORS[node.kind]
    label = f"[{color}]{escape(node.label)}[/{color}]"
    if node.highlighted:
        label = f"[bold reverse]{label}[/bold reverse] {HIGHLIGHT_MARK}"
    return label


def build_rich_tree(graph: TreeGraph) -> Tree:
    """Nested rich Tree mirroring the node/edge structure."""
    root = graph.root
    if root is None:
        return Tree("[dim]empty[/dim]")

    tree = Tree(_styled_label(root))
    branches: Dict[str, Tree] = {root.id: tree}
    by_id = {node.id: node for node in graph.nodes}

    # Edges are emitted in pre-order, so a parent's branch always exists
    # before its children are attached.
    for edge in graph.edges:
        child = by_id[edge.target]
        branches[child.id] = branches[edge.source].add(_styled_label(child))
    return tree


def build_node_table(nodes: List[GraphNode], title: str = "Nodes") -> Table:
    """Flat table of nodes with level, position and path."""
    table = Table(title=title, show_lines=False)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Level", justify="right")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")
    table.add_column("Kind")
    table.add_column("Path", style="cyan")
    table.add_column("", justify="center")

    for node in nodes:
        color = TERMINAL_COLORS[node.kind]
        x = f"{node.position.x:g}" if node.position else "-"
        y = f"{node.position.y:g}" if node.position else "-"
        table.add_row(
            node.id,
            str(node.level),
            x,
            y,
            f"[{color}]{node.kind.value}[/{color}]",
            escape(node.path),
            HIGHLIGHT_MARK if node.highlighted else "",
        )
    return table


def format_stats(graph: TreeGraph) -> List[str]:
    stats = graph.get_stats()
    kinds = ", ".join(f"{count} {kind}" for kind, count in sorted(stats["nodes_by_kind"].items()))
    return [
        f"Nodes: {stats['total_nodes']} ({kinds})",
        f"Edges: {stats['total_edges']}",
        f"Depth: {stats['depth']}, widest level: {stats['max_width']}",
    ]
