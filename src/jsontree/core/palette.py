"""
Node colours per kind and theme.

Renderers derive their styling from `kind` and `highlighted`; this table
is the shared legend so every view colours kinds the same way.
"""

from typing import Dict

from .types import NodeKind

PALETTE: Dict[str, Dict[NodeKind, str]] = {
    "light": {
        NodeKind.OBJECT: "#818cf8",
        NodeKind.ARRAY: "#34d399",
        NodeKind.PRIMITIVE: "#fbbf24",
    },
    "dark": {
        NodeKind.OBJECT: "#6366f1",
        NodeKind.ARRAY: "#10b981",
        NodeKind.PRIMITIVE: "#f59e0b",
    },
}

# Terminal colours used by the CLI for the same legend
TERMINAL_COLORS: Dict[NodeKind, str] = {
    NodeKind.OBJECT: "blue",
    NodeKind.ARRAY: "green",
    NodeKind.PRIMITIVE: "yellow",
}


def node_color(kind: NodeKind, theme: str = "light") -> str:
    return PALETTE.get(theme, PALETTE["light"])[NodeKind(kind)]


def legend(theme: str = "light") -> Dict[str, str]:
    return {kind.value: node_color(kind, theme) for kind in NodeKind}
