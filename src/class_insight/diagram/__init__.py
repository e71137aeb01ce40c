"""Class diagram rendering."""

from .external import synthesize_external_types
from .plantuml import DEFAULT_LAYOUT, edge_lines, node_declaration, render

__all__ = [
    "DEFAULT_LAYOUT",
    "edge_lines",
    "node_declaration",
    "render",
    "synthesize_external_types",
]
