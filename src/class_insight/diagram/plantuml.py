"""PlantUML class diagram rendering.

Output is deterministic: nodes and edges are emitted in name order, so two
runs over the same sources produce byte-identical text.
"""

from typing import List, Mapping

from ..logging_config import get_logger
from ..models import AnalysisResult, TypeReport
from ..relations.models import RelationKind
from ..scanning.models import TypeKind
from .external import synthesize_external_types

logger = get_logger(__name__)

DEFAULT_LAYOUT = "smetana"

# Spot letter, spot colour and label per node style
SINGLETON_STEREOTYPE = "<< (S,#FF7700) singleton >>"
STEREOTYPES = {
    TypeKind.INTERFACE: "<< (I,#87CEEB) >>",
    TypeKind.ABSTRACT_CLASS: "<< (A,#FFD700) >>",
    TypeKind.CLASS: "<< (C,#90EE90) >>",
}

KEYWORDS = {
    TypeKind.INTERFACE: "interface",
    TypeKind.ABSTRACT_CLASS: "abstract class",
    TypeKind.CLASS: "class",
}

ARROWS = {
    RelationKind.EXTENDS: "--|>",
    RelationKind.IMPLEMENTS: "..|>",
    RelationKind.COMPOSITION: "*--",
    RelationKind.AGGREGATION: "o--",
    RelationKind.ASSOCIATION: "--",
    RelationKind.DEPENDENCY: "..>",
}


def node_declaration(report: TypeReport) -> str:
    """Node block for one type; singleton styling wins over kind styling."""
    if report.singleton:
        return f"class {report.name} {SINGLETON_STEREOTYPE} {{\n}}"
    return f"{KEYWORDS[report.kind]} {report.name} {STEREOTYPES[report.kind]} {{\n}}"


def edge_lines(report: TypeReport) -> List[str]:
    """Edges leaving one type, grouped by kind and sorted by target."""
    rels = report.relationships
    lines: List[str] = []
    for kind in RelationKind:
        arrow = ARROWS[kind]
        for target in sorted(rels.targets(kind)):
            if kind is RelationKind.DEPENDENCY and rels.has_structural(target):
                continue
            lines.append(f"{report.name} {arrow} {target}")
    if report.singleton:
        lines.append(f"{report.name} o-- {report.name} : -instance")
    return lines


def _nodes(result: AnalysisResult) -> Mapping[str, TypeReport]:
    nodes = dict(synthesize_external_types(result.types))
    nodes.update(result.types)
    return nodes


def render(result: AnalysisResult, layout: str = DEFAULT_LAYOUT) -> str:
    """Render *result* as PlantUML source text.

    A result without types renders as header and footer only.
    """
    lines = ["@startuml"]
    if layout:
        lines.append(f"!pragma layout {layout}")
    lines.append("hide empty members")
    lines.append("")

    nodes = _nodes(result)
    for name in sorted(nodes):
        lines.append(node_declaration(nodes[name]))

    edges: List[str] = []
    for name in sorted(nodes):
        edges.extend(edge_lines(nodes[name]))
    if edges:
        lines.append("")
        lines.extend(edges)

    lines.append("")
    lines.append("@enduml")

    logger.debug(f"Rendered {len(nodes)} nodes and {len(edges)} edges")
    return "\n".join(lines) + "\n"
