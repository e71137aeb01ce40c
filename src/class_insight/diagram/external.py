"""Placeholder nodes for relationship targets that were never declared.

Library types such as ``Runnable`` or ``ArrayList`` show up as targets of
heritage clauses and fields. The diagram still draws them, so each one
gets a bare node here. Placeholders never carry metrics and never enter
the abstractness ratio.
"""

from typing import Dict, Mapping, Set

from ..models import TypeReport
from ..scanning.models import TypeKind


def synthesize_external_types(types: Mapping[str, TypeReport]) -> Dict[str, TypeReport]:
    """Build a placeholder report for every undeclared relationship target.

    A placeholder is an interface if any declared type implements it,
    otherwise a concrete class.
    """
    implemented: Set[str] = set()
    referenced: Set[str] = set()
    for report in types.values():
        implemented |= report.relationships.implements
        referenced |= report.relationships.all_targets()

    externals: Dict[str, TypeReport] = {}
    for name in sorted(referenced - set(types)):
        kind = TypeKind.INTERFACE if name in implemented else TypeKind.CLASS
        externals[name] = TypeReport(name=name, kind=kind, external=True)
    return externals
