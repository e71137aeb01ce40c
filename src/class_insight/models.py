"""Result models for Class Insight.

Everything here is immutable: an :class:`AnalysisResult` is built once at
the end of a run and then only read by renderers and formatters.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Tuple

from .relations.models import STRUCTURAL_KINDS, RelationKind
from .scanning.models import FileMetrics, TypeKind

_EMPTY: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class RelationshipSet:
    """Relationship targets of one type, by kind."""

    extends: FrozenSet[str] = _EMPTY
    implements: FrozenSet[str] = _EMPTY
    compositions: FrozenSet[str] = _EMPTY
    aggregations: FrozenSet[str] = _EMPTY
    associations: FrozenSet[str] = _EMPTY
    dependencies: FrozenSet[str] = _EMPTY

    _FIELDS = {
        RelationKind.EXTENDS: "extends",
        RelationKind.IMPLEMENTS: "implements",
        RelationKind.COMPOSITION: "compositions",
        RelationKind.AGGREGATION: "aggregations",
        RelationKind.ASSOCIATION: "associations",
        RelationKind.DEPENDENCY: "dependencies",
    }

    @classmethod
    def from_relations(cls, relations: Mapping[RelationKind, Any]) -> "RelationshipSet":
        return cls(
            **{attr: frozenset(relations.get(kind, ())) for kind, attr in cls._FIELDS.items()}
        )

    def targets(self, kind: RelationKind) -> FrozenSet[str]:
        return getattr(self, self._FIELDS[kind])

    def all_targets(self) -> FrozenSet[str]:
        out: set = set()
        for kind in RelationKind:
            out |= self.targets(kind)
        return frozenset(out)

    def has_structural(self, target: str) -> bool:
        """True if *target* has a relationship stronger than dependency."""
        return any(target in self.targets(kind) for kind in STRUCTURAL_KINDS)

    def to_dict(self) -> Dict[str, List[str]]:
        return {attr: sorted(self.targets(kind)) for kind, attr in self._FIELDS.items()}


@dataclass(frozen=True)
class TypeMetrics:
    """Coupling counters and derived Martin metrics of one declared type."""

    ca: int = 0
    ce: int = 0
    abstractness: float = 0.0  # 1.0 for interfaces / abstract classes
    instability: float = 0.0  # Ce / (Ca + Ce), 0 when isolated
    distance: float = 0.0  # |A_global + I - 1|
    zone: str = "main_sequence"


@dataclass(frozen=True)
class TypeReport:
    """Everything known about one type after analysis."""

    name: str
    kind: TypeKind
    relationships: RelationshipSet = field(default_factory=RelationshipSet)
    metrics: TypeMetrics = field(default_factory=TypeMetrics)
    singleton: bool = False
    external: bool = False  # placeholder synthesized for the diagram only

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind.value,
            "singleton": self.singleton,
            "ca": self.metrics.ca,
            "ce": self.metrics.ce,
            "abstractness": self.metrics.abstractness,
            "instability": self.metrics.instability,
            "distance": self.metrics.distance,
            "zone": self.metrics.zone,
            "relationships": self.relationships.to_dict(),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis run.

    Attributes:
        files: File name -> size / complexity metrics
        types: Declared type name -> report
        abstractness: Abstractness ratio over all declared types (A_global)
        file_paths: Paths as listed by the retrieval collaborator, in order
        failed_files: Paths whose content could not be retrieved
        skipped_declarations: Declarations dropped for an unclosed body
    """

    files: Mapping[str, FileMetrics] = field(default_factory=lambda: MappingProxyType({}))
    types: Mapping[str, TypeReport] = field(default_factory=lambda: MappingProxyType({}))
    abstractness: float = 0.0
    file_paths: Tuple[str, ...] = ()
    failed_files: Tuple[str, ...] = ()
    skipped_declarations: int = 0

    @property
    def has_types(self) -> bool:
        """False signals "no types found" (an empty but valid result)."""
        return bool(self.types)

    def scatter_points(self) -> List[Tuple[str, float, float]]:
        """``(name, instability, abstractness)`` per declared type, sorted by name."""
        return [
            (name, report.metrics.instability, report.metrics.abstractness)
            for name, report in sorted(self.types.items())
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "abstractness": self.abstractness,
            "file_paths": list(self.file_paths),
            "failed_files": list(self.failed_files),
            "skipped_declarations": self.skipped_declarations,
            "files": {
                name: {"size": fm.size, "complexity": fm.complexity}
                for name, fm in sorted(self.files.items())
            },
            "types": {name: report.to_dict() for name, report in sorted(self.types.items())},
        }
