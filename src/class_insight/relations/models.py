"""Relationship accumulator shared by every resolver stage.

A :class:`TypeRegistry` is created by the analysis engine for one run and
threaded through each stage. It owns one :class:`TypeState` per declared
type name plus the ordered list of every declaration occurrence.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set

from ..logging_config import get_logger
from ..scanning.models import TypeDeclaration, TypeKind

logger = get_logger(__name__)


class RelationKind(Enum):
    """Kinds of directed relationship between two types, strongest first."""

    EXTENDS = "extends"
    IMPLEMENTS = "implements"
    COMPOSITION = "composition"
    AGGREGATION = "aggregation"
    ASSOCIATION = "association"
    DEPENDENCY = "dependency"

    @property
    def is_structural(self) -> bool:
        return self is not RelationKind.DEPENDENCY


STRUCTURAL_KINDS = tuple(kind for kind in RelationKind if kind.is_structural)


def _empty_relations() -> Dict[RelationKind, Set[str]]:
    return {kind: set() for kind in RelationKind}


@dataclass
class TypeState:
    """Mutable per-type state while a run is in progress.

    Ca and Ce only ever grow. The relationship sets keep the first
    structural relationship recorded per target; a dependency is kept only
    while no structural relationship exists for that target.
    """

    name: str
    kind: TypeKind
    declaration: Optional[TypeDeclaration] = None
    relations: Dict[RelationKind, Set[str]] = field(default_factory=_empty_relations)
    ca: int = 0
    ce: int = 0
    singleton: bool = False
    instance_field: Optional[str] = None

    def targets(self, kind: RelationKind) -> Set[str]:
        return self.relations[kind]

    def structural_kind(self, target: str) -> Optional[RelationKind]:
        """The structural relationship already recorded for *target*, if any."""
        for kind in STRUCTURAL_KINDS:
            if target in self.relations[kind]:
                return kind
        return None

    def has_structural(self, target: str) -> bool:
        return self.structural_kind(target) is not None

    def record(self, kind: RelationKind, target: str) -> bool:
        """Record a relationship to *target*; returns False if it was refused."""
        existing = self.structural_kind(target)
        if kind is RelationKind.DEPENDENCY:
            if existing is not None:
                return False
        else:
            if existing is not None and existing is not kind:
                return False
            self.relations[RelationKind.DEPENDENCY].discard(target)
        self.relations[kind].add(target)
        return True


class TypeRegistry:
    """Accumulates declarations, relationships and coupling for one run."""

    def __init__(self) -> None:
        self.states: Dict[str, TypeState] = {}
        self.declarations: List[TypeDeclaration] = []

    def __contains__(self, name: str) -> bool:
        return name in self.states

    def __len__(self) -> int:
        return len(self.states)

    def register(self, declaration: TypeDeclaration) -> TypeState:
        """Add a declaration occurrence.

        A repeated name maps onto the same state: the latest occurrence
        provides the kind and the body used by field and method scanning,
        while relationships and coupling accumulate over all occurrences.
        """
        self.declarations.append(declaration)
        state = self.states.get(declaration.name)
        if state is None:
            state = TypeState(name=declaration.name, kind=declaration.kind)
            self.states[declaration.name] = state
        else:
            logger.debug(
                f"Type {declaration.name} declared again in {declaration.file}; "
                "using the latest body"
            )
            state.kind = declaration.kind
        state.declaration = declaration
        return state

    def names(self) -> List[str]:
        return sorted(self.states)

    def couple(self, source: str, target: str) -> None:
        """Count one reference from *source* to *target* (Ce and Ca)."""
        self.states[source].ce += 1
        self.states[target].ca += 1
