"""Transient type usage (dependency) and singleton accessor usage (association)."""

from typing import List, Optional, Sequence, Set

from ..logging_config import get_logger
from ..scanning.tokens import (
    char_at,
    declared_name_after,
    is_member_access,
    iter_word,
    match_angles,
    paren_depths,
    read_ident,
    skip_ws,
)
from .models import RelationKind, TypeRegistry

logger = get_logger(__name__)

DEFAULT_ACCESSORS = ("getInstance", "instance", "get")

# What may follow ``Type name`` for the pair to count as a usage:
# a method name before its parameter list, or a local variable
_USAGE_FOLLOWERS = ("(", "=", ";", ":", ",", ")")


def find_singleton_usages(
    body: str, type_names: Sequence[str], accessors: Sequence[str] = DEFAULT_ACCESSORS
) -> Set[str]:
    """Types accessed as ``Type.getInstance(`` (or another accessor) in *body*."""
    wanted = set(accessors)
    found: Set[str] = set()
    for type_name in type_names:
        for pos in iter_word(body, type_name):
            if is_member_access(body, pos):
                continue
            dot = skip_ws(body, pos + len(type_name))
            if char_at(body, dot) != ".":
                continue
            accessor, end = read_ident(body, skip_ws(body, dot + 1))
            if accessor in wanted and char_at(body, skip_ws(body, end)) == "(":
                found.add(type_name)
                break
    return found


def find_transient_usages(
    body: str, type_names: Sequence[str], depths: Optional[List[int]] = None
) -> Set[str]:
    """Types used as a parameter, return type or local variable type in *body*.

    These are token adjacency tests: ``Type name`` inside parentheses is a
    parameter; ``Type name(`` is a return type; ``Type name =`` / ``;`` /
    ``:`` is a local variable.
    """
    if depths is None:
        depths = paren_depths(body)
    angles = match_angles(body)
    found: Set[str] = set()
    for type_name in type_names:
        for pos in iter_word(body, type_name):
            if is_member_access(body, pos):
                continue
            name, end = declared_name_after(body, pos + len(type_name), angles)
            if not name or name == "instanceof":
                continue
            if depths[pos] > 0 or char_at(body, skip_ws(body, end)) in _USAGE_FOLLOWERS:
                found.add(type_name)
                break
    return found


def resolve_method_usages(
    registry: TypeRegistry, accessors: Sequence[str] = DEFAULT_ACCESSORS
) -> int:
    """Record singleton associations, then dependencies, for every type.

    Only targets without a structural relationship are considered, and
    singleton associations are recorded before dependencies so that the
    dependency pass skips them.

    Returns:
        Number of relationships recorded
    """
    names = registry.names()
    recorded = 0
    for state in registry.states.values():
        decl = state.declaration
        if decl is None:
            continue
        body = decl.denested_body
        candidates = [n for n in names if n != decl.name and not state.has_structural(n)]
        if not candidates:
            continue

        for target in sorted(find_singleton_usages(body, candidates, accessors)):
            if state.record(RelationKind.ASSOCIATION, target):
                recorded += 1

        remaining = [n for n in candidates if not state.has_structural(n)]
        for target in sorted(find_transient_usages(body, remaining)):
            if state.record(RelationKind.DEPENDENCY, target):
                recorded += 1

    logger.debug(f"Method pass: {recorded} relationships")
    return recorded
