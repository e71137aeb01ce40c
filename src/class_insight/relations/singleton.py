"""Singleton pattern detection."""

from typing import Optional, Sequence

from ..scanning.models import TypeDeclaration
from ..scanning.tokens import (
    char_at,
    declared_name_after,
    is_member_access,
    iter_word,
    match_angles,
    modifiers_before,
    skip_ws,
)
from .methods import DEFAULT_ACCESSORS
from .models import TypeRegistry


def singleton_instance_field(
    declaration: TypeDeclaration,
    accessors: Sequence[str] = DEFAULT_ACCESSORS,
    window: int = 80,
) -> Optional[str]:
    """Name of the instance field if the declaration is a singleton, else None.

    Both halves of the pattern must be present:

    * a ``private static`` field whose type is the declaring type
    * a ``public static`` method returning the declaring type and named
      after one of *accessors*
    """
    body = declaration.body
    name = declaration.name
    wanted = set(accessors)
    angles = match_angles(body)
    instance_field = None
    has_accessor = False

    for pos in iter_word(body, name):
        if is_member_access(body, pos):
            continue
        member, end = declared_name_after(body, pos + len(name), angles)
        if not member:
            continue
        follower = char_at(body, skip_ws(body, end))
        modifiers = modifiers_before(body, pos, window)
        if follower in (";", "=") and {"private", "static"} <= modifiers:
            if instance_field is None:
                instance_field = member
        elif follower == "(" and member in wanted and {"public", "static"} <= modifiers:
            has_accessor = True
        if instance_field is not None and has_accessor:
            return instance_field

    return None


def is_singleton(
    declaration: TypeDeclaration,
    accessors: Sequence[str] = DEFAULT_ACCESSORS,
    window: int = 80,
) -> bool:
    """True if the declaration holds both halves of the singleton pattern."""
    return singleton_instance_field(declaration, accessors, window) is not None


def detect_singletons(
    registry: TypeRegistry, accessors: Sequence[str] = DEFAULT_ACCESSORS, window: int = 80
) -> int:
    """Flag singleton types using each type's latest declaration."""
    flagged = 0
    for state in registry.states.values():
        if state.declaration is None:
            continue
        field_name = singleton_instance_field(state.declaration, accessors, window)
        if field_name is not None:
            state.singleton = True
            state.instance_field = field_name
            flagged += 1
    return flagged
