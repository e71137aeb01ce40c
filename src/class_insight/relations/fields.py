"""Field relationship classification: composition, aggregation, association.

Fields are only looked for in the field region of a body, the text before
the first method or constructor signature. That region ends where a
closing parenthesis is followed by ``{`` or ``throws``. Single-line
constructs such as anonymous class initializers can end the region early.
This is accepted as a heuristic limit.

Classification per field, first match wins:

1. composition: declared ``private`` and assigned ``new <Type>`` somewhere
   in the full body
2. aggregation: the type appears in a parameter list, or the field is
   assigned from an expression other than ``new`` / ``null``
3. association: anything else
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..logging_config import get_logger
from ..scanning.tokens import (
    char_at,
    declared_name_after,
    is_ident_char,
    is_member_access,
    iter_word,
    match_angles,
    modifiers_before,
    paren_depths,
    read_ident,
    skip_ws,
    statement_start,
)
from .models import RelationKind, TypeRegistry

logger = get_logger(__name__)

_NON_NAMES = {"extends", "implements", "instanceof", "new", "return", "throws"}


@dataclass(frozen=True)
class FieldInfo:
    """A confirmed field: declared type, name and offset of the name in the body."""

    type_name: str
    name: str
    offset: int


def _starts_word(text: str, pos: int, word: str) -> bool:
    end = pos + len(word)
    return text.startswith(word, pos) and not is_ident_char(char_at(text, end))


def field_region(body: str) -> str:
    """Prefix of *body* preceding the first method or constructor signature."""
    pos = body.find(")")
    while pos != -1:
        nxt = skip_ws(body, pos + 1)
        if char_at(body, nxt) == "{" or _starts_word(body, nxt, "throws"):
            return body[: statement_start(body, pos)]
        pos = body.find(")", pos + 1)
    return body


def extract_fields(body: str, type_names: Sequence[str]) -> List[FieldInfo]:
    """Fields in the field region whose declared type is one of *type_names*.

    A field is ``Type name`` followed by ``;`` or ``=`` (generic arguments
    and array brackets after the type are allowed).
    """
    region = field_region(body)
    angles = match_angles(region)
    fields: List[FieldInfo] = []
    for type_name in type_names:
        for pos in iter_word(region, type_name):
            if is_member_access(region, pos):
                continue
            name, end = declared_name_after(region, pos + len(type_name), angles)
            if not name or name in _NON_NAMES:
                continue
            if char_at(region, skip_ws(region, end)) in (";", "="):
                fields.append(FieldInfo(type_name=type_name, name=name, offset=end - len(name)))
    fields.sort(key=lambda f: f.offset)
    return fields


def _assignments(body: str, field_name: str):
    """Yield the offset of the right-hand side of every plain ``name = ...``."""
    for pos in iter_word(body, field_name):
        eq = skip_ws(body, pos + len(field_name))
        if char_at(body, eq) != "=" or char_at(body, eq + 1) == "=":
            continue
        yield skip_ws(body, eq + 1)


def is_private(body: str, field: FieldInfo, window: int) -> bool:
    """True if ``private`` occurs in the field's statement within *window* chars."""
    return "private" in modifiers_before(body, field.offset, window)


def is_constructed_internally(body: str, field: FieldInfo) -> bool:
    """True if the field is assigned ``new <its own type>`` anywhere in *body*."""
    for rhs in _assignments(body, field.name):
        if not _starts_word(body, rhs, "new"):
            continue
        created, _ = read_ident(body, skip_ws(body, rhs + len("new")))
        if created == field.type_name:
            return True
    return False


def is_supplied_externally(
    body: str,
    field: FieldInfo,
    depths: List[int],
    angles: Optional[Dict[int, int]] = None,
) -> bool:
    """True if the field's type is a parameter type, or the field gets a non-``new`` value.

    Setter methods are covered by the parameter test, as their parameter
    list carries the type.
    """
    if angles is None:
        angles = match_angles(body)
    type_name = field.type_name
    for pos in iter_word(body, type_name):
        if depths[pos] > 0 and not is_member_access(body, pos):
            name, _ = declared_name_after(body, pos + len(type_name), angles)
            if name and name not in _NON_NAMES:
                return True

    for rhs in _assignments(body, field.name):
        if char_at(body, rhs) in ("", ";", ","):
            continue
        if _starts_word(body, rhs, "new") or _starts_word(body, rhs, "null"):
            continue
        return True
    return False


def classify_field(
    body: str,
    field: FieldInfo,
    window: int = 80,
    depths: Optional[List[int]] = None,
    angles: Optional[Dict[int, int]] = None,
) -> RelationKind:
    """Classify one field as composition, aggregation or association."""
    if depths is None:
        depths = paren_depths(body)
    if is_private(body, field, window) and is_constructed_internally(body, field):
        return RelationKind.COMPOSITION
    if is_supplied_externally(body, field, depths, angles):
        return RelationKind.AGGREGATION
    return RelationKind.ASSOCIATION


def resolve_fields(registry: TypeRegistry, window: int = 80) -> int:
    """Classify the fields of every type's latest declaration.

    A type's own name is a candidate field type too (``Node next``). The
    singleton instance field is the one exception: it is drawn as the
    singleton self-edge, so run :func:`detect_singletons` first. Only the
    first field seen per target type is classified.

    Returns:
        Number of relationships recorded
    """
    names = registry.names()
    recorded = 0
    for state in registry.states.values():
        decl = state.declaration
        if decl is None:
            continue
        fields = extract_fields(decl.denested_body, names)
        if not fields:
            continue
        depths = paren_depths(decl.body)
        angles = match_angles(decl.body)
        for info in fields:
            if info.type_name == decl.name and info.name == state.instance_field:
                continue
            existing = state.structural_kind(info.type_name)
            if existing is not None:
                logger.debug(
                    f"{decl.name}.{info.name}: {info.type_name} already related "
                    f"by {existing.value}"
                )
                continue
            kind = classify_field(decl.body, info, window, depths, angles)
            if state.record(kind, info.type_name):
                recorded += 1
    logger.debug(f"Field pass: {recorded} relationships")
    return recorded
