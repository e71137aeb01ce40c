"""Inheritance and realization edges from heritage clauses."""

from typing import List, Optional, Tuple

from ..logging_config import get_logger
from ..scanning.tokens import char_at, find_word, read_ident, skip_ws
from .models import RelationKind, TypeRegistry

logger = get_logger(__name__)


def _strip_generics(text: str) -> str:
    """Blank every ``<...>`` group so type parameters cannot leak keywords."""
    chars = list(text)
    depth = 0
    for i, ch in enumerate(text):
        if ch == "<":
            depth += 1
        if depth > 0:
            chars[i] = " "
        if ch == ">" and depth > 0:
            depth -= 1
    return "".join(chars)


def _read_type_name(text: str, pos: int) -> Optional[str]:
    """Read a possibly qualified name at *pos* and return its last segment."""
    name, end = read_ident(text, skip_ws(text, pos))
    if not name:
        return None
    while char_at(text, skip_ws(text, end)) == ".":
        segment, seg_end = read_ident(text, skip_ws(text, skip_ws(text, end) + 1))
        if not segment:
            break
        name, end = segment, seg_end
    return name


def parse_heritage(heritage: str) -> Tuple[Optional[str], List[str]]:
    """Split a heritage clause into its extends target and implements targets.

    >>> parse_heritage("extends Base<T> implements Runnable, java.io.Serializable")
    ('Base', ['Runnable', 'Serializable'])
    """
    text = _strip_generics(heritage)

    extends_target = None
    pos = find_word(text, "extends")
    if pos != -1:
        extends_target = _read_type_name(text, pos + len("extends"))

    implements: List[str] = []
    pos = find_word(text, "implements")
    if pos != -1:
        segment = text[pos + len("implements") :]
        stop = find_word(segment, "permits")
        if stop != -1:
            segment = segment[:stop]
        for item in segment.split(","):
            name = _read_type_name(item, 0)
            if name and name not in implements:
                implements.append(name)

    return extends_target, implements


def resolve_signatures(registry: TypeRegistry) -> int:
    """Record extends/implements targets and count coupling to declared ones.

    Every target is recorded, declared or not; only declared targets (other
    than the type itself) increment the source's Ce and the target's Ca.

    Returns:
        Number of coupling increments applied
    """
    increments = 0
    for decl in registry.declarations:
        state = registry.states[decl.name]
        extends_target, implements = parse_heritage(decl.heritage)

        found = []
        if extends_target:
            found.append((RelationKind.EXTENDS, extends_target))
        found.extend((RelationKind.IMPLEMENTS, target) for target in implements)

        for kind, target in found:
            state.record(kind, target)
            if target in registry and target != decl.name:
                registry.couple(decl.name, target)
                increments += 1

    logger.debug(f"Signature pass: {increments} coupling increments")
    return increments
