"""Type declaration extraction and nested-type erasure.

Declarations are discovered on sanitized text:

    [modifiers] (class|interface) Name <heritage clause> { body }

The heritage clause is everything between the name and the opening brace.
Its scan is bounded by the next declaration keyword, so a run of keywords
without bodies cannot make extraction quadratic. Brace spans come from a
single stack-based pass over the file (``match_braces``).
"""

from typing import List, Tuple

from ..logging_config import get_logger
from .models import SourceFile, TypeDeclaration, TypeKind
from .sanitizer import match_braces
from .tokens import (
    char_at,
    blank,
    contains_word,
    is_ident_start,
    iter_identifiers,
    read_ident,
    skip_ws,
    skip_ws_back,
    statement_start,
)

logger = get_logger(__name__)

DECLARATION_KEYWORDS = ("class", "interface")

# A heritage clause never contains these; hitting one first means the
# keyword was not a declaration (``Foo.class;``, ``x = class...``).
_HERITAGE_BREAKERS = ";}=()"


def extract_declarations(
    source: SourceFile, sanitized: str, modifier_lookback: int = 80
) -> Tuple[List[TypeDeclaration], int]:
    """Find every class/interface declaration in a sanitized file.

    Args:
        source: The file the text belongs to (used for the file name)
        sanitized: ``sanitize(source.text)``
        modifier_lookback: Characters searched before the keyword for the
            ``abstract`` modifier

    Returns:
        Tuple of (declarations ordered by body start, number of malformed
        declarations skipped because their body never closes)
    """
    hits = [
        (word, start, end)
        for word, start, end in iter_identifiers(sanitized)
        if word in DECLARATION_KEYWORDS
    ]
    if not hits:
        return [], 0

    braces = match_braces(sanitized)
    declarations: List[TypeDeclaration] = []
    skipped = 0

    for index, (keyword, kw_start, kw_end) in enumerate(hits):
        # Foo.class is a literal, not a declaration
        if char_at(sanitized, skip_ws_back(sanitized, kw_start)) == ".":
            continue

        name_start = skip_ws(sanitized, kw_end)
        if not is_ident_start(char_at(sanitized, name_start)):
            continue
        name, name_end = read_ident(sanitized, name_start)
        if name in DECLARATION_KEYWORDS:
            continue

        limit = hits[index + 1][1] if index + 1 < len(hits) else len(sanitized)
        open_idx = _find_body_open(sanitized, name_end, limit)
        if open_idx is None:
            continue

        close_idx = braces.get(open_idx)
        if close_idx is None:
            logger.debug(f"Skipping malformed declaration {name} in {source.name}: unbalanced body")
            skipped += 1
            continue

        kind = _classify_kind(sanitized, keyword, kw_start, modifier_lookback)
        heritage = " ".join(sanitized[name_end:open_idx].split())
        body = sanitized[open_idx : close_idx + 1]

        declarations.append(
            TypeDeclaration(
                name=name,
                heritage=heritage,
                kind=kind,
                file=source.name,
                start=open_idx,
                end=close_idx,
                body=body,
                denested_body=body,
            )
        )

    return declarations, skipped


def _find_body_open(text: str, pos: int, limit: int):
    """Offset of the ``{`` opening the body, or None if the clause breaks first."""
    for i in range(pos, limit):
        ch = text[i]
        if ch == "{":
            return i
        if ch in _HERITAGE_BREAKERS:
            return None
    return None


def _classify_kind(text: str, keyword: str, kw_start: int, lookback: int) -> TypeKind:
    if keyword == "interface":
        return TypeKind.INTERFACE
    floor = max(0, kw_start - lookback)
    begin = statement_start(text, kw_start, floor)
    if contains_word(text[begin:kw_start], "abstract"):
        return TypeKind.ABSTRACT_CLASS
    return TypeKind.CLASS


def erase_nested_types(declarations: List[TypeDeclaration], sanitized: str) -> None:
    """Attach a de-nested body to every declaration of one file.

    For each declaration, every other declaration strictly inside its body
    is blanked, together with its own signature (walking back to the
    previous ``;``, ``{`` or ``}``). Lengths and newlines are preserved.
    """
    for parent in declarations:
        nested = [other for other in declarations if other is not parent and parent.contains(other)]
        if not nested:
            parent.denested_body = parent.body
            continue

        chars = list(parent.body)
        floor = parent.start + 1
        covered = -1
        for child in sorted(nested, key=lambda d: d.start):
            # already blanked as part of an enclosing nested type
            if child.start < covered:
                continue
            covered = child.end
            # the walk also stops at "{" so a local class leaves its method signature intact
            decl_start = statement_start(sanitized, child.start, floor)
            blank(chars, decl_start - parent.start, child.end + 1 - parent.start)
        parent.denested_body = "".join(chars)
