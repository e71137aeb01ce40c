"""Token-level helpers over sanitized source text.

Every helper here walks the text forward (or a bounded window backward)
with plain string scanning. Nothing builds a backtracking pattern from a
type name, so matching cost stays proportional to the text scanned.
"""

from typing import Dict, Iterator, List, Optional, Set, Tuple

STATEMENT_STOPS = ";{}"
_GENERIC_BREAKERS = ";{}()="


def is_ident_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_" or ch == "$"


def is_ident_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_" or ch == "$"


def iter_word(text: str, word: str, start: int = 0, end: Optional[int] = None) -> Iterator[int]:
    """Yield offsets of whole-word occurrences of *word* in text[start:end]."""
    if not word:
        return
    limit = len(text) if end is None else min(end, len(text))
    size = len(word)
    pos = text.find(word, start, limit)
    while pos != -1:
        after = pos + size
        if (pos == 0 or not is_ident_char(text[pos - 1])) and (
            after >= len(text) or not is_ident_char(text[after])
        ):
            yield pos
        pos = text.find(word, pos + 1, limit)


def find_word(text: str, word: str, start: int = 0, end: Optional[int] = None) -> int:
    """Offset of the first whole-word occurrence of *word*, or -1."""
    return next(iter_word(text, word, start, end), -1)


def contains_word(text: str, word: str) -> bool:
    return find_word(text, word) != -1


def count_word(text: str, word: str) -> int:
    return sum(1 for _ in iter_word(text, word))


def iter_identifiers(text: str) -> Iterator[Tuple[str, int, int]]:
    """Yield ``(identifier, start, end)`` for every identifier in *text*."""
    n = len(text)
    i = 0
    while i < n:
        ch = text[i]
        if is_ident_start(ch):
            j = i + 1
            while j < n and is_ident_char(text[j]):
                j += 1
            yield text[i:j], i, j
            i = j
        elif ch.isdigit():
            # numeric literal such as 10L or 0x1F is not an identifier
            j = i + 1
            while j < n and is_ident_char(text[j]):
                j += 1
            i = j
        else:
            i += 1


def skip_ws(text: str, pos: int) -> int:
    """Offset of the first non-whitespace character at or after *pos*."""
    n = len(text)
    while pos < n and text[pos].isspace():
        pos += 1
    return pos


def skip_ws_back(text: str, pos: int) -> int:
    """Offset of the last non-whitespace character strictly before *pos*, or -1."""
    pos -= 1
    while pos >= 0 and text[pos].isspace():
        pos -= 1
    return pos


def read_ident(text: str, pos: int) -> Tuple[str, int]:
    """Read the identifier starting at *pos*; returns ``("", pos)`` if none."""
    n = len(text)
    if pos >= n or not is_ident_start(text[pos]):
        return "", pos
    end = pos + 1
    while end < n and is_ident_char(text[end]):
        end += 1
    return text[pos:end], end


def char_at(text: str, pos: int) -> str:
    return text[pos] if 0 <= pos < len(text) else ""


def match_angles(text: str) -> Dict[int, int]:
    """Map every closed ``<`` in *text* to its matching ``>``, in one pass.

    A generic argument list never spans ``;{}()=``, so those characters
    drop every ``<`` still open. Stray ``>`` characters are ignored.
    """
    matches: Dict[int, int] = {}
    stack: List[int] = []
    for i, ch in enumerate(text):
        if ch == "<":
            stack.append(i)
        elif ch == ">":
            if stack:
                matches[stack.pop()] = i
        elif ch in _GENERIC_BREAKERS:
            stack.clear()
    return matches


def skip_type_suffix(text: str, pos: int, angles: Optional[Dict[int, int]] = None) -> int:
    """Skip generic arguments and array brackets following a type name.

    ``pos`` points just past the type name. Returns the offset after any
    ``<...>`` group and ``[]`` pairs (whitespace allowed in between). An
    unbalanced ``<`` is returned as is. Callers scanning many type names in
    the same text pass ``angles = match_angles(text)`` once.
    """
    n = len(text)
    pos = skip_ws(text, pos)
    if pos < n and text[pos] == "<":
        if angles is None:
            angles = match_angles(text)
        close = angles.get(pos)
        if close is None:
            return pos
        pos = skip_ws(text, close + 1)
    while pos < n and text[pos] == "[":
        close = skip_ws(text, pos + 1)
        if close < n and text[close] == "]":
            pos = skip_ws(text, close + 1)
        else:
            break
    return pos


def declared_name_after(
    text: str, type_end: int, angles: Optional[Dict[int, int]] = None
) -> Tuple[str, int]:
    """Read the variable/member name that follows a type name ending at *type_end*.

    Returns ``(name, end)`` or ``("", type_end)`` when the type is not
    followed by an identifier.
    """
    pos = skip_type_suffix(text, type_end, angles)
    name, end = read_ident(text, pos)
    if not name:
        return "", type_end
    return name, end


def statement_start(text: str, pos: int, floor: int = 0, stops: str = STATEMENT_STOPS) -> int:
    """Walk back from *pos* to just after the nearest statement delimiter.

    Never goes below *floor*.
    """
    while pos > floor and text[pos - 1] not in stops:
        pos -= 1
    return pos


def modifiers_before(text: str, pos: int, window: int) -> Set[str]:
    """Words in the same statement before *pos*, within *window* characters."""
    floor = max(0, pos - window)
    begin = statement_start(text, pos, floor)
    return {word for word, _, _ in iter_identifiers(text[begin:pos])}


def paren_depths(text: str) -> List[int]:
    """Parenthesis nesting depth at every offset of *text*.

    Stray closing parentheses never push the depth below zero.
    """
    depths = []
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")" and depth > 0:
            depth -= 1
        depths.append(depth)
    return depths


def is_member_access(text: str, pos: int) -> bool:
    """True if the token at *pos* is preceded by a ``.`` (``x.Name``)."""
    return char_at(text, skip_ws_back(text, pos)) == "."


def blank(chars: List[str], start: int, end: int) -> None:
    """Replace chars[start:end] with spaces in place, keeping newlines."""
    for i in range(max(0, start), min(end, len(chars))):
        if chars[i] != "\n":
            chars[i] = " "
