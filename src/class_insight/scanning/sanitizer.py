"""Single-pass scrubbing of string literals and comments, plus brace matching.

Both routines are explicit character scanners: every character is visited
once, so running time stays linear on arbitrarily large or malformed input.
"""

from typing import Dict, List, Optional

_BLANK = " "


def sanitize(text: str) -> str:
    """Return *text* with string/char literals and comments blanked.

    The result has exactly the same length as the input. Every character
    belonging to a string literal, char literal, line comment or block
    comment (delimiters included) becomes a space, except newlines, which
    are kept so line structure survives. Everything else is unchanged.

    An unterminated string or block comment is scrubbed to the end of the
    input. A char literal also ends at the end of its line. An escaped
    quote does not close a literal.
    """
    out = list(text)
    n = len(text)
    in_string = False
    in_char = False
    in_line_comment = False
    in_block_comment = False
    escaped = False

    i = 0
    while i < n:
        ch = text[i]

        if in_line_comment:
            if ch == "\n":
                in_line_comment = False
            else:
                out[i] = _BLANK

        elif in_block_comment:
            if ch == "*" and i + 1 < n and text[i + 1] == "/":
                out[i] = _BLANK
                out[i + 1] = _BLANK
                in_block_comment = False
                i += 2
                continue
            if ch != "\n":
                out[i] = _BLANK

        elif in_string or in_char:
            if ch == "\n":
                if in_char:
                    in_char = False
                escaped = False
            else:
                out[i] = _BLANK
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"' and in_string:
                    in_string = False
                elif ch == "'" and in_char:
                    in_char = False

        elif ch == '"':
            in_string = True
            out[i] = _BLANK
        elif ch == "'":
            in_char = True
            out[i] = _BLANK
        elif ch == "/" and i + 1 < n and text[i + 1] == "/":
            in_line_comment = True
            out[i] = _BLANK
        elif ch == "/" and i + 1 < n and text[i + 1] == "*":
            in_block_comment = True
            out[i] = _BLANK
            out[i + 1] = _BLANK
            i += 2
            continue

        i += 1

    return "".join(out)


def find_closing_brace(
    text: str, open_idx: int, open_ch: str = "{", close_ch: str = "}"
) -> Optional[int]:
    """Return the offset of the delimiter closing the one at *open_idx*.

    *text* should already be sanitized so delimiters inside literals and
    comments cannot confuse the depth count. Returns None if *open_idx* does
    not hold *open_ch* or the depth never returns to zero.
    """
    if open_idx < 0 or open_idx >= len(text) or text[open_idx] != open_ch:
        return None

    depth = 0
    for i in range(open_idx, len(text)):
        ch = text[i]
        if ch == open_ch:
            depth += 1
        elif ch == close_ch:
            depth -= 1
            if depth == 0:
                return i
    return None


def match_braces(text: str, open_ch: str = "{", close_ch: str = "}") -> Dict[int, int]:
    """Map every balanced opening delimiter in *text* to its closing one.

    Gives the same answer as :func:`find_closing_brace` for each opening
    delimiter, in one pass over the text. Stray closers are ignored and
    unclosed openers are absent from the mapping.
    """
    matches: Dict[int, int] = {}
    stack: List[int] = []
    for i, ch in enumerate(text):
        if ch == open_ch:
            stack.append(i)
        elif ch == close_ch and stack:
            matches[stack.pop()] = i
    return matches
