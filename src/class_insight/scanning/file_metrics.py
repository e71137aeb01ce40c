"""File-level metrics: size and control-statement complexity."""

from typing import Optional

from .models import FileMetrics
from .sanitizer import sanitize
from .tokens import count_word

CONTROL_KEYWORDS = ("if", "switch", "for", "while")


def count_lines(text: str) -> int:
    """Number of lines containing something other than whitespace."""
    return sum(1 for line in text.splitlines() if line.strip())


def count_control_statements(sanitized: str) -> int:
    """Whole-word occurrences of the control keywords in sanitized text."""
    return sum(count_word(sanitized, keyword) for keyword in CONTROL_KEYWORDS)


def measure_file(name: str, text: str, sanitized: Optional[str] = None) -> FileMetrics:
    """Compute size and complexity for one file.

    Args:
        name: File name used as the metrics key
        text: Raw file text
        sanitized: Pre-computed ``sanitize(text)``, computed here if omitted
    """
    if sanitized is None:
        sanitized = sanitize(text)
    return FileMetrics(
        name=name,
        size=count_lines(text),
        complexity=count_control_statements(sanitized),
    )
