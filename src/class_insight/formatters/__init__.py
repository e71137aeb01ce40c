"""Output formatters for Class Insight."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "rich": RichFormatter,
        "json": JsonFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "RichFormatter",
    "get_formatter",
]
