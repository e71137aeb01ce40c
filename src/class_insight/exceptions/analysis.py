"""Analysis-related exceptions: file retrieval and input availability."""

from typing import Sequence

from .base import ClassInsightError


class AnalysisError(ClassInsightError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised by a content loader when a single file cannot be retrieved."""

    def __init__(self, filepath: str, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = str(filepath)
        self.reason = reason


class RetrievalError(AnalysisError):
    """Raised when every candidate file failed to load.

    An input with no candidate files at all is not an error; it produces
    an empty result instead.
    """

    def __init__(self, failed: Sequence[str]):
        shown = ", ".join(list(failed)[:5])
        if len(failed) > 5:
            shown += ", ..."
        super().__init__(
            "No source file could be retrieved",
            details={"failed": str(len(failed)), "files": shown},
        )
        self.failed = list(failed)
