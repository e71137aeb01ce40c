"""Exception hierarchy for Class Insight."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    RetrievalError,
)
from .base import ClassInsightError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "ClassInsightError",
    "AnalysisError",
    "FileAccessError",
    "RetrievalError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
