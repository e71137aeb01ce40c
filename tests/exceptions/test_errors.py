"""Tests for the exception hierarchy."""

import pytest

from class_insight.exceptions import (
    AnalysisError,
    ClassInsightError,
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
    InvalidPathError,
    RetrievalError,
)


class TestHierarchy:
    """Every error derives from ClassInsightError."""

    @pytest.mark.parametrize(
        "error",
        [
            FileAccessError("A.java", "gone"),
            RetrievalError(["A.java"]),
            InvalidConfigError("workers", 0, "must be at least 1"),
            InvalidPathError("/nope", "missing"),
        ],
    )
    def test_base_class(self, error):
        assert isinstance(error, ClassInsightError)

    def test_grouping(self):
        assert issubclass(FileAccessError, AnalysisError)
        assert issubclass(RetrievalError, AnalysisError)
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert issubclass(InvalidPathError, ConfigurationError)


class TestMessages:
    """Test string rendering with details."""

    def test_details_appended(self):
        error = ClassInsightError("Boom", details={"a": "1"})
        assert str(error) == "Boom (a=1)"

    def test_no_details(self):
        assert str(ClassInsightError("Boom")) == "Boom"

    def test_file_access(self):
        error = FileAccessError("A.java", "gone")
        assert error.filepath == "A.java"
        assert "reason=gone" in str(error)

    def test_retrieval_truncates_file_list(self):
        failed = [f"F{i}.java" for i in range(8)]
        error = RetrievalError(failed)
        assert error.details["failed"] == "8"
        assert error.details["files"].endswith(", ...")
        assert "F5.java" not in error.details["files"]
