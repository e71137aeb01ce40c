"""Analysis pipeline orchestration."""

from .engine import AnalysisEngine, ContentLoader

__all__ = ["AnalysisEngine", "ContentLoader"]
