"""Public API for Class Insight.

The core is two calls: :func:`analyze` turns a list of file paths plus a
content loader into an immutable :class:`AnalysisResult`, and
:func:`render` turns that result into PlantUML text.

Example:
    >>> from class_insight import analyze, render
    >>> from class_insight.sources import DirectoryLoader
    >>>
    >>> loader = DirectoryLoader("path/to/project")
    >>> result = analyze(loader.list_files(), loader)
    >>> print(render(result))
"""

from __future__ import annotations

from typing import Iterable, Optional

from .analysis.engine import AnalysisEngine, ContentLoader
from .config import DEFAULT_CONFIG, AnalysisConfig
from .diagram import plantuml
from .logging_config import get_logger
from .models import AnalysisResult

logger = get_logger(__name__)


def analyze(
    file_paths: Iterable[str],
    content_loader: ContentLoader,
    config: Optional[AnalysisConfig] = None,
) -> AnalysisResult:
    """Analyze the source files named by *file_paths*.

    Args:
        file_paths: Paths as listed by the retrieval collaborator. Paths
            without a configured extension are kept in the result's path
            list but not analyzed.
        content_loader: Callable returning the text of one path. It may raise
            :class:`FileAccessError` or :class:`OSError`; that file is then
            skipped.
        config: Analysis configuration (defaults when None). Configuration
            files are not consulted here; use :func:`load_config` for that.

    Returns:
        Immutable analysis result

    Raises:
        RetrievalError: If there were files to analyze and none could be loaded
    """
    return AnalysisEngine(config or DEFAULT_CONFIG).analyze(file_paths, content_loader)


def render(result: AnalysisResult, config: Optional[AnalysisConfig] = None) -> str:
    """Render *result* as PlantUML class diagram text."""
    config = config or DEFAULT_CONFIG
    return plantuml.render(result, layout=config.diagram_layout)
