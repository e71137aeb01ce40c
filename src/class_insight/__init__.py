"""
Class Insight - Structural analysis of class-based source code

Reconstructs declared types and their relationships (inheritance,
realization, composition, aggregation, association, dependency) from
source text with a lexical scanner, computes Martin's coupling metrics,
and renders the result as a PlantUML class diagram.
"""

__version__ = "0.1.0"

from .api import analyze, render
from .config import AnalysisConfig, load_config
from .models import AnalysisResult, TypeReport

__all__ = [
    "analyze",  # Main entry point
    "render",
    "AnalysisConfig",
    "AnalysisResult",
    "TypeReport",
    "load_config",
]
