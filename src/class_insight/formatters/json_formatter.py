"""JSON formatter for Class Insight."""

import json

from ..models import AnalysisResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the result as JSON."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result))

    def format(self, result: AnalysisResult) -> str:
        return json.dumps(result.to_dict(), indent=2)
