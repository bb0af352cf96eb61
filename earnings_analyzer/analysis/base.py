from abc import ABC, abstractmethod

from earnings_analyzer.analysis.models import AnalysisResult


class BaseAnalysisProvider(ABC):
    """Contract for all transcript analysis providers."""

    @abstractmethod
    def analyze(self, text: str) -> AnalysisResult:
        """Extract structured financial insights from transcript text.

        Args:
            text: Plain transcript text from the extraction step.

        Returns:
            AnalysisResult with revenue, EPS, guidance, themes and outlook.

        Raises:
            AnalysisError: on any failure.
        """
