from dataclasses import dataclass
from datetime import datetime

from earnings_analyzer.analysis.models import AnalysisResult, ProviderName


@dataclass(frozen=True)
class Transcript:
    """A stored transcript and its latest analysis, if any."""

    id: int
    content: str
    provider: ProviderName
    created_at: datetime
    analysis: AnalysisResult | None = None

    def to_payload(self) -> dict[str, object]:
        """JSON-ready dict in the shape returned by the HTTP API."""
        return {
            "id": self.id,
            "content": self.content,
            "provider": self.provider.value,
            "analysis": self.analysis.to_payload() if self.analysis is not None else None,
            "createdAt": self.created_at.isoformat(),
        }
