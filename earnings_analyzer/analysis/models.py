from dataclasses import dataclass, field
from enum import Enum


class ProviderName(str, Enum):
    """Analysis providers a caller can select."""

    GEMINI = "gemini"
    OPENAI = "openai"

    @property
    def label(self) -> str:
        return {"gemini": "Gemini", "openai": "OpenAI"}[self.value]


@dataclass(frozen=True)
class Revenue:
    """Reported revenue figure."""

    amount: str
    growth: str | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Structured insights extracted from an earnings call transcript.

    Optional fields stay ``None`` when the provider omits them.
    """

    key_themes: list[str] = field(default_factory=list)
    revenue: Revenue | None = None
    eps: str | None = None
    guidance: str | None = None
    future_outlook: str | None = None

    def to_payload(self) -> dict[str, object]:
        """JSON-ready dict using the wire field names; absent fields are omitted."""
        payload: dict[str, object] = {}
        if self.revenue is not None:
            revenue: dict[str, str] = {"amount": self.revenue.amount}
            if self.revenue.growth is not None:
                revenue["growth"] = self.revenue.growth
            payload["revenue"] = revenue
        if self.eps is not None:
            payload["eps"] = self.eps
        if self.guidance is not None:
            payload["guidance"] = self.guidance
        payload["keyThemes"] = list(self.key_themes)
        if self.future_outlook is not None:
            payload["futureOutlook"] = self.future_outlook
        return payload
