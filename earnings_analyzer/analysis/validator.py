"""Validates a parsed provider response and coerces it into an AnalysisResult."""

from typing import Any

from earnings_analyzer.analysis.exceptions import AnalysisValidationError
from earnings_analyzer.analysis.models import AnalysisResult, Revenue


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Validate raw parsed JSON and build an AnalysisResult.

    Optional fields that are missing or null stay absent. Numbers given for
    text fields are converted to strings.

    Raises:
        AnalysisValidationError: on any validation failure.
    """
    return AnalysisResult(
        key_themes=_build_key_themes(data.get("keyThemes")),
        revenue=_build_revenue(data.get("revenue")),
        eps=_optional_text(data.get("eps"), "eps"),
        guidance=_optional_text(data.get("guidance"), "guidance"),
        future_outlook=_optional_text(data.get("futureOutlook"), "futureOutlook"),
    )


def _build_key_themes(raw: Any) -> list[str]:
    if raw is None:
        raise AnalysisValidationError("Missing required field: keyThemes")
    if not isinstance(raw, list):
        raise AnalysisValidationError("'keyThemes' must be a list")
    themes: list[str] = []
    for i, item in enumerate(raw):
        if not isinstance(item, str):
            raise AnalysisValidationError(f"Key theme at index {i} must be a string")
        themes.append(item)
    return themes


def _build_revenue(raw: Any) -> Revenue | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return Revenue(amount=raw)
    if not isinstance(raw, dict):
        raise AnalysisValidationError("'revenue' must be an object, a string or null")
    amount = _optional_text(raw.get("amount"), "revenue.amount")
    if amount is None:
        raise AnalysisValidationError("'revenue.amount' is required when revenue is given")
    growth = _optional_text(raw.get("growth"), "revenue.growth")
    return Revenue(amount=amount, growth=growth)


def _optional_text(raw: Any, name: str) -> str | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    raise AnalysisValidationError(f"'{name}' must be a string or null")
