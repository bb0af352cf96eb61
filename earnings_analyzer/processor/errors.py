"""Maps pipeline failures to an HTTP status and a caller-safe message."""

from earnings_analyzer.analysis.exceptions import AnalysisError
from earnings_analyzer.extraction.exceptions import ExtractionError
from earnings_analyzer.processor.exceptions import ProcessorError, UploadValidationError
from earnings_analyzer.storage.exceptions import StorageError

_CLIENT_ERROR_KEYWORDS = (
    "validation",
    "invalid",
    "no file",
    "no usable",
    "empty",
    "too large",
    "exceeds",
    "unsupported",
)

GENERIC_SERVER_ERROR = "Failed to analyze transcript"


def classify_error(exc: Exception) -> tuple[int, str]:
    """Return (status_code, message) for an exception raised by the pipeline."""
    message = str(exc).strip()
    if isinstance(exc, (UploadValidationError, ExtractionError)):
        return 400, message or "Invalid upload"
    if isinstance(exc, (AnalysisError, StorageError, ProcessorError)):
        return 500, message or GENERIC_SERVER_ERROR
    lowered = message.lower()
    if any(keyword in lowered for keyword in _CLIENT_ERROR_KEYWORDS):
        return 400, message
    return 500, GENERIC_SERVER_ERROR
