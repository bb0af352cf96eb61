class AnalysisError(Exception):
    """Raised when transcript analysis fails."""


class MissingCredentialError(AnalysisError):
    """Raised before any network call when a provider API key is not configured."""


class EmptyResponseError(AnalysisError):
    """Raised when the AI provider returns no text content."""


class MalformedResponseError(AnalysisError):
    """Raised when the AI provider response is not a JSON object."""


class AnalysisValidationError(MalformedResponseError):
    """Raised when the parsed response does not fit the analysis result shape."""


class AnalysisTransportError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
