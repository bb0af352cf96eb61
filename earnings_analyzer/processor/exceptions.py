class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class UploadValidationError(ProcessorError):
    """Raised when an upload is missing, too large, or names an unknown provider."""


class UnknownProviderError(ProcessorError):
    """Raised when no analyzer is registered for the requested provider."""
