class ExtractionError(Exception):
    """Raised when text cannot be extracted from an uploaded document."""


class EmptyContentError(ExtractionError):
    """Raised when a document yields no usable text."""


class ContentTooLargeError(ExtractionError):
    """Raised when extracted text exceeds the configured character limit."""


class ParseFailureError(ExtractionError):
    """Raised when a format-specific parser fails."""

    def __init__(self, format_name: str, message: str) -> None:
        super().__init__(f"Failed to extract text from {format_name} document: {message}")
        self.format_name = format_name
