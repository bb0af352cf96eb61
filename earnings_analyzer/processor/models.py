from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedDocument:
    """An uploaded file held in memory for the duration of one request."""

    raw_bytes: bytes
    filename: str
    mime_type: str
    size_bytes: int
