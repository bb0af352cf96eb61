class StorageError(Exception):
    """Base exception for all storage-related errors."""


class TranscriptNotFoundError(StorageError):
    """Raised when a transcript cannot be found in the repository."""
