from earnings_analyzer.analysis.models import ProviderName
from earnings_analyzer.processor.exceptions import UploadValidationError
from earnings_analyzer.processor.models import UploadedDocument


def build_uploaded_document(
    data: bytes | None,
    filename: str | None,
    mime_type: str | None,
    max_bytes: int,
) -> UploadedDocument:
    """Check the shape and size of an upload before extraction.

    Raises:
        UploadValidationError: if no file was sent or it exceeds max_bytes.
    """
    if data is None:
        raise UploadValidationError("No file uploaded")
    if len(data) > max_bytes:
        raise UploadValidationError(
            f"File size must be less than {max_bytes // (1024 * 1024)}MB"
        )
    return UploadedDocument(
        raw_bytes=data,
        filename=filename or "",
        mime_type=mime_type or "application/octet-stream",
        size_bytes=len(data),
    )


def parse_provider(value: str | None, default: str) -> ProviderName:
    """Resolve the provider field of a request; blank means the default.

    Raises:
        UploadValidationError: if the value names no known provider.
    """
    raw = (value or "").strip().lower() or default.lower()
    try:
        return ProviderName(raw)
    except ValueError as exc:
        supported = [p.value for p in ProviderName]
        raise UploadValidationError(
            f"Invalid provider '{raw}'. Choose from: {supported}"
        ) from exc
