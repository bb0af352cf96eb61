from collections.abc import Mapping
from pathlib import PurePath

from earnings_analyzer.extraction.base import BaseTextExtractor
from earnings_analyzer.extraction.exceptions import (
    ContentTooLargeError,
    EmptyContentError,
    ExtractionError,
    ParseFailureError,
)
from earnings_analyzer.logging.logger import Log
from earnings_analyzer.processor.models import UploadedDocument


class Extractor:
    """Turns an uploaded document into plain text.

    The format is chosen from the filename extension; the declared MIME type
    is not trusted. Unknown or missing extensions are read as UTF-8 text.
    """

    DEFAULT_MAX_CHARS = 5_000_000

    def __init__(
        self,
        adapters: Mapping[str, BaseTextExtractor],
        fallback: BaseTextExtractor,
        max_chars: int = DEFAULT_MAX_CHARS,
    ) -> None:
        self._adapters = dict(adapters)
        self._fallback = fallback
        self._max_chars = max_chars

    def extract(self, document: UploadedDocument) -> str:
        """Extract and check the text of an uploaded document.

        Raises:
            EmptyContentError: if no non-whitespace text remains.
            ContentTooLargeError: if the text exceeds the character limit.
            ParseFailureError: if the format parser fails.
        """
        adapter = self.adapter_for(document.filename)
        Log.info(
            f"Extracting {document.size_bytes} bytes from '{document.filename}' "
            f"as {adapter.format_name}"
        )
        try:
            text = adapter.extract(document.raw_bytes)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ParseFailureError(adapter.format_name, str(exc)) from exc

        if not text.strip():
            raise EmptyContentError("The uploaded document contains no usable text content")
        if len(text) > self._max_chars:
            raise ContentTooLargeError(
                f"Text content exceeds {self._max_chars:,} characters ({len(text):,})"
            )
        return text

    def adapter_for(self, filename: str) -> BaseTextExtractor:
        extension = PurePath(filename).suffix.lower().lstrip(".")
        return self._adapters.get(extension, self._fallback)
