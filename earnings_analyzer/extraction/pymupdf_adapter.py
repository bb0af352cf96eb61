import pymupdf

from earnings_analyzer.extraction.base import BaseTextExtractor
from earnings_analyzer.extraction.exceptions import EmptyContentError, ParseFailureError


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts text from PDF using PyMuPDF."""

    format_name = "pdf"

    def extract(self, data: bytes) -> str:
        if not data:
            raise EmptyContentError("The uploaded PDF is empty and has no usable text content")
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise ParseFailureError(self.format_name, f"pymupdf: {exc}") from exc
