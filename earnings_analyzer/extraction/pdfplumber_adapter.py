import io

import pdfplumber

from earnings_analyzer.extraction.base import BaseTextExtractor
from earnings_analyzer.extraction.exceptions import EmptyContentError, ParseFailureError


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts text from PDF using pdfplumber."""

    format_name = "pdf"

    def extract(self, data: bytes) -> str:
        if not data:
            raise EmptyContentError("The uploaded PDF is empty and has no usable text content")
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise ParseFailureError(self.format_name, f"pdfplumber: {exc}") from exc
