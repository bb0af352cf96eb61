from earnings_analyzer.extraction.base import BaseTextExtractor


class PlainTextAdapter(BaseTextExtractor):
    """Decodes raw bytes as UTF-8 text."""

    format_name = "txt"

    def extract(self, data: bytes) -> str:
        return data.decode("utf-8", errors="replace")
