"""Text extraction from Office Open XML (.docx) word-processing documents."""

import io
import zipfile
from typing import ClassVar
from xml.etree import ElementTree as ET

from earnings_analyzer.extraction.base import BaseTextExtractor
from earnings_analyzer.extraction.exceptions import ParseFailureError

_W_NS = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"


class DocxAdapter(BaseTextExtractor):
    """Reads the main document part of a .docx container.

    Each paragraph becomes one line; tabs and explicit breaks are kept.
    """

    format_name = "docx"

    DOCUMENT_PART: ClassVar[str] = "word/document.xml"

    def extract(self, data: bytes) -> str:
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as archive:
                xml_payload = archive.read(self.DOCUMENT_PART)
            root = ET.fromstring(xml_payload)
        except (zipfile.BadZipFile, KeyError, ET.ParseError) as exc:
            raise ParseFailureError(self.format_name, str(exc)) from exc

        paragraphs = [self._paragraph_text(p) for p in root.iter(f"{_W_NS}p")]
        return "\n".join(paragraphs).strip()

    @staticmethod
    def _paragraph_text(paragraph: ET.Element) -> str:
        parts: list[str] = []
        for node in paragraph.iter():
            if node.tag == f"{_W_NS}t":
                parts.append(node.text or "")
            elif node.tag == f"{_W_NS}tab":
                parts.append("\t")
            elif node.tag in (f"{_W_NS}br", f"{_W_NS}cr"):
                parts.append("\n")
        return "".join(parts)
