from typing import ClassVar

from earnings_analyzer.config.settings import Settings
from earnings_analyzer.extraction.base import BaseTextExtractor
from earnings_analyzer.extraction.doc_adapter import DocAdapter
from earnings_analyzer.extraction.docx_adapter import DocxAdapter
from earnings_analyzer.extraction.extractor import Extractor
from earnings_analyzer.extraction.pdfplumber_adapter import PdfPlumberAdapter
from earnings_analyzer.extraction.plain_text_adapter import PlainTextAdapter
from earnings_analyzer.extraction.pymupdf_adapter import PyMuPdfAdapter


class ExtractorFactory:
    """Creates the extractor with the configured PDF engine."""

    PDF_ENGINES: ClassVar[dict[str, type[BaseTextExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> Extractor:
        plain_text = PlainTextAdapter()
        adapters: dict[str, BaseTextExtractor] = {
            "txt": plain_text,
            "pdf": cls._create_pdf_adapter(settings.pdf_engine),
            "docx": DocxAdapter(),
            "doc": DocAdapter(),
        }
        return Extractor(
            adapters=adapters,
            fallback=plain_text,
            max_chars=settings.max_content_chars,
        )

    @classmethod
    def _create_pdf_adapter(cls, pdf_engine: str) -> BaseTextExtractor:
        engine = pdf_engine.lower()
        adapter_cls = cls.PDF_ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return adapter_cls()
