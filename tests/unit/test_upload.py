import pytest

from earnings_analyzer.analysis.models import ProviderName
from earnings_analyzer.processor.exceptions import UploadValidationError
from earnings_analyzer.processor.upload import build_uploaded_document, parse_provider

FIVE_MB = 5 * 1024 * 1024


class TestBuildUploadedDocument:
    def test_builds_document(self) -> None:
        document = build_uploaded_document(b"abc", "call.txt", "text/plain", FIVE_MB)
        assert document.raw_bytes == b"abc"
        assert document.filename == "call.txt"
        assert document.mime_type == "text/plain"
        assert document.size_bytes == 3

    def test_missing_file_raises(self) -> None:
        with pytest.raises(UploadValidationError, match="No file uploaded"):
            build_uploaded_document(None, None, None, FIVE_MB)

    def test_file_at_limit_is_accepted(self) -> None:
        document = build_uploaded_document(b"a" * FIVE_MB, "call.txt", None, FIVE_MB)
        assert document.size_bytes == FIVE_MB

    def test_oversize_file_raises(self) -> None:
        with pytest.raises(UploadValidationError, match="less than 5MB"):
            build_uploaded_document(b"a" * (FIVE_MB + 1), "call.txt", None, FIVE_MB)

    def test_zero_byte_file_is_left_to_extraction(self) -> None:
        document = build_uploaded_document(b"", "call.txt", None, FIVE_MB)
        assert document.size_bytes == 0

    def test_missing_name_and_type_get_defaults(self) -> None:
        document = build_uploaded_document(b"abc", None, None, FIVE_MB)
        assert document.filename == ""
        assert document.mime_type == "application/octet-stream"


class TestParseProvider:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("gemini", ProviderName.GEMINI),
            ("openai", ProviderName.OPENAI),
            (" OpenAI ", ProviderName.OPENAI),
            (None, ProviderName.GEMINI),
            ("", ProviderName.GEMINI),
        ],
    )
    def test_resolves_provider(self, value: str | None, expected: ProviderName) -> None:
        assert parse_provider(value, default="gemini") is expected

    def test_uses_configured_default(self) -> None:
        assert parse_provider(None, default="openai") is ProviderName.OPENAI

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(UploadValidationError, match="Invalid provider 'claude'"):
            parse_provider("claude", default="gemini")
