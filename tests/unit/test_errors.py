import pytest

from earnings_analyzer.analysis.exceptions import (
    AnalysisTransportError,
    AnalysisValidationError,
    EmptyResponseError,
    MissingCredentialError,
)
from earnings_analyzer.extraction.exceptions import (
    ContentTooLargeError,
    EmptyContentError,
    ParseFailureError,
)
from earnings_analyzer.processor.errors import GENERIC_SERVER_ERROR, classify_error
from earnings_analyzer.processor.exceptions import UploadValidationError
from earnings_analyzer.storage.exceptions import TranscriptNotFoundError


class TestClassifyError:
    @pytest.mark.parametrize(
        "exc",
        [
            UploadValidationError("No file uploaded"),
            EmptyContentError("no usable text content"),
            ContentTooLargeError("Text content exceeds 5,000,000 characters"),
            ParseFailureError("pdf", "broken xref"),
        ],
    )
    def test_client_errors_are_400(self, exc: Exception) -> None:
        status, message = classify_error(exc)
        assert status == 400
        assert message == str(exc)

    @pytest.mark.parametrize(
        "exc",
        [
            MissingCredentialError("Gemini API key is not configured"),
            EmptyResponseError("OpenAI returned an empty response"),
            AnalysisValidationError("Missing required field: keyThemes"),
            AnalysisTransportError("Gemini request failed: timeout"),
            TranscriptNotFoundError("Transcript 3 not found"),
        ],
    )
    def test_pipeline_errors_are_500(self, exc: Exception) -> None:
        status, message = classify_error(exc)
        assert status == 500
        assert message == str(exc)

    def test_unclassified_validation_message_is_400(self) -> None:
        assert classify_error(ValueError("Invalid multipart body")) == (
            400,
            "Invalid multipart body",
        )

    def test_unclassified_fault_hides_details(self) -> None:
        status, message = classify_error(KeyError("internal_cache_slot_7"))
        assert status == 500
        assert message == GENERIC_SERVER_ERROR
