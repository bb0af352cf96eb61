from collections.abc import Sequence

from earnings_analyzer.analysis.exceptions import AnalysisError
from earnings_analyzer.analysis.factory import AnalyzerFactory
from earnings_analyzer.analysis.models import ProviderName
from earnings_analyzer.config.settings import Settings
from earnings_analyzer.extraction.exceptions import ExtractionError
from earnings_analyzer.extraction.factory import ExtractorFactory
from earnings_analyzer.logging.logger import Log
from earnings_analyzer.processor.exceptions import ProcessorError
from earnings_analyzer.processor.models import UploadedDocument
from earnings_analyzer.processor.pipeline import PipelineContext, PipelineState, PipelineStep
from earnings_analyzer.processor.steps import (
    AnalyzeStep,
    CreateTranscriptStep,
    ExtractTextStep,
    PersistAnalysisStep,
)
from earnings_analyzer.storage.exceptions import StorageError
from earnings_analyzer.storage.models import Transcript
from earnings_analyzer.storage.repositories.transcript_repository import TranscriptRepository

_EXPECTED_ERRORS = (ExtractionError, AnalysisError, StorageError, ProcessorError)


class Processor:
    """Runs one uploaded document through the analysis pipeline.

    Pipeline: extract -> create transcript -> analyze -> persist analysis.
    A failure in any step marks the context failed and is re-raised to the
    caller. A transcript created before the failure is kept.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, document: UploadedDocument, provider: ProviderName) -> Transcript:
        context = PipelineContext(document=document, provider=provider)
        Log.info(
            f"Processing '{document.filename}' ({document.size_bytes} bytes) "
            f"with {provider.label}"
        )
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            failed_in = context.state
            context.state = PipelineState.FAILED
            context.error_message = str(exc)
            message = (
                f"Processing '{document.filename}' failed after state "
                f"{failed_in.value}: {exc}"
            )
            if isinstance(exc, _EXPECTED_ERRORS):
                Log.error(message)
            else:
                Log.exception(message)
            raise

        if context.transcript is None:
            raise RuntimeError("Pipeline finished without a transcript")
        Log.info(f"Transcript {context.transcript.id} completed")
        return context.transcript


def build_processor(settings: Settings, repository: TranscriptRepository) -> Processor:
    """Build a Processor with all required adapters."""
    extractor = ExtractorFactory.create(settings)
    analyzers = AnalyzerFactory.create_all(settings)
    return Processor(
        steps=[
            ExtractTextStep(extractor=extractor),
            CreateTranscriptStep(repository=repository),
            AnalyzeStep(analyzers=analyzers),
            PersistAnalysisStep(repository=repository),
        ]
    )
