from collections.abc import Mapping

from earnings_analyzer.analysis.base import BaseAnalysisProvider
from earnings_analyzer.analysis.models import ProviderName
from earnings_analyzer.extraction.extractor import Extractor
from earnings_analyzer.logging.logger import Log
from earnings_analyzer.processor.exceptions import UnknownProviderError
from earnings_analyzer.processor.pipeline import PipelineContext, PipelineState, PipelineStep
from earnings_analyzer.storage.repositories.transcript_repository import TranscriptRepository


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: Extractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._extractor.extract(context.document)
        context.state = PipelineState.EXTRACTED
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from '{context.document.filename}'"
        )
        return context


class CreateTranscriptStep(PipelineStep):
    def __init__(self, repository: TranscriptRepository) -> None:
        self._repository = repository

    def run(self, context: PipelineContext) -> PipelineContext:
        context.transcript = self._repository.create(context.extracted_text, context.provider)
        context.state = PipelineState.CREATED
        Log.info(f"Created transcript {context.transcript.id}")
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzers: Mapping[ProviderName, BaseAnalysisProvider]) -> None:
        self._analyzers = dict(analyzers)

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.transcript is None:
            raise ValueError("PipelineContext.transcript must be set before analysis")
        analyzer = self._analyzers.get(context.provider)
        if analyzer is None:
            raise UnknownProviderError(f"No analyzer configured for '{context.provider.value}'")
        context.analysis = analyzer.analyze(context.transcript.content)
        context.state = PipelineState.ANALYZED
        Log.info(
            f"Analyzed transcript {context.transcript.id} with {context.provider.label}"
        )
        return context


class PersistAnalysisStep(PipelineStep):
    def __init__(self, repository: TranscriptRepository) -> None:
        self._repository = repository

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.transcript is None or context.analysis is None:
            raise ValueError("PipelineContext.analysis must be set before persist")
        context.transcript = self._repository.update_analysis(
            context.transcript.id,
            context.analysis,
        )
        context.state = PipelineState.COMPLETED
        return context
