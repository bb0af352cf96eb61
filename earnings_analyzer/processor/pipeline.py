from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from earnings_analyzer.analysis.models import AnalysisResult, ProviderName
from earnings_analyzer.processor.models import UploadedDocument
from earnings_analyzer.storage.models import Transcript


class PipelineState(str, Enum):
    RECEIVED = "received"
    EXTRACTED = "extracted"
    CREATED = "created"
    ANALYZED = "analyzed"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(slots=True)
class PipelineContext:
    document: UploadedDocument
    provider: ProviderName
    state: PipelineState = PipelineState.RECEIVED
    extracted_text: str = ""
    transcript: Transcript | None = None
    analysis: AnalysisResult | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
