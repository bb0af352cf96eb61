import threading
from dataclasses import replace
from datetime import datetime, timezone

from earnings_analyzer.analysis.models import AnalysisResult, ProviderName
from earnings_analyzer.storage.exceptions import TranscriptNotFoundError
from earnings_analyzer.storage.models import Transcript


class TranscriptRepository:
    """In-memory transcript store for the lifetime of the process.

    Records are immutable; updates swap in a new record under the lock, so
    readers never observe a partial write.
    """

    def __init__(self) -> None:
        self._transcripts: dict[int, Transcript] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, content: str, provider: ProviderName) -> Transcript:
        """Store a new transcript with no analysis and return it."""
        with self._lock:
            transcript = Transcript(
                id=self._next_id,
                content=content,
                provider=provider,
                created_at=datetime.now(timezone.utc),
            )
            self._transcripts[transcript.id] = transcript
            self._next_id += 1
        return transcript

    def update_analysis(self, transcript_id: int, analysis: AnalysisResult) -> Transcript:
        """Replace the analysis of a transcript and return the updated record.

        Raises:
            TranscriptNotFoundError: if no transcript with this ID exists.
        """
        with self._lock:
            current = self._transcripts.get(transcript_id)
            if current is None:
                raise TranscriptNotFoundError(f"Transcript {transcript_id} not found")
            updated = replace(current, analysis=analysis)
            self._transcripts[transcript_id] = updated
        return updated

    def get(self, transcript_id: int) -> Transcript | None:
        with self._lock:
            return self._transcripts.get(transcript_id)
