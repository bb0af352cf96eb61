"""HTTP routes for uploading and inspecting transcripts."""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from earnings_analyzer.api.deps import get_processor, get_repository, get_settings
from earnings_analyzer.config.settings import Settings
from earnings_analyzer.logging.logger import Log
from earnings_analyzer.processor.errors import classify_error
from earnings_analyzer.processor.processor import Processor
from earnings_analyzer.processor.upload import build_uploaded_document, parse_provider
from earnings_analyzer.storage.repositories.transcript_repository import TranscriptRepository

router = APIRouter(tags=["Transcripts"])


def _error_response(exc: Exception) -> JSONResponse:
    status_code, message = classify_error(exc)
    return JSONResponse(status_code=status_code, content={"message": message})


@router.post(
    "/analyze",
    summary="Upload an earnings call transcript and analyze it",
)
async def analyze_transcript(
    file: UploadFile | None = File(default=None),
    provider: str | None = Form(default=None),
    settings: Settings = Depends(get_settings),
    processor: Processor = Depends(get_processor),
) -> JSONResponse:
    """Extract text from the upload, store it, and analyze it with the chosen provider.

    The transcript is stored before analysis starts, so it stays retrievable
    when the provider call fails.
    """
    try:
        data = await file.read() if file is not None else None
        document = build_uploaded_document(
            data,
            filename=file.filename if file is not None else None,
            mime_type=file.content_type if file is not None else None,
            max_bytes=settings.max_upload_bytes,
        )
        selected = parse_provider(provider, settings.default_provider)
    except Exception as exc:
        Log.warning(f"Analyze request rejected: {exc}")
        return _error_response(exc)

    try:
        transcript = await run_in_threadpool(processor.process, document, selected)
    except Exception as exc:
        return _error_response(exc)
    return JSONResponse(content=transcript.to_payload())


@router.get("/transcripts/{transcript_id}", summary="Fetch a stored transcript")
async def get_transcript(
    transcript_id: int,
    repository: TranscriptRepository = Depends(get_repository),
) -> JSONResponse:
    transcript = repository.get(transcript_id)
    if transcript is None:
        return JSONResponse(
            status_code=404,
            content={"message": f"Transcript {transcript_id} not found"},
        )
    return JSONResponse(content=transcript.to_payload())


@router.get("/health", summary="Liveness check")
async def health() -> dict[str, str]:
    return {"status": "ok"}
