from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from earnings_analyzer.api.routes import router
from earnings_analyzer.config.settings import Settings
from earnings_analyzer.logging.logger import Log
from earnings_analyzer.processor.processor import Processor, build_processor
from earnings_analyzer.storage.repositories.transcript_repository import TranscriptRepository


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed requests with 400 and a short message naming the bad fields."""
    fields = sorted(
        {str(error["loc"][-1]) for error in exc.errors() if error.get("loc")}
    )
    message = f"Invalid request field: {', '.join(fields)}" if fields else "Invalid request"
    Log.warning(f"{request.method} {request.url.path} rejected: {message}")
    return JSONResponse(status_code=400, content={"message": message})


def create_app(
    settings: Settings | None = None,
    repository: TranscriptRepository | None = None,
    processor: Processor | None = None,
) -> FastAPI:
    """Build the FastAPI application around one repository and processor."""
    settings = settings or Settings()
    repository = repository or TranscriptRepository()
    processor = processor or build_processor(settings, repository)

    app = FastAPI(title="Earnings Call Analyzer")
    app.state.settings = settings
    app.state.repository = repository
    app.state.processor = processor
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.include_router(router)
    return app
