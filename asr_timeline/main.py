"""FastAPI application exposing the transcription endpoint and the single-page UI."""

import logging
import mimetypes
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from . import __version__
from .config import Settings
from .errors import BadRequest, CleanupWarning, TranscriptionError
from .model_client import GeminiClient, ModelClient
from .parser import parse_timeline
from .schemas import ErrorResponse, TimelineEntry
from .scratch import ScratchStorage
from .transcriber import Transcriber

logger = logging.getLogger(__name__)

INDEX_HTML = Path(__file__).parent / "static" / "index.html"


def create_app(settings: Optional[Settings] = None, client: Optional[ModelClient] = None) -> FastAPI:
    """Build the app; `client` defaults to a GeminiClient configured from `settings`."""
    settings = settings or Settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if client is None:
        client = GeminiClient(
            api_key=settings.GOOGLE_API_KEY,
            model_name=settings.GEMINI_MODEL,
            response_mime_type=settings.RESPONSE_MIME_TYPE or None,
        )

    app = FastAPI(title=settings.PROJECT_NAME, version=__version__)
    app.state.settings = settings
    app.state.scratch = ScratchStorage(settings.SCRATCH_DIR)
    app.state.transcriber = Transcriber(
        client,
        prompt=settings.prompt_text(),
        max_retries=settings.RETRY_MAX_RETRIES,
        initial_delay_ms=settings.RETRY_INITIAL_DELAY_MS,
    )

    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(TranscriptionError)
    async def transcription_error_handler(request: Request, exc: TranscriptionError) -> JSONResponse:
        return JSONResponse(ErrorResponse(error=str(exc)).model_dump(), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # A `video` field that is not a file counts as a missing upload
        fields = {str(err["loc"][-1]) for err in exc.errors() if err.get("loc")}
        if "video" in fields:
            return await transcription_error_handler(request, BadRequest("No video file provided"))
        logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
        return await transcription_error_handler(request, BadRequest("Invalid request"))

    @app.get("/")
    async def get_index() -> HTMLResponse:
        """Serve the index.html single-page UI."""
        return HTMLResponse(INDEX_HTML.read_text(encoding="utf-8"))

    @app.get("/health")
    async def health_check() -> dict:
        return {"status": "ok", "service": settings.PROJECT_NAME, "version": __version__}

    @app.post("/api/transcribe", response_model=List[TimelineEntry])
    async def transcribe_video(request: Request, video: Optional[UploadFile] = File(None)) -> List[TimelineEntry]:
        """Send the uploaded video to the model and return its timeline entries."""
        if video is None:
            raise BadRequest("No video file provided")

        original_name = video.filename or "upload"
        mime_type = (
            video.content_type
            or mimetypes.guess_type(original_name)[0]
            or "application/octet-stream"
        )
        data = await video.read()
        logger.info(f"Received {original_name} ({len(data)} bytes, {mime_type})")

        scratch: ScratchStorage = request.app.state.scratch
        transcriber: Transcriber = request.app.state.transcriber

        scratch_path = scratch.write(original_name, data)
        try:
            raw_text = await transcriber.transcribe(data, mime_type)
        finally:
            try:
                scratch.delete(scratch_path)
            except CleanupWarning as e:
                logger.warning(str(e))

        entries = parse_timeline(raw_text, original_name)
        logger.info(f"Returning {len(entries)} timeline entries for {original_name}")
        return entries

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("asr_timeline.main:app", host="0.0.0.0", port=8000)
