"""This module builds the transcription request and sends it under the retry policy"""

import logging

from .errors import UpstreamError
from .model_client import ModelClient
from .retry import retry_with_backoff

logger = logging.getLogger(__name__)


class Transcriber:
    """Pairs a video with the fixed instruction prompt and asks the model for a timeline."""

    def __init__(
        self,
        client: ModelClient,
        prompt: str,
        max_retries: int = 3,
        initial_delay_ms: int = 1000,
    ) -> None:
        self.client = client
        self.prompt = prompt
        self.max_retries = max_retries
        self.initial_delay_ms = initial_delay_ms

    async def build_and_send(self, video_bytes: bytes, mime_type: str) -> str:
        """Make exactly one model call and return its raw text."""
        return await self.client.generate_content(video_bytes, mime_type, self.prompt)

    async def transcribe(self, video_bytes: bytes, mime_type: str) -> str:
        """Run `build_and_send` with rate-limit retries; any final failure becomes UpstreamError."""
        try:
            return await retry_with_backoff(
                lambda: self.build_and_send(video_bytes, mime_type),
                max_retries=self.max_retries,
                initial_delay_ms=self.initial_delay_ms,
            )
        except Exception as e:
            logger.error(f"Model call failed: {e}")
            raise UpstreamError(str(e) or "Failed to process video") from e
