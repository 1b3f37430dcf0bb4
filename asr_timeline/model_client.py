"""Clients for the generative model that does the actual transcription."""

import logging
from typing import Optional, Protocol

import google.generativeai as genai

logger = logging.getLogger(__name__)


class ModelClient(Protocol):
    """Anything able to answer a prompt about an inline video."""

    async def generate_content(self, video_bytes: bytes, mime_type: str, prompt: str) -> str:
        ...


class GeminiClient:
    """Sends the video inline to a Gemini model and returns the reply text."""

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-2.5-pro",
        response_mime_type: Optional[str] = "application/json",
    ) -> None:
        genai.configure(api_key=api_key)
        generation_config = None
        if response_mime_type:
            generation_config = genai.GenerationConfig(response_mime_type=response_mime_type)
        self.model_name = model_name
        self.model = genai.GenerativeModel(model_name, generation_config=generation_config)

    async def generate_content(self, video_bytes: bytes, mime_type: str, prompt: str) -> str:
        """Send one request; the SDK base64-encodes the inline blob."""
        logger.info(f"Calling {self.model_name} with {len(video_bytes)} bytes of {mime_type}")
        response = await self.model.generate_content_async(
            [{"mime_type": mime_type, "data": video_bytes}, prompt]
        )
        return response.text
