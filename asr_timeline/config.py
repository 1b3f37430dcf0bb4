"""Application settings, read from the environment or a .env file."""

import os
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings

from .prompt import DEFAULT_PROMPT


class Settings(BaseSettings):
    PROJECT_NAME: str = "ASR Timeline"
    LOG_LEVEL: str = "INFO"

    # Model service
    GOOGLE_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-pro"
    # Empty string lets the model answer in free text
    RESPONSE_MIME_TYPE: str = "application/json"

    # One scratch file per request lives here while the model call runs
    SCRATCH_DIR: str = os.path.join(os.getcwd(), "tmp")

    # Rate-limit retry policy
    RETRY_MAX_RETRIES: int = 3
    RETRY_INITIAL_DELAY_MS: int = 1000

    # Instruction text, PROMPT_FILE wins when set
    TRANSCRIPTION_PROMPT: str = DEFAULT_PROMPT
    PROMPT_FILE: Optional[str] = None

    CORS_ORIGINS: List[str] = []

    class Config:
        case_sensitive = True
        env_file = ".env"

    def prompt_text(self) -> str:
        """Return the effective instruction prompt."""
        if self.PROMPT_FILE:
            return Path(self.PROMPT_FILE).read_text(encoding="utf-8")
        return self.TRANSCRIPTION_PROMPT
