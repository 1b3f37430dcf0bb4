"""Request and response models."""

from pydantic import BaseModel, ConfigDict, Field

TIMECODE_PATTERN = r"^\d{2}:\d{2}:\d{2}:\d{2}$"


class TimelineEntry(BaseModel):
    """One speaker utterance, timed with the on-screen HH:MM:SS:FF counter."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    filename: str
    tc_in: str = Field(pattern=TIMECODE_PATTERN)
    tc_out: str = Field(pattern=TIMECODE_PATTERN)
    speaker: str
    dialogue: str


class ErrorResponse(BaseModel):
    error: str
