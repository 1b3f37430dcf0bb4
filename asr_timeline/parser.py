"""Turns the model's free-text reply into validated timeline entries."""

import json
import logging
from typing import List, Optional

from pydantic import ValidationError

from .errors import ParseError
from .schemas import TimelineEntry

logger = logging.getLogger(__name__)


def _balanced_span_end(text: str, start: int) -> Optional[int]:
    """Index just past the bracket closing the one at `start`, or None if it never closes."""
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch in "[{":
            depth += 1
        elif ch in "]}":
            depth -= 1
            if depth == 0:
                return i + 1
    return None


def extract_json_array(raw_text: str) -> Optional[str]:
    """Return the first balanced `[ { ... } ]` span in `raw_text`, or None.

    Prose and markdown fences around the array are skipped.
    """
    start = raw_text.find("[")
    while start != -1:
        rest = raw_text[start + 1:].lstrip()
        if rest.startswith("{"):
            end = _balanced_span_end(raw_text, start)
            if end is not None:
                return raw_text[start:end]
        start = raw_text.find("[", start + 1)
    return None


def parse_timeline(raw_text: str, original_filename: str) -> List[TimelineEntry]:
    """Decode the JSON array in `raw_text` and tag each entry with `original_filename`."""
    span = extract_json_array(raw_text)
    if span is None:
        logger.error(f"No JSON array found in model response: {raw_text[:200]!r}")
        raise ParseError("No valid JSON found in response")

    try:
        decoded = json.loads(span)
    except json.JSONDecodeError as e:
        logger.error(f"Model response holds malformed JSON: {e}")
        raise ParseError("Failed to parse transcription response") from e

    entries = []
    for index, item in enumerate(decoded):
        if not isinstance(item, dict):
            raise ParseError(f"Timeline entry {index} is not an object")
        try:
            entries.append(TimelineEntry.model_validate({**item, "filename": original_filename}))
        except ValidationError as e:
            logger.error(f"Invalid timeline entry {index}: {e}")
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise ParseError(f"Timeline entry {index} is invalid: {fields}") from e
    return entries
