"""JSON export format, matching the file the UI downloads."""

import json
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from .schemas import TimelineEntry


def export_filename(original_name: str, now: Optional[datetime] = None) -> str:
    """`ASR_<name before first dot>_<ISO timestamp with ':' and '.' as '-'>.json`."""
    now = now or datetime.now(timezone.utc)
    base = original_name.split(".")[0]
    # Same shape as JavaScript's Date.toISOString(): millisecond precision, Z suffix
    stamp = now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
    stamp = stamp.replace(":", "-").replace(".", "-")
    return f"ASR_{base}_{stamp}.json"


def dumps_entries(entries: Iterable[TimelineEntry]) -> str:
    return json.dumps([entry.model_dump() for entry in entries], indent=2, ensure_ascii=False)


def loads_entries(text: str) -> List[TimelineEntry]:
    return [TimelineEntry.model_validate(item) for item in json.loads(text)]
