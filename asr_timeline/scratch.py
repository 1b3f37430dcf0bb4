"""Per-request scratch copies of uploaded videos."""

import logging
import os
import uuid
from pathlib import Path

from .errors import CleanupWarning, ScratchError

logger = logging.getLogger(__name__)


class ScratchStorage:
    """Holds one uniquely named copy of each upload while its request is in flight."""

    def __init__(self, directory: str) -> None:
        self.directory = Path(directory)

    def write(self, original_name: str, data: bytes) -> Path:
        """Save `data` as `<uuid>-<basename>`, creating the directory on demand."""
        safe_name = os.path.basename(original_name or "") or "upload"
        path = self.directory / f"{uuid.uuid4().hex}-{safe_name}"
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            logger.error(f"Failed to write scratch file {path}: {e}")
            if path.is_file():
                self._discard(path)
            raise ScratchError("Failed to store uploaded video") from e
        logger.info(f"Scratch file written: {path} ({len(data)} bytes)")
        return path

    def _discard(self, path: Path) -> None:
        """Remove a partially written file, logging instead of raising."""
        try:
            self.delete(path)
        except CleanupWarning as e:
            logger.warning(str(e))

    def delete(self, path: Path) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise CleanupWarning(f"Error deleting temporary file {path}: {e}") from e
        logger.info(f"Scratch file deleted: {path}")
