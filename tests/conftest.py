import sys
import os

import pytest

# Ensure the project root is in sys.path so `from asr_timeline.main import create_app`
# works without installing the package
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from asr_timeline.config import Settings  # noqa: E402


class FakeModelClient:
    """Replays scripted replies; exceptions in the script are raised instead of returned."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    async def generate_content(self, video_bytes, mime_type, prompt):
        self.calls.append((video_bytes, mime_type, prompt))
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, BaseException):
            raise reply
        return reply


@pytest.fixture
def scratch_dir(tmp_path):
    return tmp_path / "scratch"


@pytest.fixture
def settings(scratch_dir):
    return Settings(
        _env_file=None,
        GOOGLE_API_KEY="test-key",
        SCRATCH_DIR=str(scratch_dir),
        RETRY_INITIAL_DELAY_MS=1,
    )
