"""Errors raised while turning an upload into timeline entries."""


class TranscriptionError(Exception):
    """Base error, carries the HTTP status the endpoint answers with."""

    status_code = 500


class BadRequest(TranscriptionError):
    status_code = 400


class UpstreamError(TranscriptionError):
    """The model call failed, either non-retryable or after all retries."""


class ParseError(TranscriptionError):
    """The model reply does not hold a valid JSON array of timeline entries."""


class CleanupWarning(TranscriptionError):
    """A scratch file could not be deleted. Logged, never returned to the client."""


class ScratchError(TranscriptionError):
    """The upload could not be written to the scratch directory."""
