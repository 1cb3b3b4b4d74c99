"""Error types raised by the transcript tool."""


class InvalidInputError(ValueError):
    """Empty or unrecognised YouTube URL."""


class MissingArgumentError(InvalidInputError):
    """A required tool argument was not supplied."""


class TranscriptFetchError(RuntimeError):
    """Transcript could not be retrieved for a URL."""
