"""Utility functions."""

import re

from yt_transcript_server.errors import InvalidInputError

# watch?v=, /v/, /e/, /embed/, channel paths and youtu.be short links
VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)"
    r"([^\"&?/\s]{11})"
)


def extract_video_id(url: str) -> str:
    """Extract the 11-character YouTube video ID from a URL."""
    match = VIDEO_ID_PATTERN.search(url)
    if not match:
        raise InvalidInputError("Invalid YouTube URL")
    return match.group(1)
