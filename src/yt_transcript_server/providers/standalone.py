"""Standalone provider using youtube-transcript-api directly."""

import asyncio
import logging
from functools import partial

from youtube_transcript_api import (
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
)

from yt_transcript_server.models import TranscriptFragment
from .base import TranscriptProvider

logger = logging.getLogger(__name__)


class StandaloneProvider(TranscriptProvider):
    def __init__(self):
        self._api = YouTubeTranscriptApi()

    async def get_transcript(
        self, video_id: str, languages: list[str]
    ) -> list[TranscriptFragment]:
        loop = asyncio.get_running_loop()
        try:
            fetched = await loop.run_in_executor(
                None,
                partial(self._fetch, video_id, languages),
            )
        except (TranscriptsDisabled, NoTranscriptFound) as e:
            raise ValueError(f"No transcript available for {video_id}") from e
        except VideoUnavailable as e:
            raise ValueError(f"Video {video_id} is unavailable") from e

        logger.debug(f"Fetched {len(fetched)} fragments for {video_id}")
        return [
            TranscriptFragment(
                text=s.text,
                offset=s.start,
                duration=s.duration,
            )
            for s in fetched
        ]

    def _fetch(self, video_id: str, languages: list[str]):
        """Synchronous fetch in executor."""
        return self._api.fetch(video_id, languages=languages)

    async def close(self) -> None:
        pass
