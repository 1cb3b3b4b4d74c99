"""Turn a YouTube URL into plain transcript text."""

import logging
from collections.abc import Sequence

from yt_transcript_server.errors import InvalidInputError, TranscriptFetchError
from yt_transcript_server.providers.base import TranscriptProvider
from yt_transcript_server.utils import extract_video_id

logger = logging.getLogger(__name__)


class TranscriptFetcher:
    """Resolves a URL to a video ID and joins the provider's caption fragments.

    Every failure after the empty-URL check is reported as a
    ``TranscriptFetchError`` carrying the original message.
    """

    def __init__(self, provider: TranscriptProvider, languages: Sequence[str] = ("en",)):
        self._provider = provider
        self._languages = list(languages)

    async def fetch_transcript(
        self, url: str, languages: list[str] | None = None
    ) -> str:
        if not url:
            raise InvalidInputError("URL is required")

        try:
            video_id = extract_video_id(url)
            fragments = await self._provider.get_transcript(
                video_id, languages or self._languages
            )
        except Exception as e:
            message = str(e) or "Unknown error"
            logger.warning(f"Transcript fetch failed for {url}: {message}")
            raise TranscriptFetchError(f"Failed to get transcript: {message}") from e

        return " ".join(f.text for f in fragments)

    async def close(self) -> None:
        await self._provider.close()
