"""Abstract base for transcript providers."""

from abc import ABC, abstractmethod

from yt_transcript_server.models import TranscriptFragment


class TranscriptProvider(ABC):
    @abstractmethod
    async def get_transcript(
        self, video_id: str, languages: list[str]
    ) -> list[TranscriptFragment]:
        """Fetch caption fragments for a single video, in playback order."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Clean up resources."""
        ...
