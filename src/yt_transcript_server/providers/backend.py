"""Backend provider that calls a remote transcript service over HTTP."""

import logging

import httpx

from yt_transcript_server.models import TranscriptFragment
from .base import TranscriptProvider

logger = logging.getLogger(__name__)


class BackendProvider(TranscriptProvider):
    def __init__(self, base_url: str, api_key: str = "", timeout: float = 60.0):
        self._base_url = base_url.rstrip("/")
        self._headers = {}
        if api_key:
            self._headers["X-API-Key"] = api_key
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=timeout,
        )

    async def get_transcript(
        self, video_id: str, languages: list[str]
    ) -> list[TranscriptFragment]:
        params = {"format": "segments"}
        if languages:
            params["lang"] = languages[0]
        resp = await self._client.get(f"/transcript/{video_id}", params=params)
        resp.raise_for_status()
        data = resp.json()

        return [
            TranscriptFragment(
                text=s["text"],
                offset=s.get("start", 0.0),
                duration=s.get("duration", 0.0),
            )
            for s in data.get("segments", [])
        ]

    async def close(self) -> None:
        await self._client.aclose()
