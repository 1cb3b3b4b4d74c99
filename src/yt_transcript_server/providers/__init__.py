"""Transcript providers."""

import logging

from yt_transcript_server.config import Mode, Settings
from .base import TranscriptProvider
from .standalone import StandaloneProvider
from .backend import BackendProvider

logger = logging.getLogger(__name__)


def create_provider(settings: Settings) -> TranscriptProvider:
    """Build the provider selected by ``settings.mode``."""
    if settings.mode == Mode.BACKEND:
        logger.info(f"Backend mode: {settings.backend_url}")
        return BackendProvider(
            base_url=settings.backend_url,
            api_key=settings.backend_api_key,
            timeout=settings.backend_timeout,
        )
    logger.info("Standalone mode")
    return StandaloneProvider()


__all__ = [
    "TranscriptProvider",
    "StandaloneProvider",
    "BackendProvider",
    "create_provider",
]
