"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest

from yt_transcript_server.fetcher import TranscriptFetcher
from yt_transcript_server.models import TranscriptFragment


@pytest.fixture
def sample_fragments():
    return [
        TranscriptFragment(text="Hello", offset=0.0, duration=2.0),
        TranscriptFragment(text="world", offset=2.0, duration=1.5),
    ]


@pytest.fixture
def mock_provider(sample_fragments):
    provider = AsyncMock()
    provider.get_transcript = AsyncMock(return_value=sample_fragments)
    provider.close = AsyncMock()
    return provider


@pytest.fixture
def fetcher(mock_provider):
    return TranscriptFetcher(mock_provider, ["en"])
