"""Data models for transcript results."""

from pydantic import BaseModel


class TranscriptFragment(BaseModel):
    text: str
    offset: float
    duration: float = 0.0
