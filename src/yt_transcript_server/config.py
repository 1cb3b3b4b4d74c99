"""Configuration via environment variables."""

from enum import Enum
from pydantic_settings import BaseSettings


class Mode(str, Enum):
    STANDALONE = "standalone"
    BACKEND = "backend"


class Settings(BaseSettings):
    model_config = {"env_prefix": "YT_TRANSCRIPT_"}

    mode: Mode = Mode.STANDALONE
    backend_url: str = "http://localhost:8300"
    backend_api_key: str = ""
    backend_timeout: float = 60.0
    languages: list[str] = ["en"]
    log_level: str = "INFO"
