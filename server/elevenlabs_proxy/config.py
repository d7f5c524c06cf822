"""Proxy configuration with environment variable overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass

try:
    from dotenv import load_dotenv

    load_dotenv(override=False)
except Exception:
    # Optional dependency; env vars still work without .env loading.
    pass


_PLACEHOLDER_API_KEY = "tu_api_key_aqui"
_PLACEHOLDER_BASE_URL = "https://elevenlabs-proxy-production-3ede.up.railway.app"

DEFAULT_MODEL_ID = "eleven_multilingual_v2"
DEFAULT_OUTPUT_FORMAT = "mp3_44100_128"


@dataclass(slots=True)
class Settings:
    """Proxy settings. Override any field via environment variable."""

    host: str = os.environ.get("HOST", "0.0.0.0")
    port: int = int(os.environ.get("PORT", "3000"))
    elevenlabs_api_key: str = os.environ.get("ELEVENLABS_API_KEY", _PLACEHOLDER_API_KEY)
    base_url: str = os.environ.get("BASE_URL", _PLACEHOLDER_BASE_URL)
    elevenlabs_api_url: str = os.environ.get(
        "ELEVENLABS_API_URL", "https://api.elevenlabs.io"
    )
    upstream_timeout_s: float = float(os.environ.get("ELEVENLABS_TIMEOUT_S", "60.0"))
    audio_dir: str = os.environ.get("AUDIO_DIR", "./audio_files")
    audio_ttl_s: float = float(os.environ.get("AUDIO_TTL_S", "3600"))
    cleanup_interval_s: float = float(
        os.environ.get("AUDIO_CLEANUP_INTERVAL_S", "3600")
    )
    log_level: str = os.environ.get("LOG_LEVEL", "INFO").upper()

    def __post_init__(self) -> None:
        if not (1 <= self.port <= 65535):
            raise ValueError("PORT must be between 1 and 65535")
        if self.upstream_timeout_s <= 0.0:
            raise ValueError("ELEVENLABS_TIMEOUT_S must be > 0")
        if self.audio_ttl_s <= 0.0:
            raise ValueError("AUDIO_TTL_S must be > 0")
        if self.cleanup_interval_s <= 0.0:
            raise ValueError("AUDIO_CLEANUP_INTERVAL_S must be > 0")

    @property
    def public_base_url(self) -> str:
        """Externally visible origin without trailing whitespace or slash."""
        return self.base_url.strip().rstrip("/")


settings = Settings()
