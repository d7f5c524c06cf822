"""ElevenLabs API client package exports."""

from elevenlabs_proxy.upstream.client import ElevenLabsClient
from elevenlabs_proxy.upstream.errors import (
    UpstreamAuthError,
    UpstreamError,
    UpstreamNotFoundError,
    UpstreamQuotaError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)

__all__ = [
    "ElevenLabsClient",
    "UpstreamError",
    "UpstreamAuthError",
    "UpstreamNotFoundError",
    "UpstreamQuotaError",
    "UpstreamStatusError",
    "UpstreamUnavailableError",
]
