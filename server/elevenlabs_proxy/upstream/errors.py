"""Error hierarchy for ElevenLabs API failures."""

from __future__ import annotations


class UpstreamError(RuntimeError):
    """Base error for ElevenLabs API failures."""


class UpstreamAuthError(UpstreamError):
    """Raised when ElevenLabs rejects the API key (HTTP 401)."""


class UpstreamNotFoundError(UpstreamError):
    """Raised when the requested voice does not exist (HTTP 404)."""


class UpstreamQuotaError(UpstreamError):
    """Raised when the account quota or rate limit is exhausted (HTTP 429)."""


class UpstreamStatusError(UpstreamError):
    """Raised for any other non-2xx response."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Request failed with status code {status_code}")
        self.status_code = status_code
        self.body = body


class UpstreamUnavailableError(UpstreamError):
    """Raised when ElevenLabs cannot be reached or the request times out."""
