"""Async client for the ElevenLabs text-to-speech and voices endpoints."""

from __future__ import annotations

import logging

import httpx

from elevenlabs_proxy.config import DEFAULT_OUTPUT_FORMAT, settings
from elevenlabs_proxy.upstream.errors import (
    UpstreamAuthError,
    UpstreamError,
    UpstreamNotFoundError,
    UpstreamQuotaError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)

log = logging.getLogger(__name__)

_API_KEY_HEADER = "xi-api-key"
_ERROR_BODY_LIMIT = 500

_STATUS_ERRORS: dict[int, type[UpstreamError]] = {
    401: UpstreamAuthError,
    404: UpstreamNotFoundError,
    429: UpstreamQuotaError,
}


class ElevenLabsClient:
    """Thin async wrapper around the ElevenLabs REST API.

    No retries are attempted; every failure is surfaced as an
    :class:`UpstreamError` subclass for the routers to translate.
    """

    def __init__(
        self,
        api_key: str = settings.elevenlabs_api_key,
        base_url: str = settings.elevenlabs_api_url,
        timeout_s: float = settings.upstream_timeout_s,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout_s, connect=10.0)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def start(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
            headers={_API_KEY_HEADER: self._api_key},
        )

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def synthesize(
        self,
        voice_id: str,
        payload: dict,
        output_format: str = DEFAULT_OUTPUT_FORMAT,
    ) -> bytes:
        """POST a synthesis job and return the raw audio bytes."""
        resp = await self._request(
            "POST",
            f"/v1/text-to-speech/{voice_id}",
            json=payload,
            params={"output_format": output_format},
            headers={"Content-Type": "application/json"},
        )
        return resp.content

    async def list_voices(self) -> bytes:
        """Return the raw JSON body of the voices listing."""
        resp = await self._request("GET", "/v1/voices")
        return resp.content

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        if self._client is None:
            raise UpstreamUnavailableError("ElevenLabs client not started")
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise UpstreamUnavailableError(f"timeout calling ElevenLabs: {exc}") from exc
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableError(str(exc) or type(exc).__name__) from exc

        if resp.is_success:
            return resp

        body = resp.text[:_ERROR_BODY_LIMIT]
        log.error("ElevenLabs %s %s -> %d: %s", method, path, resp.status_code, body)
        error_cls = _STATUS_ERRORS.get(resp.status_code)
        if error_cls is not None:
            raise error_cls(f"Request failed with status code {resp.status_code}")
        raise UpstreamStatusError(resp.status_code, body)
