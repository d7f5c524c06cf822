"""GET /v1/voices — relay the ElevenLabs voice catalogue."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from elevenlabs_proxy.upstream.client import ElevenLabsClient
from elevenlabs_proxy.upstream.errors import UpstreamError

log = logging.getLogger(__name__)

router = APIRouter()


@router.get("/v1/voices")
async def list_voices(request: Request) -> Response:
    upstream: ElevenLabsClient = request.app.state.upstream
    try:
        body = await upstream.list_voices()
    except UpstreamError as exc:
        log.error("Error al obtener voces: %s", exc)
        return JSONResponse({"error": "Error al obtener voces"}, status_code=500)
    return Response(content=body, media_type="application/json")
