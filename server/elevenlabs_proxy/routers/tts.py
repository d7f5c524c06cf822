"""POST /v1/text-to-speech/{voice_id} — synthesize, store, return a URL."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from elevenlabs_proxy.config import DEFAULT_OUTPUT_FORMAT
from elevenlabs_proxy.storage.file_store import AudioFileStore
from elevenlabs_proxy.upstream.client import ElevenLabsClient
from elevenlabs_proxy.upstream.errors import (
    UpstreamAuthError,
    UpstreamError,
    UpstreamNotFoundError,
    UpstreamQuotaError,
)
from elevenlabs_proxy.upstream.schemas import SynthesisRequest, SynthesisResponse

log = logging.getLogger(__name__)

router = APIRouter()

_LOG_TEXT_PREVIEW = 50


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units; astral characters count as two."""
    return len(text.encode("utf-16-le")) // 2


def _error(status_code: int, message: str, **extra: str) -> JSONResponse:
    return JSONResponse({"error": message, **extra}, status_code=status_code)


@router.post("/v1/text-to-speech/{voice_id}", response_model=SynthesisResponse)
async def text_to_speech(
    voice_id: str,
    request: Request,
    body: SynthesisRequest | None = None,
    output_format: str | None = None,
) -> SynthesisResponse | JSONResponse:
    """Generate speech via ElevenLabs and return a temporary public URL."""
    body = body or SynthesisRequest()
    text = body.text
    if not text or not text.strip():
        return _error(400, "El texto es requerido")

    upstream: ElevenLabsClient = request.app.state.upstream
    store: AudioFileStore = request.app.state.store
    settings = request.app.state.settings

    log.info("Generando audio para: %r...", text[:_LOG_TEXT_PREVIEW])

    try:
        audio = await upstream.synthesize(
            voice_id,
            body.upstream_payload(),
            output_format=output_format or DEFAULT_OUTPUT_FORMAT,
        )
        stored = await asyncio.to_thread(store.save, audio)
    except UpstreamAuthError:
        return _error(401, "API key inválida")
    except UpstreamNotFoundError:
        return _error(404, "Voice ID no encontrado")
    except UpstreamQuotaError:
        return _error(429, "Límite de cuota excedido")
    except (UpstreamError, OSError) as exc:
        log.error("Error: %s", exc)
        return _error(500, "Error al generar audio", details=str(exc))

    log.info("Stored %s (%d bytes) for voice %s", stored.filename, stored.size_bytes, voice_id)

    return SynthesisResponse(
        audio_url=f"{settings.public_base_url}/audio/{stored.filename}",
        voice_id=voice_id,
        text_length=utf16_length(text),
        model=body.resolved_model_id,
    )
