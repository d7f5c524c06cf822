"""ElevenLabs proxy server entry point."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from elevenlabs_proxy import __version__
from elevenlabs_proxy.config import settings
from elevenlabs_proxy.routers.audio import router as audio_router
from elevenlabs_proxy.routers.tts import router as tts_router
from elevenlabs_proxy.routers.voices import router as voices_router
from elevenlabs_proxy.storage.file_store import AudioFileStore
from elevenlabs_proxy.storage.janitor import AudioJanitor
from elevenlabs_proxy.upstream.client import ElevenLabsClient

log = logging.getLogger(__name__)

SERVICE_NAME = "ElevenLabs Proxy"
INVALID_REQUEST_MESSAGE = "Solicitud inválida"

_STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the audio store, start the janitor and the upstream client."""
    app.state.settings = settings

    store = AudioFileStore(settings.audio_dir)
    store.ensure_dir()
    app.state.store = store

    upstream = ElevenLabsClient(
        api_key=settings.elevenlabs_api_key,
        base_url=settings.elevenlabs_api_url,
        timeout_s=settings.upstream_timeout_s,
    )
    await upstream.start()
    app.state.upstream = upstream

    janitor = AudioJanitor(
        store,
        ttl_s=settings.audio_ttl_s,
        interval_s=settings.cleanup_interval_s,
    )
    await janitor.start()
    app.state.janitor = janitor

    base = settings.public_base_url
    log.info("Servidor proxy corriendo en %s (audio dir %s)", base, store.root)
    log.info("Endpoints disponibles:")
    log.info("   POST %s/v1/text-to-speech/:voice_id", base)
    log.info("   GET  %s/v1/voices", base)
    log.info("   GET  %s/health", base)

    yield

    await janitor.stop()
    await upstream.close()
    log.info("Proxy shut down")


async def health():
    """Liveness check."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "uptime": max(0.0, time.monotonic() - _STARTED_AT),
    }


async def invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed bodies and params with the proxy's ``{"error": ...}`` shape."""
    log.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        {"error": INVALID_REQUEST_MESSAGE, "details": _describe_errors(exc)},
        status_code=400,
    )


def _describe_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc or 'body'}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def create_app() -> FastAPI:
    """Build the proxy application with its routers and error handlers."""
    application = FastAPI(
        title="ElevenLabs Proxy",
        version=__version__,
        lifespan=lifespan,
    )
    application.add_exception_handler(RequestValidationError, invalid_request)
    application.include_router(tts_router)
    application.include_router(voices_router)
    application.include_router(audio_router)
    application.add_api_route("/health", health, methods=["GET"])
    return application


app = create_app()


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )
    uvicorn.run(
        "elevenlabs_proxy.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
