"""GET /audio/{filename} — serve generated audio from the file store."""

from __future__ import annotations

import mimetypes

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, JSONResponse, Response

from elevenlabs_proxy.storage.file_store import AudioFileStore

router = APIRouter()

mimetypes.add_type("audio/mpeg", ".mp3")


def _not_found() -> JSONResponse:
    return JSONResponse({"error": "Archivo no encontrado"}, status_code=404)


@router.get("/audio/{filename}")
async def get_audio(filename: str, request: Request) -> Response:
    store: AudioFileStore = request.app.state.store
    path = store.resolve(filename)
    if path is None:
        return _not_found()
    # The janitor may expire the file between resolve() and the stat.
    try:
        stat_result = path.stat()
    except FileNotFoundError:
        return _not_found()
    media_type, _ = mimetypes.guess_type(path.name)
    return FileResponse(
        path,
        media_type=media_type or "application/octet-stream",
        stat_result=stat_result,
    )
