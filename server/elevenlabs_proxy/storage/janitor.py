"""Background task that expires generated audio after its TTL."""

from __future__ import annotations

import asyncio
import contextlib
import logging

from elevenlabs_proxy.storage.file_store import AudioFileStore

log = logging.getLogger(__name__)


class AudioJanitor:
    """Periodically removes files older than ``ttl_s`` from the store."""

    def __init__(
        self,
        store: AudioFileStore,
        *,
        ttl_s: float = 3600.0,
        interval_s: float = 3600.0,
    ) -> None:
        self._store = store
        self._ttl_s = ttl_s
        self._interval_s = interval_s
        self._task: asyncio.Task | None = None
        self._sweeps = 0
        self._removed = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run_loop())
        log.info(
            "Audio janitor started (ttl=%.0fs, interval=%.0fs)",
            self._ttl_s,
            self._interval_s,
        )

    async def stop(self) -> None:
        if self._task and not self._task.done():
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
        self._task = None

    async def run_once(self) -> list[str]:
        """Sweep the store now; the directory walk runs in a worker thread."""
        removed = await asyncio.to_thread(self._store.sweep_expired, self._ttl_s)
        self._sweeps += 1
        self._removed += len(removed)
        return removed

    def snapshot(self) -> dict:
        return {
            "running": self.running,
            "sweeps": self._sweeps,
            "removed": self._removed,
        }

    async def _run_loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval_s)
            try:
                removed = await self.run_once()
                if removed:
                    log.info("Janitor removed %d expired file(s)", len(removed))
            except asyncio.CancelledError:
                raise
            except Exception:
                log.exception("Audio janitor sweep failed")
