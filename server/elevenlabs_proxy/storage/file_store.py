"""Flat on-disk store for generated audio, keyed by random filenames."""

from __future__ import annotations

import logging
import secrets
import time
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

# 16 random bytes -> 32 hex chars.
_TOKEN_BYTES = 16


@dataclass(slots=True)
class StoredAudio:
    filename: str
    path: Path
    size_bytes: int


class AudioFileStore:
    """Writes audio blobs under unguessable names and expires old ones.

    Filenames are the only access control for the files, so they are
    always 128-bit random tokens and lookups never leave ``root``.
    """

    def __init__(self, root: str | Path, *, suffix: str = ".mp3") -> None:
        self._root = Path(root).resolve()
        self._suffix = suffix

    @property
    def root(self) -> Path:
        return self._root

    def ensure_dir(self) -> None:
        self._root.mkdir(parents=True, exist_ok=True)

    def new_filename(self) -> str:
        return f"{secrets.token_hex(_TOKEN_BYTES)}{self._suffix}"

    def save(self, data: bytes) -> StoredAudio:
        """Write ``data`` to a fresh random file and return its handle."""
        self.ensure_dir()
        filename = self.new_filename()
        path = self._root / filename
        # "xb" so an (astronomically unlikely) name clash fails loudly.
        with open(path, "xb") as fh:
            fh.write(data)
        return StoredAudio(filename=filename, path=path, size_bytes=len(data))

    def resolve(self, filename: str) -> Path | None:
        """Map a public filename to a regular file inside the store, or None."""
        if not filename or filename in {".", ".."}:
            return None
        if "/" in filename or "\\" in filename or "\x00" in filename:
            return None
        candidate = (self._root / filename).resolve()
        if candidate.parent != self._root:
            return None
        if not candidate.is_file():
            return None
        return candidate

    def sweep_expired(self, max_age_s: float, now: float | None = None) -> list[str]:
        """Delete files whose mtime is more than ``max_age_s`` in the past.

        Failures on a single entry are logged and skipped so the rest of the
        directory is still swept. Returns the names that were removed.
        """
        if now is None:
            now = time.time()
        try:
            entries = list(self._root.iterdir())
        except FileNotFoundError:
            return []

        removed: list[str] = []
        for entry in entries:
            try:
                if not entry.is_file():
                    continue
                age_s = now - entry.stat().st_mtime
                if age_s <= max_age_s:
                    continue
                entry.unlink()
            except FileNotFoundError:
                continue
            except OSError as exc:
                log.warning("Could not expire %s: %s", entry.name, exc)
                continue
            removed.append(entry.name)
            log.info("Archivo eliminado: %s", entry.name)
        return removed
