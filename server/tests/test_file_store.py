"""Tests for the on-disk audio store."""

from __future__ import annotations

import os
import re
import time

import pytest

from elevenlabs_proxy.storage.file_store import AudioFileStore

NAME_RE = re.compile(r"^[0-9a-f]{32}\.mp3$")


@pytest.fixture()
def store(tmp_path):
    return AudioFileStore(tmp_path / "audio_files")


def _age(path, seconds: float) -> None:
    past = time.time() - seconds
    os.utime(path, (past, past))


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------


def test_save_creates_directory_and_random_name(store):
    stored = store.save(b"abc")
    assert store.root.is_dir()
    assert NAME_RE.match(stored.filename)
    assert stored.path.read_bytes() == b"abc"
    assert stored.size_bytes == 3


def test_filenames_are_unique(store):
    names = {store.save(b"x").filename for _ in range(200)}
    assert len(names) == 200


def test_ensure_dir_is_idempotent(store):
    store.ensure_dir()
    store.ensure_dir()
    assert store.root.is_dir()


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def test_resolve_returns_stored_file(store):
    stored = store.save(b"abc")
    assert store.resolve(stored.filename) == stored.path


@pytest.mark.parametrize(
    "name",
    ["", ".", "..", "../audio_files", "a/b.mp3", "..\\x.mp3", "nul\x00.mp3"],
)
def test_resolve_rejects_unsafe_names(store, name):
    store.ensure_dir()
    assert store.resolve(name) is None


def test_resolve_missing_file_is_none(store):
    store.ensure_dir()
    assert store.resolve("f" * 32 + ".mp3") is None


# ---------------------------------------------------------------------------
# Expiry
# ---------------------------------------------------------------------------


def test_sweep_removes_only_expired_files(store):
    old = store.save(b"old")
    fresh = store.save(b"fresh")
    _age(old.path, 3601)
    _age(fresh.path, 10)

    removed = store.sweep_expired(3600)

    assert removed == [old.filename]
    assert not old.path.exists()
    assert fresh.path.exists()


def test_sweep_uses_supplied_clock(store):
    stored = store.save(b"x")
    now = stored.path.stat().st_mtime + 7200

    assert store.sweep_expired(3600, now=now) == [stored.filename]


def test_sweep_skips_directories(store):
    store.ensure_dir()
    nested = store.root / "nested"
    nested.mkdir()
    _age(nested, 7200)

    assert store.sweep_expired(3600) == []
    assert nested.is_dir()


def test_sweep_missing_directory_is_noop(store):
    assert store.sweep_expired(3600) == []


def test_sweep_continues_after_per_file_failure(store, monkeypatch):
    first = store.save(b"a")
    second = store.save(b"b")
    for stored in (first, second):
        _age(stored.path, 7200)

    real_unlink = type(first.path).unlink

    def flaky_unlink(self, *args, **kwargs):
        if self.name == first.filename:
            raise PermissionError("read-only")
        return real_unlink(self, *args, **kwargs)

    monkeypatch.setattr(type(first.path), "unlink", flaky_unlink)

    removed = store.sweep_expired(3600)

    assert removed == [second.filename]
    assert first.path.exists()
    assert not second.path.exists()
