"""Audio file storage package exports."""

from elevenlabs_proxy.storage.file_store import AudioFileStore, StoredAudio
from elevenlabs_proxy.storage.janitor import AudioJanitor

__all__ = ["AudioFileStore", "AudioJanitor", "StoredAudio"]
