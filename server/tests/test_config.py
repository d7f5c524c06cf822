"""Configuration validation tests."""

from __future__ import annotations

import pytest

from elevenlabs_proxy.config import Settings


def test_settings_reject_port_out_of_range() -> None:
    with pytest.raises(ValueError, match="PORT must be between 1 and 65535"):
        Settings(port=0)


def test_settings_reject_non_positive_ttl() -> None:
    with pytest.raises(ValueError, match="AUDIO_TTL_S must be > 0"):
        Settings(audio_ttl_s=0)


def test_settings_reject_non_positive_interval() -> None:
    with pytest.raises(ValueError, match="AUDIO_CLEANUP_INTERVAL_S must be > 0"):
        Settings(cleanup_interval_s=-1)


def test_settings_reject_non_positive_timeout() -> None:
    with pytest.raises(ValueError, match="ELEVENLABS_TIMEOUT_S must be > 0"):
        Settings(upstream_timeout_s=0)


def test_placeholder_credentials_are_accepted() -> None:
    settings = Settings(elevenlabs_api_key="tu_api_key_aqui", base_url="")
    assert settings.elevenlabs_api_key == "tu_api_key_aqui"


def test_public_base_url_strips_whitespace_and_slash() -> None:
    settings = Settings(base_url="https://proxy.example.com/\t")
    assert settings.public_base_url == "https://proxy.example.com"
