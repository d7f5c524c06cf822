"""Pydantic models for the text-to-speech request/response contract."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from elevenlabs_proxy.config import DEFAULT_MODEL_ID

SUCCESS_MESSAGE = (
    "Audio generado exitosamente. El archivo estará disponible por 1 hora."
)


class VoiceSettings(BaseModel):
    """ElevenLabs voice tuning knobs; unknown keys are forwarded untouched."""

    model_config = ConfigDict(extra="allow")

    stability: float = 0.5
    similarity_boost: float = 0.75
    style: float = 0
    use_speaker_boost: bool = True


class SynthesisRequest(BaseModel):
    """Body of ``POST /v1/text-to-speech/{voice_id}``.

    ``text`` is optional at the schema level so that a missing or blank
    value is answered with the proxy's own 400 instead of a 422.
    """

    text: str | None = None
    model_id: str | None = None
    voice_settings: VoiceSettings | None = None

    @property
    def resolved_model_id(self) -> str:
        return self.model_id or DEFAULT_MODEL_ID

    def upstream_payload(self) -> dict:
        """Body sent to ElevenLabs, with defaults filled in."""
        voice_settings = self.voice_settings or VoiceSettings()
        return {
            "text": self.text,
            "model_id": self.resolved_model_id,
            "voice_settings": voice_settings.model_dump(),
        }


class SynthesisResponse(BaseModel):
    """Returned to the caller instead of the raw audio bytes."""

    success: bool = True
    audio_url: str
    voice_id: str
    text_length: int = Field(ge=0)
    model: str
    message: str = SUCCESS_MESSAGE
