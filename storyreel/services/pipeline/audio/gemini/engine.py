"""Gemini TTS engine."""

from __future__ import annotations

import logging
from typing import Optional

from google.genai import types

from storyreel.config import DEFAULT_VOICE, get_model_name
from storyreel.core import LogTimer, get_logger, is_known_voice
from storyreel.services.infrastructure.llm.gemini import GeminiClientFactory, call_gemini

from .audio_payload import extract_inline_audio_payload, pcm_payload_to_wav

logger = get_logger(__name__, component="gemini_tts")


class GeminiTTSEngine:
    """Text-to-Speech using a prebuilt Gemini voice. The whole utterance is one buffer."""

    DEFAULT_VOICE = DEFAULT_VOICE

    def __init__(
        self,
        client_factory: Optional[GeminiClientFactory] = None,
        model: Optional[str] = None,
    ):
        self.client_factory = client_factory or GeminiClientFactory()
        self.model = model or get_model_name("speech_synthesis")

    @staticmethod
    def build_config(voice: str) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_modalities=[types.Modality.AUDIO],
            speech_config=types.SpeechConfig(
                voice_config=types.VoiceConfig(
                    prebuilt_voice_config=types.PrebuiltVoiceConfig(
                        voice_name=voice,
                    )
                )
            ),
        )

    async def _call_gemini_tts(self, text: str, voice: str) -> tuple[bytes, str | None]:
        client = self.client_factory.create_client()
        with LogTimer(logger, f"TTS with voice {voice} ({len(text)} chars)", level=logging.DEBUG):
            response = await call_gemini(
                client.models.generate_content,
                model=self.model,
                contents=[types.Part.from_text(text=text)],
                config=self.build_config(voice),
            )
        return extract_inline_audio_payload(response)

    async def synthesize(self, text: str, voice: Optional[str] = None) -> bytes:
        """Return the raw audio bytes (24 kHz 16-bit mono PCM) for ``text``."""
        voice = voice or self.DEFAULT_VOICE
        if not is_known_voice(voice):
            logger.warning(f"Voice '{voice}' is not in the story voice catalog; sending it as-is")

        audio_bytes, mime_type = await self._call_gemini_tts(text, voice)
        logger.info(
            f"Gemini TTS: generated {len(audio_bytes)} bytes ({len(text)} chars)",
            extra={"voice": voice, "mime_type": mime_type},
        )
        return audio_bytes

    async def synthesize_wav(self, text: str, voice: Optional[str] = None) -> bytes:
        """Same as ``synthesize`` but wrapped in a WAV container for playback."""
        voice = voice or self.DEFAULT_VOICE
        audio_bytes, mime_type = await self._call_gemini_tts(text, voice)
        return pcm_payload_to_wav(audio_bytes, mime_type)


async def generate_scene_audio(
    text: str,
    voice_name: str = DEFAULT_VOICE,
    client_factory: Optional[GeminiClientFactory] = None,
) -> bytes:
    return await GeminiTTSEngine(client_factory=client_factory).synthesize(text, voice_name)
