"""Gemini TTS package."""

from .audio_payload import (
    extract_inline_audio_payload,
    parse_mime,
    pcm_payload_to_wav,
    pcm_to_wav,
)
from .engine import GeminiTTSEngine, generate_scene_audio

__all__ = [
    "GeminiTTSEngine",
    "generate_scene_audio",
    "extract_inline_audio_payload",
    "parse_mime",
    "pcm_payload_to_wav",
    "pcm_to_wav",
]
