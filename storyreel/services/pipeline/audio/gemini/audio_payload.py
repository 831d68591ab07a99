"""Audio payload extraction and WAV wrapping helpers."""

from __future__ import annotations

import io
import wave
from typing import Any

from storyreel.config import TTS_SAMPLE_RATE
from storyreel.core import GenerationFailedError
from storyreel.services.infrastructure.llm.gemini import first_part_inline_data, payload_to_bytes


def extract_inline_audio_payload(response: Any) -> tuple[bytes, str | None]:
    """Return the first candidate's first-part audio bytes and mime type."""
    payload = first_part_inline_data(response)
    if payload is None:
        raise GenerationFailedError("Failed to generate audio.")

    data, mime_type = payload
    try:
        return payload_to_bytes(data), mime_type
    except ValueError as exc:
        raise GenerationFailedError("Unable to decode base64 audio payload") from exc


def parse_mime(mime_type: str | None) -> tuple[str | None, dict[str, str]]:
    """Split ``audio/L16;codec=pcm;rate=24000`` into base type and parameters."""
    if not mime_type:
        return None, {}
    parts = [part.strip() for part in mime_type.split(";") if part.strip()]
    mime_base = parts[0].lower() if parts else None
    params: dict[str, str] = {}
    for part in parts[1:]:
        if "=" not in part:
            continue
        key, value = part.split("=", 1)
        params[key.strip().lower()] = value.strip()
    return mime_base, params


def pcm_to_wav(
    pcm: bytes,
    rate: int = TTS_SAMPLE_RATE,
    channels: int = 1,
    sample_width: int = 2,
) -> bytes:
    """Wrap raw 16-bit PCM (Gemini TTS output) in a WAV container."""
    frame_size = sample_width * max(1, channels)
    usable = len(pcm) - (len(pcm) % frame_size)

    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wf:
        wf.setnchannels(max(1, channels))
        wf.setsampwidth(sample_width)
        wf.setframerate(rate)
        wf.writeframes(pcm[:usable])
    return buffer.getvalue()


def pcm_payload_to_wav(audio_bytes: bytes, mime_type: str | None) -> bytes:
    """WAV bytes for a TTS payload, honouring ``rate``/``channels`` from its mime type."""
    _, params = parse_mime(mime_type)
    return pcm_to_wav(
        audio_bytes,
        rate=int(params.get("rate", str(TTS_SAMPLE_RATE))),
        channels=int(params.get("channels", "1")),
    )
