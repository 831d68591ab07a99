"""
Prebuilt Gemini voices used for story narration.

This module is the single source of truth for:
- The five narration voices offered to users
- The (gender, tone) -> voice selection table
"""

from __future__ import annotations

from typing import Any, Dict, List

from storyreel.models.story import VoiceGender, VoiceTone

STORY_VOICES: Dict[str, Dict[str, Any]] = {
    "Kore": {"name": "Kore (Soft)", "gender": "female"},
    "Zephyr": {"name": "Zephyr (Bright)", "gender": "female"},
    "Puck": {"name": "Puck (Upbeat)", "gender": "male"},
    "Charon": {"name": "Charon (Deep)", "gender": "male"},
    "Fenrir": {"name": "Fenrir (Excitable)", "gender": "male"},
}

DEFAULT_FEMALE_VOICE = "Kore"
DEFAULT_MALE_VOICE = "Puck"


def map_voice_config(gender: VoiceGender | str, tone: VoiceTone | str) -> str:
    """Pick a prebuilt voice for a narrator gender and tone.

    female: energetic/formal -> Zephyr, anything else -> Kore
    male:   deep -> Charon, energetic -> Fenrir, anything else -> Puck
    """
    gender = VoiceGender(gender)
    tone = VoiceTone(tone)

    if gender == VoiceGender.FEMALE:
        if tone in (VoiceTone.ENERGETIC, VoiceTone.FORMAL):
            return "Zephyr"
        return DEFAULT_FEMALE_VOICE

    if tone == VoiceTone.DEEP:
        return "Charon"
    if tone == VoiceTone.ENERGETIC:
        return "Fenrir"
    return DEFAULT_MALE_VOICE


def get_story_voices() -> List[Dict[str, str]]:
    """Return voice options in display order."""
    return [
        {"id": voice_id, "name": info["name"], "gender": info["gender"]}
        for voice_id, info in STORY_VOICES.items()
    ]


def is_known_voice(voice: str) -> bool:
    return voice in STORY_VOICES
