"""
Per-mode script parameters.

Each StoryMode maps to one ModeProfile: which prompt format to use, how many
scenes to request, and the duration/length guidance embedded in the prompt.
"""

from dataclasses import dataclass
from enum import Enum

from storyreel.models import StoryMode


class StoryFormat(str, Enum):
    SHORT_FORM = "short_form"   # YouTube Shorts / TikTok pacing
    AUDIOBOOK = "audiobook"     # podcast / audiobook chapters


@dataclass(frozen=True)
class ModeProfile:
    mode: StoryMode
    story_format: StoryFormat
    scene_count: int
    duration_guidance: str
    length_guidance: str = ""


MODE_PROFILES = {
    StoryMode.SHORT: ModeProfile(
        mode=StoryMode.SHORT,
        story_format=StoryFormat.SHORT_FORM,
        scene_count=StoryMode.SHORT.scene_count,
        duration_guidance="Total video length should be approx 40-50 seconds. Create exactly 6 scenes.",
    ),
    StoryMode.MEDIUM: ModeProfile(
        mode=StoryMode.MEDIUM,
        story_format=StoryFormat.SHORT_FORM,
        scene_count=StoryMode.MEDIUM.scene_count,
        duration_guidance="Total video length should be approx 60-75 seconds. Create exactly 8 scenes.",
    ),
    StoryMode.LONG: ModeProfile(
        mode=StoryMode.LONG,
        story_format=StoryFormat.AUDIOBOOK,
        scene_count=StoryMode.LONG.scene_count,
        duration_guidance="Target Duration: 3-5 Minutes Podcast Style.",
        length_guidance=(
            "Long and detailed. Each chapter must be 100-150 words. "
            "It should take 45-60 seconds to read each scene."
        ),
    ),
    StoryMode.MEGA_LONG: ModeProfile(
        mode=StoryMode.MEGA_LONG,
        story_format=StoryFormat.AUDIOBOOK,
        scene_count=StoryMode.MEGA_LONG.scene_count,
        duration_guidance="Target Duration: 30 Minutes Audiobook Style.",
        length_guidance=(
            "EXTREMELY LONG. Each chapter must be 300-400 words. "
            "It should take 2-3 minutes to read each scene."
        ),
    ),
}

SHORT_FORM_MODES = frozenset(m for m, p in MODE_PROFILES.items() if p.story_format == StoryFormat.SHORT_FORM)
AUDIOBOOK_MODES = frozenset(m for m, p in MODE_PROFILES.items() if p.story_format == StoryFormat.AUDIOBOOK)


def get_mode_profile(mode: StoryMode | str) -> ModeProfile:
    """Look up the profile for a mode; raises ValueError for unknown modes."""
    return MODE_PROFILES[StoryMode(mode)]
