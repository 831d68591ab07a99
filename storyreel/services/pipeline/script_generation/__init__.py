"""Story script generation (all modes share one schema and parser)."""

from .generator import (
    StoryScriptGenerator,
    generate_long_story_script,
    generate_story_script,
    stamp_story,
)
from .modes import MODE_PROFILES, ModeProfile, StoryFormat, get_mode_profile
from .prompts import AUDIOBOOK_STORY, SHORT_FORM_STORY, PromptTemplate, build_story_prompt
from .schema import build_scene_schema, build_story_schema

__all__ = [
    "StoryScriptGenerator",
    "generate_story_script",
    "generate_long_story_script",
    "stamp_story",
    "MODE_PROFILES",
    "ModeProfile",
    "StoryFormat",
    "get_mode_profile",
    "AUDIOBOOK_STORY",
    "SHORT_FORM_STORY",
    "PromptTemplate",
    "build_story_prompt",
    "build_scene_schema",
    "build_story_schema",
]
