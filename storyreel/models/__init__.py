"""
Data models for stories, scenes and produced media.
"""

from .story import (
    AppState,
    ContractModel,
    GeneratedSceneMedia,
    HistoryItem,
    MediaType,
    SCENE_COUNTS,
    SoundEffect,
    StoryConfig,
    StoryData,
    StoryMode,
    StoryScene,
    SubtitleLang,
    VisualEffect,
    VoiceGender,
    VoiceTone,
)

__all__ = [
    "AppState",
    "ContractModel",
    "GeneratedSceneMedia",
    "HistoryItem",
    "MediaType",
    "SCENE_COUNTS",
    "SoundEffect",
    "StoryConfig",
    "StoryData",
    "StoryMode",
    "StoryScene",
    "SubtitleLang",
    "VisualEffect",
    "VoiceGender",
    "VoiceTone",
]
