"""
Story data contract

The camelCase JSON shape produced by script generation and consumed by
rendering/playback callers. Python attributes are snake_case; aliases keep
the wire names, and ``to_contract()`` dumps back to them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)


class StoryMode(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    MEGA_LONG = "mega_long"

    @property
    def scene_count(self) -> int:
        return SCENE_COUNTS[self]


SCENE_COUNTS: Dict[StoryMode, int] = {
    StoryMode.SHORT: 6,
    StoryMode.MEDIUM: 8,
    StoryMode.LONG: 4,
    StoryMode.MEGA_LONG: 12,
}


class VisualEffect(str, Enum):
    NONE = "none"
    RAIN = "rain"
    STORM = "storm"
    SNOW = "snow"
    FIRE = "fire"
    FOG = "fog"
    SPARKLES = "sparkles"
    CAMERA_SHAKE = "camera_shake"
    LIGHTNING = "lightning"


class SoundEffect(str, Enum):
    NONE = "none"
    RAIN = "rain"
    THUNDER = "thunder"
    FOREST = "forest"
    CITY = "city"
    FIRE = "fire"
    MAGIC = "magic"
    FOOTSTEPS = "footsteps"
    WIND = "wind"
    HEAVY_RAIN = "heavy_rain"


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class VoiceGender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class VoiceTone(str, Enum):
    SOFT = "soft"
    ENERGETIC = "energetic"
    DEEP = "deep"
    FORMAL = "formal"


class SubtitleLang(str, Enum):
    TH = "th"
    EN = "en"


class AppState(str, Enum):
    IDLE = "IDLE"
    GENERATING_SCRIPT = "GENERATING_SCRIPT"
    GENERATING_MEDIA = "GENERATING_MEDIA"
    READY = "READY"
    ERROR = "ERROR"


class ContractModel(BaseModel):
    """Base for wire-contract models: alias-aware, keeps unknown fields."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        # Optional fields never given are dropped; an explicit null is kept.
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if name in self.model_fields_set:
                continue
            for key in (name, field.alias):
                if key and key in data and data[key] is None:
                    del data[key]
        return data

    def to_contract(self) -> Dict[str, Any]:
        """Dump to the camelCase JSON contract; absent optional fields are omitted."""
        return self.model_dump(by_alias=True, mode="json")


class StoryScene(ContractModel):
    """One narrative beat."""

    story_text: str = Field(alias="storyText")
    english_translation: Optional[str] = Field(default=None, alias="englishTranslation")
    image_prompt: str = Field(alias="imagePrompt")
    scene_number: int = Field(alias="sceneNumber", ge=1)
    visual_effect: Optional[VisualEffect] = Field(default=None, alias="visualEffect")
    sound_effect: Optional[SoundEffect] = Field(default=None, alias="soundEffect")


class StoryConfig(ContractModel):
    """Production options picked by the user before generation."""

    duration: StoryMode = StoryMode.SHORT
    media_type: MediaType = Field(default=MediaType.IMAGE, alias="mediaType")
    voice_gender: VoiceGender = Field(default=VoiceGender.FEMALE, alias="voiceGender")
    voice_tone: VoiceTone = Field(default=VoiceTone.SOFT, alias="voiceTone")
    bgm_enabled: bool = Field(default=True, alias="bgmEnabled")
    default_show_subtitles: bool = Field(default=True, alias="defaultShowSubtitles")
    default_subtitle_lang: SubtitleLang = Field(default=SubtitleLang.TH, alias="defaultSubtitleLang")


class StoryData(ContractModel):
    """One generated story: metadata, cover and ordered scenes."""

    id: str
    created_at: int = Field(alias="createdAt")
    mode: StoryMode
    title: str
    seo_summary: str = Field(alias="seoSummary")
    tags: List[str] = Field(default_factory=list)
    character_description: str = Field(alias="characterDescription")
    mood: str

    cover_title: Optional[str] = Field(default=None, alias="coverTitle")
    cover_image_prompt: Optional[str] = Field(default=None, alias="coverImagePrompt")
    cover_image_url: Optional[str] = Field(default=None, alias="coverImageUrl")

    scenes: List[StoryScene]
    story_config: Optional[StoryConfig] = Field(default=None, alias="config")

    @model_validator(mode="after")
    def _check_scene_count(self) -> "StoryData":
        expected = self.mode.scene_count
        if len(self.scenes) != expected:
            raise ValueError(
                f"mode '{self.mode.value}' requires exactly {expected} scenes, got {len(self.scenes)}"
            )
        return self


class GeneratedSceneMedia(BaseModel):
    """Assets produced for one scene by the production use case."""

    model_config = ConfigDict(populate_by_name=True)

    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    video_url: Optional[str] = Field(default=None, alias="videoUrl")
    audio_buffer: Optional[bytes] = Field(default=None, alias="audioBuffer")
    text: str
    text_en: Optional[str] = Field(default=None, alias="textEn")
    visual_effect: Optional[str] = Field(default=None, alias="visualEffect")
    sound_effect: Optional[str] = Field(default=None, alias="soundEffect")


class HistoryItem(BaseModel):
    """A story together with the media produced for it."""

    model_config = ConfigDict(populate_by_name=True)

    story_data: StoryData = Field(alias="storyData")
    media: List[GeneratedSceneMedia] = Field(default_factory=list)
