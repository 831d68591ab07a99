"""
Story production: the caller-side sequencing of the generators.

    topic -> script -> (cover image) -> per scene: image or video + narration

Scenes are produced one after another. The first failure moves the state to
ERROR and is re-raised unchanged.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from storyreel.core import (
    clear_context,
    get_logger,
    map_voice_config,
    set_scene,
    set_story_id,
)
from storyreel.models import (
    AppState,
    GeneratedSceneMedia,
    HistoryItem,
    MediaType,
    StoryConfig,
    StoryScene,
)
from storyreel.services.infrastructure.llm.gemini import GeminiClientFactory
from storyreel.services.pipeline.audio import GeminiTTSEngine
from storyreel.services.pipeline.script_generation import StoryScriptGenerator
from storyreel.services.pipeline.visuals import SceneImageGenerator, SceneVideoGenerator

from .base import UseCase

logger = get_logger(__name__, component="story_production")

ProgressCallback = Callable[[AppState, str], None]


@dataclass
class StoryProductionRequest:
    topic: str
    config: StoryConfig = field(default_factory=StoryConfig)
    include_cover: bool = True


class StoryProductionUseCase(UseCase[StoryProductionRequest, HistoryItem]):
    """Generate a script and all per-scene media for a topic."""

    def __init__(
        self,
        client_factory: Optional[GeminiClientFactory] = None,
        script_generator: Optional[StoryScriptGenerator] = None,
        image_generator: Optional[SceneImageGenerator] = None,
        video_generator: Optional[SceneVideoGenerator] = None,
        tts_engine: Optional[GeminiTTSEngine] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        factory = client_factory or GeminiClientFactory()
        self.script_generator = script_generator or StoryScriptGenerator(client_factory=factory)
        self.image_generator = image_generator or SceneImageGenerator(client_factory=factory)
        self.video_generator = video_generator or SceneVideoGenerator(client_factory=factory)
        self.tts_engine = tts_engine or GeminiTTSEngine(client_factory=factory)
        self.on_progress = on_progress
        self.state = AppState.IDLE

    def _set_state(self, state: AppState, message: str = "") -> None:
        self.state = state
        logger.info(f"{state.value}: {message}" if message else state.value)
        if self.on_progress:
            self.on_progress(state, message)

    async def execute(self, request: StoryProductionRequest) -> HistoryItem:
        config = request.config
        try:
            self._set_state(AppState.GENERATING_SCRIPT, f"Writing a {config.duration.value} story")
            story = await self.script_generator.generate(request.topic, config.duration)
            story = story.model_copy(update={"story_config": config})
            set_story_id(story.id)

            self._set_state(AppState.GENERATING_MEDIA, f"Producing {len(story.scenes)} scenes")
            if request.include_cover:
                story = await self.image_generator.generate_cover(story)

            voice = map_voice_config(config.voice_gender, config.voice_tone)
            media: List[GeneratedSceneMedia] = []
            for scene in story.scenes:
                set_scene(scene.scene_number)
                media.append(await self.produce_scene(scene, config.media_type, voice))
                if self.on_progress:
                    self.on_progress(
                        AppState.GENERATING_MEDIA,
                        f"Scene {len(media)}/{len(story.scenes)} ready",
                    )

            self._set_state(AppState.READY, story.title)
            return HistoryItem(story_data=story, media=media)
        except Exception as e:
            self._set_state(AppState.ERROR, str(e))
            raise
        finally:
            clear_context()

    async def produce_scene(
        self,
        scene: StoryScene,
        media_type: MediaType,
        voice: str,
    ) -> GeneratedSceneMedia:
        image_url: Optional[str] = None
        video_url: Optional[str] = None

        if media_type == MediaType.VIDEO:
            video_url = await self.video_generator.generate(scene.image_prompt)
        else:
            image_url = await self.image_generator.generate(scene.image_prompt)

        audio = await self.tts_engine.synthesize(scene.story_text, voice)

        return GeneratedSceneMedia(
            image_url=image_url,
            video_url=video_url,
            audio_buffer=audio,
            text=scene.story_text,
            text_en=scene.english_translation,
            visual_effect=scene.visual_effect.value if scene.visual_effect else None,
            sound_effect=scene.sound_effect.value if scene.sound_effect else None,
        )
