"""
Tests for storyreel.services.use_cases.story_production
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from storyreel.core import PermissionDeniedError
from storyreel.core.logging import scene_var, story_id_var
from storyreel.models import AppState, HistoryItem, StoryConfig, StoryData
from storyreel.services.use_cases import (
    StoryProductionRequest,
    StoryProductionUseCase,
    UseCase,
)


class TestStoryProductionUseCase:
    """Test StoryProductionUseCase orchestration."""

    @pytest.fixture
    def story(self, story_payload):
        def _build(mode="short", scene_count=6):
            return StoryData.model_validate(
                {"id": "1700000000000", "createdAt": 1700000000000, "mode": mode, **story_payload(scene_count)}
            )
        return _build

    @pytest.fixture
    def collaborators(self, story):
        script_generator = MagicMock()
        script_generator.generate = AsyncMock(return_value=story())

        image_generator = MagicMock()
        image_generator.generate = AsyncMock(side_effect=lambda prompt: f"data:image/png;base64,{len(prompt)}")
        image_generator.generate_cover = AsyncMock(
            side_effect=lambda s: s.model_copy(update={"cover_image_url": "data:image/png;base64,cover"})
        )

        video_generator = MagicMock()
        video_generator.generate = AsyncMock(return_value="/tmp/scene.mp4")

        tts_engine = MagicMock()
        tts_engine.synthesize = AsyncMock(return_value=b"\x00\x01")

        return SimpleNamespace(
            script_generator=script_generator,
            image_generator=image_generator,
            video_generator=video_generator,
            tts_engine=tts_engine,
        )

    @pytest.fixture
    def progress(self):
        return MagicMock()

    @pytest.fixture
    def use_case(self, collaborators, progress):
        return StoryProductionUseCase(
            client_factory=MagicMock(),
            script_generator=collaborators.script_generator,
            image_generator=collaborators.image_generator,
            video_generator=collaborators.video_generator,
            tts_engine=collaborators.tts_engine,
            on_progress=progress,
        )

    def test_is_use_case(self, use_case):
        assert isinstance(use_case, UseCase)
        assert use_case.state is AppState.IDLE

    @pytest.mark.asyncio
    async def test_image_story(self, use_case, collaborators, progress):
        item = await use_case.execute(StoryProductionRequest(topic="แมวหลงทาง"))

        assert isinstance(item, HistoryItem)
        assert item.story_data.cover_image_url == "data:image/png;base64,cover"
        assert item.story_data.story_config == StoryConfig()
        assert len(item.media) == 6

        first = item.media[0]
        assert first.image_url.startswith("data:image/png;base64,")
        assert first.video_url is None
        assert first.audio_buffer == b"\x00\x01"
        assert first.text == "ฉากที่ 1"
        assert first.text_en == "Scene 1"
        assert first.visual_effect == "rain"
        assert first.sound_effect == "heavy_rain"

        collaborators.script_generator.generate.assert_awaited_once()
        assert collaborators.image_generator.generate.await_count == 6
        collaborators.video_generator.generate.assert_not_awaited()
        assert use_case.state is AppState.READY

        states = [c.args[0] for c in progress.call_args_list]
        assert states[0] is AppState.GENERATING_SCRIPT
        assert states[-1] is AppState.READY
        assert AppState.ERROR not in states

    @pytest.mark.asyncio
    async def test_video_story_uses_mapped_voice(self, use_case, collaborators, story):
        collaborators.script_generator.generate.return_value = story("long", 4)
        config = StoryConfig(duration="long", media_type="video", voice_gender="male", voice_tone="deep")

        item = await use_case.execute(StoryProductionRequest(topic="topic", config=config, include_cover=False))

        assert [m.video_url for m in item.media] == ["/tmp/scene.mp4"] * 4
        assert all(m.image_url is None for m in item.media)
        collaborators.image_generator.generate.assert_not_awaited()
        collaborators.image_generator.generate_cover.assert_not_awaited()
        for call in collaborators.tts_engine.synthesize.await_args_list:
            assert call.args[1] == "Charon"
        collaborators.script_generator.generate.assert_awaited_once_with("topic", config.duration)

    @pytest.mark.asyncio
    async def test_scenes_in_order(self, use_case, collaborators):
        item = await use_case.execute(StoryProductionRequest(topic="topic"))

        texts = [c.args[0] for c in collaborators.tts_engine.synthesize.await_args_list]
        assert texts == [f"ฉากที่ {i}" for i in range(1, 7)]
        assert [m.text for m in item.media] == texts

    @pytest.mark.asyncio
    async def test_failure_sets_error_and_reraises(self, use_case, collaborators, progress):
        collaborators.image_generator.generate.side_effect = PermissionDeniedError("paid key required")

        with pytest.raises(PermissionDeniedError):
            await use_case.execute(StoryProductionRequest(topic="topic"))

        assert use_case.state is AppState.ERROR
        progress.assert_called_with(AppState.ERROR, "paid key required")
        collaborators.tts_engine.synthesize.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_context_cleared(self, use_case):
        await use_case.execute(StoryProductionRequest(topic="topic"))

        assert story_id_var.get() is None
        assert scene_var.get() is None
