"""
Story script generation

One parameterised operation serves every mode: the ModeProfile decides the
prompt format, scene count and duration/length guidance, and all modes share
the same response schema, parsing and stamping.
"""

import time
from typing import Any, Callable, Dict, Optional

from google.genai import types
from pydantic import ValidationError

from storyreel.config import get_model_name
from storyreel.core import (
    EmptyResponseError,
    LogTimer,
    MalformedResponseError,
    get_logger,
)
from storyreel.models import StoryData, StoryMode
from storyreel.services.infrastructure.llm.gemini import GeminiClientFactory, call_gemini
from storyreel.services.infrastructure.parsing import parse_json_object

from .modes import AUDIOBOOK_MODES, SHORT_FORM_MODES, ModeProfile, get_mode_profile
from .prompts import build_story_prompt
from .schema import build_story_schema

logger = get_logger(__name__, component="script_generation")


def stamp_story(raw: Dict[str, Any], mode: StoryMode, created_at_ms: int) -> Dict[str, Any]:
    """Add id, createdAt and mode to a parsed script.

    ``id`` and ``createdAt`` are additive: values already in the response win.
    ``mode`` is always the requested one, so the scene-count check runs
    against what was asked for.
    """
    return {
        "id": str(created_at_ms),
        "createdAt": created_at_ms,
        **raw,
        "mode": mode.value,
    }


class StoryScriptGenerator:
    """Generates a StoryData script for a topic and mode."""

    def __init__(
        self,
        client_factory: Optional[GeminiClientFactory] = None,
        model: Optional[str] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.client_factory = client_factory or GeminiClientFactory()
        self.model = model or get_model_name("script_generation")
        self._clock = clock

    def build_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=build_story_schema(),
        )

    async def generate(self, topic: str, mode: StoryMode | str = StoryMode.SHORT) -> StoryData:
        """Generate and validate a story script.

        Raises:
            MissingCredentialError: no API key (before any network call)
            EmptyResponseError: the model returned no text
            MalformedResponseError: invalid JSON, unknown enum value, a different mode
                or wrong scene count
        """
        topic = (topic or "").strip()
        if not topic:
            raise ValueError("topic must not be empty")

        profile = get_mode_profile(mode)
        client = self.client_factory.create_client()
        prompt = build_story_prompt(topic, profile)

        with LogTimer(logger, f"{profile.mode.value} script for '{topic[:60]}'"):
            response = await call_gemini(
                client.models.generate_content,
                model=self.model,
                contents=prompt,
                config=self.build_config(),
            )

        story = self._parse_response(response, profile)
        logger.info(
            f"Generated '{story.title}' with {len(story.scenes)} scenes",
            extra={"story_id": story.id, "mode": story.mode.value, "mood": story.mood},
        )
        return story

    def _parse_response(self, response: Any, profile: ModeProfile) -> StoryData:
        text = getattr(response, "text", None)
        if not text:
            raise EmptyResponseError("Failed to generate story script.")

        raw = parse_json_object(text)
        raw_mode = raw.get("mode")
        if raw_mode is not None and raw_mode != profile.mode.value:
            raise MalformedResponseError(
                f"Story script is for mode '{raw_mode}' but '{profile.mode.value}' was requested"
            )

        created_at_ms = int(self._clock() * 1000)
        stamped = stamp_story(raw, profile.mode, created_at_ms)

        try:
            return StoryData.model_validate(stamped)
        except ValidationError as e:
            logger.error(
                f"Story script failed validation: {e.error_count()} error(s)",
                extra={"mode": profile.mode.value},
            )
            raise MalformedResponseError(f"Story script does not match the story contract: {e}") from e


async def generate_story_script(
    topic: str,
    mode: StoryMode | str = StoryMode.SHORT,
    client_factory: Optional[GeminiClientFactory] = None,
) -> StoryData:
    """Short-form story (short: 6 scenes, medium: 8 scenes)."""
    mode = StoryMode(mode)
    if mode not in SHORT_FORM_MODES:
        raise ValueError(f"generate_story_script handles short/medium, got '{mode.value}'")
    return await StoryScriptGenerator(client_factory=client_factory).generate(topic, mode)


async def generate_long_story_script(
    topic: str,
    mode: StoryMode | str = StoryMode.LONG,
    client_factory: Optional[GeminiClientFactory] = None,
) -> StoryData:
    """Audiobook-style story (long: 4 chapters, mega_long: 12 chapters)."""
    mode = StoryMode(mode)
    if mode not in AUDIOBOOK_MODES:
        raise ValueError(f"generate_long_story_script handles long/mega_long, got '{mode.value}'")
    return await StoryScriptGenerator(client_factory=client_factory).generate(topic, mode)
