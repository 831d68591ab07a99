"""
Scene and cover image generation.

Images come back as inline data on the first candidate; the first part that
carries bytes is returned as a ``data:`` URI. The image model needs a paid
key, so a 403 is re-raised as PermissionDeniedError with a specific message.
"""

from typing import Optional

from google.genai import types

from storyreel.config import IMAGE_ASPECT_RATIO, IMAGE_SIZE, get_model_name
from storyreel.core import (
    GenerationFailedError,
    PermissionDeniedError,
    get_logger,
)
from storyreel.models import StoryData
from storyreel.services.infrastructure.llm.gemini import (
    GeminiClientFactory,
    call_gemini,
    find_first_inline_data,
    is_permission_denied,
    payload_to_base64,
)

logger = get_logger(__name__, component="image_generator")

IMAGE_PERMISSION_MESSAGE = (
    "Permission Denied: Please use a paid API Key (Billing Enabled) for Gemini 3 Pro Images."
)
DEFAULT_IMAGE_MIME = "image/png"


class SceneImageGenerator:
    """Generates 9:16 images through the Gemini image model."""

    def __init__(
        self,
        client_factory: Optional[GeminiClientFactory] = None,
        model: Optional[str] = None,
    ):
        self.client_factory = client_factory or GeminiClientFactory()
        self.model = model or get_model_name("image_generation")

    def build_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            image_config=types.ImageConfig(
                aspect_ratio=IMAGE_ASPECT_RATIO,
                image_size=IMAGE_SIZE,
            ),
        )

    async def generate(self, image_prompt: str) -> str:
        """Return the generated image as ``data:<mime>;base64,<payload>``."""
        client = self.client_factory.create_client()

        try:
            response = await call_gemini(
                client.models.generate_content,
                model=self.model,
                contents=[types.Part.from_text(text=image_prompt)],
                config=self.build_config(),
            )
        except Exception as e:
            logger.error(f"Image Gen Error: {e}", exc_info=True)
            if is_permission_denied(e):
                raise PermissionDeniedError(IMAGE_PERMISSION_MESSAGE) from e
            raise

        payload = find_first_inline_data(response)
        if payload is None:
            raise GenerationFailedError("Failed to generate image.")

        data, mime_type = payload
        logger.debug("Image generated", extra={"mime_type": mime_type or DEFAULT_IMAGE_MIME})
        return f"data:{mime_type or DEFAULT_IMAGE_MIME};base64,{payload_to_base64(data)}"

    async def generate_cover(self, story: StoryData) -> StoryData:
        """Render the story's cover prompt and return a copy with ``cover_image_url`` set.

        Stories without a cover prompt are returned unchanged.
        """
        if not story.cover_image_prompt:
            logger.info("Story has no cover prompt; skipping cover image")
            return story

        url = await self.generate(story.cover_image_prompt)
        return story.model_copy(update={"cover_image_url": url})


async def generate_scene_image(
    image_prompt: str,
    client_factory: Optional[GeminiClientFactory] = None,
) -> str:
    return await SceneImageGenerator(client_factory=client_factory).generate(image_prompt)


async def generate_cover_image(
    story: StoryData,
    client_factory: Optional[GeminiClientFactory] = None,
) -> StoryData:
    return await SceneImageGenerator(client_factory=client_factory).generate_cover(story)
