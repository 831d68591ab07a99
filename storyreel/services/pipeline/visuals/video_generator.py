"""
Scene video generation (Veo).

Flow:
    1. Submit a long-running generate_videos job (one 720p 9:16 clip)
    2. Poll the operation every ``poll_interval`` seconds until it reports done
    3. Download the asset with the same API key and write it to a local file

The wait is bounded by ``max_wait`` (STORYREEL_VIDEO_MAX_WAIT); None or 0 means unbounded.
Polling suspends on ``asyncio.sleep`` so cancelling the calling task stops it.
"""

import asyncio
import time
import uuid
from pathlib import Path
from typing import Any, Callable, Optional

import httpx
from google.genai import types

from storyreel.config import (
    VIDEO_ASPECT_RATIO,
    VIDEO_DOWNLOAD_TIMEOUT,
    VIDEO_NUMBER_OF_VIDEOS,
    VIDEO_RESOLUTION,
    get_model_name,
    get_video_max_wait,
    get_video_output_dir,
    get_video_poll_interval,
)
from storyreel.core import (
    GenerationFailedError,
    PermissionDeniedError,
    StoryReelError,
    VideoDownloadError,
    VideoTimeoutError,
    get_logger,
)
from storyreel.services.infrastructure.llm.gemini import (
    GeminiClientFactory,
    call_gemini,
    is_permission_denied,
)

logger = get_logger(__name__, component="video_generator")

VIDEO_PERMISSION_MESSAGE = (
    "Permission Denied: Veo Video generation requires a paid Google Cloud Project with Billing Enabled."
)

_FROM_CONFIG: Any = object()


class SceneVideoGenerator:
    """Generates a scene clip and returns the path of the downloaded file."""

    def __init__(
        self,
        client_factory: Optional[GeminiClientFactory] = None,
        model: Optional[str] = None,
        poll_interval: Optional[float] = None,
        max_wait: Optional[float] = _FROM_CONFIG,
        output_dir: Optional[Path] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client_factory = client_factory or GeminiClientFactory()
        self.model = model or get_model_name("video_generation")
        self.poll_interval = get_video_poll_interval() if poll_interval is None else poll_interval
        if max_wait is _FROM_CONFIG:
            max_wait = get_video_max_wait()
        self.max_wait = None if max_wait is not None and max_wait <= 0 else max_wait
        self.output_dir = Path(output_dir) if output_dir else get_video_output_dir()
        self._transport = transport
        self._clock = clock

    def build_config(self) -> types.GenerateVideosConfig:
        return types.GenerateVideosConfig(
            number_of_videos=VIDEO_NUMBER_OF_VIDEOS,
            resolution=VIDEO_RESOLUTION,
            aspect_ratio=VIDEO_ASPECT_RATIO,
        )

    async def generate(self, prompt: str) -> str:
        api_key = self.client_factory.resolve_api_key()
        client = self.client_factory.create_client(api_key)

        try:
            operation = await call_gemini(
                client.models.generate_videos,
                model=self.model,
                prompt=prompt,
                config=self.build_config(),
            )
            operation = await self.wait_for_completion(client, operation)
            download_link = self.extract_video_uri(operation)
            video_bytes = await self.download(download_link, api_key)
        except StoryReelError:
            raise
        except Exception as e:
            logger.error(f"Veo Error: {e}", exc_info=True)
            if is_permission_denied(e):
                raise PermissionDeniedError(VIDEO_PERMISSION_MESSAGE) from e
            raise

        path = self._save(video_bytes)
        logger.info(f"Scene video saved ({len(video_bytes)} bytes)", extra={"path": str(path)})
        return str(path)

    async def wait_for_completion(self, client: Any, operation: Any) -> Any:
        """Re-fetch the operation until ``done``; raises VideoTimeoutError past ``max_wait``."""
        started = self._clock()
        polls = 0

        while not operation.done:
            waited = self._clock() - started
            if self.max_wait is not None and waited >= self.max_wait:
                raise VideoTimeoutError(waited, self.max_wait)

            await asyncio.sleep(self.poll_interval)
            operation = await call_gemini(client.operations.get, operation)
            polls += 1
            logger.debug(f"Video operation poll #{polls}: done={bool(operation.done)}")

        error = getattr(operation, "error", None)
        if error:
            raise GenerationFailedError(f"Video generation failed: {error}")

        logger.info(f"Video operation completed after {polls} poll(s)")
        return operation

    @staticmethod
    def extract_video_uri(operation: Any) -> str:
        response = getattr(operation, "response", None)
        videos = getattr(response, "generated_videos", None) if response else None
        video = getattr(videos[0], "video", None) if videos else None
        uri = getattr(video, "uri", None) if video else None
        if not uri:
            raise GenerationFailedError("Failed to generate video URI")
        return uri

    async def download(self, download_link: str, api_key: str) -> bytes:
        """Fetch the asset bytes, passing the API key as the ``key`` query parameter."""
        async with httpx.AsyncClient(
            timeout=VIDEO_DOWNLOAD_TIMEOUT,
            follow_redirects=True,
            transport=self._transport,
        ) as http:
            try:
                response = await http.get(download_link, params={"key": api_key})
            except httpx.HTTPError as e:
                raise VideoDownloadError("Failed to download video bytes") from e

        if response.status_code >= 400:
            logger.error("Video download rejected", extra={"status_code": response.status_code})
            raise VideoDownloadError("Failed to download video bytes")
        return response.content

    def _save(self, video_bytes: bytes) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / f"scene_{uuid.uuid4().hex}.mp4"
        path.write_bytes(video_bytes)
        return path


async def generate_scene_video(
    prompt: str,
    client_factory: Optional[GeminiClientFactory] = None,
) -> str:
    return await SceneVideoGenerator(client_factory=client_factory).generate(prompt)
