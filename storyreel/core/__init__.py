"""
Core Module - Cross-cutting concerns and shared infrastructure

Organization:
    - logging.py: Structured logging configuration and utilities
    - exceptions.py: Error taxonomy shared by all generators
    - credentials.py: Gemini API key resolution
    - voice_catalog.py: Narration voices and the voice selection table

Usage:
    from storyreel.core import get_logger, resolve_api_key, map_voice_config
"""

from .logging import (
    setup_logging,
    get_logger,
    set_story_id,
    set_scene,
    clear_context,
    LogTimer,
)

from .exceptions import (
    StoryReelError,
    PipelineError,
    InfrastructureError,
    MissingCredentialError,
    PermissionDeniedError,
    EmptyResponseError,
    MalformedResponseError,
    GenerationFailedError,
    VideoDownloadError,
    VideoTimeoutError,
)

from .credentials import (
    CredentialResolver,
    resolve_api_key,
    save_api_key,
    clear_api_key,
)

from .voice_catalog import (
    STORY_VOICES,
    map_voice_config,
    get_story_voices,
    is_known_voice,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "set_story_id",
    "set_scene",
    "clear_context",
    "LogTimer",
    "StoryReelError",
    "PipelineError",
    "InfrastructureError",
    "MissingCredentialError",
    "PermissionDeniedError",
    "EmptyResponseError",
    "MalformedResponseError",
    "GenerationFailedError",
    "VideoDownloadError",
    "VideoTimeoutError",
    "CredentialResolver",
    "resolve_api_key",
    "save_api_key",
    "clear_api_key",
    "STORY_VOICES",
    "map_voice_config",
    "get_story_voices",
    "is_known_voice",
]
