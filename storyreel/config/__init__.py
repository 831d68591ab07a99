"""
Application configuration and settings
"""

import os
import tempfile
from pathlib import Path
from typing import Optional

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from .models import (
    ModelConfig,
    PipelineModels,
    PIPELINE_STEPS,
    get_model_config,
    get_model_name,
    list_pipeline_steps,
)


def parse_bool_env(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}")


# Credentials
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")
SETTINGS_KEY_NAME = "gemini_api_key"
DEFAULT_SETTINGS_FILE = Path.home() / ".storyreel" / "settings.json"


def get_settings_file() -> Path:
    """Location of the locally persisted settings (API key)."""
    override = os.getenv("STORYREEL_SETTINGS_FILE")
    return Path(override).expanduser() if override else DEFAULT_SETTINGS_FILE


# Image generation
IMAGE_ASPECT_RATIO = "9:16"
IMAGE_SIZE = "1K"

# Video generation
VIDEO_ASPECT_RATIO = "9:16"
VIDEO_RESOLUTION = "720p"
VIDEO_NUMBER_OF_VIDEOS = 1
DEFAULT_VIDEO_POLL_INTERVAL = 5.0
DEFAULT_VIDEO_MAX_WAIT = 900.0
VIDEO_DOWNLOAD_TIMEOUT = 120.0


def get_video_poll_interval() -> float:
    return _float_env("STORYREEL_VIDEO_POLL_INTERVAL", DEFAULT_VIDEO_POLL_INTERVAL)


def get_video_max_wait() -> Optional[float]:
    """Maximum seconds to wait for a video operation; None means unbounded."""
    value = _float_env("STORYREEL_VIDEO_MAX_WAIT", DEFAULT_VIDEO_MAX_WAIT)
    return value if value > 0 else None


def get_video_output_dir() -> Path:
    override = os.getenv("STORYREEL_VIDEO_OUTPUT_DIR")
    if override:
        return Path(override).expanduser()
    return Path(tempfile.gettempdir()) / "storyreel" / "videos"


# Speech synthesis
DEFAULT_VOICE = "Kore"
TTS_SAMPLE_RATE = 24000

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = parse_bool_env(os.getenv("LOG_JSON"))

__all__ = [
    "ModelConfig",
    "PipelineModels",
    "PIPELINE_STEPS",
    "get_model_config",
    "get_model_name",
    "list_pipeline_steps",
    "parse_bool_env",
    "API_KEY_ENV_VARS",
    "SETTINGS_KEY_NAME",
    "DEFAULT_SETTINGS_FILE",
    "get_settings_file",
    "IMAGE_ASPECT_RATIO",
    "IMAGE_SIZE",
    "VIDEO_ASPECT_RATIO",
    "VIDEO_RESOLUTION",
    "VIDEO_NUMBER_OF_VIDEOS",
    "DEFAULT_VIDEO_POLL_INTERVAL",
    "DEFAULT_VIDEO_MAX_WAIT",
    "VIDEO_DOWNLOAD_TIMEOUT",
    "get_video_poll_interval",
    "get_video_max_wait",
    "get_video_output_dir",
    "DEFAULT_VOICE",
    "TTS_SAMPLE_RATE",
    "LOG_LEVEL",
    "LOG_JSON",
]
