"""
Model Configuration for Pipeline Steps

This module defines the Gemini models used by each step of the story pipeline.
Each step has its own model configuration so models can be swapped without
touching the generators.

=== OVERRIDES ===

Every model name can be overridden through the environment:
    - STORYREEL_SCRIPT_MODEL : text model for story scripts
    - STORYREEL_IMAGE_MODEL  : image model for scene and cover images
    - STORYREEL_VIDEO_MODEL  : Veo model for scene videos
    - STORYREEL_TTS_MODEL    : speech model for narration

Image and video models require a paid (billing enabled) API key.
"""

import os
from dataclasses import dataclass, field


@dataclass
class ModelConfig:
    """Configuration for a single model"""
    model_name: str
    description: str = ""
    requires_billing: bool = False


def _env_model(var: str, default: str) -> str:
    return os.getenv(var) or default


@dataclass
class PipelineModels:
    """
    Model configuration for each step of the story pipeline.

    Pipeline Steps:
    1. Script Generation - Story script with scenes, cover and SEO data (JSON)
    2. Image Generation - One 9:16 image per scene, plus the cover
    3. Video Generation - Optional 9:16 clip per scene (Veo)
    4. Speech Synthesis - Thai narration per scene
    """

    script_generation: ModelConfig = field(default_factory=lambda: ModelConfig(
        model_name=_env_model("STORYREEL_SCRIPT_MODEL", "gemini-2.5-flash"),
        description="Structured story script generation"
    ))

    image_generation: ModelConfig = field(default_factory=lambda: ModelConfig(
        model_name=_env_model("STORYREEL_IMAGE_MODEL", "gemini-3-pro-image-preview"),
        description="Vertical scene and cover images",
        requires_billing=True,
    ))

    video_generation: ModelConfig = field(default_factory=lambda: ModelConfig(
        model_name=_env_model("STORYREEL_VIDEO_MODEL", "veo-3.1-fast-generate-preview"),
        description="Vertical scene clips with reasonable generation time",
        requires_billing=True,
    ))

    speech_synthesis: ModelConfig = field(default_factory=lambda: ModelConfig(
        model_name=_env_model("STORYREEL_TTS_MODEL", "gemini-2.5-flash-preview-tts"),
        description="Prebuilt-voice narration"
    ))


PIPELINE_STEPS = (
    "script_generation",
    "image_generation",
    "video_generation",
    "speech_synthesis",
)


def get_model_config(step: str) -> ModelConfig:
    """
    Get the model configuration for a specific pipeline step.

    The pipeline is rebuilt on every call so environment overrides apply
    without restarting.

    Raises:
        ValueError: if the step is unknown
    """
    if step not in PIPELINE_STEPS:
        raise ValueError(f"Unknown pipeline step: {step}")
    return getattr(PipelineModels(), step)


def get_model_name(step: str) -> str:
    return get_model_config(step).model_name


def list_pipeline_steps() -> list[str]:
    """List all available pipeline step names"""
    return list(PIPELINE_STEPS)
