"""Scene visuals: still images and Veo clips."""

from .image_generator import (
    IMAGE_PERMISSION_MESSAGE,
    SceneImageGenerator,
    generate_cover_image,
    generate_scene_image,
)
from .video_generator import (
    VIDEO_PERMISSION_MESSAGE,
    SceneVideoGenerator,
    generate_scene_video,
)

__all__ = [
    "IMAGE_PERMISSION_MESSAGE",
    "SceneImageGenerator",
    "generate_cover_image",
    "generate_scene_image",
    "VIDEO_PERMISSION_MESSAGE",
    "SceneVideoGenerator",
    "generate_scene_video",
]
