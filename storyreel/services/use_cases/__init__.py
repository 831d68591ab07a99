"""
Use Cases package - orchestration layer.

Modules:
- base: Base use case abstract class
- story_production: topic -> HistoryItem (script plus per-scene media)
"""

from .base import UseCase
from .story_production import (
    ProgressCallback,
    StoryProductionRequest,
    StoryProductionUseCase,
)

__all__ = [
    "UseCase",
    "ProgressCallback",
    "StoryProductionRequest",
    "StoryProductionUseCase",
]
