"""
StoryReel - Thai short stories and audiobooks generated with Gemini.

Usage:
    from storyreel.services.use_cases import StoryProductionUseCase, StoryProductionRequest
"""

__version__ = "0.1.0"
