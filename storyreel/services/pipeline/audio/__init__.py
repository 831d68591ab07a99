"""
Audio generation for scene narration.

Usage:
    from storyreel.services.pipeline.audio import generate_scene_audio
    pcm = await generate_scene_audio("สวัสดี", voice_name="Kore")
"""

from .gemini import GeminiTTSEngine, generate_scene_audio, pcm_to_wav

__all__ = ["GeminiTTSEngine", "generate_scene_audio", "pcm_to_wav"]
