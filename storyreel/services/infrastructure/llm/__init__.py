"""LLM infrastructure (Gemini client factory and call helpers)."""

from .gemini import GeminiClientFactory, call_gemini, is_permission_denied

__all__ = ["GeminiClientFactory", "call_gemini", "is_permission_denied"]
