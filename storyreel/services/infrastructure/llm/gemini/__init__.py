"""
Gemini AI Service Module

Provides the Gemini client factory and helper utilities for content generation.

Usage:
    from storyreel.services.infrastructure.llm.gemini import GeminiClientFactory, call_gemini
"""

from .client import GeminiClientFactory, create_client
from .helpers import (
    call_gemini,
    is_permission_denied,
    find_first_inline_data,
    first_part_inline_data,
    payload_to_bytes,
    payload_to_base64,
)

__all__ = [
    "GeminiClientFactory",
    "create_client",

    "call_gemini",
    "is_permission_denied",
    "find_first_inline_data",
    "first_part_inline_data",
    "payload_to_bytes",
    "payload_to_base64",
]
