"""
Shared Gemini API utilities used by the script, image, video and audio generators.
"""

import asyncio
import base64
from typing import Any, Callable, Optional, Tuple

PERMISSION_DENIED_STATUS = 403


async def call_gemini(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run a blocking google-genai call in a worker thread."""
    return await asyncio.to_thread(func, *args, **kwargs)


def is_permission_denied(error: BaseException) -> bool:
    """True when a Gemini error carries a 403 signature.

    google-genai raises ``errors.ClientError`` with ``code == 403``; other
    transports only mention the status in the message text.
    """
    if getattr(error, "code", None) == PERMISSION_DENIED_STATUS:
        return True
    if getattr(error, "status_code", None) == PERMISSION_DENIED_STATUS:
        return True
    return str(PERMISSION_DENIED_STATUS) in str(error)


def _candidate_parts(response: Any) -> list:
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) if content else None
    return list(parts or [])


def _inline_payload(part: Any) -> Optional[Tuple[Any, Optional[str]]]:
    inline_data = getattr(part, "inline_data", None)
    if not inline_data:
        return None
    data = getattr(inline_data, "data", None)
    if not data:
        return None
    return data, getattr(inline_data, "mime_type", None)


def find_first_inline_data(response: Any) -> Optional[Tuple[Any, Optional[str]]]:
    """Scan the first candidate's parts in order for the first inline payload."""
    for part in _candidate_parts(response):
        payload = _inline_payload(part)
        if payload:
            return payload
    return None


def first_part_inline_data(response: Any) -> Optional[Tuple[Any, Optional[str]]]:
    """Inline payload of the first candidate's first part only."""
    parts = _candidate_parts(response)
    if not parts:
        return None
    return _inline_payload(parts[0])


def payload_to_bytes(data: Any) -> bytes:
    """google-genai returns bytes; raw REST payloads arrive as base64 strings."""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    return base64.b64decode(data)


def payload_to_base64(data: Any) -> str:
    if isinstance(data, (bytes, bytearray)):
        return base64.b64encode(bytes(data)).decode("ascii")
    return str(data)
