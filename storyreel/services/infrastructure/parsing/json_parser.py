"""
JSON parsing for schema-constrained Gemini responses.

Script responses are requested with ``response_mime_type="application/json"``
so they are expected to be a bare JSON object. Markdown fences are tolerated;
anything else that fails to parse is a MalformedResponseError.
"""

import json
from typing import Any, Dict

from storyreel.core.exceptions import EmptyResponseError, MalformedResponseError


def strip_markdown_fences(text: str) -> str:
    """Remove ```json ... ``` wrappers if present."""
    text = text.strip()
    if text.startswith("```"):
        lines = text.split("\n")
        lines = [l for l in lines if not l.strip().startswith("```")]
        text = "\n".join(lines).strip()
    return text


def parse_json_object(text: str) -> Dict[str, Any]:
    """Parse a JSON object payload.

    Raises:
        EmptyResponseError: if the text is empty or whitespace
        MalformedResponseError: if it is not valid JSON or not an object
    """
    if not text or not text.strip():
        raise EmptyResponseError("Failed to generate story script.")

    cleaned = strip_markdown_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        hint = " (response looks truncated)" if looks_truncated_json(cleaned) else ""
        raise MalformedResponseError(
            f"Story script is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno}){hint}"
        ) from e

    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Story script must be a JSON object, got {type(data).__name__}"
        )
    return data


def looks_truncated_json(text: str) -> bool:
    """Heuristic check for truncated JSON payloads (unbalanced braces or open string)."""
    if not text:
        return False

    in_string = False
    escape = False
    depth = 0

    for ch in text:
        if in_string:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == "\"":
                in_string = False
            continue

        if ch == "\"":
            in_string = True
        elif ch in "{[":
            depth += 1
        elif ch in "}]":
            depth -= 1

    return depth > 0 or in_string
