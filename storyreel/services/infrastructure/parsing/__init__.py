"""
Parsing Module

Usage:
    from storyreel.services.infrastructure.parsing import parse_json_object
"""

from .json_parser import (
    parse_json_object,
    strip_markdown_fences,
    looks_truncated_json,
)

__all__ = [
    "parse_json_object",
    "strip_markdown_fences",
    "looks_truncated_json",
]
