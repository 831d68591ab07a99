"""
Tests for storyreel.services.infrastructure.llm.gemini.helpers
"""

import base64
import threading
from types import SimpleNamespace

import pytest

from storyreel.services.infrastructure.llm.gemini.helpers import (
    call_gemini,
    find_first_inline_data,
    first_part_inline_data,
    is_permission_denied,
    payload_to_base64,
    payload_to_bytes,
)


class _ClientError(Exception):
    def __init__(self, code, message):
        super().__init__(message)
        self.code = code


class TestPermissionDenied:
    def test_code_attribute(self):
        assert is_permission_denied(_ClientError(403, "PERMISSION_DENIED"))

    def test_status_code_attribute(self):
        err = Exception("forbidden")
        err.status_code = 403
        assert is_permission_denied(err)

    def test_message_only(self):
        assert is_permission_denied(RuntimeError("HTTP 403 Forbidden"))

    def test_other_errors(self):
        assert not is_permission_denied(_ClientError(429, "RESOURCE_EXHAUSTED"))
        assert not is_permission_denied(RuntimeError("connection reset"))


class TestInlineData:
    def test_scans_parts_in_order(self, inline_response):
        response = inline_response(None, (b"img-1", "image/png"), (b"img-2", "image/jpeg"))
        assert find_first_inline_data(response) == (b"img-1", "image/png")

    def test_first_part_only(self, inline_response):
        response = inline_response(None, (b"pcm", "audio/L16;rate=24000"))
        assert first_part_inline_data(response) is None
        assert first_part_inline_data(inline_response((b"pcm", "audio/L16"))) == (b"pcm", "audio/L16")

    @pytest.mark.parametrize(
        "response",
        [
            SimpleNamespace(candidates=None),
            SimpleNamespace(candidates=[]),
            SimpleNamespace(candidates=[SimpleNamespace(content=None)]),
            SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=None))]),
        ],
    )
    def test_no_candidates(self, response):
        assert find_first_inline_data(response) is None
        assert first_part_inline_data(response) is None

    def test_empty_data_skipped(self, inline_response):
        response = inline_response((b"", "image/png"), (b"real", "image/png"))
        assert find_first_inline_data(response) == (b"real", "image/png")


class TestPayloadConversion:
    def test_bytes_passthrough(self):
        assert payload_to_bytes(b"\x00\x01") == b"\x00\x01"

    def test_base64_string_decoded(self):
        assert payload_to_bytes(base64.b64encode(b"\x00\x01").decode()) == b"\x00\x01"

    def test_to_base64(self):
        assert payload_to_base64(b"abc") == "YWJj"
        assert payload_to_base64("YWJj") == "YWJj"


@pytest.mark.asyncio
async def test_call_gemini_runs_in_worker_thread():
    main_thread = threading.get_ident()

    def blocking(x, *, y):
        return x + y, threading.get_ident()

    result, thread_id = await call_gemini(blocking, 1, y=2)

    assert result == 3
    assert thread_id != main_thread
