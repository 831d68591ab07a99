import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from storyreel.core import CredentialResolver, clear_context
from storyreel.services.infrastructure.llm.gemini import GeminiClientFactory


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep every test away from real keys, real settings and the real temp dir"""
    for name in ("GEMINI_API_KEY", "API_KEY", "STORYREEL_VIDEO_MAX_WAIT", "STORYREEL_VIDEO_POLL_INTERVAL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("STORYREEL_SETTINGS_FILE", str(tmp_path / "settings.json"))
    monkeypatch.setenv("STORYREEL_VIDEO_OUTPUT_DIR", str(tmp_path / "videos"))
    yield
    clear_context()


@pytest.fixture
def gemini_client():
    """Stand-in for google.genai.Client; tests set return values on .models / .operations"""
    return MagicMock(name="genai_client")


@pytest.fixture
def client_factory(gemini_client, tmp_path):
    resolver = CredentialResolver(
        environ={"GEMINI_API_KEY": "test-key"},
        settings_file=tmp_path / "factory-settings.json",
    )
    return GeminiClientFactory(resolver=resolver, client_builder=lambda api_key: gemini_client)


@pytest.fixture
def keyless_factory(tmp_path):
    """Factory with no key anywhere; the builder must never be reached"""
    builder = MagicMock(name="client_builder")
    resolver = CredentialResolver(environ={}, settings_file=tmp_path / "empty-settings.json")
    factory = GeminiClientFactory(resolver=resolver, client_builder=builder)
    factory.builder = builder
    return factory


@pytest.fixture
def inline_response():
    """Build a generate_content response whose first candidate holds the given parts.

    Each part is ``(data, mime_type)`` for inline data or ``None`` for a text-only part.
    """
    def _build(*parts):
        built = []
        for part in parts:
            if part is None:
                built.append(SimpleNamespace(inline_data=None, text="caption"))
            else:
                data, mime_type = part
                built.append(SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type=mime_type)))
        return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=built))])
    return _build


@pytest.fixture
def story_payload():
    """Build the raw JSON object the script model returns, with ``scene_count`` scenes"""
    def _build(scene_count=6, **overrides):
        payload = {
            "title": "แมวน้อยหลงทาง",
            "coverTitle": "หลงทางกลางเมือง",
            "coverImagePrompt": "A tiny orange kitten alone on a rainy Bangkok street, dramatic lighting",
            "seoSummary": "เรื่องราวของแมวน้อยที่หลงทางกลางเมืองใหญ่",
            "tags": ["#แมว", "#นิทาน"],
            "characterDescription": "A tiny orange kitten with a blue collar",
            "mood": "Sad",
            "scenes": [
                {
                    "sceneNumber": i,
                    "storyText": f"ฉากที่ {i}",
                    "englishTranslation": f"Scene {i}",
                    "imagePrompt": f"A tiny orange kitten with a blue collar, scene {i}",
                    "visualEffect": "rain" if i == 1 else "none",
                    "soundEffect": "heavy_rain" if i == 1 else "city",
                }
                for i in range(1, scene_count + 1)
            ],
        }
        payload.update(overrides)
        return payload
    return _build


@pytest.fixture
def text_response():
    def _build(payload):
        text = payload if isinstance(payload, str) else json.dumps(payload, ensure_ascii=False)
        return SimpleNamespace(text=text)
    return _build
