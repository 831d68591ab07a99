"""
Gemini API key resolution.

Resolution order:
    1. Process environment (GEMINI_API_KEY, then API_KEY)
    2. Locally persisted settings file, key ``gemini_api_key``

The literal string "undefined" counts as absent in both places. Nothing is
cached: every generator call resolves the key again, so a key saved from a
settings screen is picked up by the next call.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Mapping, Optional

from storyreel.config import API_KEY_ENV_VARS, SETTINGS_KEY_NAME, get_settings_file

from .exceptions import MissingCredentialError
from .logging import get_logger

logger = get_logger(__name__, component="credentials")

_ABSENT_VALUES = {"", "undefined"}


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if value in _ABSENT_VALUES:
        return None
    return value


class CredentialResolver:
    """Resolves the Gemini API key from the environment or local settings."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        settings_file: Optional[Path] = None,
    ):
        self._environ = environ
        self._settings_file = settings_file

    @property
    def environ(self) -> Mapping[str, str]:
        return self._environ if self._environ is not None else os.environ

    @property
    def settings_file(self) -> Path:
        return self._settings_file or get_settings_file()

    def from_environment(self) -> Optional[str]:
        for name in API_KEY_ENV_VARS:
            value = _clean(self.environ.get(name))
            if value:
                return value
        return None

    def from_settings(self) -> Optional[str]:
        settings = _read_settings(self.settings_file)
        value = settings.get(SETTINGS_KEY_NAME)
        return _clean(value) if isinstance(value, str) else None

    def resolve(self) -> str:
        """Return a non-empty API key or raise MissingCredentialError."""
        api_key = self.from_environment()
        if api_key:
            return api_key

        api_key = self.from_settings()
        if api_key:
            logger.debug("Using API key from local settings", extra={"settings_file": str(self.settings_file)})
            return api_key

        raise MissingCredentialError()

    def save(self, api_key: str) -> Path:
        """Persist an API key to the local settings file."""
        cleaned = _clean(api_key)
        if not cleaned:
            raise ValueError("Refusing to save an empty API key")

        path = self.settings_file
        settings = _read_settings(path)
        settings[SETTINGS_KEY_NAME] = cleaned
        _write_settings(path, settings)
        logger.info("Saved API key to local settings", extra={"settings_file": str(path)})
        return path

    def clear(self) -> None:
        path = self.settings_file
        settings = _read_settings(path)
        if settings.pop(SETTINGS_KEY_NAME, None) is not None:
            _write_settings(path, settings)
            logger.info("Removed API key from local settings", extra={"settings_file": str(path)})


def _read_settings(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable settings file {path}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def _write_settings(path: Path, settings: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    # New files are created owner-only; an existing file is tightened before the key is written.
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        try:
            os.chmod(path, 0o600)
        except OSError as e:
            logger.warning(f"Could not restrict permissions on {path}: {e}")
        json.dump(settings, f, indent=2, ensure_ascii=False)


def resolve_api_key() -> str:
    """Resolve the API key using the process environment and default settings file."""
    return CredentialResolver().resolve()


def save_api_key(api_key: str) -> Path:
    return CredentialResolver().save(api_key)


def clear_api_key() -> None:
    CredentialResolver().clear()
