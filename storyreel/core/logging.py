"""
Logging for the story pipeline.

Console output is colourised for development, or one JSON object per line
when LOG_JSON is set; file output is always JSON. Every line emitted while a
story is being produced carries its story id and the current scene number.
Anything that looks like a credential is redacted before it is written.
"""

import json
import logging
import os
import sys
import time
from contextvars import ContextVar
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from storyreel.config import LOG_JSON, LOG_LEVEL

REDACTED = "***REDACTED***"
SENSITIVE_KEY_TOKENS = ("password", "secret", "token", "api_key", "apikey", "authorization", "key=")
NOISY_LOGGERS = ("httpx", "httpcore", "google_genai", "urllib3", "asyncio")

story_id_var: ContextVar[Optional[str]] = ContextVar("story_id", default=None)
scene_var: ContextVar[Optional[int]] = ContextVar("scene", default=None)

# Attributes every LogRecord carries; anything else arrived through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime", "taskName"}
_CONTEXT_KEYS = ("story_id", "scene")


def current_context() -> Dict[str, Any]:
    """The story id and scene bound to the running task, skipping unset ones."""
    context: Dict[str, Any] = {}
    story_id = story_id_var.get()
    if story_id:
        context["story_id"] = story_id
    scene = scene_var.get()
    if scene is not None:
        context["scene"] = scene
    return context


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(token in lowered for token in SENSITIVE_KEY_TOKENS)


def redact(key: str, value: Any) -> Any:
    """Mask credential-looking values, recursing into dicts and sequences."""
    if isinstance(value, dict):
        return {
            k: REDACTED if _is_sensitive(str(k)) else redact(str(k), v)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact(key, item) for item in value]
    if isinstance(value, str) and _is_sensitive(key):
        return REDACTED
    return value


class StructuredFormatter(logging.Formatter):
    """JSON lines for log files and log shipping"""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, UTC)
        payload: Dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        payload.update(current_context())

        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in _CONTEXT_KEYS and not key.startswith("_")
        }
        if extra:
            payload["extra"] = redact("extra", extra)

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc, _ = record.exc_info
            payload["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(payload, ensure_ascii=False, default=str)


class DevelopmentFormatter(logging.Formatter):
    """One coloured line: time, level, logger, [story, scene], message"""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        stamp = f"{self.formatTime(record, '%H:%M:%S')}.{int(record.msecs):03d}"

        context = current_context()
        tags = []
        if "story_id" in context:
            tags.append(f"story:{context['story_id'][-8:]}")
        if "scene" in context:
            tags.append(f"scene:{context['scene']}")

        line = f"{color}{stamp} {record.levelname:<8}{self.RESET} {record.name}"
        if tags:
            line += f" [{' '.join(tags)}]"
        line += f" {record.getMessage()}"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class LoggerAdapter(logging.LoggerAdapter):
    """Adds bound fields and the current story context to every record.

    Fields passed at the call site win over bound ones.
    """

    def process(self, msg: str, kwargs: Any) -> tuple:
        extra = dict(kwargs.get("extra") or {})
        for key, value in {**current_context(), **(self.extra or {})}.items():
            extra.setdefault(key, value)
        kwargs["extra"] = extra
        return msg, kwargs


def _rotating_json_handler(path: Path, level: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path,
        maxBytes=int(os.getenv("LOG_MAX_BYTES", str(20 * 1024 * 1024))),
        backupCount=int(os.getenv("LOG_BACKUP_COUNT", "5")),
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(StructuredFormatter())
    return handler


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    use_json: Optional[bool] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        level: Level name; defaults to LOG_LEVEL
        log_file: Optional rotating JSON log file
        use_json: JSON on the console too; defaults to LOG_JSON
    """
    numeric_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    if use_json is None:
        use_json = LOG_JSON

    root = logging.getLogger()
    root.setLevel(numeric_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(numeric_level)
    console.setFormatter(StructuredFormatter() if use_json else DevelopmentFormatter())
    root.addHandler(console)

    if log_file:
        root.addHandler(_rotating_json_handler(Path(log_file), numeric_level))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str, **extra: Any) -> LoggerAdapter:
    """
    Logger with fields bound to every record.

    Example:
        logger = get_logger(__name__, component="video_generator")
        logger.debug("Video operation poll", extra={"attempt": 3})
    """
    return LoggerAdapter(logging.getLogger(name), extra)


def set_story_id(story_id: Optional[str]) -> None:
    story_id_var.set(story_id)


def set_scene(scene_number: Optional[int]) -> None:
    scene_var.set(scene_number)


def clear_context() -> None:
    story_id_var.set(None)
    scene_var.set(None)


class LogTimer:
    """Logs start, completion or failure of a block, with its duration"""

    def __init__(self, logger: logging.LoggerAdapter, operation: str, level: int = logging.INFO):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.duration: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self) -> "LogTimer":
        self._started = time.perf_counter()
        self.logger.log(self.level, f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb) -> None:
        self.duration = round(time.perf_counter() - self._started, 3)
        if exc_type is None:
            self.logger.log(
                self.level,
                f"Completed: {self.operation}",
                extra={"duration_seconds": self.duration},
            )
        else:
            self.logger.error(
                f"Failed: {self.operation}",
                extra={"duration_seconds": self.duration, "error": str(exc_val)},
            )
