"""Structured slug event logging.

Responsibilities:
- Emit concise, deterministic debug lines for post-processing decisions.
- Keep the library silent until a caller opts in via `configure_logging`.

Input text is never logged, only the decisions taken on it.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_PACKAGE_NAME = "fileslug"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def configure_logging(sink: TextIO | None = None, level: str = "DEBUG") -> int:
    """Enable package logging and attach a plain `{message}` sink.

    Returns:
        The loguru handler id, usable with `logger.remove`.
    """

    logger.enable(_PACKAGE_NAME)
    return logger.add(sink or sys.stderr, format="{message}", level=level, colorize=False)


class SlugEventLogger:
    """Emit deterministic debug events for slug post-processing."""

    def _emit(self, event: str, **context: object) -> None:
        """Emit one structured slug log line."""

        logger.debug(f"[slug] event={event}{_format_context(context)}")

    def log_fallback(self, reason: str) -> None:
        """Record that the fallback name replaced the result."""

        self._emit("fallback", reason=reason)

    def log_leading_dot(self) -> None:
        """Record that a hidden-file name was prefixed."""

        self._emit("leading_dot")

    def log_reserved_name(self) -> None:
        """Record that a Windows reserved device name was prefixed."""

        self._emit("reserved_name")

    def log_truncated(self, original_bytes: int, max_len_bytes: int) -> None:
        """Record that the result exceeded the byte cap and was shortened."""

        self._emit("truncated", max_len_bytes=max_len_bytes, original_bytes=original_bytes)


slug_events = SlugEventLogger()
