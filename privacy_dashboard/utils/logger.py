"""
Structured, colourful console logging for request aggregation.

The log buffer is stored in a ``contextvars.ContextVar`` so that
dashboards built for different tabs in the same process do not
interfere with each other.
"""

from __future__ import annotations

import contextvars
import re
import sys
from datetime import UTC, datetime

from privacy_dashboard import config

_log_buffer_var: contextvars.ContextVar[list[str]] = contextvars.ContextVar("_log_buffer_var")

_ANSI_PATTERN = re.compile(r"\033\[[0-9;]*m")


def _get_log_buffer() -> list[str]:
    """Return the per-context log buffer, creating it on first access."""
    try:
        return _log_buffer_var.get()
    except LookupError:
        buf: list[str] = []
        _log_buffer_var.set(buf)
        return buf


def get_log_buffer() -> list[str]:
    """Return a copy of the accumulated log lines (ANSI-stripped)."""
    return list(_get_log_buffer())


def clear_log_buffer() -> None:
    """Clear the in-memory log buffer."""
    _get_log_buffer().clear()


_colours = {
    "reset": "\033[0m",
    "bright": "\033[1m",
    "dim": "\033[2m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "gray": "\033[90m",
}

_levels = {
    "info": (_colours["cyan"], "ℹ"),
    "warn": (_colours["yellow"], "⚠"),
    "debug": (_colours["gray"], "•"),
}


def _format_value(value: object) -> str:
    """Colour *value* by type; collections are shown as their size."""
    c = _colours
    if value is None:
        return f"{c['dim']}None{c['reset']}"
    if isinstance(value, (bool, int, float)):
        return f"{c['yellow']}{value}{c['reset']}"
    if isinstance(value, str):
        display = value[:197] + "..." if len(value) > 200 else value
        return f'{c["green"]}"{display}"{c["reset"]}'
    if isinstance(value, (list, tuple, dict)):
        return f"{c['cyan']}[{len(value)} items]{c['reset']}"
    return str(value)


class Logger:
    """Structured logger with a context prefix and an optional data dict."""

    def __init__(self, context: str) -> None:
        self._context = context

    def _log(self, level: str, message: str, data: dict[str, object] | None = None) -> None:
        settings = config.get_settings()
        if level == "debug" and not settings.debug_logging:
            return

        c = _colours
        colour, symbol = _levels[level]
        now = datetime.now(UTC)
        ts = now.strftime("%H:%M:%S.") + f"{now.microsecond // 1000:03d}"
        line = f"{c['gray']}[{ts}]{c['reset']} {colour}{symbol}{c['reset']} {c['bright']}[{self._context}]{c['reset']} {message}"
        if data:
            line += " " + " ".join(f"{c['dim']}{k}={c['reset']}{_format_value(v)}" for k, v in data.items())

        plain = _ANSI_PATTERN.sub("", line)
        print(line if settings.colour_output else plain, file=sys.stderr)
        _get_log_buffer().append(plain)

    def info(self, message: str, data: dict[str, object] | None = None) -> None:
        """Log an informational message."""
        self._log("info", message, data)

    def warn(self, message: str, data: dict[str, object] | None = None) -> None:
        """Log a warning message."""
        self._log("warn", message, data)

    def debug(self, message: str, data: dict[str, object] | None = None) -> None:
        """Log a debug-level message (only when debug logging is enabled)."""
        self._log("debug", message, data)


def create_logger(context: str) -> Logger:
    """Create a logger for a specific module."""
    return Logger(context)
