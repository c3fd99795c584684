from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import IO, Any

from redactor_metrics.services.logger.interface import LoggingInterface

_COLORS = {
    "INFO": "\033[32m",   # green
    "WARN": "\033[33m",   # yellow
    "ERROR": "\033[31m",  # red
    "DEBUG": "\033[36m",  # cyan
}
_RESET = "\033[0m"
_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


class PrettyLogger(LoggingInterface):
    """Colorized human-readable logger for local runs.

    Entries below ``min_level`` are dropped. Colors are only emitted when the
    stream is a terminal.
    """

    def __init__(self, min_level: str = "INFO", stream: IO[str] | None = None) -> None:
        level = min_level.upper()
        if level not in _LEVELS:
            raise ValueError(
                f"Unknown log level: '{min_level}' (available: {', '.join(_LEVELS)})"
            )
        self._min_rank = _LEVELS.index(level)
        self._stream = stream

    def info(self, msg: str, **ctx: Any) -> None:
        self._log("INFO", msg, ctx)

    def warn(self, msg: str, **ctx: Any) -> None:
        self._log("WARN", msg, ctx)

    def error(self, msg: str, **ctx: Any) -> None:
        self._log("ERROR", msg, ctx)

    def debug(self, msg: str, **ctx: Any) -> None:
        self._log("DEBUG", msg, ctx)

    def _log(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        if _LEVELS.index(level) < self._min_rank:
            return
        stream = self._stream or sys.stderr
        ts = datetime.now(timezone.utc).strftime("%H:%M:%S")
        use_color = stream.isatty() if hasattr(stream, "isatty") else False
        color = _COLORS.get(level, "") if use_color else ""
        reset = _RESET if use_color else ""
        extra = f"  {ctx}" if ctx else ""
        print(f"{color}{ts} [{level}]{reset} {msg}{extra}", file=stream)
