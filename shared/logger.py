"""
Structured Logger
=================

:class:`ToolLogger` wraps a stdlib logger with a Rich handler on stderr
and, optionally, a rotating log file written as plain text or JSON
lines. Standard output carries tool results only.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Generator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
    }
)

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_RECORD_KEYS = ("exc_info", "stack_info", "stacklevel")


class _JSONFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message,
    plus ``operation`` and ``extra`` when the record carries them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if getattr(record, "operation", None) is not None:
            entry["operation"] = record.operation  # type: ignore[attr-defined]
        if getattr(record, "tool_extra", None):
            entry["extra"] = record.tool_extra  # type: ignore[attr-defined]
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _console_handler(level: int) -> RichHandler:
    return RichHandler(
        level=level,
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )


def _file_handler(path: Path, level: int, json_logs: bool, max_bytes: int, backups: int) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(path), maxBytes=max_bytes, backupCount=backups, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(
        _JSONFormatter() if json_logs else logging.Formatter(_TEXT_FORMAT, "%Y-%m-%dT%H:%M:%S%z")
    )
    return handler


class ToolLogger:
    """Logger bound to a dotted name such as ``"cryptogram.engine"``.

    Keyword arguments other than the stdlib ones are collected into the
    record's ``extra`` field; :meth:`operation` tags every record inside
    a ``with`` block.

    Usage::

        log = ToolLogger("cryptogram.engine", log_level="INFO")
        with log.operation("encode"):
            log.info("Encoded %d character(s)", 12, attempts=3)
    """

    def __init__(
        self,
        name: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._operation: str | None = None
        level = getattr(logging, log_level.upper(), logging.WARNING)

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.propagate = False
        # Re-instantiating with the same name replaces, not stacks, handlers
        self._logger.handlers.clear()

        if console_output:
            self._logger.addHandler(_console_handler(level))
        if log_file is not None:
            self._logger.addHandler(
                _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )

    @contextmanager
    def operation(self, name: str) -> Generator[ToolLogger, None, None]:
        """Tag records logged inside the block with ``operation=name``."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Generator[None, None, None]:
        """Log *label* at DEBUG on entry and its duration at INFO on exit."""
        start = time.perf_counter()
        self.debug("Started: %s", label)
        try:
            yield
        finally:
            self.info("Completed: %s (%.3f sec)", label, time.perf_counter() - start)

    def _log(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        record_kwargs = {k: kwargs.pop(k) for k in _RECORD_KEYS if k in kwargs}
        extra = {"operation": self._operation}
        if kwargs:
            extra["tool_extra"] = kwargs
        self._logger.log(level, msg, *args, extra=extra, **record_kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """ERROR record with the active exception's traceback."""
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, args, kwargs)

    @property
    def underlying(self) -> logging.Logger:
        """The wrapped stdlib :class:`logging.Logger`."""
        return self._logger


def get_logger(name: str, config: Any = None) -> ToolLogger:
    """Build a :class:`ToolLogger` from a :class:`~shared.config.ToolConfig`.

    With no config the logger uses its defaults (WARNING, console only).
    """
    if config is None:
        return ToolLogger(name)
    settings = config.global_settings
    return ToolLogger(
        name,
        log_level="DEBUG" if settings.debug else settings.log_level,
        log_file=settings.log_file,
        json_logs=settings.log_json,
    )
