"""
Pontifex Structured Logger
===========================

Provides :class:`PontifexLogger`, a small logging facade that emits
human-friendly Rich console output on stderr and, optionally, plain-text
or JSON-lines records to a rotating log file.

Handlers are installed on the ``pontifex`` package logger. Component
loggers (``pontifex.engine``) and plain module loggers
(``pontifex.deck``, ``pontifex.processor``) propagate to it, so one
configuration covers the whole package. Building another
:class:`PontifexLogger` closes and replaces the previous handlers.

Every record carries the *component* it came from and the current
*operation*, if one is active.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from shared.config import GlobalConfig

PACKAGE_LOGGER = "pontifex"

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)


# ========================== Filters / formatters ===========================


class _ComponentFilter(logging.Filter):
    """Derive ``component`` from the logger name for module-level loggers."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "component", None) is None:
            record.component = record.name.rpartition(".")[2]
        return True


class _JSONFormatter(logging.Formatter):
    """Emit each log record as a single-line JSON object.

    Output fields::

        {
          "timestamp": "...",
          "level": "INFO",
          "logger": "pontifex.engine",
          "message": "...",
          "component": "engine",
          "operation": "encrypt",
          "extra": { ... },
          "exc_info": "..."
        }
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for attr in ("component", "operation"):
            val = getattr(record, attr, None)
            if val is not None:
                entry[attr] = val

        extra = getattr(record, "pontifex_extra", None)
        if extra is not None:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class _ColorConsoleHandler(RichHandler):
    """:class:`rich.logging.RichHandler` writing to stderr with our theme."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            console=Console(theme=_LOG_THEME, stderr=True),
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            markup=False,
            **kwargs,
        )


# ========================== PontifexLogger =================================


class PontifexLogger:
    """Structured, context-aware logger for Pontifex components.

    Usage::

        log = PontifexLogger("engine", log_file="pontifex.log", json_logs=True)
        log.info("Deck loaded")
        with log.operation("encrypt"):
            log.debug("Drawing %d keystream values", 12)

    Args:
        component:       Name of the component, used as logger suffix.
        log_level:       Minimum severity (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file:        Path to the rotating log file. ``None`` disables file logging.
        json_logs:       If ``True`` the file handler emits JSON lines.
        max_bytes:       Maximum log-file size before rotation (default 10 MiB).
        backup_count:    Number of rotated backup files to keep.
        console_output:  If ``True`` attach a Rich console handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._operation: str | None = None
        level = getattr(logging, log_level.upper(), logging.WARNING)

        self._logger = logging.getLogger(f"{PACKAGE_LOGGER}.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = True

        package = logging.getLogger(PACKAGE_LOGGER)
        package.setLevel(level)
        package.propagate = False
        for old in list(package.handlers):
            package.removeHandler(old)
            old.close()

        if console_output:
            self._install(package, _ColorConsoleHandler(), level)

        if log_file is not None:
            file_path = Path(log_file)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                filename=str(file_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            if json_logs:
                fh.setFormatter(_JSONFormatter())
            else:
                fh.setFormatter(
                    logging.Formatter(
                        fmt=(
                            "%(asctime)s | %(levelname)-8s | "
                            "%(name)s | %(message)s"
                        ),
                        datefmt="%Y-%m-%dT%H:%M:%S%z",
                    )
                )
            self._install(package, fh, level)

    @staticmethod
    def _install(package: logging.Logger, handler: logging.Handler, level: int) -> None:
        handler.setLevel(level)
        handler.addFilter(_ComponentFilter())
        package.addHandler(handler)

    @classmethod
    def from_config(
        cls,
        component: str,
        settings: Optional[GlobalConfig] = None,
        *,
        console_output: bool = True,
    ) -> PontifexLogger:
        """Build a logger from the ``[global]`` configuration section."""
        settings = settings or GlobalConfig()
        return cls(
            component,
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
            console_output=console_output,
        )

    # ------------------------------------------------------------------ #
    #  Operation scope
    # ------------------------------------------------------------------ #

    class _OperationContext:
        """Binds an operation name for the duration of a ``with`` block."""

        def __init__(self, parent: PontifexLogger, operation: str) -> None:
            self._parent = parent
            self._operation = operation
            self._prev: str | None = None

        def __enter__(self) -> PontifexLogger:
            self._prev = self._parent._operation
            self._parent._operation = self._operation
            return self._parent

        def __exit__(self, *exc: Any) -> None:
            self._parent._operation = self._prev

    def operation(self, name: str) -> _OperationContext:
        """Tag records logged inside the block with *name*.

        Usage::

            with log.operation("decrypt"):
                log.info("Processing %d letters", n)
        """
        return self._OperationContext(self, name)

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _enrich(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        """Move non-standard keyword arguments into the record's *extra*."""
        extra = kwargs.pop("extra", {}) or {}

        pontifex_extra: dict[str, Any] = {}
        standard_keys = {"exc_info", "stack_info", "stacklevel"}
        for key in list(kwargs):
            if key not in standard_keys:
                pontifex_extra[key] = kwargs.pop(key)

        extra["component"] = self._component
        extra["operation"] = self._operation
        if pontifex_extra:
            extra["pontifex_extra"] = pontifex_extra

        kwargs["extra"] = extra
        return kwargs

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(msg, *args, **self._enrich(kwargs))

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(msg, *args, **self._enrich(kwargs))

    # ------------------------------------------------------------------ #
    #  Timing
    # ------------------------------------------------------------------ #

    class _TimingContext:
        """Logs a start record on entry and the elapsed time on exit."""

        def __init__(self, logger_inst: PontifexLogger, label: str) -> None:
            self._logger = logger_inst
            self._label = label
            self._start: float = 0.0

        def __enter__(self) -> PontifexLogger._TimingContext:
            self._start = time.perf_counter()
            self._logger.debug("Started: %s", self._label)
            return self

        def __exit__(self, *exc: Any) -> None:
            self._logger.info(
                "Completed: %s (%.3f sec)", self._label, self.elapsed
            )

        @property
        def elapsed(self) -> float:
            return time.perf_counter() - self._start

    def timed(self, label: str) -> _TimingContext:
        return self._TimingContext(self, label)

    @property
    def component(self) -> str:
        return self._component

    @property
    def underlying(self) -> logging.Logger:
        """The stdlib :class:`logging.Logger` for this component."""
        return self._logger
