"""Runtime logging helpers."""

from __future__ import annotations

import inspect
import logging
import os
import sys
from logging import Handler
from typing import Literal

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

LogProfile = Literal["default", "cli"]

DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_PROFILE: LogProfile | None = None


class InterceptHandler(logging.Handler):
    """Handler that forwards stdlib logging messages to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame:
            filename = frame.f_code.co_filename
            is_logging = filename == logging.__file__
            is_frozen = "importlib" in filename and "_bootstrap" in filename
            if depth > 0 and not (is_logging or is_frozen):
                break
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _build_cli_handler() -> Handler:
    return RichHandler(
        console=get_console(),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def parse_log_filter(filter_text: str | None = None) -> dict[str, str | bool]:
    """Parse a log filter such as ``"info,simpl.eval=trace"``.

    Format: "level" or "level,module1=level,module2=level"
    Examples:
        - "info" - global INFO level
        - "warning,simpl.eval=trace" - global WARNING, simpl.eval at TRACE
        - "debug,simpl.core=false" - global DEBUG, simpl.core disabled

    Falls back to ``SIMPL_LOG_FILTER`` and then to "warning".

    Returns:
        A loguru filter dict; the "" key holds the global level.
    """
    if filter_text is None:
        filter_text = os.getenv("SIMPL_LOG_FILTER", "warning")
    filter_dict: dict[str, str | bool] = {"": "WARNING"}

    for part in (p.strip() for p in filter_text.lower().split(",")):
        if not part:
            continue
        if "=" in part:
            module, level = (s.strip() for s in part.split("=", 1))
            filter_dict[module] = False if level == "false" else level.upper()
        else:
            filter_dict[""] = part.upper()

    return filter_dict


def sink_level(module_filter: dict[str, str | bool]) -> str:
    """Lowest level any entry of ``module_filter`` lets through."""
    levels = [level for level in module_filter.values() if isinstance(level, str)]
    return min(levels, key=lambda name: logger.level(name).no)


def _setup_stdlib_intercept() -> None:
    """Forward stdlib logging to loguru."""
    root_logger = logging.getLogger()
    if not any(isinstance(h, InterceptHandler) for h in root_logger.handlers):
        root_logger.addHandler(InterceptHandler())


def configure_logging(*, profile: LogProfile = "default", log_filter: str | None = None) -> None:
    """Configure process-level logging once per profile.

    The ``simpl`` logger is disabled on import; this enables it and
    installs a single sink filtered by ``log_filter``.
    """
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    module_filter = parse_log_filter(log_filter)
    level = sink_level(module_filter)

    logger.remove()
    logger.enable("simpl")

    if profile == "cli":
        logger.add(
            _build_cli_handler(),
            level=level,
            format="{message}",
            backtrace=False,
            diagnose=False,
            filter=module_filter,
        )
    else:
        logger.add(
            sys.stderr,
            level=level,
            format=DEFAULT_FORMAT,
            backtrace=False,
            diagnose=False,
            filter=module_filter,
        )

    _setup_stdlib_intercept()

    _CONFIGURED_PROFILE = profile
