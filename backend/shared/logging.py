"""Logging for the solver command line.

Events are produced with structlog and handed to the stdlib logging tree,
which renders them on stderr and, when asked, into a per-run file. Two
environment variables tune the output:

LOG_FORMAT  "json" selects one JSON object per line; "console" or nothing
            selects the key=value console renderer.
LOG_LEVEL   threshold name, INFO when unset.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import UTC, datetime
from pathlib import Path

import structlog

LOG_FILE_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"

_LOG_FORMATS = {"json", "console", ""}
_LOG_LEVEL_NAMES = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _is_test() -> bool:
    return "pytest" in sys.modules


def _wants_json() -> bool:
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format not in _LOG_FORMATS:
        msg = f"Invalid LOG_FORMAT={log_format!r}. Expected 'json', 'console' or nothing."
        raise ValueError(msg)
    return log_format == "json"


def _level_from_env() -> int:
    name = os.environ.get("LOG_LEVEL", "INFO").upper()
    if name not in _LOG_LEVEL_NAMES:
        msg = f"Invalid LOG_LEVEL={name!r}. Expected one of {', '.join(sorted(_LOG_LEVEL_NAMES))}."
        raise ValueError(msg)
    return getattr(logging, name)


def _make_formatter(*, json_lines: bool, colors: bool = False) -> logging.Formatter:
    if json_lines:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors)
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )


def setup_logging(
    log_dir: Path | str | None = None,
    level: int | None = None,
) -> Path | None:
    """Send solver log events to stderr, plus a file under `log_dir` if given.

    stdout is left to the solutions themselves. The file is named after the
    UTC start time and is never created while running under pytest. Returns
    the file path, or None when no file was opened.
    """
    json_lines = _wants_json()
    if level is None:
        level = _level_from_env()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_make_formatter(json_lines=json_lines, colors=sys.stderr.isatty()))
    root.addHandler(console)

    if log_dir is None or _is_test():
        return None

    target_dir = Path(log_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / f"{datetime.now(tz=UTC).strftime(LOG_FILE_TIMESTAMP_FORMAT)}.log"
    log_file = logging.FileHandler(log_path)
    log_file.setFormatter(_make_formatter(json_lines=json_lines))
    root.addHandler(log_file)
    return log_path
