# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Logging configuration for the BigQuery snippets.

Snippets write their results to stdout, which is what the tests assert on. Everything else (API
calls made, job IDs, cleanup failures) goes to a log file so that stdout stays clean.
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile
import warnings
from functools import lru_cache
from pathlib import Path

import pendulum
import structlog
import ulid


def _str_to_bool(value: str) -> bool:
    return bool(value.lower().replace("false", "").replace("0", ""))


def _get_logging_root() -> Path | None:
    """Return the root directory for logs.

    Returns `None` if no valid path can be found.
    """
    if "BIGQUERY_SNIPPETS_LOGGING_ROOT" in os.environ:
        log_root = Path(os.environ["BIGQUERY_SNIPPETS_LOGGING_ROOT"])
    else:
        log_root = Path(tempfile.gettempdir()) / "bigquery_snippets" / "logs"

    try:
        # Attempt to create the log root directory if it does not exist
        log_root.mkdir(parents=True, exist_ok=True)
    except OSError:
        warnings.warn(
            (
                f"Failed to create logging directory at `{log_root}`. "
                "You can override the default path by setting the "
                "`BIGQUERY_SNIPPETS_LOGGING_ROOT` environment variable."
            ),
            category=UserWarning,
            stacklevel=0,
        )
        return None
    else:
        return log_root


BIGQUERY_SNIPPETS_LOGGING_ROOT: Path | None = _get_logging_root()
"""The root directory for snippet logs.

This value can be overridden by setting the `BIGQUERY_SNIPPETS_LOGGING_ROOT` environment variable.

If not provided, `/tmp/bigquery_snippets/logs/` is used, where `/tmp/` is the OS's default
temporary directory. If the directory cannot be created, a warning is issued and this value is set
to `None`.
"""


BIGQUERY_SNIPPETS_STRUCTURED_LOGGING: bool = _str_to_bool(
    os.getenv(
        key="BIGQUERY_SNIPPETS_STRUCTURED_LOGGING",
        default="false",
    )
)
"""Whether to enable structured (JSON) logging.

This value is read from the `BIGQUERY_SNIPPETS_STRUCTURED_LOGGING` environment variable. If the
variable is not set, the default value is `False`.
"""


def _get_structured_logger() -> structlog.stdlib.BoundLogger:
    """Route structlog events through the `bigquery_snippets` stdlib logger as JSON lines."""
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger("bigquery_snippets")


@lru_cache
def get_global_file_logger() -> logging.Logger | structlog.stdlib.BoundLogger | None:
    """Return the global file logger for the snippets.

    Returns `None` if no log directory is available.
    """
    logger = logging.getLogger("bigquery_snippets")
    logger.setLevel(logging.INFO)
    logger.propagate = False

    if BIGQUERY_SNIPPETS_LOGGING_ROOT is None:
        return None

    # Remove any existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    yyyy_mm_dd: str = pendulum.now().format("YYYY-MM-DD")
    folder = BIGQUERY_SNIPPETS_LOGGING_ROOT / yyyy_mm_dd
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except Exception:
        warnings.warn(
            f"Failed to create logging directory at '{folder!s}'. File logging is disabled.",
            category=UserWarning,
            stacklevel=2,
        )
        return None

    logfile_path = folder / f"bigquery-snippets-log-{ulid.ULID()!s}.log"
    # Stdout belongs to the snippets.
    print(f"Writing snippet logs to file: {logfile_path!s}", file=sys.stderr)

    file_handler = logging.FileHandler(
        filename=logfile_path,
        encoding="utf-8",
    )

    if BIGQUERY_SNIPPETS_STRUCTURED_LOGGING:
        # The JSON line is rendered by structlog, so the handler writes it as-is.
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(file_handler)
        return _get_structured_logger()

    file_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    logger.addHandler(file_handler)
    return logger


def log_info(message: str, *args: object) -> None:
    """Log an info message to the global file logger, if one is available."""
    logger = get_global_file_logger()
    if logger is not None:
        logger.info(message, *args)


def log_warning(message: str, *args: object) -> None:
    """Log a warning to the global file logger, if one is available."""
    logger = get_global_file_logger()
    if logger is not None:
        logger.warning(message, *args)
