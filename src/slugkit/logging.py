"""Logging for slugkit.

Library calls stay quiet: the slug pipeline only emits DEBUG records
(one per slug produced) on the ``slugkit`` logger, and the stderr handler
attached here starts at INFO.

Batch runs driven by the CLI call :func:`configure_logging` once with the
``[logging]`` settings.  It moves the logger and the stderr handler to the
configured level together and, when a log directory is set, adds a
``slugkit_<timestamp>.log`` file so a run over thousands of titles can be
audited afterwards (at DEBUG, every input and its slug).
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("slugkit")
logger.setLevel(logging.INFO)

stderr_handler = logging.StreamHandler(sys.stderr)
stderr_handler.setLevel(logging.INFO)
stderr_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))
logger.addHandler(stderr_handler)


def _run_log_handler(log_dir: Path, level: int) -> logging.FileHandler:
    """Create the per-run log file handler, creating *log_dir* if needed."""
    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    file_handler = logging.FileHandler(
        str(log_dir / f"slugkit_{timestamp}.log"), encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))
    return file_handler


def configure_logging(level: int, *, log_dir: str | Path = "") -> logging.FileHandler | None:
    """Apply a run's logging settings.

    Args:
        level: Level for the logger, the stderr handler and the run log.
        log_dir: Directory for the run log file; empty disables it.

    Returns:
        The file handler that was added, or ``None`` when *log_dir* is
        empty.  Callers (and tests) remove it with ``logger.removeHandler``.
    """
    logger.setLevel(level)
    stderr_handler.setLevel(level)
    if not log_dir:
        return None

    file_handler = _run_log_handler(Path(log_dir), level)
    logger.addHandler(file_handler)
    logger.debug("Writing run log to %s", file_handler.baseFilename)
    return file_handler


__all__ = ["configure_logging", "logger", "stderr_handler"]
