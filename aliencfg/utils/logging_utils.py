"""Logging setup for aliencfg.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

and the CLI calls ``setup_logging`` once at startup. Records go to a rotating
file in the config directory; ``--verbose`` also echoes them to stderr.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

LOG_FILE_NAME = "aliencfg.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_MARKER = "_aliencfg_handler"


def level_from_str(value: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as "debug" to its logging constant."""
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    log_dir: Path,
    level: int = logging.INFO,
    console: bool = False,
) -> logging.Logger:
    """
    Configure the ``aliencfg`` logger.

    Safe to call more than once: handlers installed by an earlier call are
    replaced rather than duplicated.

    Args:
        log_dir: Directory for aliencfg.log (created if missing)
        level: Level for the aliencfg logger
        console: Also log to stderr

    Returns:
        The configured ``aliencfg`` logger
    """
    logger = logging.getLogger("aliencfg")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARKER, True)
        logger.addHandler(file_handler)
    except OSError as e:
        # Logging must not stop the tool; report once and carry on
        print(f"Warning: could not open log file in {log_dir}: {e}", file=sys.stderr)

    if console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        setattr(stream_handler, _HANDLER_MARKER, True)
        logger.addHandler(stream_handler)

    return logger
