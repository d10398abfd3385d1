import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from . import settings

CONSOLE_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _file_handler(log_dir: Path, log_level: int) -> RotatingFileHandler | None:
    """Rotating log file under `log_dir`, or None if the directory can't be created."""
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logging.getLogger(__name__).warning(f"⚠️ File logging disabled ({log_dir}): {e}")
        return None

    handler = RotatingFileHandler(
        log_dir / settings.LOG_FILENAME,
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logger(
    name: str | None = None,
    log_level: int | None = None,
    log_dir: Path | None = None,
    to_file: bool | None = None,
) -> logging.Logger:
    """
    Configures the application logger once: a clean console stream for the
    CLI and, unless LOG_TO_FILE is off, a rotating file with timestamps.
    Library modules never call this; they only use logging.getLogger(__name__).
    """
    if log_level is None:
        log_level = getattr(logging, settings.LOG_LEVEL, logging.INFO)
    if to_file is None:
        to_file = settings.LOG_TO_FILE

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Only this logger's own handlers count; a handler on the root logger
    # (e.g. one installed by a test runner) must not stop the setup.
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if to_file:
        file_handler = _file_handler(log_dir or settings.LOG_DIR, log_level)
        if file_handler is not None:
            logger.addHandler(file_handler)

    return logger
