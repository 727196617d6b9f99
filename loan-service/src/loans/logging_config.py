"""
Logging configuration for the loan service.

Writes a rotating log file under loan-service/logs/ (or LOG_DIR) and echoes
warnings to the console.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

# loan-service/logs
DEFAULT_LOG_DIR = Path(__file__).resolve().parents[2] / "logs"

SERVICE_LOGGER = "loan_service"
LOG_FILE_NAME = "loan_service.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5


def _build_handlers(log_file: Path, level: int) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    file_handler = RotatingFileHandler(log_file, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8")
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)

    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
    return [file_handler, console_handler]


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Union[str, Path]] = None,
    sql_echo: bool = False,
) -> logging.Logger:
    """
    Configure root + service loggers. Safe to call more than once.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    directory = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    directory.mkdir(parents=True, exist_ok=True)

    logging.getLogger().setLevel(level)

    logger = logging.getLogger(SERVICE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(directory / LOG_FILE_NAME, level):
        logger.addHandler(handler)

    # SQL statements are only interesting when echo is requested
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if sql_echo else logging.WARNING)
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Convenience wrapper to get a named logger.
    """
    return logging.getLogger(name)
