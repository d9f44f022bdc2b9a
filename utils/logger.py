# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "stockroom"


def setup_logger(log_dir: str | Path = "data/logs", level: int = logging.INFO):
    """
    Configure the global logger for the stockroom.

    Features:
    - Daily rotating log files (one file per day, a week kept)
    - Console + file output
    - Unified log format with timestamp and level
    - Creates the log directory automatically

    Modules log through child loggers ("stockroom.inventory", ...),
    which propagate to the handlers installed here.
    """

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "stockroom.log"

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info("Logger initialized (daily rotation enabled)")
    return logger


def get_logger(component: str) -> logging.Logger:
    # Child logger for one module, e.g. get_logger("inventory").
    return logging.getLogger(f"{LOGGER_NAME}.{component}")
