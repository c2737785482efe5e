import logging
import sys
from typing import Optional

from .config import get_config

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(name: str = "translit", level: Optional[str] = None) -> logging.Logger:
    log_config = get_config().get("storage.logging", {}) or {}

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or log_config.get("level", "WARNING")).upper()))
    logger.handlers.clear()

    formatter = logging.Formatter(log_config.get("format", DEFAULT_FORMAT))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"translit.{name}")
