from __future__ import annotations

import logging
import sys

_DEFAULT_LOGGER_NAME = "sfen_preview"
_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = _DEFAULT_LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    logger.addHandler(handler)
    return logger


def set_level(level: int) -> None:
    logging.getLogger(_DEFAULT_LOGGER_NAME).setLevel(level)
