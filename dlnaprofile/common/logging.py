# dlnaprofile/common/logging.py
from __future__ import annotations

import logging


def get_logger(name: str = "dlnaprofile", level: int | str | None = None) -> logging.Logger:
    """
    Return a named logger. If the root logger has no handlers yet we add a
    basicConfig once, so library use and `uvicorn` runs both get output.
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if level is not None:
        logger.setLevel(_to_level(level))
    return logger


def _to_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO
