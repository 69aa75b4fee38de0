# graphlearn/common/logging.py
from __future__ import annotations

import logging
from typing import Optional, Union

from graphlearn.common.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = "graphlearn", level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Return a logger that plays nice with Uvicorn if running under it.
    If no handlers are set, we add a basicConfig once.

    Without an explicit `level` the logger follows `Settings.log_level`
    (LOG_LEVEL in the environment).
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    return logger
