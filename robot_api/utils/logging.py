# robot_api/utils/logging.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — logging utilities
----------------------------------
Central logging configuration for the server.

- One format across all modules.
- settings.debug switches the root level to DEBUG.
- Uvicorn's own loggers are kept quieter unless asked otherwise.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    *,
    debug: bool = False,
    level: Optional[int] = None,
) -> None:
    """
    Configure root logging for the process.

    Parameters
    ----------
    debug:
        If True, default log level becomes DEBUG, otherwise INFO.
        Wired from settings.debug.
    level:
        Optional explicit logging level (overrides debug flag).

    Calling it more than once only adjusts the levels.
    """
    if level is not None:
        base_level = level
    else:
        base_level = logging.DEBUG if debug else logging.INFO

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(base_level)
        for h in root.handlers:
            h.setLevel(base_level)
        return

    logging.basicConfig(
        level=base_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    for noisy in ("uvicorn.access", "httpx"):
        logging.getLogger(noisy).setLevel(os.getenv("ROBOT_API_NOISY_LOG_LEVEL", "WARNING"))


def get_logger(name: str) -> logging.Logger:
    """
    Small convenience wrapper around logging.getLogger.

    Usage:
        from robot_api.utils import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
