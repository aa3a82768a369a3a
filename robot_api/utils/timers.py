# robot_api/utils/timers.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — timing utilities
---------------------------------
Stopwatch context manager used by the request logging middleware.
"""

from __future__ import annotations

import logging
import time
from contextlib import ContextDecorator
from typing import Optional


class Stopwatch(ContextDecorator):
    """
    Simple stopwatch context manager.

    Example:
        from robot_api.utils import Stopwatch, get_logger

        logger = get_logger(__name__)

        with Stopwatch("POST /robot/1/move", logger):
            ...

    This will log something like:
        POST /robot/1/move took 0.002 s
    """

    def __init__(
        self,
        label: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.INFO,
    ) -> None:
        self.label = label
        self.logger = logger or logging.getLogger(__name__)
        self.level = level
        self._start: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> "Stopwatch":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, exc_tb) -> None:  # type: ignore[override]
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, "%s took %.3f s", self.label, self.elapsed)
