# robot_api/utils/__init__.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — Utility toolbox
--------------------------------
Shared helpers used across the server:

- logging   : central logging configuration
- timers    : request timing

    from robot_api.utils import setup_logging, get_logger
"""

from __future__ import annotations

from .logging import (  # noqa: F401
    setup_logging,
    get_logger,
)

from .timers import (  # noqa: F401
    Stopwatch,
)
