# robot_api/core/types.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — Shared type helpers
------------------------------------
Central place for small shared type definitions used across the server:

- Direction   : string literal for up/down/left/right
- DIRECTION_DELTAS : unit (dx, dy) step for every direction
"""

from __future__ import annotations

from typing import Dict, Literal, Tuple, get_args

# ---------------------------------------------------------------------------
# Labels (string forms)
# ---------------------------------------------------------------------------

Direction = Literal["up", "down", "left", "right"]

VALID_DIRECTIONS: Tuple[str, ...] = get_args(Direction)


# ---------------------------------------------------------------------------
# Grid movement
# ---------------------------------------------------------------------------

# y grows upwards, x grows to the right.
DIRECTION_DELTAS: Dict[str, Tuple[int, int]] = {
    "up": (0, 1),
    "down": (0, -1),
    "left": (-1, 0),
    "right": (1, 0),
}


def is_valid_direction(value: object) -> bool:
    """True if `value` is one of the four grid directions."""
    return isinstance(value, str) and value in DIRECTION_DELTAS
