# robot_api/models/position_model.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — Position Model
-------------------------------
A single cell on the unbounded integer grid. Negative coordinates are fine;
there are no bounds.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictInt


def whole_number(value: Any) -> Any:
    """JSON numbers such as 2.0 count as the integer 2."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# 1.5, "1" and true are rejected instead of coerced.
GridInt = Annotated[StrictInt, BeforeValidator(whole_number)]


class Position(BaseModel):
    """Integer (x, y) cell. `up` increases y, `right` increases x."""

    model_config = ConfigDict(validate_assignment=True)

    x: GridInt = Field(..., description="Horizontal coordinate.", examples=[5])
    y: GridInt = Field(..., description="Vertical coordinate.", examples=[5])

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
