# robot_api/models/item_model.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — Item Model
---------------------------
An item is either lying on the grid (`position` set) or held by exactly one
robot (`robot_id` set), never both and never neither.

The robot's inventory list and the item's `robot_id` describe the same fact
from two sides; the pickup/putdown routes update both together.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from robot_api.models.position_model import Position


class Item(BaseModel):
    """One item in the world."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., gt=0)
    robot_id: Optional[int] = Field(
        default=None,
        alias="robotId",
        description="Owning robot id, or null while the item lies on the grid.",
    )
    position: Optional[Position] = Field(
        default=None,
        description="Grid cell, or null while a robot holds the item.",
    )
    in_inventory: bool = Field(default=False, alias="inInventory")

    @model_validator(mode="after")
    def _check_placement(self) -> "Item":
        if (self.robot_id is None) == (self.position is None):
            raise ValueError(
                f"Item {self.id} must have exactly one of robotId or position set"
            )
        if self.in_inventory != (self.robot_id is not None):
            raise ValueError(f"Item {self.id}: inInventory disagrees with robotId")
        return self

    @property
    def is_held(self) -> bool:
        return self.robot_id is not None

    def set_in_inventory(self, robot_id: int) -> None:
        """Hand the item to `robot_id`. Callers check it was on the ground first."""
        self.in_inventory = True
        self.robot_id = robot_id
        self.position = None

    def set_not_in_inventory(self, x: int, y: int) -> None:
        """Place the item on the grid at (x, y)."""
        self.position = Position(x=x, y=y)
        self.in_inventory = False
        self.robot_id = None
