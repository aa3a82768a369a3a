# robot_api/models/robot_model.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — Robot Model
----------------------------
A robot standing on the grid, with an energy level, an inventory of item ids
and an append-only log of everything it has done.

The entity is deliberately trusting: it applies mutations as asked and only
refuses an attack when it lacks energy. Existence checks, duplicate pickups,
missing inventory items and value ranges are all checked by the routers
before any method here is called.

Energy rules
------------
- attacking costs the attacker ATTACK_ENERGY_COST
- the target loses ATTACK_DAMAGE, floored at 0
- a robot with less than ATTACK_ENERGY_COST energy cannot attack
- direct state updates are written as given (0..100 is enforced at the boundary)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from robot_api.core.types import DIRECTION_DELTAS
from robot_api.models.action_model import (
    AttackAction,
    MoveAction,
    PickupAction,
    PutdownAction,
    RobotAction,
    StateUpdateAction,
)
from robot_api.models.position_model import Position

logger = logging.getLogger(__name__)

ATTACK_ENERGY_COST = 5
ATTACK_DAMAGE = 10
MAX_ENERGY = 100


class InsufficientEnergyError(RuntimeError):
    """Raised when a robot tries to attack with less than ATTACK_ENERGY_COST energy."""

    def __init__(self, robot_id: int, energy: int) -> None:
        super().__init__("Not enough energy to attack")
        self.robot_id = robot_id
        self.energy = energy


class Robot(BaseModel):
    """
    One simulated robot.

    Attributes
    ----------
    id:
        Unique positive id, never changes.
    position:
        Current grid cell.
    energy:
        Current energy (0..100 by convention).
    inventory:
        Ids of held items, in pickup order.
    actions:
        Every action performed so far, oldest first.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., gt=0)
    position: Position = Field(default_factory=lambda: Position(x=0, y=0))
    energy: int = MAX_ENERGY
    inventory: List[int] = Field(default_factory=list)
    actions: List[RobotAction] = Field(default_factory=list)

    # ----------------------------------------------------------------------
    # Mutations
    # ----------------------------------------------------------------------
    def move(self, direction: str) -> Position:
        """
        Step one cell in `direction` and log it.

        Raises ValueError for anything other than up/down/left/right.
        """
        try:
            dx, dy = DIRECTION_DELTAS[direction]
        except KeyError:
            raise ValueError(f"Invalid direction: {direction!r}") from None

        self.position = Position(x=self.position.x + dx, y=self.position.y + dy)
        self.actions.append(MoveAction(direction=direction))
        logger.debug("robot %s moved %s -> %s", self.id, direction, self.position.as_tuple())
        return self.position

    def pickup(self, item_id: int) -> None:
        self.inventory.append(item_id)
        self.actions.append(PickupAction(item=item_id))

    def putdown(self, item_id: int) -> None:
        """Drop the first occurrence of `item_id`; silently ignore unknown ids."""
        if item_id not in self.inventory:
            return
        self.inventory.remove(item_id)
        self.actions.append(PutdownAction(item=item_id))

    def attack(self, target: "Robot") -> None:
        """
        Hit `target`.

        Only the attacker's log gets a record. On failure neither robot
        changes.
        """
        if not self.can_attack():
            raise InsufficientEnergyError(self.id, self.energy)

        self.energy -= ATTACK_ENERGY_COST
        target.energy = max(target.energy - ATTACK_DAMAGE, 0)
        self.actions.append(AttackAction(target_id=target.id))

    def update_state(
        self,
        energy: Optional[int] = None,
        position: Optional[Position] = None,
    ) -> None:
        """Overwrite energy and/or position as given and log the patch."""
        new_state: Dict[str, Any] = {}
        if energy is not None:
            self.energy = energy
            new_state["energy"] = energy
        if position is not None:
            self.position = position.model_copy()
            new_state["position"] = position.model_dump()
        self.actions.append(StateUpdateAction(new_state=new_state))

    # ----------------------------------------------------------------------
    # Convenience helpers
    # ----------------------------------------------------------------------
    def holds(self, item_id: int) -> bool:
        return item_id in self.inventory

    def can_attack(self) -> bool:
        return self.energy >= ATTACK_ENERGY_COST
