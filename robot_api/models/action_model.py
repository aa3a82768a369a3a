# robot_api/models/action_model.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — Action records
-------------------------------
One record is appended to a robot's action log for every mutation it
performs. Records are tagged by the `action` field, so the log serializes
to JSON like:

    [
      {"action": "move", "direction": "up"},
      {"action": "pickup", "item": 1},
      {"action": "putdown", "item": 1},
      {"action": "attack", "targetId": 2},
      {"action": "stateUpdate", "newState": {"energy": 90}}
    ]

Records are frozen once created; the log itself is append-only.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from robot_api.core.types import Direction


class _ActionBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MoveAction(_ActionBase):
    action: Literal["move"] = "move"
    direction: Direction


class PickupAction(_ActionBase):
    action: Literal["pickup"] = "pickup"
    item: int


class PutdownAction(_ActionBase):
    action: Literal["putdown"] = "putdown"
    item: int


class AttackAction(_ActionBase):
    action: Literal["attack"] = "attack"
    target_id: int = Field(..., alias="targetId")


class StateUpdateAction(_ActionBase):
    """
    Raw state patch as it was applied.

    `new_state` only carries the keys that were supplied (energy and/or
    position), position already converted to a plain {"x", "y"} dict.
    """

    action: Literal["stateUpdate"] = "stateUpdate"
    new_state: Dict[str, Any] = Field(..., alias="newState")


RobotAction = Annotated[
    Union[MoveAction, PickupAction, PutdownAction, AttackAction, StateUpdateAction],
    Field(discriminator="action"),
]
