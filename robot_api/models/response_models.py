# robot_api/models/response_models.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — Response bodies
--------------------------------
Response models for the /robot and /items endpoints. FastAPI uses them to
serialize results (camelCase keys via aliases) and to build the OpenAPI docs.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from robot_api.models.action_model import RobotAction
from robot_api.models.position_model import Position
from robot_api.models.robot_model import Robot


class _Response(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------


class StatusLinks(_Response):
    self_link: str = Field(..., alias="self", examples=["/robot/1/status"])
    actions: str = Field(..., examples=["/robot/1/actions"])


class ActionLinks(_Response):
    self_link: str = Field(..., alias="self")
    next: str
    previous: Optional[str] = None


# ---------------------------------------------------------------------------
# Endpoint bodies
# ---------------------------------------------------------------------------


class RobotStatusResponse(_Response):
    id: int = Field(..., examples=[1])
    position: Position
    energy: int = Field(..., examples=[100])
    inventory: List[int]
    links: StatusLinks


class MoveResponse(_Response):
    message: str = Field(..., examples=["Robot moved up"])
    position: Position


class InventoryResponse(_Response):
    message: str = Field(..., examples=["Item 1 picked up"])
    inventory: List[int]


class StateUpdateResponse(_Response):
    message: str = Field(default="State updated")
    robot: Robot


class ActionsPageResponse(_Response):
    page: int
    size: int
    total_actions: int = Field(..., alias="totalActions")
    actions: List[RobotAction]
    links: ActionLinks


class AttackResponse(_Response):
    message: str = Field(default="Attack executed")
    attacker_energy: int = Field(..., alias="attackerEnergy")
    target_energy: int = Field(..., alias="targetEnergy")


class ErrorResponse(_Response):
    """Shape of every non-2xx body (documentation only)."""

    detail: Any
