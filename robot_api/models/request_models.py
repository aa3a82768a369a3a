# robot_api/models/request_models.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — Request bodies
-------------------------------
Payloads accepted by the /robot endpoints. All range and shape checks for
client input live here (or in the router), never in the entities.
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, conint, model_validator

from robot_api.models.position_model import Position, whole_number

EnergyLevel = Annotated[conint(strict=True, ge=0, le=100), BeforeValidator(whole_number)]


class MoveRequest(BaseModel):
    """
    Body of POST /robot/{id}/move.

    `direction` is kept as a free string so the router can tell "missing"
    (400) apart from "not one of up/down/left/right" (422).
    """

    direction: Optional[str] = Field(
        default=None,
        description="Direction to move in. Valid values are up, down, left, right.",
        examples=["up"],
    )


class StateUpdateRequest(BaseModel):
    """
    Body of PATCH /robot/{id}/state.

    At least one of `energy` / `position` must be supplied.
    """

    model_config = ConfigDict(extra="ignore")

    energy: Optional[EnergyLevel] = Field(
        default=None,
        description="New energy level of the robot (0..100).",
        examples=[90],
    )
    position: Optional[Position] = Field(
        default=None,
        description="New grid cell of the robot.",
        examples=[{"x": 10, "y": 20}],
    )

    @model_validator(mode="after")
    def _require_some_field(self) -> "StateUpdateRequest":
        if self.energy is None and self.position is None:
            raise ValueError("Either position or energy must be defined")
        return self
