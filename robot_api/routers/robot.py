# robot_api/routers/robot.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — /robot router
------------------------------
HTTP endpoints to inspect and drive the robots on the grid.

Endpoints
---------
GET   /robot/{id}/status
POST  /robot/{id}/move                 body: {"direction": "up"}
POST  /robot/{id}/pickup/{itemId}
POST  /robot/{id}/putdown/{itemId}
PATCH /robot/{id}/state                body: {"energy": 90, "position": {"x": 1, "y": 2}}
GET   /robot/{id}/actions?page=1&size=5
POST  /robot/{id}/attack/{targetId}

Every handler follows the same shape: take the world lock, look the entities
up (404 if missing), check the preconditions the entities do not check
themselves (400/422), then call exactly one mutation and serialize.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from robot_api.core.config import settings
from robot_api.core.pagination import build_action_links, paginate
from robot_api.core.types import VALID_DIRECTIONS, is_valid_direction
from robot_api.models.item_model import Item
from robot_api.models.request_models import MoveRequest, StateUpdateRequest
from robot_api.models.response_models import (
    ActionLinks,
    ActionsPageResponse,
    AttackResponse,
    ErrorResponse,
    InventoryResponse,
    MoveResponse,
    RobotStatusResponse,
    StateUpdateResponse,
    StatusLinks,
)
from robot_api.models.robot_model import InsufficientEnergyError, Robot
from robot_api.runtime_state import WorldStore, get_world_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/robot", tags=["robot"])

_NOT_FOUND: Dict[int | str, Dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Robot or item not found"},
}
_BAD_REQUEST: Dict[int | str, Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
}

_DIRECTION_HINT = f"Please provide a valid direction ({', '.join(VALID_DIRECTIONS)})."


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_robot_or_404(store: WorldStore, robot_id: int) -> Robot:
    robot = store.robots.get(robot_id)
    if robot is None:
        logger.warning("robot router: robot %s not found", robot_id)
        raise HTTPException(status_code=404, detail=f"Robot with id {robot_id} not found")
    return robot


def _get_item_or_404(store: WorldStore, item_id: int) -> Item:
    item = store.items.get(item_id)
    if item is None:
        logger.warning("robot router: item %s not found", item_id)
        raise HTTPException(status_code=404, detail=f"Item with id {item_id} not found")
    return item


def _conflict(error: str, message: str) -> HTTPException:
    logger.warning("robot router: %s: %s", error, message)
    return HTTPException(status_code=400, detail={"error": error, "message": message})


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get(
    "/{robot_id}/status",
    response_model=RobotStatusResponse,
    responses=_NOT_FOUND,
    summary="Get robot status",
)
async def get_robot_status(
    robot_id: int,
    store: WorldStore = Depends(get_world_store),
) -> RobotStatusResponse:
    """
    Return id, position, energy level and inventory of the robot, with links
    to itself and to its action log.
    """
    with store.lock:
        robot = _get_robot_or_404(store, robot_id)
        return RobotStatusResponse(
            id=robot.id,
            position=robot.position.model_copy(),
            energy=robot.energy,
            inventory=list(robot.inventory),
            links=StatusLinks(
                self_link=f"/robot/{robot.id}/status",
                actions=f"/robot/{robot.id}/actions",
            ),
        )


@router.post(
    "/{robot_id}/move",
    response_model=MoveResponse,
    responses={
        **_NOT_FOUND,
        400: {"model": ErrorResponse, "description": "Direction cannot be empty"},
        422: {"model": ErrorResponse, "description": "Direction must be up, down, left or right"},
    },
    summary="Move the robot",
)
async def move_robot(
    robot_id: int,
    body: Optional[MoveRequest] = Body(default=None),
    store: WorldStore = Depends(get_world_store),
) -> MoveResponse:
    """
    Move the robot one cell. `up`/`down` change y by ±1, `left`/`right`
    change x by ±1. There are no grid bounds.
    """
    with store.lock:
        robot = _get_robot_or_404(store, robot_id)

        direction = body.direction if body is not None else None
        if not direction:
            logger.warning("robot router: move for robot %s without direction", robot_id)
            raise HTTPException(
                status_code=400,
                detail={
                    "error": "Invalid request body",
                    "message": f"Direction cannot be empty. {_DIRECTION_HINT}",
                },
            )

        if not is_valid_direction(direction):
            logger.warning("robot router: invalid direction %r for robot %s", direction, robot_id)
            raise HTTPException(
                status_code=422,
                detail={
                    "error": "Invalid input value for direction",
                    "message": f"The body does not contain a valid direction ({', '.join(VALID_DIRECTIONS)}).",
                    "received": direction,
                },
            )

        position = robot.move(direction)
        logger.info("robot %s moved %s to (%d, %d)", robot.id, direction, position.x, position.y)
        return MoveResponse(message=f"Robot moved {direction}", position=position.model_copy())


@router.post(
    "/{robot_id}/pickup/{item_id}",
    response_model=InventoryResponse,
    responses={**_NOT_FOUND, 400: {"model": ErrorResponse, "description": "Item already owned"}},
    summary="Pick up an item",
)
async def pickup_item(
    robot_id: int,
    item_id: int,
    store: WorldStore = Depends(get_world_store),
) -> InventoryResponse:
    """
    The robot picks up the item and adds it to its inventory. Items already
    held by any robot cannot be picked up.
    """
    with store.lock:
        robot = _get_robot_or_404(store, robot_id)
        item = _get_item_or_404(store, item_id)

        if item.robot_id is not None:
            raise _conflict(
                "Item already owned",
                f"Item with id {item.id} already in Inventory of Robot with id {item.robot_id}",
            )

        item.set_in_inventory(robot.id)
        robot.pickup(item.id)
        logger.info("robot %s picked up item %s", robot.id, item.id)
        return InventoryResponse(message=f"Item {item.id} picked up", inventory=list(robot.inventory))


@router.post(
    "/{robot_id}/putdown/{item_id}",
    response_model=InventoryResponse,
    responses={**_NOT_FOUND, 400: {"model": ErrorResponse, "description": "Item not in inventory"}},
    summary="Put down an item",
)
async def putdown_item(
    robot_id: int,
    item_id: int,
    store: WorldStore = Depends(get_world_store),
) -> InventoryResponse:
    """
    Put an item from the robot's inventory down on the cell the robot is
    standing on.
    """
    with store.lock:
        robot = _get_robot_or_404(store, robot_id)
        item = _get_item_or_404(store, item_id)

        if not robot.holds(item.id):
            raise _conflict(
                "Item Not Found",
                f"Item with id {item.id} is not in the inventory of robot {robot.id}.",
            )

        item.set_not_in_inventory(robot.position.x, robot.position.y)
        robot.putdown(item.id)
        logger.info(
            "robot %s put down item %s at (%d, %d)",
            robot.id,
            item.id,
            robot.position.x,
            robot.position.y,
        )
        return InventoryResponse(message=f"Item {item.id} put down", inventory=list(robot.inventory))


@router.patch(
    "/{robot_id}/state",
    response_model=StateUpdateResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    summary="Update robot state",
)
async def update_robot_state(
    robot_id: int,
    body: StateUpdateRequest,
    store: WorldStore = Depends(get_world_store),
) -> StateUpdateResponse:
    """
    Overwrite the robot's energy level (0..100) and/or position. At least one
    of them must be given.
    """
    with store.lock:
        robot = _get_robot_or_404(store, robot_id)
        robot.update_state(energy=body.energy, position=body.position)
        logger.info(
            "robot %s state updated: %s",
            robot.id,
            body.model_dump(exclude_none=True),
        )
        return StateUpdateResponse(robot=robot.model_copy(deep=True))


@router.get(
    "/{robot_id}/actions",
    response_model=ActionsPageResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    summary="Get robot actions",
)
async def get_robot_actions(
    robot_id: int,
    page: int = Query(default=1, ge=1, description="Page of action results", examples=[1]),
    size: int = Query(
        default=settings.default_page_size,
        ge=1,
        description="Number of actions per page",
        examples=[5],
    ),
    store: WorldStore = Depends(get_world_store),
) -> ActionsPageResponse:
    """
    Return one page of the actions the robot has performed so far, oldest
    first. Pages past the end are empty.
    """
    with store.lock:
        robot = _get_robot_or_404(store, robot_id)
        records, total = paginate(robot.actions, page, size)

    return ActionsPageResponse(
        page=page,
        size=size,
        total_actions=total,
        actions=records,
        links=ActionLinks.model_validate(build_action_links(robot_id, page, size)),
    )


@router.post(
    "/{robot_id}/attack/{target_id}",
    response_model=AttackResponse,
    responses={**_NOT_FOUND, 400: {"model": ErrorResponse, "description": "Not enough energy to attack"}},
    summary="Attack another robot",
)
async def attack_robot(
    robot_id: int,
    target_id: int,
    store: WorldStore = Depends(get_world_store),
) -> AttackResponse:
    """
    The attacker spends 5 energy, the target loses 10 (never below 0).
    Attacking needs at least 5 energy.
    """
    with store.lock:
        attacker = _get_robot_or_404(store, robot_id)
        target = _get_robot_or_404(store, target_id)

        try:
            attacker.attack(target)
        except InsufficientEnergyError as exc:
            raise _conflict(
                "Insufficient energy",
                f"{exc} (robot {exc.robot_id} has {exc.energy} energy)",
            ) from exc

        logger.info(
            "robot %s attacked robot %s (attacker=%d, target=%d)",
            attacker.id,
            target.id,
            attacker.energy,
            target.energy,
        )
        return AttackResponse(attacker_energy=attacker.energy, target_energy=target.energy)
