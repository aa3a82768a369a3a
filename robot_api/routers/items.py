# robot_api/routers/items.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — /items router
------------------------------
Read-only view of the items, to see where an item lies or who holds it.

GET /items/{itemId}
    {"id": 1, "robotId": null, "position": {"x": 2, "y": 3}, "inInventory": false}
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from robot_api.models.item_model import Item
from robot_api.models.response_models import ErrorResponse
from robot_api.runtime_state import WorldStore, get_world_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/items", tags=["items"])


@router.get(
    "/{item_id}",
    response_model=Item,
    responses={404: {"model": ErrorResponse, "description": "Item not found"}},
    summary="Get item",
)
async def get_item(
    item_id: int,
    store: WorldStore = Depends(get_world_store),
) -> Item:
    with store.lock:
        item = store.items.get(item_id)
        if item is None:
            logger.warning("items router: item %s not found", item_id)
            raise HTTPException(status_code=404, detail=f"Item with id {item_id} not found")
        return item.model_copy(deep=True)
