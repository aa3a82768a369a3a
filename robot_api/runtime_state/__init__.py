"""
Runtime state package for the Robot Grid API.

Holds the process-wide world: every robot and item, created once from the
seed data and mutated in place by the /robot routes.

Typical usage (in a router):

    from fastapi import Depends
    from robot_api.runtime_state import WorldStore, get_world_store

    async def handler(store: WorldStore = Depends(get_world_store)):
        with store.lock:
            robot = store.robots.get(robot_id)
            ...
"""

from .registry import (
    EntityRegistry,
    ItemRegistry,
    RobotRegistry,
    WorldStore,
    get_world_store,
    world_store,
)
from .seed import (
    DEFAULT_SEED,
    SeedData,
    default_seed,
    load_seed,
)

__all__ = [
    "EntityRegistry",
    "ItemRegistry",
    "RobotRegistry",
    "WorldStore",
    "get_world_store",
    "world_store",
    "DEFAULT_SEED",
    "SeedData",
    "default_seed",
    "load_seed",
]
