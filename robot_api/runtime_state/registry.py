# robot_api/runtime_state/registry.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — In-memory world registries
-------------------------------------------

Purpose
~~~~~~~
- Hold every robot and item of the running process.
- Look entities up by id for the route handlers.
- Offer one lock so a handler can run lookup -> check -> mutate as a unit.

Design notes
~~~~~~~~~~~~
- Plain ordered lists searched linearly; the worlds are tiny and fixed.
- Nothing is persisted; a restart brings back the seed world.
- The registries never grow or shrink after construction.
- Action logs grow without bound for the life of the process.
"""

from __future__ import annotations

import threading
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from robot_api.models.item_model import Item
from robot_api.models.robot_model import Robot
from robot_api.runtime_state.seed import SeedData, load_seed
from robot_api.utils import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Union[Robot, Item])


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------


class EntityRegistry(Generic[E]):
    """Ordered, fixed collection of entities looked up by `id`."""

    def __init__(self, entities: Iterable[E] = ()) -> None:
        self._entities: List[E] = list(entities)

    def get(self, entity_id: int) -> Optional[E]:
        """Return the entity with `entity_id`, or None."""
        for entity in self._entities:
            if entity.id == entity_id:
                return entity
        return None

    def ids(self) -> List[int]:
        return [e.id for e in self._entities]

    def __iter__(self) -> Iterator[E]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return any(e.id == entity_id for e in self._entities)


class RobotRegistry(EntityRegistry[Robot]):
    """All robots of the world."""


class ItemRegistry(EntityRegistry[Item]):
    """All items of the world."""


# ---------------------------------------------------------------------------
# World store
# ---------------------------------------------------------------------------


class WorldStore:
    """
    Owner of the robot and item registries.

    Route handlers get the store through the `get_world_store` dependency and
    hold `store.lock` for the whole of a mutating request. The lock is
    re-entrant so helpers may take it again.
    """

    def __init__(self, robots: RobotRegistry, items: ItemRegistry) -> None:
        self.robots = robots
        self.items = items
        self.lock = threading.RLock()

    @classmethod
    def from_seed(cls, seed: SeedData) -> "WorldStore":
        robots, items = cls._build(seed)
        return cls(robots, items)

    @staticmethod
    def _build(seed: SeedData) -> tuple[RobotRegistry, ItemRegistry]:
        robots = RobotRegistry(
            Robot(id=r.id, position=r.position.model_copy(), energy=r.energy)
            for r in seed.robots
        )
        items = ItemRegistry(
            Item(id=i.id, position=i.position.model_copy()) for i in seed.items
        )
        return robots, items

    def reset(self, seed: SeedData) -> None:
        """Throw away all state and rebuild the world from `seed`."""
        with self.lock:
            self.robots, self.items = self._build(seed)
        logger.info(
            "[WorldStore] Reset world (%d robots, %d items)",
            len(self.robots),
            len(self.items),
        )

    # ------------------------------------------------------------------
    # Ownership helpers
    # ------------------------------------------------------------------

    def owner_of(self, item_id: int) -> Optional[Robot]:
        """Robot whose inventory lists `item_id`, if any."""
        for robot in self.robots:
            if robot.holds(item_id):
                return robot
        return None

    def check_consistency(self) -> List[str]:
        """
        Compare robot inventories with item ownership.

        Returns a list of human readable violations; empty means every
        item's robot_id agrees with exactly one inventory.
        """
        problems: List[str] = []
        with self.lock:
            for item in self.items:
                holders = [r.id for r in self.robots if r.holds(item.id)]
                if (item.robot_id is None) == (item.position is None):
                    problems.append(f"item {item.id}: exactly one of robotId/position must be set")
                if item.robot_id is None and holders:
                    problems.append(f"item {item.id}: on the ground but listed by robots {holders}")
                if item.robot_id is not None and holders != [item.robot_id]:
                    problems.append(
                        f"item {item.id}: owned by robot {item.robot_id} but listed by robots {holders}"
                    )
            for robot in self.robots:
                for item_id in robot.inventory:
                    if item_id not in self.items:
                        problems.append(f"robot {robot.id}: unknown item {item_id} in inventory")
        return problems


# Global instance used by the routers
world_store = WorldStore.from_seed(load_seed())


def get_world_store() -> WorldStore:
    """FastAPI dependency; tests override it with an isolated store."""
    return world_store
