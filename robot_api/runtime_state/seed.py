# robot_api/runtime_state/seed.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — World seed data
--------------------------------
The robots and items that exist for the whole lifetime of the process.
They are created once at startup; no endpoint adds or removes entities.

File format (JSON)
------------------
    {
      "robots": [
        {"id": 1, "position": {"x": 0, "y": 0}, "energy": 100}
      ],
      "items": [
        {"id": 1, "position": {"x": 2, "y": 3}}
      ]
    }

`position` defaults to (0, 0) and `energy` to 100 for robots. Items always
start on the ground.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from robot_api.core.config import settings
from robot_api.models.position_model import Position
from robot_api.utils import get_logger

logger = get_logger(__name__)


class RobotSeed(BaseModel):
    id: int = Field(..., gt=0)
    position: Position = Field(default_factory=lambda: Position(x=0, y=0))
    energy: int = Field(default=100, ge=0, le=100)


class ItemSeed(BaseModel):
    id: int = Field(..., gt=0)
    position: Position


class SeedData(BaseModel):
    """Validated content of a seed file."""

    robots: List[RobotSeed] = Field(default_factory=list)
    items: List[ItemSeed] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> "SeedData":
        for label, ids in (
            ("robot", [r.id for r in self.robots]),
            ("item", [i.id for i in self.items]),
        ):
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            if duplicates:
                raise ValueError(f"Duplicate {label} ids in seed data: {duplicates}")
        return self


# Built-in fallback, identical to the bundled world_data/seed_world.json.
DEFAULT_SEED: Dict[str, Any] = {
    "robots": [
        {"id": 1, "position": {"x": 0, "y": 0}, "energy": 100},
        {"id": 2, "position": {"x": 5, "y": 5}, "energy": 100},
        {"id": 3, "position": {"x": -3, "y": 2}, "energy": 80},
    ],
    "items": [
        {"id": 1, "position": {"x": 2, "y": 3}},
        {"id": 2, "position": {"x": 0, "y": 0}},
        {"id": 3, "position": {"x": -1, "y": 4}},
        {"id": 4, "position": {"x": 5, "y": 5}},
    ],
}


def default_seed() -> SeedData:
    return SeedData.model_validate(DEFAULT_SEED)


def load_seed(path: Optional[Path] = None) -> SeedData:
    """
    Load seed data from `path` (default: settings.resolved_seed_path()).

    A missing, unreadable or invalid file is logged and replaced by the
    built-in DEFAULT_SEED so the server still starts.
    """
    target = Path(path) if path is not None else settings.resolved_seed_path()

    try:
        seed = SeedData.model_validate_json(target.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Seed file %s unavailable (%s); using built-in default world.", target, exc)
        return default_seed()
    except ValidationError as exc:
        logger.warning(
            "Seed file %s is invalid (%d errors); using built-in default world.",
            target,
            exc.error_count(),
        )
        return default_seed()

    logger.info(
        "Loaded seed world from %s (%d robots, %d items)",
        target,
        len(seed.robots),
        len(seed.items),
    )
    return seed
