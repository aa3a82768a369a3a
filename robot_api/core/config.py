# robot_api/core/config.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — Configuration
------------------------------
Central configuration for the robot grid server, including:

- app metadata
- API host/port and docs location
- filesystem paths (seed world data)
- action log pagination limits.

Every value can be overridden through the environment or a `.env` file
next to the project root, e.g.:

    SEED_PATH=/tmp/my_world.json API_PORT=3000 uvicorn robot_api.main:app
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------

# This file is: robot_api/core/config.py
APP_DIR: Path = Path(__file__).resolve().parents[1]   # .../robot_api
ROOT_DIR: Path = APP_DIR.parent                       # project root

WORLD_DATA_DIR: Path = APP_DIR / "world_data"
DEFAULT_SEED_PATH: Path = WORLD_DATA_DIR / "seed_world.json"


# ---------------------------------------------------------------------------
# Settings model
# ---------------------------------------------------------------------------


class Settings(BaseSettings):
    """
    Global configuration for the robot grid server.

    This class is instantiated once at import time as `settings`
    and used everywhere in the codebase.
    """

    model_config = SettingsConfigDict(
        env_file=ROOT_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- App / server basics -----------------------------------------------
    app_name: str = "Robot Grid API"
    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False

    api_host: str = "0.0.0.0"
    api_port: int = 3000

    docs_url: str = "/api-docs"
    redoc_url: str = "/redoc"

    # --- World seed ---------------------------------------------------------
    # ENV: SEED_PATH=/path/to/world.json
    seed_path: Optional[Path] = Field(
        default=None,
        description=(
            "JSON file with the robots/items to create at startup "
            "(env: SEED_PATH). Defaults to the bundled seed_world.json."
        ),
    )

    # --- Action log pagination ----------------------------------------------
    default_page_size: int = Field(default=5, ge=1)

    def resolved_seed_path(self) -> Path:
        """Seed file to load: explicit override or the bundled default."""
        return self.seed_path if self.seed_path is not None else DEFAULT_SEED_PATH


# Single global settings instance used by the rest of the app.
settings = Settings()


if __name__ == "__main__":
    # Minimal self-test so you can quickly verify config loading.
    print("Robot Grid API — Settings self-test")
    print(f"ROOT_DIR         : {ROOT_DIR}")
    print(f"APP_DIR          : {APP_DIR}")
    print(f"Seed path        : {settings.resolved_seed_path()}")
    print(f"Environment      : {settings.environment}")
    print(f"Listen           : {settings.api_host}:{settings.api_port}")
    print(f"Page size        : {settings.default_page_size}")
