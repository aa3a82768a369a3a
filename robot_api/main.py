# robot_api/main.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — FastAPI application entrypoint
-----------------------------------------------
This file wires everything together:

- Sets up central logging.
- Creates the FastAPI app (OpenAPI docs at settings.docs_url).
- Adds middleware (CORS outside production, request timing).
- Turns request validation errors into 400 responses.
- Mounts routers:
    * /robot/*   (HTTP) → status, move, pickup, putdown, state, actions, attack
    * /items/*   (HTTP) → read-only item view
- Exposes an ASGI `app` object for uvicorn.

Typical run command (dev):

    uvicorn robot_api.main:app --host 0.0.0.0 --port 3000 --reload
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from robot_api.core.config import settings
from robot_api.routers.items import router as items_router
from robot_api.routers.robot import router as robot_router
from robot_api.runtime_state import WorldStore, get_world_store
from robot_api.utils import Stopwatch, get_logger, setup_logging


setup_logging(debug=settings.debug)
logger = get_logger(__name__)
logger.info(
    "Robot Grid API starting (env=%s, seed=%s)",
    settings.environment,
    settings.resolved_seed_path(),
)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report malformed bodies, non-integer ids and bad query values as 400.

    Only loc/msg/type are returned; pydantic's `ctx` may hold exception
    objects that are not JSON serializable.
    """
    details: List[Dict[str, Any]] = [
        {
            "loc": list(err.get("loc", ())),
            "msg": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]
    logger.warning("Invalid request %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(status_code=400, content={"detail": details})


def create_app() -> FastAPI:
    """
    Application factory.

    Returns a configured FastAPI instance ready for uvicorn.
    """
    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="API for controlling robots on a 2D grid",
        docs_url=settings.docs_url,
        redoc_url=settings.redoc_url,
    )

    if settings.environment != "production":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def time_requests(request: Request, call_next):
        with Stopwatch(f"{request.method} {request.url.path}", logger, level=logging.DEBUG):
            return await call_next(request)

    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # ------------------------------------------------------------------
    # Routers
    # ------------------------------------------------------------------
    app.include_router(robot_router)
    app.include_router(items_router)

    # ------------------------------------------------------------------
    # Meta / health endpoints
    # ------------------------------------------------------------------

    @app.get("/", tags=["meta"])
    async def root():
        """Quick check that the server is alive."""
        return {
            "name": settings.app_name,
            "environment": settings.environment,
            "message": "Robot Grid API is running.",
        }

    @app.get("/health", tags=["meta"])
    async def health_check(store: WorldStore = Depends(get_world_store)):
        """Lightweight health check with the size of the world."""
        return {
            "status": "ok",
            "environment": settings.environment,
            "debug": settings.debug,
            "robots": len(store.robots),
            "items": len(store.items),
        }

    logger.info("FastAPI app created (env=%s)", settings.environment)
    return app


# ASGI app for uvicorn / gunicorn
app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "robot_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=(settings.environment != "production"),
    )


if __name__ == "__main__":
    run()
