"""FastAPI application entry point."""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.error_handlers import register_error_handlers
from app.routers import health, progress, users, workouts
from app.services.store_registry import build_store_registry


logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build a configured application with its own, freshly seeded stores.

    Args:
        settings: Overrides the cached environment settings (used by tests)

    Returns:
        FastAPI: Application ready to be served
    """
    settings = settings or get_settings()

    app = FastAPI(title=settings.app_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )

    register_error_handlers(app)

    app.state.settings = settings
    # The stores live as long as the app; nothing is persisted across restarts.
    app.state.stores = build_store_registry(seed=settings.seed_sample_data)

    app.include_router(health.router)
    app.include_router(workouts.router)
    app.include_router(users.router)
    app.include_router(progress.router)

    logger.info("%s %s initialised", settings.app_name, settings.api_version)
    return app


app = create_app()
