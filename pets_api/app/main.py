"""
Main entrypoint for the Pets API.

This module assembles the FastAPI application, sets up logging,
creates the pets content provider and includes versioned routers.
Run it with uvicorn, e.g.::

    uvicorn pets_api.app.main:app --reload
"""

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .core.storage import SQLiteStorage
from .services.pet_provider import PetProvider
from .services.uri_matcher import build_pet_matcher


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    The routing table is built here, once, and handed to the provider
    shared by all requests through ``app.state.provider``.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.provider = PetProvider(build_pet_matcher(), SQLiteStorage())

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file on first run.
        init_db()

    return app


app = create_app()
