"""FastAPI application for the wedding RSVP lookup."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from wedding import __version__
from wedding.api.routes import get_db_manager, router as api_router
from wedding.config import settings
from wedding.db import DatabaseManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan events."""
    logger.info("Starting Wedding RSVP API...")
    db_manager = app.dependency_overrides.get(get_db_manager, get_db_manager)()
    db_manager.init_db()
    yield
    logger.info("Shutting down Wedding RSVP API...")
    db_manager.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Wedding RSVP",
        description="Guest lookup for the attendance confirmation flow",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request timing middleware
    @app.middleware("http")
    async def add_timing_header(request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = (time.perf_counter() - start_time) * 1000
        response.headers["X-Process-Time-Ms"] = f"{process_time:.2f}"
        return response

    app.include_router(api_router, prefix="/v1", tags=["invites"])

    @app.get("/health")
    def health_check(db_manager: DatabaseManager = Depends(get_db_manager)):
        database = "ok" if db_manager.health_check() else "unavailable"
        return {"status": "healthy", "database": database, "version": __version__}

    @app.get("/")
    async def root():
        return {
            "name": "Wedding RSVP",
            "version": __version__,
            "docs": "/docs",
        }

    return app


# Create app instance
app = create_app()
