"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.config import Settings
from orchestrator.core import ProgramFinder
from server.middleware import RequestIDMiddleware
from server.routes import health, programs
from utils.logger import get_logger

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function to create FastAPI application."""
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "FastAPI server starting up",
            extra={"extra_fields": {"model": settings.get_model_info()}},
        )
        missing = settings.missing_credentials()
        if missing:
            logger.warning(f"Missing environment variables: {missing}")
        if getattr(app.state, "finder", None) is None:
            app.state.finder = ProgramFinder.from_settings(settings)

        yield

        logger.info("FastAPI server shutting down")

    app = FastAPI(
        title="ProgramFinder API",
        description="Graduate program search with web results and AI extraction",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(health.router)
    app.include_router(programs.router)

    return app
