"""FastAPI dependencies for settings and pipeline access."""

from fastapi import Request

from config.config import Settings
from orchestrator.core import ProgramFinder
from server.utils import cors_headers


def get_settings(request: Request) -> Settings:
    """Settings resolved once in the app lifespan."""
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        settings = Settings.from_env()
        request.app.state.settings = settings
    return settings


def get_finder(request: Request) -> ProgramFinder:
    """Dependency to get the ProgramFinder built from process settings (one per app)."""
    finder = getattr(request.app.state, "finder", None)
    if finder is None:
        finder = ProgramFinder.from_settings(get_settings(request))
        request.app.state.finder = finder
    return finder


def get_cors_headers(request: Request) -> dict[str, str]:
    """CORS headers for this request under the configured allowed origins."""
    settings = get_settings(request)
    return cors_headers(settings.cors_allow_origins, request.headers.get("origin"))
