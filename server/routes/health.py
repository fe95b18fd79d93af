"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from config.config import Settings
from server.dependencies import get_settings
from server.schemas.responses import HealthResponseDTO

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponseDTO)
async def health_check(settings: Settings = Depends(get_settings)):
    """Liveness plus a list of unconfigured credentials (names only)."""
    return HealthResponseDTO(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        version="1.0.0",
        missing_credentials=settings.missing_credentials(),
    )
