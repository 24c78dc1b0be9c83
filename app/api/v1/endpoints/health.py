"""Health check endpoint."""
from __future__ import annotations

from datetime import UTC, datetime

from bs4.builder import builder_registry
from fastapi import APIRouter

from app.api.models.responses import HealthResponse
from seo_inspector import __version__

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check API health and parser availability.",
)
async def health_check() -> HealthResponse:
    """Return API health status."""
    checks: dict[str, bool] = {}

    # lxml registers its tree builder with BeautifulSoup when installed
    checks["html_parser"] = builder_registry.lookup("lxml") is not None

    return HealthResponse(
        status="healthy" if all(checks.values()) else "degraded",
        version=__version__,
        timestamp=datetime.now(UTC),
        checks=checks,
    )
