"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from epicycles import __version__
from epicycles.engine.registry import get_registry
from epicycles.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        generators_registered=get_registry().count,
    )
