"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from topfill import __version__
from topfill.engine.registry import get_registry
from topfill.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        patterns=get_registry().names(),
    )
