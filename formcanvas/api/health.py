"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from formcanvas.forms.palette import ELEMENT_TYPES
from formcanvas.models.responses import HealthResponse, PaletteResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        element_types=len(ELEMENT_TYPES),
    )


@router.get("/palette", response_model=PaletteResponse)
async def palette() -> PaletteResponse:
    return PaletteResponse(element_types=list(ELEMENT_TYPES))
