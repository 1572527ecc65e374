"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from asciisketch.grid.parser import GLYPH_RULES
from asciisketch.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        glyph_rules=len(GLYPH_RULES),
    )
