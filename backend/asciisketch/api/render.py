"""POST /api/render: ASCII art to a hand-drawn SVG."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from asciisketch.grid.parser import parse
from asciisketch.models.requests import MAX_CANVAS, RenderRequest
from asciisketch.render.sketch import FONT_SCALE, fit_canvas, render_svg

logger = logging.getLogger(__name__)

router = APIRouter()

SVG_MEDIA_TYPE = "image/svg+xml"


def render_request(req: RenderRequest, scale: float = 1.0) -> str:
    """Render a request's drawing; shared with the export endpoint.

    Fitted canvases are held to the same bound as explicit ones, measured in
    output pixels (canvas size times ``scale``).

    Raises:
        HTTPException: 422 when the output bitmap would exceed ``MAX_CANVAS``.
    """
    cell_width, cell_height = req.cell_size()
    font_size = cell_height * FONT_SCALE
    primitives = parse(req.text, cell_width, cell_height)

    width, height = req.width, req.height
    if width is None or height is None:
        fit_w, fit_h = fit_canvas(primitives, font_size=font_size)
        width = fit_w if width is None else width
        height = fit_h if height is None else height

    if max(width, height) * scale > MAX_CANVAS:
        logger.warning("Render rejected: canvas %.0fx%.0f at scale %.2f", width, height, scale)
        raise HTTPException(
            status_code=422,
            detail=f"Canvas {width:.0f}x{height:.0f} at scale {scale:g} exceeds {MAX_CANVAS} pixels per side",
        )

    return render_svg(
        primitives,
        width,
        height,
        font_size=font_size,
        background=req.background,
    )


@router.post("/render", response_class=Response)
async def render(req: RenderRequest) -> Response:
    return Response(content=render_request(req), media_type=SVG_MEDIA_TYPE)
