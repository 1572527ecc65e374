"""POST /api/export: rasterized sketch download."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from asciisketch.api.render import render_request
from asciisketch.models.requests import ExportRequest
from asciisketch.render.export import ExportError, export_image, file_extension, media_type

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/export", response_class=Response)
async def export(req: ExportRequest) -> Response:
    try:
        data = export_image(render_request(req, scale=req.scale), fmt=req.format, scale=req.scale)
        ext = file_extension(req.format)
        content_type = media_type(req.format)
    except ExportError as e:
        logger.warning("Export rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e

    return Response(
        content=data,
        media_type=content_type,
        headers={"Content-Disposition": f'attachment; filename="sketch.{ext}"'},
    )
