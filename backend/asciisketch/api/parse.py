"""POST /api/parse: ASCII art to drawing primitives."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from asciisketch.grid.parser import grid_extent, parse
from asciisketch.models.requests import ParseRequest
from asciisketch.models.responses import ParseResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/parse", response_model=ParseResponse)
async def parse_grid(req: ParseRequest) -> ParseResponse:
    cell_width, cell_height = req.cell_size()
    primitives = parse(req.text, cell_width, cell_height)
    rows, columns = grid_extent(req.text)
    logger.info("Parse: %dx%d grid -> %d primitives", rows, columns, len(primitives))

    return ParseResponse.model_validate({
        "primitives": [p.to_dict() for p in primitives],
        "count": len(primitives),
        "rows": rows,
        "columns": columns,
    })
