"""GET /api/examples: built-in gallery."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from asciisketch.api.render import SVG_MEDIA_TYPE
from asciisketch.config import Settings
from asciisketch.dependencies import get_settings
from asciisketch.gallery import EXAMPLES, Example, get_example
from asciisketch.models.responses import ExampleOut, ExamplesResponse
from asciisketch.render.sketch import render_text

router = APIRouter(prefix="/examples")


def _lookup(example_id: str) -> Example:
    try:
        return get_example(example_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown example: {example_id}") from None


@router.get("", response_model=ExamplesResponse)
async def list_examples() -> ExamplesResponse:
    return ExamplesResponse(
        examples=[ExampleOut(id=ex.id, name=ex.name, data=ex.data) for ex in EXAMPLES],
    )


@router.get("/{example_id}", response_model=ExampleOut)
async def example(example_id: str) -> ExampleOut:
    ex = _lookup(example_id)
    return ExampleOut(id=ex.id, name=ex.name, data=ex.data)


@router.get("/{example_id}/render", response_class=Response)
async def render_example(example_id: str, cfg: Settings = Depends(get_settings)) -> Response:
    ex = _lookup(example_id)
    svg = render_text(ex.data, cfg.cell_width, cfg.cell_height)
    return Response(content=svg, media_type=SVG_MEDIA_TYPE)
