"""API response models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    glyph_rules: int = 0


class LineOut(BaseModel):
    kind: Literal["line"] = "line"
    x: float
    y: float
    x2: float
    y2: float


class RectangleOut(BaseModel):
    kind: Literal["rectangle"] = "rectangle"
    x: float
    y: float
    width: float
    height: float


class CircleOut(BaseModel):
    kind: Literal["circle"] = "circle"
    x: float
    y: float
    diameter: float


class TextOut(BaseModel):
    kind: Literal["text"] = "text"
    x: float
    y: float
    character: str


PrimitiveOut = Annotated[
    Union[LineOut, RectangleOut, CircleOut, TextOut],
    Field(discriminator="kind"),
]


class ParseResponse(BaseModel):
    primitives: list[PrimitiveOut] = Field(default_factory=list)
    count: int = 0
    rows: int = 0
    columns: int = 0


class ExampleOut(BaseModel):
    id: str
    name: str
    data: str


class ExamplesResponse(BaseModel):
    examples: list[ExampleOut] = Field(default_factory=list)
