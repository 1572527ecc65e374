"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from asciisketch.config import settings

# Output bitmap sides beyond this are refused; cairosvg allocates the full bitmap.
MAX_CANVAS = 10_000


class ParseRequest(BaseModel):
    text: str = Field(..., description="ASCII art, newline-delimited rows")
    cell_width: float | None = Field(default=None, gt=0, allow_inf_nan=False, description="Character cell width")
    cell_height: float | None = Field(default=None, gt=0, allow_inf_nan=False, description="Character cell height")

    @field_validator("text")
    @classmethod
    def _text_size(cls, v: str) -> str:
        if len(v) > settings.max_text_chars:
            raise ValueError(f"text exceeds {settings.max_text_chars} characters")
        return v

    def cell_size(self) -> tuple[float, float]:
        """Requested cell size, falling back to the configured defaults."""
        return (
            self.cell_width if self.cell_width is not None else settings.cell_width,
            self.cell_height if self.cell_height is not None else settings.cell_height,
        )


class RenderRequest(ParseRequest):
    width: float | None = Field(default=None, ge=1, le=MAX_CANVAS, allow_inf_nan=False, description="Canvas width; fitted if omitted")
    height: float | None = Field(default=None, ge=1, le=MAX_CANVAS, allow_inf_nan=False, description="Canvas height; fitted if omitted")
    background: str | None = Field(default=None, description="Canvas fill colour, transparent if omitted")


class ExportRequest(RenderRequest):
    format: str = Field(default="png", description="png, jpeg or webp")
    scale: float = Field(default=1.0, gt=0, le=8, allow_inf_nan=False, description="Output pixels per drawing unit")
