"""Sketch rendering and image export."""

from asciisketch.render.export import ExportError, export_image, media_type
from asciisketch.render.sketch import SketchStyle, render_svg, render_text

__all__ = [
    "SketchStyle",
    "render_svg",
    "render_text",
    "export_image",
    "media_type",
    "ExportError",
]
