"""Rasterize rendered sketches to image bytes."""

from __future__ import annotations

import io
import logging

from PIL import Image

logger = logging.getLogger(__name__)

_MEDIA_TYPES = {
    "png": "image/png",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
}

_ALIASES = {"jpg": "jpeg"}

# JPEG has no alpha; transparent pixels are flattened onto this.
_JPEG_BACKGROUND = (255, 255, 255)
_JPEG_QUALITY = 92


class ExportError(ValueError):
    """Raised when a sketch cannot be exported in the requested form."""


def normalize_format(fmt: str) -> str:
    key = fmt.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in _MEDIA_TYPES:
        raise ExportError(f"Unsupported export format: {fmt!r}")
    return key


def media_type(fmt: str) -> str:
    return _MEDIA_TYPES[normalize_format(fmt)]


def file_extension(fmt: str) -> str:
    key = normalize_format(fmt)
    return "jpg" if key == "jpeg" else key


def export_image(svg: str, fmt: str = "png", scale: float = 1.0) -> bytes:
    """Rasterize SVG markup.

    Args:
        svg: SVG document, e.g. from ``render_svg``.
        fmt: ``png``, ``jpeg``/``jpg`` or ``webp``.
        scale: Output pixels per drawing unit.

    Raises:
        ExportError: Unknown format, non-positive scale, or the SVG could not
            be rasterized.
    """
    key = normalize_format(fmt)
    if scale <= 0:
        raise ExportError(f"Export scale must be positive, got {scale}")

    import cairosvg  # loads libcairo

    try:
        png = cairosvg.svg2png(bytestring=svg.encode("utf-8"), scale=scale)
    except Exception as e:
        logger.warning("SVG rasterization failed: %s", e)
        raise ExportError(f"Could not rasterize sketch: {e}") from e

    if key == "png":
        logger.info("Exported PNG (%d bytes, scale %.2f)", len(png), scale)
        return png

    try:
        with Image.open(io.BytesIO(png)) as img:
            rgba = img.convert("RGBA")
        out = io.BytesIO()
        if key == "jpeg":
            flat = Image.new("RGB", rgba.size, _JPEG_BACKGROUND)
            flat.paste(rgba, mask=rgba.getchannel("A"))
            flat.save(out, format="JPEG", quality=_JPEG_QUALITY)
        else:
            rgba.save(out, format="WEBP")
    except OSError as e:
        logger.warning("Image re-encoding to %s failed: %s", key, e)
        raise ExportError(f"Could not encode sketch as {key}: {e}") from e

    data = out.getvalue()
    logger.info("Exported %s (%d bytes, scale %.2f)", key.upper(), len(data), scale)
    return data
