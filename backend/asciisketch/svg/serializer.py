"""Write SVG markup from element dicts produced by the sketch renderer."""

from __future__ import annotations

import re
from html import escape
from typing import Any

# Keys of an element dict that are not SVG attributes.
_RESERVED = ("tag", "text")

# Code points XML 1.0 forbids in character data (lone surrogates included).
_XML_ILLEGAL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")

# Stand-in for a forbidden code point.
_REPLACEMENT = "\ufffd"


def _xml_text(value: str) -> str:
    return escape(_XML_ILLEGAL.sub(_REPLACEMENT, value), quote=True)


def _fmt(value: Any) -> str:
    if isinstance(value, float):
        # Two decimals keeps output stable and compact.
        return f"{value:.2f}".rstrip("0").rstrip(".")
    return _xml_text(str(value))


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 800.0,
    canvas_h: float = 600.0,
    title: str = "",
    description: str = "",
    styles: dict[str, str] | None = None,
    background: str | None = None,
) -> str:
    """Generate SVG markup from element definitions.

    Each element is ``{"tag": ..., <attr>: <value>, ...}``; an optional
    ``"text"`` key becomes the element's escaped character content.
    """
    w, h = _fmt(float(canvas_w)), _fmt(float(canvas_h))
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {w} {h}" width="{w}" height="{h}" xmlns="http://www.w3.org/2000/svg"'
        f' role="img">',
    ]

    if title:
        lines.append(f"  <title>{_xml_text(title)}</title>")
    if description:
        lines.append(f"  <desc>{_xml_text(description)}</desc>")

    if styles:
        lines.append("  <style>")
        for selector, props in styles.items():
            lines.append(f"    {selector} {{ {props} }}")
        lines.append("  </style>")

    if background:
        lines.append(f'  <rect x="0" y="0" width="{w}" height="{h}" fill="{_fmt(background)}" />')

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k not in _RESERVED}
        attr_str = " ".join(f'{k}="{_fmt(v)}"' for k, v in attrs.items())
        if "text" in elem:
            lines.append(f"  <{tag} {attr_str}>{_xml_text(str(elem['text']))}</{tag}>")
        else:
            lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)
