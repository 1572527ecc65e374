"""Shared test fixtures."""

from __future__ import annotations

import pytest

# Sample drawings

BOX_SCENE = "[ A ]\n  |  "

CLOUD_ARCH = r"""      [ Mobile ]
          |
    +-----+-----+
    |  Auth API |
    +-----+-----+"""

ROBOT = r"""      [o] [o]
       \___/
      |     |
    --| ROB |---"""

CRLF_SCENE = "[ok]\r\n-|-\r\n"


def _cairo_available() -> bool:
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


requires_cairo = pytest.mark.skipif(not _cairo_available(), reason="cairo system library not installed")


@pytest.fixture
def box_scene() -> str:
    return BOX_SCENE


@pytest.fixture
def cloud_arch() -> str:
    return CLOUD_ARCH


@pytest.fixture
def robot() -> str:
    return ROBOT
