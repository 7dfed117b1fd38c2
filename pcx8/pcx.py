"""
pcx.py – ZSoft PCX 8-bit, 256-colour image decoder.

Only the single-plane 8 bits per pixel variant with a trailing VGA
palette is supported; every other bit depth / plane combination is
rejected with ``UnsupportedFormat``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from PIL import Image as PILImage

from .container import PixelGrid, load_container
from .errors import UnsupportedFormat
from .header import HEADER_SIZE, parse_header

log = logging.getLogger(__name__)


def decode_8bit_256(src: bytes | bytearray | BinaryIO,
                    legacy_bounds: bool = False) -> PixelGrid:
    """Decode an 8-bit 256-colour PCX image into a ``PixelGrid``."""
    raw = load_container(src)
    hdr = raw.header
    if hdr.bits_per_pixel_per_plane != 8:
        raise UnsupportedFormat("bits_per_pixel_per_plane",
                                hdr.bits_per_pixel_per_plane, 8)
    if hdr.num_planes != 1:
        raise UnsupportedFormat("num_planes", hdr.num_planes, 1)
    grid = raw.to_grid(legacy_bounds=legacy_bounds)
    log.info("decoded %dx%d PCX image", grid.width, grid.height)
    return grid


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read_pcx(path: str | Path, legacy_bounds: bool = False) -> PILImage.Image:
    """Decode a PCX file to a PIL Image (RGB)."""
    with open(path, "rb") as f:
        grid = decode_8bit_256(f, legacy_bounds=legacy_bounds)
    return grid.to_image().convert("RGB")


def is_pcx(path: str | Path) -> bool:
    """Return True if the file carries a PCX header marker."""
    try:
        with open(path, "rb") as f:
            raw = f.read(HEADER_SIZE)
    except OSError:
        return False
    if len(raw) < HEADER_SIZE:
        return False
    return parse_header(raw).looks_valid()
