"""
container.py – Split a PCX file into header, pixel data and palette, and
rebuild the pixel grid.

File layout (8-bit, single plane)
---------------------------------
  [0 .. 128)              header (see header.py)
  [128 .. end-769)        RLE-compressed palette indices
  [end-769]               palette separator (0x0c, only logged if different)
  [end-768 .. end)        256 × RGB palette

The grid is filled in raster order, one decompressed index per cell.  If
the decompressed data runs out early the remaining cells keep index 0;
truncated files are common and a partial image beats no image.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterator

from PIL import Image as PILImage

from .errors import SourceTooShort, TruncatedInput
from .header import HEADER_SIZE, Header, read_header
from .rle import decompress

log = logging.getLogger(__name__)

PALETTE_SIZE = 0x300
PALETTE_REGION_SIZE = PALETTE_SIZE + 1
MIN_FILE_SIZE = HEADER_SIZE + PALETTE_REGION_SIZE
PALETTE_SEPARATOR = 0x0C

Color = tuple[int, int, int, int]


# ---------------------------------------------------------------------------
# Pixel grid
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PixelGrid:
    """Palette-indexed image: ``indices`` holds one byte per cell, row-major."""

    width: int
    height: int
    indices: bytes
    palette: tuple[Color, ...]

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def index_at(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} grid")
        return self.indices[y * self.width + x]

    def pixel(self, x: int, y: int) -> Color:
        """Return the RGBA colour of cell (*x*, *y*)."""
        return self.palette[self.index_at(x, y)]

    def rows(self) -> Iterator[list[Color]]:
        pal = self.palette
        for y in range(self.height):
            row = self.indices[y * self.width: (y + 1) * self.width]
            yield [pal[i] for i in row]

    def to_image(self) -> PILImage.Image:
        """Return a Pillow "P" image carrying this grid's palette."""
        img = PILImage.frombytes("P", self.size, self.indices)
        pal_rgb = bytearray(PALETTE_SIZE)
        for i, (r, g, b, _a) in enumerate(self.palette):
            pal_rgb[i*3]     = r
            pal_rgb[i*3 + 1] = g
            pal_rgb[i*3 + 2] = b
        img.putpalette(bytes(pal_rgb))
        return img


# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Container:
    header: Header
    data: bytes
    palette: tuple[Color, ...]

    def to_grid(self, legacy_bounds: bool = False) -> PixelGrid:
        """
        Decompress the pixel data and lay it out as a ``PixelGrid``.

        With *legacy_bounds* the data is laid out the way older decoders
        did it: the grid spans ``(xmin, ymin)..(ymax, ymax)``, while the
        data is read as ``ymax + 1`` rows of ``xmax + 1`` indices starting
        at (0, 0).  Data columns below ``xmin`` or past the grid edge and
        data rows below ``ymin`` are dropped.
        """
        hdr = self.header
        if legacy_bounds:
            x0, y0 = hdr.window_xmin, hdr.window_ymin
            width = max(0, hdr.window_ymax + 1 - x0)
            height = max(0, hdr.window_ymax + 1 - y0)
            stride = hdr.window_xmax + 1
            rows = hdr.window_ymax + 1
        else:
            x0 = y0 = 0
            width = stride = max(0, hdr.width)
            height = rows = max(0, hdr.height)

        src = decompress(self.data)
        cells = bytearray(width * height)
        if not legacy_bounds:
            n = min(len(src), len(cells))
            cells[:n] = src[:n]
        else:
            keep = max(0, min(width, stride - x0))
            for y in range(y0, rows):
                start = y * stride + x0
                row = src[start: start + keep]
                dst = (y - y0) * width
                cells[dst: dst + len(row)] = row

        needed = stride * rows
        if len(src) < needed:
            log.debug("pixel data under-run: %d of %d indices", len(src), needed)
        return PixelGrid(width, height, bytes(cells), self.palette)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def parse_palette(raw: bytes | bytearray) -> tuple[Color, ...]:
    """Turn 768 bytes of RGB triples into 256 opaque RGBA colours."""
    if len(raw) < PALETTE_SIZE:
        raise TruncatedInput(0, PALETTE_SIZE, len(raw))
    return tuple(
        (raw[i], raw[i + 1], raw[i + 2], 0xFF)
        for i in range(0, PALETTE_SIZE, 3)
    )


def _read_exact(f: BinaryIO, n: int) -> bytes:
    offset = f.tell()
    chunk = f.read(n)
    if len(chunk) != n:
        raise TruncatedInput(offset, n, len(chunk))
    return chunk


def load_container(src: bytes | bytearray | BinaryIO) -> Container:
    """
    Read header, compressed pixel data and trailing palette from *src*.

    *src* is either the whole file as bytes or a seekable binary file
    object positioned at the start of the PCX data.  Raises
    ``TruncatedInput`` for a short header and ``SourceTooShort`` when the
    source cannot hold the palette region.
    """
    f = io.BytesIO(src) if isinstance(src, (bytes, bytearray)) else src

    base = f.tell()
    header = read_header(f)
    total = f.seek(0, io.SEEK_END) - base
    if total < MIN_FILE_SIZE:
        raise SourceTooShort(MIN_FILE_SIZE, total)

    f.seek(base + HEADER_SIZE, io.SEEK_SET)
    data = _read_exact(f, total - MIN_FILE_SIZE)
    separator = _read_exact(f, 1)[0]
    if separator != PALETTE_SEPARATOR:
        log.debug("palette separator is %#04x, expected %#04x",
                  separator, PALETTE_SEPARATOR)
    palette = parse_palette(_read_exact(f, PALETTE_SIZE))

    log.debug("container: %d bytes, %d compressed, header %dx%d",
              total, len(data), header.width, header.height)
    return Container(header, data, palette)
