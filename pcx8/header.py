"""
header.py – PCX 128-byte file header.

Header layout (all multi-byte fields little-endian)
---------------------------------------------------
  [0x00]        marker                   (0x0a for ZSoft files)
  [0x01]        version                  0, 2, 3, 4 or 5
  [0x02]        encoding                 1 = RLE (rarely 0)
  [0x03]        bits per pixel per plane
  [0x04..0x05]  window xmin   (uint16)   width  = xmax - xmin + 1
  [0x06..0x07]  window ymin   (uint16)   height = ymax - ymin + 1
  [0x08..0x09]  window xmax   (uint16)
  [0x0a..0x0b]  window ymax   (uint16)
  [0x0c..0x0d]  vertical DPI  (uint16)   unreliable
  [0x0e..0x0f]  horizontal DPI (uint16)  unreliable
  [0x10..0x3f]  16-colour EGA palette (48 bytes, unused for 8-bit images)
  [0x40]        reserved
  [0x41]        number of colour planes
  [0x42..0x43]  bytes per plane line (uint16)
  [0x44..0x45]  palette info  (uint16)   1 = colour/BW, 2 = greyscale
  [0x46..0x47]  horizontal screen size (uint16)
  [0x48..0x49]  vertical screen size   (uint16)
  [0x4a..0x7f]  padding (54 bytes)

The codec only reads and writes the layout; deciding whether the values
describe something decodable is left to the caller.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

from .errors import TruncatedInput

HEADER_SIZE = 128
PCX_MARKER = 0x0A

_HEADER_FMT = "<BBBBHHHHHH48sBBHHHH54s"

assert struct.calcsize(_HEADER_FMT) == HEADER_SIZE


@dataclass(frozen=True)
class Header:
    marker: int = PCX_MARKER
    version: int = 5
    encoding: int = 1
    bits_per_pixel_per_plane: int = 8
    window_xmin: int = 0
    window_ymin: int = 0
    window_xmax: int = 0
    window_ymax: int = 0
    vertical_dpi: int = 0
    horizontal_dpi: int = 0
    palette16: bytes = bytes(48)
    reserved: bytes = bytes(1)
    num_planes: int = 1
    bytes_per_plane_line: int = 0
    palette_info: int = 1
    horizontal_screen_size: int = 0
    vertical_screen_size: int = 0
    padding: bytes = bytes(54)

    @property
    def width(self) -> int:
        return self.window_xmax - self.window_xmin + 1

    @property
    def height(self) -> int:
        return self.window_ymax - self.window_ymin + 1

    def looks_valid(self) -> bool:
        """Return True if the marker byte is the ZSoft one."""
        return self.marker == PCX_MARKER

    def to_bytes(self) -> bytes:
        """Serialise back to the 128-byte on-disk form."""
        return struct.pack(
            _HEADER_FMT,
            self.marker,
            self.version,
            self.encoding,
            self.bits_per_pixel_per_plane,
            self.window_xmin,
            self.window_ymin,
            self.window_xmax,
            self.window_ymax,
            self.vertical_dpi,
            self.horizontal_dpi,
            self.palette16,
            self.reserved[0],
            self.num_planes,
            self.bytes_per_plane_line,
            self.palette_info,
            self.horizontal_screen_size,
            self.vertical_screen_size,
            self.padding,
        )


def parse_header(raw: bytes | bytearray) -> Header:
    """Parse the first 128 bytes of *raw* into a ``Header``."""
    if len(raw) < HEADER_SIZE:
        raise TruncatedInput(0, HEADER_SIZE, len(raw))
    (marker, version, encoding, bpp,
     xmin, ymin, xmax, ymax, vdpi, hdpi,
     palette16, reserved, planes, bpl, pal_info,
     hscreen, vscreen, padding) = struct.unpack_from(_HEADER_FMT, raw, 0)
    return Header(
        marker=marker,
        version=version,
        encoding=encoding,
        bits_per_pixel_per_plane=bpp,
        window_xmin=xmin,
        window_ymin=ymin,
        window_xmax=xmax,
        window_ymax=ymax,
        vertical_dpi=vdpi,
        horizontal_dpi=hdpi,
        palette16=palette16,
        reserved=bytes([reserved]),
        num_planes=planes,
        bytes_per_plane_line=bpl,
        palette_info=pal_info,
        horizontal_screen_size=hscreen,
        vertical_screen_size=vscreen,
        padding=padding,
    )


def read_header(src: bytes | bytearray | BinaryIO) -> Header:
    """
    Read a ``Header`` from a byte string or a binary file object.

    File objects are advanced by exactly 128 bytes.  Raises
    ``TruncatedInput`` if fewer than 128 bytes are available.
    """
    if isinstance(src, (bytes, bytearray)):
        return parse_header(src)
    raw = src.read(HEADER_SIZE)
    return parse_header(raw)
