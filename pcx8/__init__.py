"""
pcx8 – Python decoder for 8-bit, 256-colour ZSoft PCX images.

Public API re-exports:

  from pcx8.header    import Header, read_header, parse_header
  from pcx8.rle       import decompress
  from pcx8.container import Container, PixelGrid, load_container
  from pcx8.pcx       import decode_8bit_256, read_pcx, is_pcx
  from pcx8.errors    import (PCXError, TruncatedInput, SourceTooShort,
                              TruncatedRun, UnsupportedFormat)
"""

from .errors    import (
    PCXError,
    TruncatedInput,
    SourceTooShort,
    TruncatedRun,
    UnsupportedFormat,
)
from .header    import Header, read_header, parse_header
from .rle       import decompress
from .container import Container, PixelGrid, load_container
from .pcx       import decode_8bit_256, read_pcx, is_pcx

__all__ = [
    "PCXError",
    "TruncatedInput",
    "SourceTooShort",
    "TruncatedRun",
    "UnsupportedFormat",
    "Header",
    "read_header",
    "parse_header",
    "decompress",
    "Container",
    "PixelGrid",
    "load_container",
    "decode_8bit_256",
    "read_pcx",
    "is_pcx",
]
