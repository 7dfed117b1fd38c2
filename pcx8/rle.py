"""
rle.py – PCX run-length decompression.

Byte classes
------------
  0xc0..0xff  run marker: count = b & 0x3f, the next byte is repeated
              `count` times (a count of 0 still consumes the data byte)
  0x00..0xbf  literal: emitted once

The stream carries no length prefix, so the output size is only known
after the whole input has been consumed.
"""

from __future__ import annotations

from .errors import TruncatedRun

RUN_MARKER = 0xC0
RUN_COUNT_MASK = 0x3F


def decompress(data: bytes | bytearray) -> bytes:
    """Expand PCX RLE *data* into raw index bytes."""
    out = bytearray()
    sp = 0
    slen = len(data)
    while sp < slen:
        b = data[sp]
        if b >= RUN_MARKER:
            if sp + 1 >= slen:
                raise TruncatedRun(sp)
            count = b & RUN_COUNT_MASK
            out.extend(bytes((data[sp + 1],)) * count)
            sp += 2
        else:
            out.append(b)
            sp += 1
    return bytes(out)
