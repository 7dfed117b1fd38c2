"""
errors.py – Exceptions raised while decoding PCX files.

Every failure derives from ``PCXError``, which is a ``ValueError`` so code
that already guards the other ``read_*`` helpers with ``except ValueError``
keeps working.  I/O errors from the underlying source are not wrapped.
"""

from __future__ import annotations


class PCXError(ValueError):
    """Base class for malformed or unsupported PCX input."""


class TruncatedInput(PCXError):
    """Fewer bytes were available than a fixed-size block requires."""

    def __init__(self, offset: int, expected: int, actual: int) -> None:
        self.offset = offset
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"truncated input at offset {offset}: "
            f"expected {expected} bytes, got {actual}"
        )


class SourceTooShort(PCXError):
    """The whole source cannot hold a header, separator and palette."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"source too short: need at least {expected} bytes, got {actual}"
        )


class TruncatedRun(PCXError):
    """A run marker was the last byte of the compressed data."""

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(
            f"truncated run: marker at offset {offset} has no data byte"
        )


class UnsupportedFormat(PCXError):
    """The header describes a PCX variant other than 8-bit, 1-plane."""

    def __init__(self, field: str, value: int, expected: int) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(
            f"unsupported format: header says {field}={value}, expecting {expected}"
        )
