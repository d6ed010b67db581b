from __future__ import annotations

from typing import Iterator, Optional

from ..raster.types import PixelBuffer
from .header import BitmapHeader

BYTES_PER_PIXEL = 3


def pack_pixel(value: int, out: bytearray, offset: int) -> None:
    """Write a packed color into ``out`` as blue, green, red."""
    out[offset] = (value >> 16) & 0xFF
    out[offset + 1] = (value >> 8) & 0xFF
    out[offset + 2] = value & 0xFF


def encode_header(buffer: PixelBuffer) -> bytes:
    return BitmapHeader.for_dimensions(buffer.width, buffer.height).to_bytes()


def iter_rows(buffer: PixelBuffer, header: Optional[BitmapHeader] = None) -> Iterator[bytes]:
    """Yield padded BGR rows from the bottom image row up to row 0.

    Rows are sized by ``header.row_size``; the header must describe the
    buffer's dimensions.
    """
    if header is None:
        header = BitmapHeader.for_dimensions(buffer.width, buffer.height)
    pixels = buffer.pixels
    width = buffer.width
    if (header.width, header.height) != (width, buffer.height):
        raise ValueError(
            f"Header is {header.width}x{header.height}, buffer is {width}x{buffer.height}"
        )
    row_size = header.row_size
    if row_size < width * BYTES_PER_PIXEL or row_size % 4:
        raise ValueError(f"Row size of {row_size} bytes cannot hold {width} pixels")
    line = bytearray(row_size)
    for y in range(buffer.height - 1, -1, -1):
        start = y * width
        for x in range(width):
            pack_pixel(pixels[start + x], line, x * BYTES_PER_PIXEL)
        # Padding bytes past width*3 are never written, so they stay zero.
        yield bytes(line)


def iter_chunks(buffer: PixelBuffer) -> Iterator[bytes]:
    """Yield the header, then every pixel row, in file order."""
    header = BitmapHeader.for_dimensions(buffer.width, buffer.height)
    yield header.to_bytes()
    yield from iter_rows(buffer, header)


def encode(buffer: PixelBuffer) -> bytes:
    """Return the complete bitmap file for ``buffer``."""
    return b"".join(iter_chunks(buffer))
