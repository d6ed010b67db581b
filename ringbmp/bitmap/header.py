from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..errors import BitmapFormatError

MAGIC = b"BM"
BITS_PER_PIXEL = 24
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE
COLOR_PLANES = 1
COMPRESSION_NONE = 0

# (field name, byte width, signed) in on-disk order, after the 2-byte magic.
_FIELDS: List[Tuple[str, int, bool]] = [
    ("file_size", 4, False),
    ("reserved", 4, False),
    ("pixel_offset", 4, False),
    ("header_size", 4, False),
    ("width", 4, True),
    ("height", 4, True),
    ("planes", 2, False),
    ("bits_per_pixel", 2, False),
    ("compression", 4, False),
    ("image_size", 4, False),
    ("x_pixels_per_meter", 4, True),
    ("y_pixels_per_meter", 4, True),
    ("colors_used", 4, False),
    ("colors_important", 4, False),
]


def bytes_per_row(width: int, bits: int = BITS_PER_PIXEL) -> int:
    """Return the padded length of one pixel row.

    Rows are rounded up to a whole number of 32-bit words, so 175 pixels at
    24 bits (525 bytes of color) take 528 bytes on disk.
    """
    return ((width * bits + 31) // 32) * 4


@dataclass(frozen=True)
class BitmapHeader:
    """File header plus BITMAPINFOHEADER of an uncompressed 24-bit bitmap."""

    width: int
    height: int
    file_size: int
    image_size: int
    reserved: int = 0
    pixel_offset: int = PIXEL_DATA_OFFSET
    header_size: int = INFO_HEADER_SIZE
    planes: int = COLOR_PLANES
    bits_per_pixel: int = BITS_PER_PIXEL
    compression: int = COMPRESSION_NONE
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0
    colors_used: int = 0
    colors_important: int = 0

    @classmethod
    def for_dimensions(cls, width: int, height: int) -> "BitmapHeader":
        image_size = bytes_per_row(width) * height
        return cls(
            width=width,
            height=height,
            file_size=image_size + PIXEL_DATA_OFFSET,
            image_size=image_size,
        )

    @property
    def row_size(self) -> int:
        return bytes_per_row(self.width, self.bits_per_pixel)

    def to_bytes(self) -> bytes:
        out = bytearray(MAGIC)
        for name, size, signed in _FIELDS:
            out += getattr(self, name).to_bytes(size, "little", signed=signed)
        return bytes(out)

    @classmethod
    def parse(cls, data: bytes) -> "BitmapHeader":
        if len(data) < PIXEL_DATA_OFFSET:
            raise BitmapFormatError(f"Bitmap header needs {PIXEL_DATA_OFFSET} bytes, got {len(data)}")
        if data[:2] != MAGIC:
            raise BitmapFormatError(f"Bad bitmap magic: {bytes(data[:2])!r}")
        values = {}
        offset = len(MAGIC)
        for name, size, signed in _FIELDS:
            values[name] = int.from_bytes(data[offset : offset + size], "little", signed=signed)
            offset += size
        return cls(**values)
