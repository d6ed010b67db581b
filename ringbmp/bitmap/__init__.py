from .encoding import encode, encode_header, iter_chunks, iter_rows, pack_pixel
from .header import (
    BITS_PER_PIXEL,
    INFO_HEADER_SIZE,
    MAGIC,
    PIXEL_DATA_OFFSET,
    BitmapHeader,
    bytes_per_row,
)
from .reader import load_bitmap, verify_bitmap

__all__ = [
    "BITS_PER_PIXEL",
    "BitmapHeader",
    "INFO_HEADER_SIZE",
    "MAGIC",
    "PIXEL_DATA_OFFSET",
    "bytes_per_row",
    "encode",
    "encode_header",
    "iter_chunks",
    "iter_rows",
    "load_bitmap",
    "pack_pixel",
    "verify_bitmap",
]
