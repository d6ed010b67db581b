from .bitmap import BitmapHeader, bytes_per_row, encode, load_bitmap, verify_bitmap
from .errors import AllocationError, BitmapFormatError, BitmapIOError, InvalidDimensions, RingBitmapError
from .raster import Color, PixelBuffer, release_buffer
from .rendering import (
    RenderSettings,
    draw_circle,
    draw_rings,
    offset_color,
    render_concentric_circles,
    render_rings,
)
from .transport import ByteSink, FileSink, MemorySink

__all__ = [
    "AllocationError",
    "BitmapFormatError",
    "BitmapHeader",
    "BitmapIOError",
    "ByteSink",
    "Color",
    "FileSink",
    "InvalidDimensions",
    "MemorySink",
    "PixelBuffer",
    "RenderSettings",
    "RingBitmapError",
    "bytes_per_row",
    "draw_circle",
    "draw_rings",
    "encode",
    "load_bitmap",
    "offset_color",
    "release_buffer",
    "render_concentric_circles",
    "render_rings",
    "verify_bitmap",
]
