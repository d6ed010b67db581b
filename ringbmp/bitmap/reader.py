from __future__ import annotations

from typing import Optional, Tuple

from PIL import Image

from ..errors import BitmapFormatError
from ..raster.types import PixelBuffer, pack_color


def _load_image(path: str) -> Tuple[Image.Image, Optional[str]]:
    """Return a detached copy of the image and the format Pillow detected."""
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy(), img.format
    except OSError as exc:
        raise BitmapFormatError(f"Cannot read bitmap {path}: {exc}") from exc


def load_bitmap(path: str) -> PixelBuffer:
    """Decode a bitmap file into a new PixelBuffer (row 0 at the top)."""
    img, _ = _load_image(path)
    if img.mode != "RGB":
        img = img.convert("RGB")
    width, height = img.size
    data = img.tobytes()
    buffer = PixelBuffer.create(width, height)
    pixels = buffer.pixels
    for index in range(width * height):
        offset = index * 3
        pixels[index] = pack_color(data[offset], data[offset + 1], data[offset + 2])
    return buffer


def verify_bitmap(path: str, width: int, height: int) -> None:
    """Check that ``path`` is a 24-bit bitmap with the expected size."""
    img, fmt = _load_image(path)
    if fmt != "BMP":
        raise BitmapFormatError(f"Expected BMP file, got {fmt}")
    if img.mode != "RGB":
        raise BitmapFormatError(f"Expected RGB bitmap, got mode {img.mode}")
    if img.size != (width, height):
        raise BitmapFormatError(f"Expected {width}x{height} bitmap, got {img.size[0]}x{img.size[1]}")
