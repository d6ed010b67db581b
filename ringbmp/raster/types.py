from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..errors import AllocationError, InvalidDimensions

_CHANNEL_MASK = 0xFF


@dataclass(frozen=True)
class Color:
    """24-bit RGB color, one 8-bit value per channel."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        check_channels(self.red, self.green, self.blue)

    def pack(self) -> int:
        """Pack into a single int as red | green << 8 | blue << 16."""
        return pack_color(self.red, self.green, self.blue)

    @classmethod
    def unpack(cls, value: int) -> "Color":
        return cls(value & _CHANNEL_MASK, (value >> 8) & _CHANNEL_MASK, (value >> 16) & _CHANNEL_MASK)


def check_channels(red: int, green: int, blue: int) -> None:
    for name, value in (("red", red), ("green", green), ("blue", blue)):
        if not 0 <= value <= _CHANNEL_MASK:
            raise ValueError(f"{name} must be in 0..255, got {value}")


def pack_color(red: int, green: int, blue: int) -> int:
    """Pack three 0..255 channels as red | green << 8 | blue << 16."""
    check_channels(red, green, blue)
    return red | (green << 8) | (blue << 16)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


class PixelBuffer:
    """Row-major buffer of packed colors addressed by (x, y).

    The pixel at (x, y) lives at ``pixels[x + y * width]``. Row 0 is the top
    row of the image.
    """

    def __init__(self, width: int, height: int, pixels: List[int]) -> None:
        if len(pixels) != width * height:
            raise ValueError("Pixels length must equal width * height")
        self._width = width
        self._height = height
        self._pixels: Optional[List[int]] = pixels

    @classmethod
    def create(cls, width: int, height: int) -> "PixelBuffer":
        validate_dimensions(width, height)
        try:
            pixels = [0] * (width * height)
        except (MemoryError, OverflowError) as exc:
            raise AllocationError(f"Failed to allocate {width}x{height} pixel buffer") from exc
        return cls(width, height, pixels)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> List[int]:
        if self._pixels is None:
            raise ValueError("Pixel buffer has been released")
        return self._pixels

    @property
    def released(self) -> bool:
        return self._pixels is None

    def index(self, x: int, y: int) -> int:
        return x + y * self._width

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set_pixel(self, x: int, y: int, red: int, green: int, blue: int) -> None:
        pixels = self.pixels
        self._check_bounds(x, y)
        pixels[x + y * self._width] = pack_color(red, green, blue)

    def set_color(self, x: int, y: int, color: Color) -> None:
        self.set_pixel(x, y, color.red, color.green, color.blue)

    def get_pixel(self, x: int, y: int) -> Color:
        pixels = self.pixels
        self._check_bounds(x, y)
        return Color.unpack(pixels[x + y * self._width])

    def release(self) -> None:
        """Drop the pixel storage. Safe to call more than once."""
        self._pixels = None

    def __enter__(self) -> "PixelBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        state = " released" if self.released else ""
        return f"<PixelBuffer {self._width}x{self._height}{state}>"

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} buffer")


def validate_dimensions(width: int, height: int) -> None:
    for name, value in (("Width", width), ("Height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidDimensions(f"{name} must be greater than zero")


def release_buffer(buffer: Optional[PixelBuffer]) -> None:
    if buffer is None:
        return
    buffer.release()
