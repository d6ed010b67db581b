from __future__ import annotations


class RingBitmapError(Exception):
    """Base class for every error raised by ringbmp."""


class InvalidDimensions(RingBitmapError, ValueError):
    pass


class AllocationError(RingBitmapError, MemoryError):
    pass


class BitmapIOError(RingBitmapError, OSError):
    pass


class BitmapFormatError(RingBitmapError, ValueError):
    pass


__all__ = [
    "AllocationError",
    "BitmapFormatError",
    "BitmapIOError",
    "InvalidDimensions",
    "RingBitmapError",
]
