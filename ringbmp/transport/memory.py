from __future__ import annotations

from typing import Optional

from ..errors import BitmapIOError
from .base import ByteSink


class MemorySink(ByteSink):
    def __init__(self) -> None:
        self._pending: Optional[bytearray] = None
        self._data: Optional[bytes] = None

    def open(self) -> None:
        self._pending = bytearray()
        self._data = None

    def write(self, data: bytes) -> None:
        if self._pending is None:
            raise BitmapIOError("Memory sink is not open")
        self._pending += data

    def close(self) -> None:
        if self._pending is None:
            raise BitmapIOError("Memory sink is not open")
        self._data = bytes(self._pending)
        self._pending = None

    def abort(self) -> None:
        self._pending = None
        self._data = None

    def getvalue(self) -> bytes:
        """Return the bytes of the last successfully closed write."""
        if self._data is None:
            raise BitmapIOError("No completed output")
        return self._data
