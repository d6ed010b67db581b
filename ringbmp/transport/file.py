from __future__ import annotations

import logging
import os
import tempfile
from typing import BinaryIO, Optional

from ..errors import BitmapIOError
from .base import ByteSink

logger = logging.getLogger(__name__)


class FileSink(ByteSink):
    """Write to a temporary file and move it onto ``path`` on close."""

    def __init__(self, path: str) -> None:
        self._path = path
        self._handle: Optional[BinaryIO] = None
        self._temp_path: Optional[str] = None
        self._written = 0

    @property
    def path(self) -> str:
        return self._path

    @property
    def bytes_written(self) -> int:
        return self._written

    def open(self) -> None:
        if self._handle is not None:
            raise BitmapIOError(f"{self._path} is already open")
        directory = os.path.dirname(os.path.abspath(self._path))
        prefix = "." + os.path.basename(self._path) + "."
        try:
            fd, temp_path = tempfile.mkstemp(prefix=prefix, suffix=".part", dir=directory)
        except OSError as exc:
            raise BitmapIOError(f"Open {self._path} failed: {exc}") from exc
        try:
            handle = os.fdopen(fd, "wb")
        except OSError as exc:
            os.close(fd)
            _remove_quietly(temp_path)
            raise BitmapIOError(f"Open {self._path} failed: {exc}") from exc
        self._temp_path = temp_path
        self._handle = handle
        self._written = 0
        logger.debug("Writing %s via %s", self._path, temp_path)

    def write(self, data: bytes) -> None:
        if self._handle is None:
            raise BitmapIOError(f"{self._path} is not open")
        try:
            self._handle.write(data)
        except OSError as exc:
            self.abort()
            raise BitmapIOError(f"Write to {self._path} failed: {exc}") from exc
        self._written += len(data)

    def close(self) -> None:
        if self._handle is None:
            raise BitmapIOError(f"{self._path} is not open")
        handle = self._handle
        temp_path = self._temp_path
        try:
            handle.close()
            os.replace(temp_path, self._path)
        except OSError as exc:
            self.abort()
            raise BitmapIOError(f"Close {self._path} failed: {exc}") from exc
        self._handle = None
        self._temp_path = None
        logger.debug("Wrote %d bytes to %s", self._written, self._path)

    def abort(self) -> None:
        """Discard everything written so far. Safe to call more than once."""
        handle, self._handle = self._handle, None
        temp_path, self._temp_path = self._temp_path, None
        if handle is not None:
            try:
                handle.close()
            except OSError:
                logger.debug("Ignoring close error while aborting %s", self._path)
        if temp_path:
            _remove_quietly(temp_path)


def _remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        return
    except OSError as exc:
        logger.warning("Could not remove partial file %s: %s", path, exc)
        return
    logger.debug("Removed partial file %s", path)
