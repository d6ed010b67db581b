from __future__ import annotations


class ByteSink:
    """Destination for an encoded bitmap.

    Used as a context manager, the sink is closed when the block succeeds and
    aborted when it raises, so a failed render never leaves partial output.
    """

    def open(self) -> None:
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError

    def abort(self) -> None:
        raise NotImplementedError

    def __enter__(self) -> "ByteSink":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        else:
            self.abort()
