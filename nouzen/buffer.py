"""A fixed-capacity byte buffer."""

from __future__ import annotations


class BoundedBuffer:
    """Accumulates bytes up to a fixed capacity.

    One byte of the capacity is reserved as a terminator, so at most
    ``size - 1`` bytes of data fit.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("buffer size must be at least 1")
        self.size = size
        self._data = bytearray()

    def append(self, data: bytes) -> None:
        """Append data, raising OverflowError if it does not fit."""
        if len(self._data) + len(data) > self.size - 1:
            raise OverflowError("buffer capacity exceeded")
        self._data += data

    def getvalue(self) -> bytes:
        """Return the bytes stored so far."""
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)