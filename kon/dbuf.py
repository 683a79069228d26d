"""A view over a fixed device buffer with headroom, data and tailroom."""

from __future__ import annotations


class DeviceBuffer:
    """Manage a data region inside a fixed buffer.

    The buffer is split into headroom, the data region and tailroom.
    ``append`` grows the data region into the tailroom, ``prepend`` grows
    it into the headroom, and ``read`` and ``adjust`` consume it from the
    front. Every region handed out is a ``memoryview`` into the buffer.
    """

    def __init__(self, buffer, iova: int = 0, headroom: int = 0) -> None:
        view = memoryview(buffer)
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
        self._buf = view
        self._iova = iova
        self._data_len = 0
        self._data_off = min(headroom, len(view))

    def reset(self, headroom: int, data_length: int) -> None:
        """Place the data region after ``headroom`` bytes with the given length."""
        self._data_len = data_length
        self._data_off = min(headroom, len(self._buf))

    @staticmethod
    def _check_size(size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")

    def append(self, size: int) -> memoryview:
        """Grow the data region by ``size`` bytes at its end and return them."""
        self._check_size(size)
        tailroom = len(self._buf) - self._data_off - self._data_len
        if size > tailroom:
            raise BufferError(f"not enough tailroom for {size} bytes ({tailroom} left)")
        tail = self._data_off + self._data_len
        self._data_len += size
        return self._buf[tail:tail + size]

    def prepend(self, size: int) -> memoryview:
        """Grow the data region by ``size`` bytes at its front and return them."""
        self._check_size(size)
        if size > self._data_off:
            raise BufferError(
                f"not enough headroom for {size} bytes ({self._data_off} left)"
            )
        self._data_off -= size
        self._data_len += size
        return self._buf[self._data_off:self._data_off + size]

    def adjust(self, size: int) -> memoryview:
        """Drop ``size`` bytes from the front of the data and return what remains."""
        self._check_size(size)
        if size > self._data_len:
            raise BufferError(f"cannot drop {size} bytes from {self._data_len}")
        self._data_len -= size
        self._data_off += size
        return self.data()

    def read(self, size: int) -> memoryview:
        """Consume ``size`` bytes from the front of the data and return them."""
        self._check_size(size)
        if size > self._data_len:
            raise BufferError(f"cannot read {size} bytes from {self._data_len}")
        head = self._data_off
        self._data_off += size
        self._data_len -= size
        return self._buf[head:head + size]

    def data(self) -> memoryview:
        """Return the current data region."""
        return self._buf[self._data_off:self._data_off + self._data_len]

    def data_length(self) -> int:
        """Return the length of the data region."""
        return self._data_len

    def iova(self) -> int:
        """Return the device address of the start of the buffer."""
        return self._iova

    def data_iova(self) -> int:
        """Return the device address of the start of the data region."""
        return self._iova + self._data_off