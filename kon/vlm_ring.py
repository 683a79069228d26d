"""A single-producer single-consumer ring of variable-length messages.

Each message is an 8-byte head (type and length, both unsigned 32-bit)
followed by its payload, the whole padded to a multiple of 8 bytes. When a
message does not fit before the end of the buffer, a turn-around head is
left behind and the message is placed at the start of the buffer.

One thread may push while another pops. Writes to the buffer happen before
the index that publishes them is stored, and each index has one writer.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

TURN_AROUND_MESSAGE_TYPE = 0xFFFFFFFF

_HEAD = struct.Struct("=II")
_U32 = struct.Struct("=I")
HEAD_SIZE = _HEAD.size


def _message_align(length: int) -> int:
    return (length + 7) & ~7


class MessageHead:
    """The head of a message, read and written in place in the ring buffer."""

    __slots__ = ("_view", "offset")

    def __init__(self, view: memoryview, offset: int) -> None:
        self._view = view
        self.offset = offset

    @property
    def type(self) -> int:
        """The message type."""
        return _U32.unpack_from(self._view, self.offset)[0]

    @type.setter
    def type(self, value: int) -> None:
        _U32.pack_into(self._view, self.offset, value)

    @property
    def length(self) -> int:
        """The payload length in bytes."""
        return _U32.unpack_from(self._view, self.offset + 4)[0]

    @length.setter
    def length(self, value: int) -> None:
        _U32.pack_into(self._view, self.offset + 4, value)

    def __repr__(self) -> str:
        return f"MessageHead(type={self.type:#x}, length={self.length}, offset={self.offset})"


@dataclass
class ZeroCopyScope:
    """A message slot in the ring: its head and a view of its payload."""

    head: MessageHead
    data: memoryview


class VlmRing:
    """Ring buffer of variable-length messages for one producer and one consumer."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        self._buffer = bytearray(_message_align(size + HEAD_SIZE))
        self._view = memoryview(self._buffer)
        self._size = size
        self._windex = 0
        self._rindex = 0

    def _scope_at(self, offset: int, length: int) -> ZeroCopyScope:
        start = offset + HEAD_SIZE
        return ZeroCopyScope(
            head=MessageHead(self._view, offset),
            data=self._view[start:start + length],
        )

    def _offset_for(self, msg_length: int) -> int | None:
        wi = self._windex
        ri = self._rindex
        if wi >= ri:
            if self._size - wi >= msg_length:
                return wi
            # Strictly greater: equal indices would mean an empty ring.
            if ri > msg_length:
                _U32.pack_into(self._view, wi, TURN_AROUND_MESSAGE_TYPE)
                return 0
            return None
        if ri - wi > msg_length:
            return wi
        return None

    def push_begin(self, length: int) -> ZeroCopyScope | None:
        """Reserve room for a payload of ``length`` bytes.

        Returns the slot to fill, or None when the ring has no room. The
        slot's head length is preset to ``length``; the message becomes
        visible to the consumer only after :meth:`push_end`.
        """
        if not 0 <= length <= 0xFFFFFFFF:
            raise ValueError(f"message length out of range: {length}")
        offset = self._offset_for(_message_align(HEAD_SIZE + length))
        if offset is None:
            return None
        scope = self._scope_at(offset, length)
        scope.head.length = length
        return scope

    def push_end(self, scope: ZeroCopyScope) -> None:
        """Publish the message in ``scope`` to the consumer."""
        head = scope.head
        self._windex = head.offset + _message_align(HEAD_SIZE + head.length)

    def push(self, type: int, data: bytes = b"") -> bool:
        """Copy a message into the ring; return False when there is no room."""
        payload = memoryview(data).cast("B")
        scope = self.push_begin(len(payload))
        if scope is None:
            return False
        scope.head.type = type
        scope.data[:] = payload
        self.push_end(scope)
        return True

    def pop_begin(self) -> ZeroCopyScope | None:
        """Return the oldest message without consuming it, or None when empty."""
        ri = self._rindex
        if self._windex == ri:
            return None
        if _U32.unpack_from(self._view, ri)[0] == TURN_AROUND_MESSAGE_TYPE:
            ri = 0
        length = _U32.unpack_from(self._view, ri + 4)[0]
        return self._scope_at(ri, length)

    def pop_end(self, scope: ZeroCopyScope) -> None:
        """Consume the message in ``scope``, releasing its room to the producer."""
        head = scope.head
        self._rindex = head.offset + _message_align(HEAD_SIZE + head.length)

    def pop(self, max_length: int | None = None) -> tuple[int, bytes] | None:
        """Consume the oldest message and return its type and a copy of its payload.

        Returns None when the ring is empty. Raises ``BufferError`` if the
        payload is longer than ``max_length``; the message is then kept.
        """
        scope = self.pop_begin()
        if scope is None:
            return None
        length = scope.head.length
        if max_length is not None and length > max_length:
            raise BufferError(f"message of {length} bytes exceeds {max_length}")
        result = (scope.head.type, bytes(scope.data))
        self.pop_end(scope)
        return result

    def empty(self) -> bool:
        """Tell whether there is no message to pop."""
        return self._windex == self._rindex

    def capacity(self) -> int:
        """Return the usable size of the ring in bytes."""
        return self._size

    def write_index(self) -> int:
        """Return the offset where the next message will be written."""
        return self._windex

    def read_index(self) -> int:
        """Return the offset of the next message to read."""
        return self._rindex