import struct

import pytest

from kon.dbuf import DeviceBuffer

FRAME_CHECK = bytes(
    [0x34, 0x12, 0x67, 0x45, 0x78, 0x56, 0x34, 0x12, 0x21, 0x43, 0x65, 0x87]
)


def test_append():
    frame = bytearray(12)
    buf = DeviceBuffer(frame, 0, 0)

    head = buf.append(4)
    struct.pack_into("<HH", head, 0, 0x1234, 0x4567)

    element = buf.append(8)
    struct.pack_into("<II", element, 0, 0x12345678, 0x87654321)

    assert buf.data_length() == len(frame)
    assert bytes(frame) == FRAME_CHECK


def test_prepend():
    frame = bytearray(12)
    buf = DeviceBuffer(frame, 0, 4)

    head = buf.prepend(4)
    struct.pack_into("<HH", head, 0, 0x1234, 0x4567)

    element = buf.append(8)
    struct.pack_into("<II", element, 0, 0x12345678, 0x87654321)

    assert buf.data_length() == len(frame)
    assert bytes(frame) == FRAME_CHECK


def test_read():
    buf = DeviceBuffer(FRAME_CHECK, 0, 0)
    buf.reset(0, len(FRAME_CHECK))

    head = buf.read(4)
    magic, length = struct.unpack("<HH", head)
    assert magic == 0x1234
    assert length == 0x4567

    element = buf.read(8)
    assert struct.unpack("<II", element) == (0x12345678, 0x87654321)

    assert buf.data_length() == 0


def test_append_beyond_tailroom_raises():
    buf = DeviceBuffer(bytearray(8), 0, 2)
    buf.append(6)
    with pytest.raises(BufferError):
        buf.append(1)
    assert buf.data_length() == 6


def test_prepend_beyond_headroom_raises():
    buf = DeviceBuffer(bytearray(8), 0, 2)
    with pytest.raises(BufferError):
        buf.prepend(3)
    assert buf.data_length() == 0


def test_read_beyond_data_raises():
    buf = DeviceBuffer(bytearray(8), 0, 0)
    buf.append(3)
    with pytest.raises(BufferError):
        buf.read(4)
    assert buf.data_length() == 3


def test_adjust_returns_remaining_data():
    frame = bytearray(b"abcdef")
    buf = DeviceBuffer(frame, 0, 0)
    buf.reset(0, 6)
    assert bytes(buf.adjust(2)) == b"cdef"
    assert buf.data_length() == 4
    with pytest.raises(BufferError):
        buf.adjust(5)


def test_iova_tracks_data_offset():
    buf = DeviceBuffer(bytearray(16), 0x1000, 4)
    assert buf.iova() == 0x1000
    assert buf.data_iova() == 0x1004
    buf.prepend(2)
    assert buf.data_iova() == 0x1002
    buf.append(4)
    buf.read(1)
    assert buf.data_iova() == 0x1003


def test_headroom_is_clamped_to_buffer_size():
    buf = DeviceBuffer(bytearray(4), 0, 10)
    assert buf.data_iova() == 4
    with pytest.raises(BufferError):
        buf.append(1)
    buf.reset(100, 0)
    assert buf.data_iova() == 4


def test_data_reflects_region():
    frame = bytearray(b"xxhelloyy")
    buf = DeviceBuffer(frame, 0, 2)
    buf.append(5)
    assert bytes(buf.data()) == b"hello"


def test_negative_size_rejected():
    buf = DeviceBuffer(bytearray(4))
    with pytest.raises(ValueError):
        buf.append(-1)