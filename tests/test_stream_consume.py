import pytest

from peekstream.binary.errors import InsufficientData
from peekstream.binary.stream import Stream
from peekstream.models.settings import StreamSettings


def even(b: int) -> bool:
    return b % 2 == 0


def test_skip():
    s = Stream.from_bytes(b"")
    s.skip(0)
    assert s.read_all() == b""

    s = Stream.from_bytes(b"")
    with pytest.raises(InsufficientData):
        s.skip(1)
    assert s.read_all() == b""

    s = Stream.from_bytes(b"\x01\x02\x03")
    s.skip(0)
    assert s.read_all() == b"\x01\x02\x03"

    s = Stream.from_bytes(b"\x01\x02\x03")
    s.skip(1)
    assert s.read_all() == b"\x02\x03"

    s = Stream.from_bytes(b"\x01\x02\x03")
    s.skip(3)
    assert s.read_all() == b""

    # failed skip consumes nothing
    s = Stream.from_bytes(b"\x01\x02\x03")
    with pytest.raises(InsufficientData):
        s.skip(6)
    assert s.read_all() == b"\x01\x02\x03"


def test_skip_bytes():
    s = Stream.from_bytes(b"")
    assert s.skip_bytes(b"")
    assert s.read_all() == b""

    s = Stream.from_bytes(b"\x01\x02\x03")
    assert s.skip_bytes(b"")
    assert s.read_all() == b"\x01\x02\x03"

    s = Stream.from_bytes(b"\x01\x02\x03")
    assert s.skip_bytes(b"\x01\x02")
    assert s.read_all() == b"\x03"

    s = Stream.from_bytes(b"\x01\x02\x03")
    assert s.skip_bytes(b"\x01\x02\x03")
    assert s.read_all() == b""

    s = Stream.from_bytes(b"\x01\x02\x03")
    assert not s.skip_bytes(b"\x04\x05")
    assert s.read_all() == b"\x01\x02\x03"

    s = Stream.from_bytes(b"\x01\x02\x03")
    with pytest.raises(InsufficientData):
        s.skip_bytes(b"\x01\x02\x03\x04")
    assert s.read_all() == b"\x01\x02\x03"


def test_skip_byte():
    s = Stream.from_bytes(b"")
    with pytest.raises(InsufficientData):
        s.skip_byte(1)
    assert s.read_all() == b""

    s = Stream.from_bytes(b"\x01\x02\x03")
    assert s.skip_byte(1)
    assert s.read_all() == b"\x02\x03"

    s = Stream.from_bytes(b"\x01\x02\x03")
    assert not s.skip_byte(4)
    assert s.read_all() == b"\x01\x02\x03"


def test_read():
    s = Stream.from_bytes(b"")
    assert s.read(0) == b""
    assert s.read_all() == b""

    s = Stream.from_bytes(b"")
    with pytest.raises(InsufficientData):
        s.read(3)
    assert s.read_all() == b""

    s = Stream.from_bytes(b"\x01\x02\x03")
    assert s.read(2) == b"\x01\x02"
    assert s.read_all() == b"\x03"

    s = Stream.from_bytes(b"\x01\x02\x03")
    assert s.read(3) == b"\x01\x02\x03"
    assert s.read_all() == b""

    s = Stream.from_bytes(b"\x01\x02")
    with pytest.raises(InsufficientData):
        s.read(3)
    assert s.read_all() == b"\x01\x02"


def test_read_matches_prior_peek():
    s = Stream.from_bytes(b"abcdef")
    expected = s.peek(4)
    assert s.read(4) == expected
    assert s.read_all() == b"ef"


def test_skip_then_read_equals_longer_read():
    a = Stream.from_bytes(b"0123456789")
    a.skip(3)
    b = Stream.from_bytes(b"0123456789")
    assert a.read(4) == b.read(7)[3:]
    assert a.read_all() == b.read_all()


def test_read_while():
    s = Stream.from_bytes(b"")
    assert s.read_while(even) == b""
    assert s.read_all() == b""

    s = Stream.from_bytes(b"\x02\x04\x05")
    assert s.read_while(even) == b"\x02\x04"
    assert s.read_all() == b"\x05"

    s = Stream.from_bytes(b"\x02\x04\x08")
    assert s.read_while(even) == b"\x02\x04\x08"
    assert s.read_all() == b""

    s = Stream.from_bytes(b"\x01\x02")
    assert s.read_while(even) == b""
    assert s.read_all() == b"\x01\x02"


def test_read_while_spans_scan_blocks():
    data = bytes(range(0, 200, 2)) + b"\x01\x02"
    s = Stream.from_bytes(data, StreamSettings(scan_block_size=3))
    assert s.read_while(even) == data[:-2]
    assert s.read_all() == b"\x01\x02"


def test_skip_while():
    s = Stream.from_bytes(b"   \tkey")
    s.skip_while(lambda b: b in b" \t")
    assert s.read_all() == b"key"


def test_read_all():
    s = Stream.from_bytes(b"\x01\x02\x03")
    assert s.read_all() == b"\x01\x02\x03"
    assert s.is_empty()
    assert s.read_all() == b""


def test_read_all_larger_than_chunk():
    data = bytes(range(256)) * 40
    s = Stream.from_bytes(data, StreamSettings(chunk_size=100))
    s.peek(10)
    assert s.read_all() == data


def test_tell_tracks_consumption_only():
    s = Stream.from_bytes(b"abcdef")
    s.peek(5)
    assert s.tell() == 0
    s.read(2)
    s.skip(1)
    assert s.tell() == 3
    s.skip_bytes(b"x")
    assert s.tell() == 3
    s.read_all()
    assert s.tell() == 6
