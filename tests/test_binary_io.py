import io
import struct

import pytest

from helixkit import binary_io


def test_write_pins_little_endian_bytes():
    buffer = io.BytesIO()
    binary_io.write(buffer, "<I", 1)
    assert buffer.getvalue() == b"\x01\x00\x00\x00"


@pytest.mark.parametrize("fmt, value", [("=h", -7), ("=Q", 2**63 + 5), ("=d", 2.75), ("?", True)])
def test_value_round_trip(fmt, value):
    buffer = io.BytesIO()
    binary_io.write(buffer, fmt, value)
    buffer.seek(0)
    assert binary_io.read(buffer, fmt) == value


def test_multiple_items_round_trip():
    buffer = io.BytesIO()
    binary_io.write(buffer, "<HbI", (300, -1, 9))
    assert len(buffer.getvalue()) == struct.calcsize("<HbI")
    buffer.seek(0)
    assert binary_io.read(buffer, "<HbI") == (300, -1, 9)


def test_read_short_stream_raises():
    with pytest.raises(binary_io.BinaryIoError):
        binary_io.read(io.BytesIO(b"\x01"), "<I")


def test_short_string_wire_format():
    buffer = io.BytesIO()
    binary_io.write_short_string(buffer, "abc")
    assert buffer.getvalue() == b"\x03abc"


def test_short_string_round_trip():
    buffer = io.BytesIO()
    binary_io.write_short_string(buffer, "hello world")
    binary_io.write_short_string(buffer, "")
    buffer.seek(0)
    assert binary_io.read_short_string(buffer) == "hello world"
    assert binary_io.read_short_string(buffer) == ""


def test_short_string_limit():
    buffer = io.BytesIO()
    binary_io.write_short_string(buffer, "x" * 255)
    buffer.seek(0)
    assert binary_io.read_short_string(buffer) == "x" * 255
    with pytest.raises(ValueError):
        binary_io.write_short_string(io.BytesIO(), "x" * 256)


def test_short_string_from_empty_stream_raises():
    with pytest.raises(binary_io.BinaryIoError):
        binary_io.read_short_string(io.BytesIO())


def test_skip_advances_stream():
    data = bytes(range(256)) * 3
    buffer = io.BytesIO(data)
    binary_io.skip(buffer, 600)
    assert buffer.read() == data[600:]


def test_skip_past_end_raises():
    with pytest.raises(binary_io.BinaryIoError):
        binary_io.skip(io.BytesIO(b"abc"), 4)


def test_write_string_wire_format():
    buffer = io.BytesIO()
    binary_io.write_string(buffer, "hi", "<H")
    assert buffer.getvalue() == b"\x02\x00hi"


def test_string_round_trip_default_count():
    buffer = io.BytesIO()
    text = "a longer string " * 40
    binary_io.write_string(buffer, text)
    assert len(buffer.getvalue()) == struct.calcsize("=I") + len(text)
    buffer.seek(0)
    assert binary_io.read_string(buffer) == text


def test_write_string_limited_by_count_type():
    with pytest.raises(ValueError):
        binary_io.write_string(io.BytesIO(), "x" * 256, "B")


def test_read_string_missing_count_raises():
    with pytest.raises(binary_io.BinaryIoError):
        binary_io.read_string(io.BytesIO(b"\x01"), "<I")


def test_invalid_count_format_rejected():
    with pytest.raises(ValueError):
        binary_io.write_string(io.BytesIO(), "x", "d")