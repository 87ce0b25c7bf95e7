import pytest

from valhalla.packet import Packet, Reader


def test_with_opcode_layout():
    p = Packet.with_opcode(0x11)
    assert bytes(p) == b"\x00\x00\x00\x00\x11"


def test_internal_layout():
    p = Packet.internal(7)
    assert len(p) == 3
    assert p[:2] == bytes(2)
    assert p[2] == 7


def test_write_string_wire_format():
    p = Packet()
    p.write_string("hi")
    assert bytes(p) == b"\x02\x00hi"


def test_str_format():
    p = Packet(b"\x01\xab")
    assert str(p) == "[Packet] (2) : 01 AB"


@pytest.mark.parametrize(
    "writer,reader,value",
    [
        ("write_byte", "read_byte", 200),
        ("write_int8", "read_int8", -5),
        ("write_int16", "read_int16", -1234),
        ("write_int32", "read_int32", -123456789),
        ("write_int64", "read_int64", -(2**40)),
        ("write_uint16", "read_uint16", 65000),
        ("write_uint32", "read_uint32", 4000000000),
        ("write_uint64", "read_uint64", 2**63 + 5),
    ],
)
def test_integer_round_trip(writer, reader, value):
    p = Packet()
    getattr(p, writer)(value)
    r = Reader(p)
    assert getattr(r, reader)() == value
    assert r.rest() == b""


def test_float_and_bool_round_trip():
    p = Packet()
    p.write_float32(1.5)
    p.write_bool(True)
    p.write_bool(False)
    r = Reader(p)
    assert r.read_float32() == 1.5
    assert r.read_bool() is True
    assert r.read_bool() is False


def test_string_round_trip_with_length_prefix():
    text = "Scania é"
    p = Packet()
    p.write_string(text)
    r = Reader(p)
    size = r.read_int16()
    assert size == len(text.encode("utf-8"))
    assert r.read_string(size) == text


def test_padded_string_pads_and_truncates():
    p = Packet()
    p.write_padded_string("abc", 6)
    assert len(p) == 6
    assert bytes(p).startswith(b"abc")
    assert bytes(p)[3:] == bytes(3)

    q = Packet()
    q.write_padded_string("abcdefgh", 4)
    assert bytes(q) == b"abcd"


def test_short_reads_return_zero_without_advancing():
    r = Reader(b"\x01")
    assert r.read_int16() == 0
    assert r.read_int32() == 0
    assert r.read_float32() == 0.0
    assert r.position == 0
    assert r.read_byte() == 1
    assert r.read_byte() == 0
    assert r.read_bool() is False


def test_read_bytes_insufficient_returns_single_zero():
    r = Reader(b"\x01\x02")
    assert r.read_bytes(5) == b"\x00"
    assert r.read_bytes(2) == b"\x01\x02"


def test_read_string_too_long_is_empty():
    r = Reader(b"ab")
    assert r.read_string(3) == ""
    assert r.read_string(2) == "ab"


def test_negative_sizes_raise():
    r = Reader(b"abc")
    with pytest.raises(ValueError):
        r.read_string(-1)
    with pytest.raises(ValueError):
        r.read_bytes(-2)


def test_skip_within_and_beyond():
    r = Reader(b"\x01\x02\x03")
    r.skip(10)
    assert r.position == 0
    r.skip(2)
    assert r.read_byte() == 3
    assert r.rest() == b""


def test_buffer_and_rest():
    data = b"\x09\x08\x07"
    r = Reader(data, time=42)
    r.read_byte()
    assert r.buffer() == data
    assert r.rest() == data[1:]
    assert r.time == 42


def test_set_position_truncates_and_grows():
    p = Packet(b"\x01\x02\x03\x04")
    p.set_position(2)
    assert bytes(p) == b"\x01\x02"
    p.set_position(5)
    assert len(p) == 5
    assert bytes(p[2:]) == bytes(3)
    p.set_position(-1)
    assert len(p) == 5
    assert p.position == 5


def test_set_int_overwrites_and_grows():
    p = Packet(bytes(8))
    p.set_int(2, -7)
    r = Reader(p)
    r.skip(2)
    assert r.read_int32() == -7
    assert len(p) == 8

    q = Packet(b"\x01")
    q.set_int(1, 123456)
    assert len(q) == 5
    r2 = Reader(q)
    assert r2.read_byte() == 1
    assert r2.read_int32() == 123456