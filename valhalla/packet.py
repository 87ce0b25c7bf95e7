"""Little-endian packet building and reading for the game wire protocol."""

from __future__ import annotations

import struct

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _encode(text: str | bytes | bytearray) -> bytes:
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    return text.encode(_ENCODING, _ERRORS)


class Packet(bytearray):
    """A growable byte buffer with typed little-endian writers."""

    @classmethod
    def with_opcode(cls, op: int) -> "Packet":
        """Create a client packet: four header bytes followed by the opcode."""
        packet = cls()
        packet.write_int32(0)
        packet.write_byte(op)
        return packet

    @classmethod
    def internal(cls, op: int) -> "Packet":
        """Create an inter-server packet: two length bytes followed by the opcode."""
        packet = cls()
        packet.write_byte(0)
        packet.write_byte(0)
        packet.write_byte(op)
        return packet

    def __str__(self) -> str:
        return f"[Packet] ({len(self)}) : {self.hex(' ').upper()}"

    @property
    def position(self) -> int:
        """The current write position, which is the length of the packet."""
        return len(self)

    def write_byte(self, value: int) -> None:
        self.append(value & 0xFF)

    def write_int8(self, value: int) -> None:
        self.append(value & 0xFF)

    def write_bool(self, value: bool) -> None:
        self.append(1 if value else 0)

    def write_uint16(self, value: int) -> None:
        self.extend(struct.pack("<H", value & 0xFFFF))

    def write_uint32(self, value: int) -> None:
        self.extend(struct.pack("<I", value & 0xFFFFFFFF))

    def write_uint64(self, value: int) -> None:
        self.extend(struct.pack("<Q", value & 0xFFFFFFFFFFFFFFFF))

    def write_int16(self, value: int) -> None:
        self.write_uint16(value)

    def write_int32(self, value: int) -> None:
        self.write_uint32(value)

    def write_int64(self, value: int) -> None:
        self.write_uint64(value)

    def write_float32(self, value: float) -> None:
        self.extend(struct.pack("<f", value))

    def write_bytes(self, data: bytes | bytearray) -> None:
        self.extend(data)

    def write_string(self, text: str | bytes) -> None:
        """Write a string prefixed by its byte length as an unsigned 16-bit value."""
        raw = _encode(text)
        self.write_uint16(len(raw))
        self.extend(raw)

    def write_padded_string(self, text: str | bytes, length: int) -> None:
        """Write exactly ``length`` bytes: the string truncated or zero padded."""
        raw = _encode(text)
        if len(raw) > length:
            self.extend(raw[:length])
        else:
            self.extend(raw)
            self.extend(bytes(length - len(raw)))

    def set_position(self, position: int) -> None:
        """Truncate to ``position`` or grow with zero bytes; negatives are ignored."""
        if position < 0:
            return
        if position <= len(self):
            del self[position:]
        else:
            self.extend(bytes(position - len(self)))

    def set_int(self, position: int, value: int) -> None:
        """Overwrite four bytes at ``position`` with ``value``, growing if needed."""
        if position < 0:
            return
        end = position + 4
        if end > len(self):
            self.extend(bytes(end - len(self)))
        self[position:end] = struct.pack("<I", value & 0xFFFFFFFF)


class Reader:
    """Sequential reader over a packet; short reads yield zero values."""

    def __init__(self, packet: bytes | bytearray, time: int = 0) -> None:
        self._packet = packet
        self._pos = 0
        self.time = time

    def __str__(self) -> str:
        return str(Packet(self._packet))

    @property
    def position(self) -> int:
        return self._pos

    def _remaining(self) -> int:
        return len(self._packet) - self._pos

    def _unpack(self, fmt: str, default: int | float = 0) -> int | float:
        size = struct.calcsize(fmt)
        if self._remaining() < size:
            return default
        (value,) = struct.unpack_from(fmt, self._packet, self._pos)
        self._pos += size
        return value

    def buffer(self) -> bytes | bytearray:
        """The whole underlying packet."""
        return self._packet

    def rest(self) -> bytes:
        """The bytes not yet read."""
        return bytes(self._packet[self._pos:])

    def skip(self, amount: int) -> None:
        """Advance by ``amount`` bytes if that stays within the packet."""
        if len(self._packet) - (self._pos + amount) >= 0:
            self._pos += amount

    def read_byte(self) -> int:
        return self._unpack("<B")

    def read_int8(self) -> int:
        return self._unpack("<b")

    def read_bool(self) -> bool:
        if self._remaining() > 0:
            return self.read_byte() != 0
        return False

    def read_bytes(self, size: int) -> bytes:
        """Read ``size`` bytes, or return a single zero byte if too few remain."""
        if size < 0:
            raise ValueError(f"negative read size: {size}")
        if self._remaining() >= size:
            data = bytes(self._packet[self._pos:self._pos + size])
            self._pos += size
            return data
        return b"\x00"

    def read_int16(self) -> int:
        return self._unpack("<h")

    def read_int32(self) -> int:
        return self._unpack("<i")

    def read_int64(self) -> int:
        return self._unpack("<q")

    def read_uint16(self) -> int:
        return self._unpack("<H")

    def read_uint32(self) -> int:
        return self._unpack("<I")

    def read_uint64(self) -> int:
        return self._unpack("<Q")

    def read_float32(self) -> float:
        return self._unpack("<f", 0.0)

    def read_string(self, size: int) -> str:
        """Read a string of ``size`` bytes, or an empty string if too few remain."""
        if size < 0:
            raise ValueError(f"negative string size: {size}")
        if self._remaining() >= size:
            raw = bytes(self._packet[self._pos:self._pos + size])
            self._pos += size
            return raw.decode(_ENCODING, _ERRORS)
        return ""