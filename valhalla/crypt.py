"""Stream cipher used on client connections: shuffled IV, byte mangling and AES-OFB."""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

HEADER_SIZE = 4
_BLOCK_SIZE = 1460

_IV_SHIFT_KEY = bytes((
    0xEC, 0x3F, 0x77, 0xA4, 0x45, 0xD0, 0x71, 0xBF, 0xB7, 0x98, 0x20, 0xFC, 0x4B, 0xE9, 0xB3, 0xE1,
    0x5C, 0x22, 0xF7, 0x0C, 0x44, 0x1B, 0x81, 0xBD, 0x63, 0x8D, 0xD4, 0xC3, 0xF2, 0x10, 0x19, 0xE0,
    0xFB, 0xA1, 0x6E, 0x66, 0xEA, 0xAE, 0xD6, 0xCE, 0x06, 0x18, 0x4E, 0xEB, 0x78, 0x95, 0xDB, 0xBA,
    0xB6, 0x42, 0x7A, 0x2A, 0x83, 0x0B, 0x54, 0x67, 0x6D, 0xE8, 0x65, 0xE7, 0x2F, 0x07, 0xF3, 0xAA,
    0x27, 0x7B, 0x85, 0xB0, 0x26, 0xFD, 0x8B, 0xA9, 0xFA, 0xBE, 0xA8, 0xD7, 0xCB, 0xCC, 0x92, 0xDA,
    0xF9, 0x93, 0x60, 0x2D, 0xDD, 0xD2, 0xA2, 0x9B, 0x39, 0x5F, 0x82, 0x21, 0x4C, 0x69, 0xF8, 0x31,
    0x87, 0xEE, 0x8E, 0xAD, 0x8C, 0x6A, 0xBC, 0xB5, 0x6B, 0x59, 0x13, 0xF1, 0x04, 0x00, 0xF6, 0x5A,
    0x35, 0x79, 0x48, 0x8F, 0x15, 0xCD, 0x97, 0x57, 0x12, 0x3E, 0x37, 0xFF, 0x9D, 0x4F, 0x51, 0xF5,
    0xA3, 0x70, 0xBB, 0x14, 0x75, 0xC2, 0xB8, 0x72, 0xC0, 0xED, 0x7D, 0x68, 0xC9, 0x2E, 0x0D, 0x62,
    0x46, 0x17, 0x11, 0x4D, 0x6C, 0xC4, 0x7E, 0x53, 0xC1, 0x25, 0xC7, 0x9A, 0x1C, 0x88, 0x58, 0x2C,
    0x89, 0xDC, 0x02, 0x64, 0x40, 0x01, 0x5D, 0x38, 0xA5, 0xE2, 0xAF, 0x55, 0xD5, 0xEF, 0x1A, 0x7C,
    0xA7, 0x5B, 0xA6, 0x6F, 0x86, 0x9F, 0x73, 0xE6, 0x0A, 0xDE, 0x2B, 0x99, 0x4A, 0x47, 0x9C, 0xDF,
    0x09, 0x76, 0x9E, 0x30, 0x0E, 0xE4, 0xB2, 0x94, 0xA0, 0x3B, 0x34, 0x1D, 0x28, 0x0F, 0x36, 0xE3,
    0x23, 0xB4, 0x03, 0xD8, 0x90, 0xC8, 0x3C, 0xFE, 0x5E, 0x32, 0x24, 0x50, 0x1F, 0x3A, 0x43, 0x8A,
    0x96, 0x41, 0x74, 0xAC, 0x52, 0x33, 0xF0, 0xD9, 0x29, 0x80, 0xB1, 0x16, 0xD3, 0xAB, 0x91, 0xB9,
    0x84, 0x7F, 0x61, 0x1E, 0xCF, 0xC5, 0xD1, 0x56, 0x3D, 0xCA, 0xF4, 0x05, 0xC6, 0xE5, 0x08, 0x49,
))

_AES_KEY = bytes((
    0x13, 0x00, 0x00, 0x00,
    0x08, 0x00, 0x00, 0x00,
    0x06, 0x00, 0x00, 0x00,
    0xB4, 0x00, 0x00, 0x00,
    0x1B, 0x00, 0x00, 0x00,
    0x0F, 0x00, 0x00, 0x00,
    0x33, 0x00, 0x00, 0x00,
    0x52, 0x00, 0x00, 0x00,
))


def _rol(value: int, count: int) -> int:
    count %= 8
    return ((value << count) | (value >> (8 - count))) & 0xFF


def _ror(value: int, count: int) -> int:
    count %= 8
    return ((value >> count) | (value << (8 - count))) & 0xFF


def packet_length(header: bytes | bytearray) -> int:
    """Body length encoded in a four-byte encrypted header."""
    if len(header) < HEADER_SIZE:
        raise ValueError("header must be at least four bytes")
    first = header[0] | (header[1] << 8)
    second = header[2] | (header[3] << 8)
    return first ^ second


def maple_encrypt(data: bytes | bytearray) -> bytes:
    """Apply the byte-mangling transform used for outgoing bodies."""
    buf = bytearray(data)
    size = len(buf)
    for _ in range(3):
        a = 0
        for j in range(size, 0, -1):
            idx = size - j
            c = _rol(buf[idx], 3)
            c = (c + j) & 0xFF
            c ^= a
            a = c
            c = _ror(a, j)
            c ^= 0xFF
            buf[idx] = (c + 0x48) & 0xFF

        a = 0
        for j in range(size, 0, -1):
            c = _rol(buf[j - 1], 4)
            c = (c + j) & 0xFF
            c ^= a
            a = c
            c ^= 0x13
            buf[j - 1] = _ror(c, 3)
    return bytes(buf)


def maple_decrypt(data: bytes | bytearray) -> bytes:
    """Reverse :func:`maple_encrypt`."""
    buf = bytearray(data)
    size = len(buf)
    for _ in range(3):
        a = b = 0
        for j in range(size, 0, -1):
            c = _rol(buf[j - 1], 3)
            c ^= 0x13
            a = c
            c ^= b
            c = (c - j) & 0xFF
            buf[j - 1] = _ror(c, 4)
            b = a

        a = b = 0
        for j in range(size, 0, -1):
            idx = size - j
            c = (buf[idx] - 0x48) & 0xFF
            c ^= 0xFF
            c = _rol(c, j)
            a = c
            c ^= b
            c = (c - j) & 0xFF
            buf[idx] = _ror(c, 3)
            b = a
    return bytes(buf)


class MapleCipher:
    """One direction of a connection's cipher state."""

    def __init__(self, key: bytes | bytearray, maple_version: int) -> None:
        if len(key) != 4:
            raise ValueError("cipher key must be four bytes")
        self._key = bytearray(bytes(key) * 4)
        self.maple_version = maple_version

    def iv(self) -> bytes:
        """The current 16-byte initialisation vector."""
        return bytes(self._key)

    def encrypt(self, data: bytes | bytearray, maple: bool = True, aes: bool = False) -> bytes:
        """Return ``data`` with its header filled in and body encrypted.

        The first four bytes of ``data`` are header space and are overwritten.
        """
        if len(data) < HEADER_SIZE:
            raise ValueError("packet too short to hold a header")
        out = bytearray(data)
        self._write_header(out)
        body = bytes(out[HEADER_SIZE:])
        if maple:
            body = maple_encrypt(body)
        if aes:
            body = self._aes_crypt(body)
        out[HEADER_SIZE:] = body
        self.shuffle()
        return bytes(out)

    def decrypt(self, data: bytes | bytearray, maple: bool = True, aes: bool = False) -> bytes:
        """Return the decrypted body ``data`` (without header)."""
        body = bytes(data)
        if aes:
            body = self._aes_crypt(body)
        if maple:
            body = maple_decrypt(body)
        self.shuffle()
        return body

    def shuffle(self) -> None:
        """Advance the IV to its next value."""
        new_iv = [0xF2, 0x53, 0x50, 0xC6]
        for value in self._key[:4]:
            shift_val = _IV_SHIFT_KEY[value]
            new_iv[0] = (new_iv[0] + _IV_SHIFT_KEY[new_iv[1]] - value) & 0xFF
            new_iv[1] = (new_iv[1] - (new_iv[2] ^ shift_val)) & 0xFF
            new_iv[2] ^= (_IV_SHIFT_KEY[new_iv[3]] + value) & 0xFF
            new_iv[3] = (new_iv[3] - ((new_iv[0] - shift_val) & 0xFF)) & 0xFF

            combined = int.from_bytes(bytes(new_iv), "little")
            rotated = ((combined >> 29) | (combined << 3)) & 0xFFFFFFFF
            new_iv = list(rotated.to_bytes(4, "little"))
        self._key[:] = bytes(new_iv) * 4

    def _write_header(self, out: bytearray) -> None:
        length = len(out) - HEADER_SIZE
        a = (self._key[3] << 8) | self._key[2]
        a ^= -(self.maple_version + 1)
        b = a ^ length
        out[0] = a & 0xFF
        out[1] = ((a - out[0]) >> 8) & 0xFF
        out[2] = b & 0xFF
        out[3] = ((b - out[2]) >> 8) & 0xFF

    def _aes_crypt(self, data: bytes) -> bytes:
        iv = bytes(self._key)
        chunks = []
        pos = 0
        first = True
        while pos < len(data):
            step = _BLOCK_SIZE - (4 if first else 0)
            chunk = data[pos:pos + step]
            encryptor = Cipher(algorithms.AES(_AES_KEY), modes.OFB(iv)).encryptor()
            chunks.append(encryptor.update(chunk) + encryptor.finalize())
            pos += step
            first = False
        return b"".join(chunks)