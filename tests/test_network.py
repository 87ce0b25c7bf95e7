import asyncio

import pytest

from valhalla import constants
from valhalla.crypt import MapleCipher, packet_length
from valhalla.network import (
    ClientConnection,
    EventType,
    ServerConnection,
    client_handshake,
)
from valhalla.packet import Packet


class FakeWriter:
    def __init__(self):
        self.data = bytearray()

    def write(self, data):
        self.data += data

    async def drain(self):
        pass

    def get_extra_info(self, name, default=None):
        if name == "peername":
            return ("127.0.0.1", 8484)
        return default


def _crypt(operation, buffer):
    result = operation(buffer, True, False)
    return bytes(buffer if result is None else result)


def _drain(queue):
    return [queue.get_nowait() for _ in range(queue.qsize())]


def test_client_handshake_layout():
    recv_iv = b"\x01\x02\x03\x04"
    send_iv = b"\x05\x06\x07\x08"
    packet = bytes(client_handshake(constants.MAPLE_VERSION, recv_iv, send_iv))
    assert packet[:2] == b"\x0d\x00"
    assert packet[2:4] == constants.MAPLE_VERSION.to_bytes(2, "little")
    assert packet[4:6] == b"\x00\x00"
    assert packet[6:10] == recv_iv
    assert packet[10:14] == send_iv
    assert packet[14:] == b"\x08"


@pytest.mark.asyncio
async def test_server_reader_events():
    reader = asyncio.StreamReader()
    reader.feed_data(b"\x03\x00abc")
    reader.feed_eof()
    events = asyncio.Queue()
    conn = ServerConnection(reader, FakeWriter(), events, 4)
    await conn.run_reader()
    got = _drain(events)
    assert [e.type for e in got] == [
        EventType.SERVER_CONNECTED,
        EventType.SERVER_PACKET,
        EventType.SERVER_DISCONNECT,
    ]
    assert got[1].packet == b"abc"
    assert got[1].connection is conn


@pytest.mark.asyncio
async def test_server_writer_prefixes_length():
    writer = FakeWriter()
    conn = ServerConnection(asyncio.StreamReader(), writer, asyncio.Queue(), 4)
    packet = Packet.internal(7)
    packet.write_byte(1)
    await conn.send(packet)
    conn.cleanup()
    await conn.run_writer()
    assert bytes(writer.data) == b"\x02\x00\x07\x01"


@pytest.mark.asyncio
async def test_send_after_cleanup_is_dropped():
    writer = FakeWriter()
    conn = ServerConnection(asyncio.StreamReader(), writer, asyncio.Queue(), 4)
    conn.cleanup()
    await conn.send(Packet.internal(1))
    await conn.run_writer()
    assert bytes(writer.data) == b""


@pytest.mark.asyncio
async def test_client_reader_decrypts():
    key_recv = b"\x11\x22\x33\x44"
    peer = MapleCipher(key_recv, constants.MAPLE_VERSION)
    payload = b"\x01hello"
    frame = _crypt(peer.encrypt, bytearray(4) + payload)

    reader = asyncio.StreamReader()
    reader.feed_data(frame)
    reader.feed_eof()
    events = asyncio.Queue()
    conn = ClientConnection(reader, FakeWriter(), events, 4, b"\x09" * 4, key_recv)
    await conn.run_reader()
    got = _drain(events)
    assert [e.type for e in got] == [
        EventType.CLIENT_CONNECTED,
        EventType.CLIENT_PACKET,
        EventType.CLIENT_DISCONNECT,
    ]
    assert got[1].packet == payload


@pytest.mark.asyncio
async def test_client_writer_encrypts_round_trip():
    key_send = b"\x0a\x0b\x0c\x0d"
    writer = FakeWriter()
    conn = ClientConnection(asyncio.StreamReader(), writer, asyncio.Queue(), 4,
                            key_send, b"\x00" * 4)
    packet = Packet.with_opcode(3)
    packet.write_string("hi")
    original = bytes(packet)
    await conn.send(packet)
    conn.cleanup()
    await conn.run_writer()

    data = bytes(writer.data)
    assert packet_length(data[:4]) == len(data) - 4
    peer = MapleCipher(key_send, constants.MAPLE_VERSION)
    assert _crypt(peer.decrypt, bytearray(data[4:])) == original[4:]


@pytest.mark.asyncio
async def test_latency_still_delivers():
    writer = FakeWriter()
    conn = ServerConnection(asyncio.StreamReader(), writer, asyncio.Queue(), 4)
    conn.latency = 5
    await conn.send(Packet.internal(9))
    conn.cleanup()
    await conn.run_writer()
    assert bytes(writer.data) == b"\x01\x00\x09"


def test_client_session_defaults_and_str():
    async def build():
        return ClientConnection(asyncio.StreamReader(), FakeWriter(), asyncio.Queue(), 1,
                                b"\x01" * 4, b"\x02" * 4)

    conn = asyncio.run(build())
    assert conn.account_id == 0
    assert conn.logged_in is False
    assert str(conn) == "127.0.0.1:8484"