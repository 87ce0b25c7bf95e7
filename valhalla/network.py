"""Framed, optionally encrypted connections to game clients and peer servers."""

from __future__ import annotations

import asyncio
import enum
import random
from dataclasses import dataclass
from typing import Any

from valhalla import constants
from valhalla.crypt import MapleCipher, packet_length
from valhalla.packet import Packet


class EventType(enum.IntEnum):
    """What happened on a connection."""

    CLIENT_CONNECTED = 0
    CLIENT_DISCONNECT = 1
    CLIENT_PACKET = 2
    SERVER_CONNECTED = 3
    SERVER_DISCONNECT = 4
    SERVER_PACKET = 5


@dataclass
class Event:
    """A connection event, with the packet body for packet events."""

    type: EventType
    connection: "Connection"
    packet: bytes = b""


def _crypt(operation, buffer: bytearray) -> bytearray:
    result = operation(buffer, True, False)
    return buffer if result is None else bytearray(result)


class Connection:
    """A connection that queues outgoing packets and reports incoming ones as events."""

    _connected = EventType.SERVER_CONNECTED
    _disconnected = EventType.SERVER_DISCONNECT
    _packet = EventType.SERVER_PACKET

    def __init__(self, reader: asyncio.StreamReader, writer: Any, events: asyncio.Queue,
                 queue_size: int = 0, *, send_cipher: MapleCipher | None = None,
                 recv_cipher: MapleCipher | None = None, inter_server: bool = False,
                 latency: int = 0, jitter: int = 0) -> None:
        self._reader = reader
        self._writer = writer
        self._events = events
        self._outgoing: asyncio.Queue = asyncio.Queue(maxsize=max(queue_size, 0))
        self._send_cipher = send_cipher
        self._recv_cipher = recv_cipher
        self.inter_server = inter_server
        self.latency = latency
        self.jitter = jitter
        self.closed = False

    def __str__(self) -> str:
        peer = self._writer.get_extra_info("peername")
        if isinstance(peer, tuple) and len(peer) >= 2:
            return f"{peer[0]}:{peer[1]}"
        return str(peer)

    async def send(self, packet: Packet | bytes) -> None:
        """Queue a packet for the writer; ignored once the connection is cleaned up."""
        if self.closed:
            return
        await self._outgoing.put(bytes(packet))

    async def _read_packet(self) -> bytes:
        header = await self._reader.readexactly(2)
        length = header[0] | header[1] << 8
        return await self._reader.readexactly(length)

    async def run_reader(self) -> None:
        """Read packets until the stream ends, posting events for each."""
        await self._events.put(Event(self._connected, self))
        while True:
            try:
                body = await self._read_packet()
            except (asyncio.IncompleteReadError, ConnectionError, OSError):
                await self._events.put(Event(self._disconnected, self))
                return
            await self._events.put(Event(self._packet, self, body))

    def _frame(self, data: bytes) -> bytearray:
        buffer = bytearray(data)
        if self._send_cipher is not None:
            buffer = _crypt(self._send_cipher.encrypt, buffer)
        if self.inter_server:
            size = len(buffer) - 2
            buffer[0] = size & 0xFF
            buffer[1] = (size >> 8) & 0xFF
        return buffer

    async def _write(self, data: bytes) -> None:
        try:
            self._writer.write(bytes(data))
            await self._writer.drain()
        except (ConnectionError, OSError):
            pass

    async def _delayed_writer(self, queue: asyncio.Queue) -> None:
        loop = asyncio.get_running_loop()
        while True:
            entry = await queue.get()
            if entry is None:
                return
            send_at, data = entry
            delay = send_at - loop.time()
            if delay > 0:
                await asyncio.sleep(delay)
            await self._write(data)

    async def run_writer(self) -> None:
        """Frame, encrypt and write queued packets until the connection is cleaned up."""
        loop = asyncio.get_running_loop()
        delayed: asyncio.Queue | None = None
        delayed_task = None
        if self.latency > 0:
            delayed = asyncio.Queue()
            delayed_task = asyncio.ensure_future(self._delayed_writer(delayed))
        try:
            while True:
                if self.closed and self._outgoing.empty():
                    break
                data = await self._outgoing.get()
                if data is None:
                    break
                framed = self._frame(data)
                if delayed is not None:
                    extra = random.randrange(self.jitter) if self.jitter > 0 else 0
                    send_at = loop.time() + (extra + self.latency) / 1000.0
                    await delayed.put((send_at, framed))
                else:
                    await self._write(framed)
        finally:
            if delayed is not None:
                await delayed.put(None)
                await delayed_task

    def cleanup(self) -> None:
        """Stop accepting packets and let the writer finish what is queued."""
        self.closed = True
        try:
            self._outgoing.put_nowait(None)
        except asyncio.QueueFull:
            pass


class ClientConnection(Connection):
    """A game client connection with its login session state."""

    _connected = EventType.CLIENT_CONNECTED
    _disconnected = EventType.CLIENT_DISCONNECT
    _packet = EventType.CLIENT_PACKET

    def __init__(self, reader: asyncio.StreamReader, writer: Any, events: asyncio.Queue,
                 queue_size: int, key_send: bytes, key_recv: bytes,
                 latency: int = 0, jitter: int = 0) -> None:
        super().__init__(
            reader, writer, events, queue_size,
            send_cipher=MapleCipher(bytes(key_send), constants.MAPLE_VERSION),
            recv_cipher=MapleCipher(bytes(key_recv), constants.MAPLE_VERSION),
            inter_server=False, latency=latency, jitter=jitter,
        )
        self.logged_in = False
        self.account_id = 0
        self.gender = 0
        self.world_id = 0
        self.channel_id = 0
        self.admin_level = 0

    async def _read_packet(self) -> bytes:
        header = await self._reader.readexactly(constants.CLIENT_HEADER_SIZE)
        length = packet_length(header)
        body = bytearray(await self._reader.readexactly(length))
        if self._recv_cipher is not None:
            body = _crypt(self._recv_cipher.decrypt, body)
        return bytes(body)


class ServerConnection(Connection):
    """A connection to another server, framed by a two-byte length."""

    def __init__(self, reader: asyncio.StreamReader, writer: Any, events: asyncio.Queue,
                 queue_size: int = 0) -> None:
        super().__init__(reader, writer, events, queue_size, inter_server=True)


def client_handshake(maple_version: int, recv_iv: bytes, send_iv: bytes) -> Packet:
    """The unencrypted first packet sent to a newly accepted client."""
    packet = Packet()
    packet.write_int16(13)
    packet.write_int16(maple_version)
    packet.write_string("")
    packet.write_bytes(bytes(recv_iv))
    packet.write_bytes(bytes(send_iv))
    packet.write_byte(8)
    return packet