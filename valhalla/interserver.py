"""Structures exchanged between login, world and channel servers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from valhalla import constants
from valhalla.packet import Packet, Reader


class ChatOp(enum.IntEnum):
    """Chat event kinds forwarded between servers."""

    WHISPHER = 0x00
    BUDDY = 0x01
    PARTY = 0x02
    GUILD = 0x03


class PartyOp(enum.IntEnum):
    """Party event kinds."""

    CREATE = 0x01
    LEAVE_EXPEL = 0x02
    ACCEPT = 0x03
    INFO_UPDATE = 0x04


class GuildOp(enum.IntEnum):
    """Guild event kinds."""

    DISBAND = 0x01
    RANK_UPDATE = 0x02
    ADD_PLAYER = 0x03
    REMOVE_PLAYER = 0x04
    NOTICE_CHANGE = 0x05
    EMBLEM_CHANGE = 0x06
    POINTS_UPDATE = 0x07
    TITLES_CHANGE = 0x08
    INVITE = 0x09
    INVITE_REJECT = 0x0A
    INVITE_ACCEPT = 0x0B


@dataclass
class Rates:
    """Experience, drop and meso multipliers."""

    exp: float = 0.0
    drop: float = 0.0
    mesos: float = 0.0


@dataclass
class Channel:
    """A channel's address and population as known to its world."""

    conn: Any = None
    ip: bytes = b""
    port: int = 0
    max_pop: int = 0
    pop: int = 0

    def to_packet(self) -> Packet:
        """The channel's address and population as packet bytes."""
        packet = Packet()
        packet.write_bytes(bytes(self.ip))
        packet.write_int16(self.port)
        packet.write_int16(self.max_pop)
        packet.write_int16(self.pop)
        return packet

    def read_from(self, reader: Reader) -> None:
        """Fill address and population from ``reader``."""
        self.ip = bytes(reader.read_bytes(4))
        self.port = reader.read_int16()
        self.max_pop = reader.read_int16()
        self.pop = reader.read_int16()


def _slots(value: Any) -> list:
    return [value] * constants.MAX_PARTY_SIZE


@dataclass
class Party:
    """A party with one slot per possible member."""

    id: int = 0
    channel_id: list[int] = field(default_factory=lambda: _slots(0))
    player_id: list[int] = field(default_factory=lambda: _slots(0))
    name: list[str] = field(default_factory=lambda: _slots(""))
    map_id: list[int] = field(default_factory=lambda: _slots(0))
    job: list[int] = field(default_factory=lambda: _slots(0))
    level: list[int] = field(default_factory=lambda: _slots(0))

    def to_packet(self) -> Packet:
        """Every slot of the party as packet bytes."""
        packet = Packet()
        packet.write_int32(self.id)
        packet.write_byte(len(self.player_id))
        for slot in zip(self.channel_id, self.player_id, self.name,
                        self.map_id, self.job, self.level):
            channel, player, name, map_id, job, level = slot
            packet.write_int32(channel)
            packet.write_int32(player)
            packet.write_string(name)
            packet.write_int32(map_id)
            packet.write_int32(job)
            packet.write_int32(level)
        return packet

    def read_from(self, reader: Reader) -> None:
        """Fill the party id and the listed slots from ``reader``."""
        self.id = reader.read_int32()
        amount = reader.read_byte()
        if amount > constants.MAX_PARTY_SIZE:
            raise ValueError(
                f"party lists {amount} members, at most {constants.MAX_PARTY_SIZE} fit"
            )
        for slot in range(amount):
            self.channel_id[slot] = reader.read_int32()
            self.player_id[slot] = reader.read_int32()
            self.name[slot] = reader.read_string(reader.read_int16())
            self.map_id[slot] = reader.read_int32()
            self.job[slot] = reader.read_int32()
            self.level[slot] = reader.read_int32()


@dataclass
class World:
    """A world and its channels as seen by the login server."""

    conn: Any = None
    icon: int = 0
    name: str = ""
    message: str = ""
    ribbon: int = 0
    channels: list[Channel] = field(default_factory=list)
    rates: Rates = field(default_factory=Rates)
    default_rates: Rates = field(default_factory=Rates)

    def info_packet(self, opcode: int) -> Packet:
        """An inter-server packet describing the world and its channels."""
        packet = Packet.internal(opcode)
        packet.write_byte(self.icon)
        packet.write_string(self.name)
        packet.write_string(self.message)
        packet.write_byte(self.ribbon)
        packet.write_byte(len(self.channels))
        for channel in self.channels:
            packet.write_bytes(bytes(channel.to_packet()))
        return packet

    def read_from(self, reader: Reader) -> None:
        """Replace the world description and channel list from ``reader``."""
        self.icon = reader.read_byte()
        self.name = reader.read_string(reader.read_int16())
        self.message = reader.read_string(reader.read_int16())
        self.ribbon = reader.read_byte()
        count = reader.read_byte()
        channels = []
        for _ in range(count):
            channel = Channel()
            channel.read_from(reader)
            channels.append(channel)
        self.channels = channels