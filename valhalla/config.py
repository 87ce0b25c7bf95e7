"""Server configuration read from a TOML file."""

from __future__ import annotations

import struct
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any


class _Kind(Enum):
    """Value type of a configuration option, with its default."""

    STR = ""
    BOOL = False
    BYTE = (0, 0xFF)
    INT16 = (-(1 << 15), (1 << 15) - 1)
    INT = (-(1 << 63), (1 << 63) - 1)
    FLOAT32 = 0.0

    @property
    def default(self) -> Any:
        if self in (_Kind.BYTE, _Kind.INT16, _Kind.INT):
            return 0
        return self.value


def _opt(kind: _Kind) -> Any:
    return field(default=kind.default, metadata={"kind": kind})


def _key(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


@dataclass
class DatabaseConfig:
    """Database connection settings."""

    address: str = _opt(_Kind.STR)
    port: str = _opt(_Kind.STR)
    user: str = _opt(_Kind.STR)
    password: str = _opt(_Kind.STR)
    database: str = _opt(_Kind.STR)


@dataclass
class LoginConfig:
    """Login server settings."""

    client_listen_address: str = _opt(_Kind.STR)
    client_listen_port: str = _opt(_Kind.STR)
    server_listen_address: str = _opt(_Kind.STR)
    server_listen_port: str = _opt(_Kind.STR)
    with_pin: bool = _opt(_Kind.BOOL)
    packet_queue_size: int = _opt(_Kind.INT)
    latency: int = _opt(_Kind.INT)
    jitter: int = _opt(_Kind.INT)


@dataclass
class WorldConfig:
    """World server settings."""

    message: str = _opt(_Kind.STR)
    ribbon: int = _opt(_Kind.BYTE)
    exp_rate: float = _opt(_Kind.FLOAT32)
    drop_rate: float = _opt(_Kind.FLOAT32)
    mesos_rate: float = _opt(_Kind.FLOAT32)
    login_address: str = _opt(_Kind.STR)
    login_port: str = _opt(_Kind.STR)
    listen_address: str = _opt(_Kind.STR)
    listen_port: str = _opt(_Kind.STR)
    packet_queue_size: int = _opt(_Kind.INT)


@dataclass
class ChannelConfig:
    """Channel server settings."""

    world_address: str = _opt(_Kind.STR)
    world_port: str = _opt(_Kind.STR)
    listen_address: str = _opt(_Kind.STR)
    client_connection_address: str = _opt(_Kind.STR)
    listen_port: str = _opt(_Kind.STR)
    packet_queue_size: int = _opt(_Kind.INT)
    max_pop: int = _opt(_Kind.INT16)
    latency: int = _opt(_Kind.INT)
    jitter: int = _opt(_Kind.INT)


def _convert(where: str, kind: _Kind, value: Any) -> Any:
    if kind is _Kind.STR:
        if not isinstance(value, str):
            raise ValueError(f"{where}: expected a string, got {value!r}")
        return value
    if kind is _Kind.BOOL:
        if not isinstance(value, bool):
            raise ValueError(f"{where}: expected a boolean, got {value!r}")
        return value
    if kind is _Kind.FLOAT32:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{where}: expected a number, got {value!r}")
        try:
            return struct.unpack("<f", struct.pack("<f", float(value)))[0]
        except OverflowError:
            raise ValueError(f"{where}: {value!r} out of range") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{where}: expected an integer, got {value!r}")
    low, high = kind.value
    if not low <= value <= high:
        raise ValueError(f"{where}: {value} out of range")
    return value


def _section(cls: type, name: str, data: Any) -> Any:
    if data is None:
        return cls()
    if not isinstance(data, Mapping):
        raise ValueError(f"{name}: expected a table, got {data!r}")
    lookup = {str(key).lower(): value for key, value in data.items()}
    kwargs = {}
    for item in fields(cls):
        key = _key(item.name)
        if key.lower() in lookup:
            kwargs[item.name] = _convert(f"{name}.{key}", item.metadata["kind"],
                                         lookup[key.lower()])
    return cls(**kwargs)


@dataclass
class Config:
    """Settings for every server type and the shared database."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    login: LoginConfig = field(default_factory=LoginConfig)
    world: WorldConfig = field(default_factory=WorldConfig)
    channel: ChannelConfig = field(default_factory=ChannelConfig)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Config":
        """Build a configuration from parsed TOML tables; keys match case-insensitively."""
        tables = {str(key).lower(): value for key, value in data.items()}
        return cls(
            database=_section(DatabaseConfig, "Database", tables.get("database")),
            login=_section(LoginConfig, "Login", tables.get("login")),
            world=_section(WorldConfig, "World", tables.get("world")),
            channel=_section(ChannelConfig, "Channel", tables.get("channel")),
        )


def load_config(path: str | Path) -> Config:
    """Read and validate a TOML configuration file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return Config.from_mapping(data)