"""Packet codec, transport cipher, constants, game-data extraction, connections and configuration for an MMORPG server."""

__version__ = "0.1.0"