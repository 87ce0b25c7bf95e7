# valhalla

Building blocks for a classic MMORPG server: the wire packet format, the
client transport cipher, game constants, typed game-data records, asyncio
connections and the server configuration file.

## What is in the package

- `valhalla.packet`: `Packet` is a `bytearray` with little-endian writers
  (`write_byte`, `write_int16`, `write_int32`, `write_int64`, the unsigned
  variants, `write_float32`, `write_bool`, `write_bytes`, length-prefixed
  `write_string` and `write_padded_string`), plus `set_position` and
  `set_int`. `Packet.with_opcode(op)` starts a client packet, which is four
  header bytes followed by the opcode. `Packet.internal(op)` starts an
  inter-server packet, which is two length bytes followed by the opcode.
  `Reader` reads a packet back. A read past the end returns a zero value, an
  empty string or a single zero byte, and does not raise.
- `valhalla.crypt`: `MapleCipher` is one direction of the client cipher. It
  generates the header, applies the byte-mangling layer and the optional
  AES-OFB layer, and shuffles the IV after every packet.
  `packet_length(header)` recovers the body length from an encrypted
  four-byte header. `maple_encrypt` and `maple_decrypt` expose the mangling
  layer on its own.
- `valhalla.constants`: the protocol version (`MAPLE_VERSION`), stat masks,
  job ids, world names and `EXP_TABLE`.
- `valhalla.skills`: the `Skill` enum of player skill ids, and per-job
  `JobSkills` sets such as `skills.FIGHTER`, with `has()` and lookup by role
  name. `job_skills(job_id)` finds the set for a job id. This module also
  holds the `MobSkill` ids and the `MobStat` flags.
- `valhalla.status`: `MobStatus` flags, with `MobStatus.combine(...)`.
- `valhalla.nx`: `Node` is a game-data tree with `get(name)` and
  `find("/a/b/c")`. `wrap_int` and `parse_id` are helpers for reading it.
  The extractors `extract_items`, `extract_maps`, `extract_mobs`,
  `extract_quests` (with `parse_job_list`) and `extract_skills` turn a tree
  into dataclasses keyed by id.
- `valhalla.network`: asyncio connections. `ClientConnection` uses an
  encrypted four-byte header and carries the session state (`account_id`,
  `world_id`, `channel_id` and so on). `ServerConnection` uses a two-byte
  length prefix. Both post `Event`s of an `EventType` to a queue. Packets go
  out through `send`, which is a coroutine, and the tasks that do the work are
  `run_reader` and `run_writer`. `client_handshake` builds the first,
  unencrypted packet sent to a new client.
- `valhalla.interserver`: `Rates`, `Channel`, `Party` and `World`, each able
  to write itself to a packet and read itself back. It also holds the
  `ChatOp`, `PartyOp` and `GuildOp` event codes.
- `valhalla.config`: `load_config(path)` reads the TOML file into a `Config`
  with `database`, `login`, `world` and `channel` sections.

## Packets

```python
from valhalla.packet import Packet, Reader

packet = Packet.with_opcode(0x01)
packet.write_string("Scania")
packet.write_int32(100000000)

reader = Reader(bytes(packet))
reader.skip(4)
assert reader.read_byte() == 0x01
assert reader.read_string(reader.read_int16()) == "Scania"
assert reader.read_int32() == 100000000
```

## The cipher

```python
from valhalla import constants
from valhalla.crypt import MapleCipher, packet_length

sender = MapleCipher(b"\x01\x02\x03\x04", constants.MAPLE_VERSION)
receiver = MapleCipher(b"\x01\x02\x03\x04", constants.MAPLE_VERSION)

wire = sender.encrypt(bytes(4) + b"hello")     # the first four bytes are header space
body = wire[4:4 + packet_length(wire[:4])]
assert receiver.decrypt(body) == b"hello"
```

Both ends must encrypt and decrypt packets in the same order, because every
call advances the IV.

## Game data

```python
from valhalla.nx.node import Node
from valhalla.nx.items import extract_items

root = Node("", children=[
    Node("Character", children=[
        Node("Weapon", children=[
            Node("1302000.img", children=[
                Node("info", children=[Node("reqLevel", 0), Node("price", 1)]),
            ]),
        ]),
    ]),
])
items = extract_items(root)
assert items[1302000].inv_tab_id == 1
```

If a branch is missing from the tree, a warning is logged and the branch is
skipped.

## Configuration

```python
from valhalla.config import load_config

config = load_config("config.toml")
print(config.login.client_listen_port)
print(config.channel.max_pop)
```

The file has `[database]`, `[login]`, `[world]` and `[channel]` tables, with
keys such as `ClientListenPort` or `MaxPop`. Table and key names match
case-insensitively. A missing key falls back to an empty or zero value. A
value of the wrong type or out of range raises `ValueError`.

## What the package does not do

- It has no login, world or channel server programs and no command line.
  It provides the parts such servers are built from, not the servers.
- It does not talk to a database. Accounts, characters and guilds are not
  stored anywhere.
- It cannot read the binary game-data file. The extractors work on a
  `Node` tree that the caller builds.
- It has no single object that gathers the extracted items, maps, mobs,
  quests and skills for lookup. Each extractor returns its own dictionary.
- It has no game logic: no handlers for login, character, party or guild
  packets.