"""A decoded game-data tree and helpers for reading its values."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


@dataclass
class Node:
    """One node of the data tree: a name, an optional value and child nodes."""

    name: str
    value: Any = None
    children: list["Node"] = field(default_factory=list)

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def get(self, name: str) -> "Node | None":
        """The first direct child called ``name``, or None."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def find(self, path: str) -> "Node | None":
        """Walk a slash separated path of child names; None if any step is missing."""
        node: Node | None = self
        for part in path.split("/"):
            if not part:
                continue
            node = node.get(part)
            if node is None:
                return None
        return node


def wrap_int(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's complement integer of ``bits`` bits."""
    if bits <= 0:
        raise ValueError(f"bit width must be positive: {bits}")
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _strip_extension(name: str) -> str:
    dot = name.rfind(".")
    if dot >= 0 and "/" not in name[dot:]:
        return name[:dot]
    return name


def parse_id(name: str) -> int:
    """Parse a 32-bit id from a file-like node name such as ``"1002140.img"``."""
    trimmed = _strip_extension(name)
    if not _ID_PATTERN.fullmatch(trimmed):
        raise ValueError(f"invalid id name: {name!r}")
    value = int(trimmed)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"id out of range: {name!r}")
    return value