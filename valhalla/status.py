"""Status bits carried in mob status packets."""

from __future__ import annotations

import enum


class MobStatus(enum.IntFlag):
    """Four-byte mob status mask."""

    WATK = 0x01
    WDEF = 0x02
    MATK = 0x04
    MDEF = 0x08
    ACC = 0x10
    AVOID = 0x20
    SPEED = 0x40
    STUN = 0x80
    FREEZE = 0x100
    POISON = 0x200
    SEAL = 0x400
    NO_CLUE1 = 0x800
    WEAPON_ATTACK_UP = 0x1000
    WEAPON_DEFENSE_UP = 0x2000
    MAGIC_ATTACK_UP = 0x4000
    MAGIC_DEFENSE_UP = 0x8000
    DOOM = 0x10000
    SHADOW_WEB = 0x20000
    WEAPON_IMMUNITY = 0x40000
    MAGIC_IMMUNITY = 0x80000
    NO_CLUE2 = 0x100000
    NO_CLUE3 = 0x200000
    NINJA_AMBUSH = 0x400000
    NO_CLUE4 = 0x800000
    VENOMOUS_WEAPON = 0x1000000
    NO_CLUE5 = 0x2000000
    NO_CLUE6 = 0x4000000
    EMPTY = 0x8000000  # every mob has this when it spawns
    HYPNOTIZE = 0x10000000
    WEAPON_DAMAGE_REFLECT = 0x20000000
    MAGIC_DAMAGE_REFLECT = 0x40000000
    NO_CLUE7 = 0x80000000  # last bit that fits in four bytes

    @classmethod
    def combine(cls, *args: int) -> "MobStatus":
        """The union of the given status bits."""
        result = cls(0)
        for flag in args:
            result |= cls(flag)
        return result