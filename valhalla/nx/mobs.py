"""Mob definitions read from the game-data tree."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from valhalla.nx.node import Node, parse_id, wrap_int

log = logging.getLogger(__name__)

_MOB_ROOT = "/Mob"


@dataclass
class Mob:
    """Static data for one mob id."""

    hp: int = 0
    mp: int = 0
    max_hp: int = 0
    hp_recovery: int = 0
    max_mp: int = 0
    mp_recovery: int = 0
    level: int = 0
    exp: int = 0
    ma_damage: int = 0
    md_damage: int = 0
    pa_damage: int = 0
    pd_damage: int = 0
    speed: int = 0
    eva: int = 0
    acc: int = 0
    summon_type: int = 0
    summon_option: int = 0
    boss: int = 0
    undead: int = 0
    elem_attr: str = ""
    link: int = 0
    fly_speed: int = 0
    no_regen: int = 0
    invincible: int = 0
    self_destruction: int = 0
    explosive_reward: int = 0
    skills: dict[int, int] = field(default_factory=dict)
    revives: list[int] = field(default_factory=list)
    fs: float = 0.0
    pushed: int = 0
    body_attack: int = 0
    no_flip: int = 0
    not_attack: int = 0
    first_attack: int = 0
    remove_quest: int = 0
    remove_after: str = ""
    public_reward: int = 0
    hp_tag_bg_color: int = 0
    hp_tag_color: int = 0


def _as_int(value: Any) -> int:
    if isinstance(value, (bool, int, float)):
        return int(value)
    raise ValueError(f"expected a number, got {value!r}")


def _i32(value: Any) -> int:
    return wrap_int(_as_int(value), 32)


def _i64(value: Any) -> int:
    return wrap_int(_as_int(value), 64)


def _byte(value: Any) -> int:
    return _as_int(value) & 0xFF


def _i8(value: Any) -> int:
    return wrap_int(_as_int(value), 8)


def _float(value: Any) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    raise ValueError(f"expected a number, got {value!r}")


def _text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


_Converter = Callable[[Any], Any]

_OPTIONS: dict[str, tuple[str, _Converter]] = {
    "hpRecovery": ("hp_recovery", _i32),
    "mpRecovery": ("mp_recovery", _i32),
    "level": ("level", _i64),
    "exp": ("exp", _i64),
    "MADamage": ("ma_damage", _i64),
    "MDDamage": ("md_damage", _i64),
    "PADamage": ("pa_damage", _i64),
    "PDDamage": ("pd_damage", _i64),
    "speed": ("speed", _i64),
    "eva": ("eva", _i64),
    "acc": ("acc", _i64),
    "summonType": ("summon_type", _i8),
    "summonOption": ("summon_option", _i32),
    "boss": ("boss", _i64),
    "undead": ("undead", _i64),
    "elemAttr": ("elem_attr", _text),
    "link": ("link", _i64),
    "flySpeed": ("fly_speed", _i64),
    "noregen": ("no_regen", _i64),
    "invincible": ("invincible", _i64),
    "selfDestruction": ("self_destruction", _i64),
    "explosiveReward": ("explosive_reward", _i64),
    "fs": ("fs", _float),
    "pushed": ("pushed", _i64),
    "bodyAttack": ("body_attack", _i64),
    "noFlip": ("no_flip", _i64),
    "notAttack": ("not_attack", _i64),
    "firstAttack": ("first_attack", _i64),
    "removeQuest": ("remove_quest", _i64),
    "removeAfter": ("remove_after", _text),
    "publicReward": ("public_reward", _i64),
    "hpTagBgcolor": ("hp_tag_bg_color", _i64),
    "hpTagColor": ("hp_tag_color", _i64),
}

_SKILL_IGNORED = frozenset({"action", "effectAfter"})


def _skills(node: Node) -> dict[int, int]:
    skills: dict[int, int] = {}
    for skill_dir in node:
        skill_id = 0
        level = 0
        for option in skill_dir:
            if option.name == "level":
                level = _byte(option.value)
            elif option.name == "skill":
                skill_id = _byte(option.value)
            elif option.name not in _SKILL_IGNORED:
                log.debug("Unsupported mob skill option: %s -> %r", option.name, option.value)
        skills[skill_id] = level
    return skills


def _revives(node: Node) -> list[int]:
    return [_i32(child.value) for child in node]


def _read_mob(node: Node) -> Mob:
    mob = Mob()
    for option in node:
        name = option.name
        if name == "maxHP":
            mob.max_hp = _i32(option.value)
            mob.hp = mob.max_hp
        elif name == "maxMP":
            mob.max_mp = _i32(option.value)
            mob.mp = mob.max_mp
        elif name == "skill":
            mob.skills = _skills(option)
        elif name == "revive":
            mob.revives = _revives(option)
        else:
            entry = _OPTIONS.get(name)
            if entry is None:
                log.debug("Unsupported mob option: %s -> %r", name, option.value)
                continue
            attribute, convert = entry
            setattr(mob, attribute, convert(option.value))
    return mob


def extract_mobs(root: Node) -> dict[int, Mob]:
    """Collect every mob under the mob branch, keyed by mob id."""
    mobs: dict[int, Mob] = {}
    branch = root.find(_MOB_ROOT)
    if branch is None:
        log.warning("Invalid node search: %s", _MOB_ROOT)
        return mobs

    for mob_node in branch:
        info = mob_node.get("info")
        if info is None:
            log.warning("Invalid node search: %s/%s/info", _MOB_ROOT, mob_node.name)
            mob = Mob()
        else:
            mob = _read_mob(info)

        try:
            mob_id = parse_id(mob_node.name)
        except ValueError as err:
            log.warning("Invalid mob id name: %s (%s)", mob_node.name, err)
            continue
        mobs[mob_id] = mob
    return mobs