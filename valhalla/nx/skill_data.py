"""Player and mob skill levels read from the game-data tree."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from valhalla.nx.node import Node, wrap_int

log = logging.getLogger(__name__)

_SKILL_ROOT = "/Skill"
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class PlayerSkill:
    """One level of a player skill."""

    mastery: int = 0
    mad: int = 0
    mdd: int = 0
    pad: int = 0
    pdd: int = 0
    hp: int = 0
    mp: int = 0
    hp_con: int = 0
    mp_con: int = 0
    bullet_consume: int = 0
    money_consume: int = 0
    item_con: int = 0
    item_con_no: int = 0
    time: int = 0
    eva: int = 0
    acc: int = 0
    jump: int = 0
    speed: int = 0
    range: int = 0
    mob_count: int = 0
    attack_count: int = 0
    damage: int = 0
    fixdamage: int = 0
    rb: tuple[int, int] = (0, 0)
    lt: tuple[int, int] = (0, 0)
    hs: str = ""
    x: int = 0
    y: int = 0
    z: int = 0
    prop: int = 0
    bullet_count: int = 0
    action: str = ""


@dataclass
class MobSkillLevel:
    """One level of a mob skill."""

    hp: int = 0
    mp_con: int = 0
    limit: int = 0
    interval: int = 0
    mob_id: list[int] = field(default_factory=list)
    summon_effect: int = 0
    time: int = 0


def _as_int(value: Any) -> int:
    if isinstance(value, (bool, int, float)):
        return int(value)
    raise ValueError(f"expected a number, got {value!r}")


def _i32(value: Any) -> int:
    return wrap_int(_as_int(value), 32)


def _i64(value: Any) -> int:
    return wrap_int(_as_int(value), 64)


def _text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _vector(value: Any) -> tuple[int, int]:
    x, y = value
    return (wrap_int(_as_int(x), 32), wrap_int(_as_int(y), 32))


def _parse_int(text: str) -> int | None:
    if _INT_PATTERN.fullmatch(text):
        return int(text)
    return None


def _strip_extension(name: str) -> str:
    dot = name.rfind(".")
    return name[:dot] if dot >= 0 else name


_Converter = Callable[[Any], Any]

_PLAYER_OPTIONS: dict[str, tuple[str, _Converter]] = {
    "mad": ("mad", _i64),
    "mdd": ("mdd", _i64),
    "pad": ("pad", _i64),
    "pdd": ("pdd", _i64),
    "hp": ("hp", _i64),
    "mp": ("mp", _i64),
    "hpCon": ("hp_con", _i64),
    "mpCon": ("mp_con", _i64),
    "bulletConsume": ("bullet_consume", _i64),
    "moneyCon": ("money_consume", _i64),
    "itemCon": ("item_con", _i64),
    "itemConNo": ("item_con_no", _i64),
    "mastery": ("mastery", _i64),
    "time": ("time", _i64),
    "eva": ("eva", _i64),
    "acc": ("acc", _i64),
    "jump": ("jump", _i64),
    "speed": ("speed", _i64),
    "range": ("range", _i64),
    "mobCount": ("mob_count", _i64),
    "attackCount": ("attack_count", _i64),
    "damage": ("damage", _i64),
    "fixdamage": ("fixdamage", _i64),
    "rb": ("rb", _vector),
    "hs": ("hs", _text),
    "lt": ("lt", _vector),
    "x": ("x", _i64),
    "y": ("y", _i64),
    "z": ("z", _i64),
    "prop": ("prop", _i64),
    "bulletCount": ("bullet_count", _i64),
    "action": ("action", _text),
}
_PLAYER_IGNORED = frozenset({"ball", "hit", "58"})

_MOB_OPTIONS: dict[str, tuple[str, _Converter]] = {
    "hp": ("hp", _i32),
    "interval": ("interval", _i64),
    "limit": ("limit", _i64),
    "summonEffect": ("summon_effect", _i64),
    "time": ("time", _i64),
    "mpCon": ("mp_con", _i32),
}
_MOB_IGNORED = frozenset({
    "0", "1", "2", "3", "4", "5",
    "lt", "rb", "effect", "x", "y", "tile", "prop", "affected", "mob", "mob0",
})

_T = TypeVar("_T")


def _apply(target: Any, node: Node, options: dict[str, tuple[str, _Converter]],
           ignored: frozenset[str], kind: str) -> None:
    for option in node:
        if option.name in ignored:
            continue
        entry = options.get(option.name)
        if entry is None:
            log.debug("Unsupported %s option: %s -> %r", kind, option.name, option.value)
            continue
        attribute, convert = entry
        setattr(target, attribute, convert(option.value))


def _player_skill(node: Node) -> PlayerSkill:
    skill = PlayerSkill()
    _apply(skill, node, _PLAYER_OPTIONS, _PLAYER_IGNORED, "player skill")
    return skill


def _mob_skill(node: Node) -> MobSkillLevel:
    skill = MobSkillLevel()
    _apply(skill, node, _MOB_OPTIONS, _MOB_IGNORED, "mob skill")
    return skill


def _levels(levels: Node, build: Callable[[Node], _T], default: Callable[[], _T]) -> list[_T]:
    result = [default() for _ in levels]
    for level_node in levels:
        level = _parse_int(level_node.name)
        if level is None:
            continue
        if not 1 <= level <= len(result):
            raise ValueError(
                f"skill level {level} outside 1..{len(result)} in {levels.name!r}"
            )
        result[level - 1] = build(level_node)
    return result


def _section(section: Node, path: str, build: Callable[[Node], _T],
             default: Callable[[], _T], mask: Callable[[int], int], out: dict[int, list[_T]]) -> None:
    for skill_node in section:
        levels = skill_node.get("level")
        if levels is None:
            log.debug("Invalid node search: %s/%s/level", path, skill_node.name)
            continue
        skill_id = _parse_int(skill_node.name)
        if skill_id is None:
            continue
        out[mask(skill_id)] = _levels(levels, build, default)


def extract_skills(root: Node) -> tuple[dict[int, list[PlayerSkill]], dict[int, list[MobSkillLevel]]]:
    """Collect player skills keyed by skill id and mob skills keyed by mob skill id.

    Each value lists the skill's levels in order, level 1 first.
    """
    player_skills: dict[int, list[PlayerSkill]] = {}
    mob_skills: dict[int, list[MobSkillLevel]] = {}

    branch = root.find(_SKILL_ROOT)
    if branch is None:
        log.warning("Invalid node search: %s", _SKILL_ROOT)
        return player_skills, mob_skills

    for section in branch:
        if _parse_int(_strip_extension(section.name)) is None:
            path = f"{_SKILL_ROOT}/{section.name}"
            _section(section, path, _mob_skill, MobSkillLevel,
                     lambda value: value & 0xFF, mob_skills)
        else:
            path = f"{_SKILL_ROOT}/{section.name}/skill"
            skills = section.get("skill")
            if skills is None:
                log.warning("Invalid node search: %s", path)
                continue
            _section(skills, path, _player_skill, PlayerSkill,
                     lambda value: wrap_int(value, 32), player_skills)

    return player_skills, mob_skills