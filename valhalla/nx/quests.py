"""Quest definitions read from the game-data tree."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from valhalla.nx.node import Node, wrap_int

log = logging.getLogger(__name__)

_INFO_ROOT = "/Quest/QuestInfo.img"
_CHECK_ROOT = "/Quest/Check.img"
_ACT_ROOT = "/Quest/Act.img"
_SAY_ROOT = "/Quest/Say.img"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT16_MIN = -(1 << 15)
_INT16_MAX = (1 << 15) - 1


@dataclass
class QuestStateReq:
    """A quest that must be in a given state."""

    id: int = 0
    state: int = 0


@dataclass
class ReqItem:
    """An item and count a quest requires."""

    id: int = 0
    count: int = 0


@dataclass
class ReqMob:
    """A mob and kill count a quest requires."""

    id: int = 0
    count: int = 0


@dataclass
class ActItem:
    """An item a quest gives or takes."""

    id: int = 0
    count: int = 0
    prop: int = 0
    job: int = 0
    gender: int = 0


@dataclass
class CheckBlock:
    """Requirements for starting or completing a quest."""

    npc: int = 0
    job: int = 0
    lv_min: int = 0
    lv_max: int = 0
    pop: int = 0
    prev_quests: list[QuestStateReq] = field(default_factory=list)
    items: list[ReqItem] = field(default_factory=list)
    mobs: list[ReqMob] = field(default_factory=list)


@dataclass
class ActBlock:
    """Rewards and actions applied when a quest starts or completes."""

    exp: int = 0
    money: int = 0
    pop: int = 0
    next_quest: int = 0
    fame: int = 0
    items: list[ActItem] = field(default_factory=list)


@dataclass
class Quest:
    """Static data for one quest id."""

    id: int = 0
    name: str = ""
    parent: str = ""
    order: int = 0
    area: int = 0
    journal: dict[int, str] = field(default_factory=dict)
    start: CheckBlock = field(default_factory=CheckBlock)
    complete: CheckBlock = field(default_factory=CheckBlock)
    act_on_start: ActBlock = field(default_factory=ActBlock)
    act_on_complete: ActBlock = field(default_factory=ActBlock)
    # Keys such as "start.0", "complete.1" or "start.yes".
    say: dict[str, list[str]] = field(default_factory=dict)


def _as_int(value: Any) -> int:
    if isinstance(value, (bool, int, float)):
        return int(value)
    raise ValueError(f"expected a number, got {value!r}")


def _i32(value: Any) -> int:
    return wrap_int(_as_int(value), 32)


def _i16_of_i32(value: Any) -> int:
    return wrap_int(_i32(value), 16)


def _i8_of_i32(value: Any) -> int:
    return wrap_int(_i32(value), 8)


def _text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _parse_int(text: str) -> int | None:
    if _INT_PATTERN.fullmatch(text):
        return int(text)
    return None


def _quest_id(name: str) -> int | None:
    dot = name.rfind(".")
    trimmed = name[:dot] if dot >= 0 else name
    value = _parse_int(trimmed)
    if value is None or not _INT16_MIN <= value <= _INT16_MAX:
        return None
    return value


def _quest_dirs(root: Node, path: str, out: dict[int, Quest]):
    """Yield (quest, directory) for every quest directory under ``path``."""
    image = root.find(path)
    if image is None:
        log.warning("Invalid node search: %s", path)
        return
    for directory in image:
        quest_id = _quest_id(directory.name)
        if quest_id is None:
            continue
        quest = out.setdefault(quest_id, Quest())
        quest.id = quest_id
        yield quest, directory


def _parse_info(root: Node, out: dict[int, Quest]) -> None:
    for quest, directory in _quest_dirs(root, _INFO_ROOT, out):
        for child in directory:
            key = child.name
            if key == "name":
                quest.name = _text(child.value)
            elif key == "parent":
                quest.parent = _text(child.value)
            elif key == "order":
                quest.order = _i16_of_i32(child.value)
            elif key == "area":
                quest.area = _i32(child.value)
            else:
                index = _parse_int(key)
                if index is not None:
                    quest.journal[index] = _text(child.value)


def _fields(node: Node) -> dict[str, Any]:
    return {child.name: child.value for child in node}


def _req_items(node: Node) -> list[ReqItem]:
    result = []
    for entry in node:
        values = _fields(entry)
        item = ReqItem(
            id=_i32(values["id"]) if "id" in values else 0,
            count=_i32(values["count"]) if "count" in values else 0,
        )
        if item.id != 0:
            result.append(item)
    return result


def _req_mobs(node: Node) -> list[ReqMob]:
    result = []
    for entry in node:
        values = _fields(entry)
        mob = ReqMob(
            id=_i32(values["id"]) if "id" in values else 0,
            count=_i32(values["count"]) if "count" in values else 0,
        )
        if mob.id != 0:
            result.append(mob)
    return result


def _req_quests(node: Node) -> list[QuestStateReq]:
    result = []
    for entry in node:
        values = _fields(entry)
        requirement = QuestStateReq(
            id=_i16_of_i32(values["id"]) if "id" in values else 0,
            state=_i8_of_i32(values["state"]) if "state" in values else 0,
        )
        if requirement.id != 0:
            result.append(requirement)
    return result


def _act_items(node: Node) -> list[ActItem]:
    result = []
    for entry in node:
        item = ActItem()
        for child in entry:
            if child.name in ("id", "count", "prop", "job", "gender"):
                setattr(item, child.name, _i32(child.value))
        if item.id != 0:
            result.append(item)
    return result


def parse_job_list(node: Node) -> list[int]:
    """Job ids listed under ``node``, either as direct values or nested ``job`` entries."""
    jobs: list[int] = []
    for child in node:
        if not child.children:
            jobs.append(_i32(child.value))
            continue
        jobs.extend(
            _i32(inner.value)
            for inner in child
            if inner.name == "job" and not inner.children
        )
    return jobs


def _check_block(phase: Node) -> CheckBlock:
    block = CheckBlock()
    for entry in phase:
        key = entry.name
        if key == "npc":
            block.npc = _i32(entry.value)
        elif key == "job":
            block.job = _i32(entry.value)
        elif key == "lvmin":
            block.lv_min = _i32(entry.value)
        elif key == "lvmax":
            block.lv_max = _i32(entry.value)
        elif key == "pop":
            block.pop = _i32(entry.value)
        elif key == "item":
            block.items.extend(_req_items(entry))
        elif key == "mob":
            block.mobs.extend(_req_mobs(entry))
        elif key == "quest":
            block.prev_quests.extend(_req_quests(entry))
    return block


def _parse_check(root: Node, out: dict[int, Quest]) -> None:
    for quest, directory in _quest_dirs(root, _CHECK_ROOT, out):
        for phase in directory:
            block = _check_block(phase)
            if phase.name == "0":
                quest.start = block
            elif phase.name == "1":
                quest.complete = block


def _act_block(phase: Node) -> ActBlock:
    block = ActBlock()
    for entry in phase:
        key = entry.name
        if key == "exp":
            block.exp = _i32(entry.value)
        elif key == "money":
            block.money = _i32(entry.value)
        elif key == "pop":
            block.pop = _i32(entry.value)
            block.fame = block.pop
        elif key == "nextQuest":
            block.next_quest = _i16_of_i32(entry.value)
        elif key == "item":
            block.items.extend(_act_items(entry))
    return block


def _parse_act(root: Node, out: dict[int, Quest]) -> None:
    for quest, directory in _quest_dirs(root, _ACT_ROOT, out):
        for phase in directory:
            block = _act_block(phase)
            if phase.name == "0":
                quest.act_on_start = block
            elif phase.name == "1":
                quest.act_on_complete = block


def _collect_say(node: Node, base: str, acc: dict[str, list[str]]) -> None:
    for child in node:
        if not child.children:
            if _parse_int(child.name) is not None:
                acc.setdefault(base, []).append(_text(child.value))
        else:
            _collect_say(child, f"{base}.{child.name}", acc)


def _parse_say(root: Node, out: dict[int, Quest]) -> None:
    for quest, directory in _quest_dirs(root, _SAY_ROOT, out):
        for phase in directory:
            prefix = "complete" if phase.name == "1" else "start"
            for entry in phase:
                if not entry.children:
                    if _parse_int(entry.name) is not None:
                        key = f"{prefix}.{entry.name}"
                        quest.say.setdefault(key, []).append(_text(entry.value))
                else:
                    _collect_say(entry, f"{prefix}.{entry.name}", quest.say)


def extract_quests(root: Node) -> dict[int, Quest]:
    """Build quests from the info, check, act and say images, keyed by quest id."""
    quests: dict[int, Quest] = {}
    _parse_info(root, quests)
    _parse_check(root, quests)
    _parse_act(root, quests)
    _parse_say(root, quests)
    return quests