"""Map definitions read from the game-data tree."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from valhalla.nx.node import Node, parse_id, wrap_int

log = logging.getLogger(__name__)

_MAP_BRANCHES = ("/Map/Map/Map0", "/Map/Map/Map1", "/Map/Map/Map2", "/Map/Map/Map9")
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class Portal:
    """A portal placed in a map."""

    id: int = 0
    pn: str = ""
    tm: int = 0
    tn: str = ""
    pt: int = 0
    x: int = 0
    y: int = 0
    script: str = ""


@dataclass
class Life:
    """An NPC or mob spawn point in a map."""

    id: int = 0
    type: str = ""
    foothold: int = 0
    face_left: bool = False
    x: int = 0
    y: int = 0
    mob_time: int = 0
    hide: int = 0
    rx0: int = 0
    rx1: int = 0
    cy: int = 0
    info: int = 0


@dataclass
class Reactor:
    """A reactor placed in a map."""

    id: int = 0
    face_left: int = 0
    x: int = 0
    y: int = 0
    reactor_time: int = 0
    name: str = ""


@dataclass
class Foothold:
    """A walkable line segment in a map."""

    id: int = 0
    x1: int = 0
    x2: int = 0
    y1: int = 0
    y2: int = 0
    prev: int = 0
    next: int = 0


@dataclass
class Map:
    """Static data for one map id."""

    town: bool = False
    forced_return: int = 0
    return_map: int = 0
    mob_rate: float = 0.0
    swim: int = 0
    personal_shop: int = 0
    entrusted_shop: int = 0
    scroll_disable: int = 0
    move_limit: int = 0
    dec_hp: int = 0
    npcs: list[Life] = field(default_factory=list)
    mobs: list[Life] = field(default_factory=list)
    portals: list[Portal] = field(default_factory=list)
    reactors: list[Reactor] = field(default_factory=list)
    footholds: list[Foothold] = field(default_factory=list)
    field_limit: int = 0
    vr_right: int = 0
    vr_top: int = 0
    vr_left: int = 0
    vr_bottom: int = 0
    vr_limit: int = 0
    recovery: float = 0.0
    version: int = 0
    bgm: str = ""
    map_mark: str = ""
    cloud: int = 0
    hide_minimap: int = 0
    map_desc: str = ""
    effect: str = ""
    fs: float = 0.0
    time_limit: int = 0
    field_type: int = 0
    everlast: int = 0
    snow: int = 0
    rain: int = 0
    map_name: str = ""
    street_name: str = ""
    help: str = ""


def _as_int(value: Any) -> int:
    if isinstance(value, (bool, int, float)):
        return int(value)
    raise ValueError(f"expected a number, got {value!r}")


def _i16(value: Any) -> int:
    return wrap_int(_as_int(value), 16)


def _i32(value: Any) -> int:
    return wrap_int(_as_int(value), 32)


def _i64(value: Any) -> int:
    return wrap_int(_as_int(value), 64)


def _flag(value: Any) -> bool:
    return (_as_int(value) & 0xFF) != 0


def _float(value: Any) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    raise ValueError(f"expected a number, got {value!r}")


def _text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _parse_int(text: Any) -> int | None:
    if isinstance(text, int) and not isinstance(text, bool):
        return text
    if isinstance(text, str) and _INT_PATTERN.fullmatch(text):
        return int(text)
    return None


_Converter = Callable[[Any], Any]

_INFO_OPTIONS: dict[str, tuple[str, _Converter]] = {
    "town": ("town", _flag),
    "mobRate": ("mob_rate", _float),
    "forcedReturn": ("forced_return", _i64),
    "personalShop": ("personal_shop", _i64),
    "entrustedShop": ("entrusted_shop", _i64),
    "swim": ("swim", _i64),
    "moveLimit": ("move_limit", _i64),
    "decHP": ("dec_hp", _i64),
    "scrollDisable": ("scroll_disable", _i64),
    "fieldLimit": ("field_limit", _i64),
    "VRRight": ("vr_right", _i64),
    "VRTop": ("vr_top", _i64),
    "VRLeft": ("vr_left", _i64),
    "VRBottom": ("vr_bottom", _i64),
    "VRLimit": ("vr_limit", _i64),
    "recovery": ("recovery", _float),
    "returnMap": ("return_map", _i32),
    "version": ("version", _i64),
    "bgm": ("bgm", _text),
    "mapMark": ("map_mark", _text),
    "cloud": ("cloud", _i64),
    "hideMinimap": ("hide_minimap", _i64),
    "mapDesc": ("map_desc", _text),
    "effect": ("effect", _text),
    "fs": ("fs", _float),
    "timeLimit": ("time_limit", _i64),
    "fieldType": ("field_type", _i64),
    "everlast": ("everlast", _i64),
    "snow": ("snow", _i64),
    "rain": ("rain", _i64),
    "mapName": ("map_name", _text),
    "streetName": ("street_name", _text),
    "help": ("help", _text),
}

_PORTAL_OPTIONS: dict[str, tuple[str, _Converter]] = {
    "pt": ("pt", _i64),
    "pn": ("pn", _text),
    "tm": ("tm", _i32),
    "tn": ("tn", _text),
    "x": ("x", _i16),
    "y": ("y", _i16),
    "script": ("script", _text),
}

_LIFE_OPTIONS: dict[str, tuple[str, _Converter]] = {
    "type": ("type", _text),
    "fh": ("foothold", _i16),
    "f": ("face_left", _flag),
    "x": ("x", _i16),
    "y": ("y", _i16),
    "mobTime": ("mob_time", lambda v: _i64(v) * 1000),
    "hide": ("hide", _i64),
    "rx0": ("rx0", _i16),
    "rx1": ("rx1", _i16),
    "cy": ("cy", _i64),
    "info": ("info", _i64),
}

_REACTOR_OPTIONS: dict[str, tuple[str, _Converter]] = {
    "id": ("id", _i64),
    "x": ("x", _i64),
    "y": ("y", _i64),
    "f": ("face_left", _i64),
    "reactorTime": ("reactor_time", _i64),
    "name": ("name", _text),
}

_FOOTHOLD_OPTIONS: dict[str, tuple[str, _Converter]] = {
    "x1": ("x1", lambda v: wrap_int(_i64(v), 16)),
    "x2": ("x2", lambda v: wrap_int(_i64(v), 16)),
    "y1": ("y1", lambda v: wrap_int(_i64(v), 16)),
    "y2": ("y2", lambda v: wrap_int(_i64(v), 16)),
    "next": ("next", _i64),
    "prev": ("prev", _i64),
}


def _apply(target: Any, node: Node, options: dict[str, tuple[str, _Converter]],
           kind: str, ignored: frozenset[str] = frozenset()) -> None:
    for option in node:
        if option.name in ignored:
            continue
        entry = options.get(option.name)
        if entry is None:
            log.debug("Unsupported %s option: %s -> %r", kind, option.name, option.value)
            continue
        attribute, convert = entry
        setattr(target, attribute, convert(option.value))


def _map_info(node: Node) -> Map:
    result = Map()
    _apply(result, node, _INFO_OPTIONS, "map")
    return result


def _portals(node: Node) -> list[Portal]:
    portals = []
    for portal_node in node:
        number = _parse_int(portal_node.name)
        if number is None:
            log.debug("Skipping portal with non-numeric id: %s", portal_node.name)
            continue
        portal = Portal(id=number & 0xFF)
        _apply(portal, portal_node, _PORTAL_OPTIONS, "portal")
        portals.append(portal)
    return portals


def _lifes(node: Node) -> tuple[list[Life], list[Life]]:
    npcs: list[Life] = []
    mobs: list[Life] = []
    for life_node in node:
        life = Life()
        for option in life_node:
            if option.name == "id":
                life_id = _parse_int(option.value)
                if life_id is not None:
                    life.id = wrap_int(life_id, 32)
                continue
            entry = _LIFE_OPTIONS.get(option.name)
            if entry is None:
                log.debug("Unsupported life option: %s -> %r", option.name, option.value)
                continue
            attribute, convert = entry
            setattr(life, attribute, convert(option.value))

        if life.type == "m":
            mobs.append(life)
        elif life.type == "n":
            npcs.append(life)
        else:
            log.debug("Unsupported life type: %s", life.type)
    return npcs, mobs


def _reactors(node: Node) -> list[Reactor]:
    reactors = []
    for reactor_node in node:
        reactor = Reactor()
        _apply(reactor, reactor_node, _REACTOR_OPTIONS, "reactor")
        reactors.append(reactor)
    return reactors


def _footholds(node: Node) -> list[Foothold]:
    footholds = []
    for layer in node:
        for group in layer:
            for fh_node in group:
                fh_id = _parse_int(fh_node.name)
                if fh_id is None:
                    log.debug("Invalid foothold id: %s", fh_node.name)
                    continue
                foothold = Foothold(id=wrap_int(fh_id, 16))
                _apply(foothold, fh_node, _FOOTHOLD_OPTIONS, "foothold", frozenset({"force"}))
                footholds.append(foothold)
    return footholds


def _read_map(branch: str, map_node: Node) -> Map:
    info = map_node.get("info")
    if info is None:
        log.warning("Invalid node search: %s/%s/info", branch, map_node.name)
        result = Map()
    else:
        result = _map_info(info)

    life = map_node.get("life")
    if life is not None:
        result.npcs, result.mobs = _lifes(life)

    portal = map_node.get("portal")
    if portal is not None:
        result.portals = _portals(portal)

    reactor = map_node.get("reactor")
    if reactor is not None:
        result.reactors = _reactors(reactor)

    foothold = map_node.get("foothold")
    if foothold is not None:
        result.footholds = _footholds(foothold)

    return result


def extract_maps(root: Node) -> dict[int, Map]:
    """Collect every map under the map branches, keyed by map id."""
    maps: dict[int, Map] = {}
    for branch in _MAP_BRANCHES:
        branch_node = root.find(branch)
        if branch_node is None:
            log.warning("Invalid node search: %s", branch)
            continue
        for map_node in branch_node:
            loaded = _read_map(branch, map_node)
            try:
                map_id = parse_id(map_node.name)
            except ValueError as err:
                log.warning("Invalid map id name: %s (%s)", map_node.name, err)
                continue
            maps[map_id] = loaded
    return maps