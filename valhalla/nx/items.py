"""Item definitions read from the game-data tree."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from valhalla.nx.node import Node, parse_id, wrap_int

log = logging.getLogger(__name__)


@dataclass
class Item:
    """Static data for one item id."""

    inv_tab_id: int = 0
    cash: bool = False
    pet: bool = False
    only: int = 0
    trade_block: int = 0
    expire_on_logout: int = 0
    quest: int = 0
    time_limited: int = 0
    req_level: int = 0
    tuc: int = 0
    slot_max: int = 0
    req_job: int = 0
    req_str: int = 0
    req_dex: int = 0
    req_int: int = 0
    req_luk: int = 0
    inc_str: int = 0
    inc_dex: int = 0
    inc_int: int = 0
    inc_luk: int = 0
    inc_acc: float = 0.0
    inc_eva: float = 0.0
    inc_mdd: float = 0.0
    inc_pdd: float = 0.0
    inc_mad: float = 0.0
    inc_pad: float = 0.0
    inc_mhp: float = 0.0
    inc_mmp: float = 0.0
    speed: int = 0
    jump: int = 0
    pad: int = 0
    pdd: int = 0
    mad: int = 0
    mdd: int = 0
    acc: int = 0
    eva: int = 0
    poison: int = 0
    darkness: int = 0
    weakness: int = 0
    curse: int = 0
    seal: int = 0
    attack: float = 0.0
    inc_jump: float = 0.0
    inc_speed: float = 0.0
    recovery_hp: float = 0.0
    hp: int = 0
    mp: int = 0
    time: int = 0
    attack_speed: int = 0
    price: int = 0
    not_sale: int = 0
    unit_price: float = 0.0
    life: int = 0
    hungry: int = 0
    pickup_item: int = 0
    pickup_all: int = 0
    sweep_for_drop: int = 0
    consume_hp: int = 0
    long_range: int = 0
    recovery: float = 0.0
    req_pop: int = 0
    name_tag: int = 0
    pachinko: int = 0
    v_slot: str = ""
    i_slot: str = ""
    type: int = 0
    success: int = 0
    cursed: int = 0
    add: int = 0
    drop_sweep: int = 0
    rate: int = 0
    meso: int = 0
    path: str = ""
    float_type: int = 0
    no_flip: str = ""
    state_change_item: int = 0
    big_size: int = 0
    sfx: str = ""
    walk: int = 0
    after_image: str = ""
    stand: int = 0
    knockback: int = 0
    fs: int = 0
    chat_balloon: int = 0
    move_to: int = 0

    def apply(self, node: Node) -> None:
        """Fill fields from the option children of an ``info`` or ``spec`` node."""
        for option in node:
            if option.name in _IGNORED:
                continue
            entry = _OPTIONS.get(option.name)
            if entry is None:
                log.debug("Unsupported item option: %s -> %r", option.name, option.value)
                continue
            attribute, convert = entry
            setattr(self, attribute, convert(option.value))


def _as_int(value: Any) -> int:
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        return int(value)
    raise ValueError(f"expected a number, got {value!r}")


def _i16(value: Any) -> int:
    return wrap_int(_as_int(value), 16)


def _i32(value: Any) -> int:
    return wrap_int(_as_int(value), 32)


def _i64(value: Any) -> int:
    return wrap_int(_as_int(value), 64)


def _byte(value: Any) -> int:
    return _as_int(value) & 0xFF


def _flag(value: Any) -> bool:
    return _byte(value) != 0


def _f16(value: Any) -> float:
    return float(_i16(value))


def _f64(value: Any) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    raise ValueError(f"expected a number, got {value!r}")


def _text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


_Converter = Callable[[Any], Any]

_OPTIONS: dict[str, tuple[str, _Converter]] = {
    "cash": ("cash", _flag),
    "reqSTR": ("req_str", _i16),
    "reqDEX": ("req_dex", _i16),
    "reqINT": ("req_int", _i16),
    "reqLUK": ("req_luk", _i16),
    "reqJob": ("req_job", _i64),
    "reqLevel": ("req_level", _byte),
    "price": ("price", _i32),
    "incSTR": ("inc_str", _i16),
    "incDEX": ("inc_dex", _i16),
    "incINT": ("inc_int", _i16),
    "incLUK": ("inc_luk", _i16),
    "incLUk": ("inc_luk", _i16),
    "incMMD": ("inc_mdd", _f16),
    "incMDD": ("inc_mdd", _f16),
    "incPDD": ("inc_pdd", _f16),
    "incMAD": ("inc_mad", _f16),
    "incPAD": ("inc_pad", _f16),
    "incEVA": ("inc_eva", _f16),
    "incACC": ("inc_acc", _f16),
    "incMHP": ("inc_mhp", _f16),
    "recoveryHP": ("recovery_hp", _f16),
    "incMMP": ("inc_mmp", _f16),
    "hp": ("hp", _i16),
    "mp": ("mp", _i16),
    "mdd": ("mdd", _i16),
    "mad": ("mad", _i16),
    "pad": ("pad", _i16),
    "pdd": ("pdd", _i16),
    "speed": ("speed", _i16),
    "jump": ("jump", _i16),
    "acc": ("acc", _i16),
    "eva": ("eva", _i16),
    "darkness": ("darkness", _i16),
    "weakness": ("weakness", _i16),
    "curse": ("curse", _i16),
    "poison": ("poison", _i16),
    "seal": ("seal", _i16),
    "only": ("only", _i64),
    "attackSpeed": ("attack_speed", _i16),
    "attack": ("attack", _f16),
    "incSpeed": ("inc_speed", _f16),
    "incJump": ("inc_jump", _f16),
    "tuc": ("tuc", _byte),
    "notSale": ("not_sale", _i64),
    "tradeBlock": ("trade_block", _i64),
    "expireOnLogout": ("expire_on_logout", _i64),
    "slotMax": ("slot_max", _i16),
    "quest": ("quest", _i64),
    "life": ("life", _i64),
    "hungry": ("hungry", _i64),
    "pickupItem": ("pickup_item", _i64),
    "pickupAll": ("pickup_all", _i64),
    "sweepForDrop": ("sweep_for_drop", _i64),
    "longRange": ("long_range", _i64),
    "consumeHP": ("consume_hp", _i64),
    "unitPrice": ("unit_price", _f64),
    "timeLimited": ("time_limited", _i64),
    "recovery": ("recovery", _f64),
    "regPOP": ("req_pop", _i64),
    "reqPOP": ("req_pop", _i64),
    "nameTag": ("name_tag", _i64),
    "pachinko": ("pachinko", _i64),
    "vslot": ("v_slot", _text),
    "islot": ("i_slot", _text),
    "type": ("type", _i64),
    "success": ("success", _i64),
    "cursed": ("cursed", _i64),
    "add": ("add", _i64),
    "dropSweep": ("drop_sweep", _i64),
    "time": ("time", _i16),
    "rate": ("rate", _i64),
    "meso": ("meso", _i64),
    "path": ("path", _text),
    "floatType": ("float_type", _i64),
    "noFlip": ("no_flip", _text),
    "stateChangeItem": ("state_change_item", _i64),
    "bigSize": ("big_size", _i64),
    "sfx": ("sfx", _text),
    "walk": ("walk", _i64),
    "afterImage": ("after_image", _text),
    "stand": ("stand", _i64),
    "knockback": ("knockback", _i64),
    "fs": ("fs", _i64),
    "chatBalloon": ("chat_balloon", _i64),
    "moveTo": ("move_to", _i32),
}

_IGNORED = frozenset({"icon", "iconRaw", "sample", "iconD", "iconRawD", "iconReward"})

_CHARACTER_CATEGORIES = (
    "/Character/Accessory", "/Character/Cap", "/Character/Cape", "/Character/Coat",
    "/Character/Face", "/Character/Glove", "/Character/Hair", "/Character/Longcoat",
    "/Character/Pants", "/Character/PetEquip", "/Character/Ring", "/Character/Shield",
    "/Character/Shoes", "/Character/Weapon",
)
_GROUPED_CATEGORIES = ("/Item/Cash", "/Item/Etc", "/Item/Install")
_CONSUME = "/Item/Consume"
_PET = "/Item/Pet"


def _inventory_tab(item_id: int) -> int:
    quotient = abs(item_id) // 1_000_000
    if item_id < 0:
        quotient = -quotient
    return quotient & 0xFF


def _register(name: str, item: Item, out: dict[int, Item]) -> None:
    try:
        item_id = parse_id(name)
    except ValueError as err:
        log.warning("Invalid item id name: %s (%s)", name, err)
        return
    item.inv_tab_id = _inventory_tab(item_id)
    out[item_id] = item


def _item_from_info(path: str, node: Node) -> Item | None:
    info = node.get("info")
    if info is None:
        log.warning("Invalid node search: %s/%s/info", path, node.name)
        return None
    item = Item()
    item.apply(info)
    return item


def extract_items(root: Node) -> dict[int, Item]:
    """Collect every item under the equipment and item branches, keyed by id."""
    items: dict[int, Item] = {}

    for base in _CHARACTER_CATEGORIES:
        category = root.find(base)
        if category is None:
            log.warning("Invalid node search: %s", base)
            continue
        for item_node in category:
            item = _item_from_info(base, item_node)
            if item is not None:
                _register(item_node.name, item, items)

    for base in _GROUPED_CATEGORIES:
        category = root.find(base)
        if category is None:
            log.warning("Invalid node search: %s", base)
            continue
        for group in category:
            for item_node in group:
                item = _item_from_info(f"{base}/{group.name}", item_node)
                if item is not None:
                    _register(item_node.name, item, items)

    consume = root.find(_CONSUME)
    if consume is None:
        log.warning("Invalid node search: %s", _CONSUME)
    else:
        for group in consume:
            for item_node in group:
                item = Item()
                info = item_node.get("info")
                if info is None:
                    log.warning(
                        "Invalid node search: %s/%s/%s/info", _CONSUME, group.name, item_node.name
                    )
                else:
                    item.apply(info)
                spec = item_node.get("spec")
                if spec is not None:
                    item.apply(spec)
                _register(item_node.name, item, items)

    pets = root.find(_PET)
    if pets is None:
        log.warning("Invalid node search: %s", _PET)
    else:
        for item_node in pets:
            item = _item_from_info(_PET, item_node)
            if item is not None:
                item.pet = True
                _register(item_node.name, item, items)

    return items