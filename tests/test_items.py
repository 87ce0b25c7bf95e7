import pytest

from valhalla.nx.items import Item, extract_items
from valhalla.nx.node import Node


def n(name, value=None, *children):
    return Node(name, value, list(children))


def test_apply_reads_int_fields():
    item = Item()
    item.apply(n("info", None, n("incSTR", 5), n("price", 1000), n("slotMax", 100)))
    assert item.inc_str == 5
    assert item.price == 1000
    assert item.slot_max == 100


def test_apply_float_stat_fields():
    item = Item()
    item.apply(n("info", None, n("incPAD", 7), n("unitPrice", 0.5)))
    assert item.inc_pad == 7.0
    assert isinstance(item.inc_pad, float)
    assert item.unit_price == 0.5


def test_apply_int16_wraps():
    item = Item()
    item.apply(n("info", None, n("incSTR", 0xFFFF)))
    assert item.inc_str == -1


def test_apply_typo_aliases():
    item = Item()
    item.apply(n("info", None, n("incLUk", 3), n("incMMD", 4), n("regPOP", 9)))
    assert item.inc_luk == 3
    assert item.inc_mdd == 4.0
    assert item.req_pop == 9


def test_apply_text_and_bool():
    item = Item()
    item.apply(n("info", None, n("vslot", "Cp"), n("cash", 1), n("path", "some/path")))
    assert item.v_slot == "Cp"
    assert item.cash is True
    assert item.path == "some/path"


def test_apply_ignores_unknown_and_icon_options():
    item = Item()
    item.apply(n("info", None, n("icon", None), n("somethingNew", 42)))
    assert item == Item()


def test_apply_rejects_text_for_number():
    with pytest.raises(ValueError):
        Item().apply(n("info", None, n("price", "lots")))


def _tree():
    return n(
        "",
        None,
        n(
            "Character",
            None,
            n("Cap", None, n("1002140.img", None, n("info", None, n("tuc", 7), n("reqLevel", 10)))),
            n("Weapon", None, n("bogus.img", None, n("info", None, n("tuc", 1)))),
        ),
        n(
            "Item",
            None,
            n("Etc", None, n("0400.img", None, n("04000000.img", None, n("info", None, n("price", 5))))),
            n(
                "Consume",
                None,
                n(
                    "0200.img",
                    None,
                    n("02000000.img", None, n("info", None, n("price", 50)), n("spec", None, n("hp", 50))),
                    n("02000001.img", None, n("spec", None, n("mp", 30))),
                ),
            ),
            n("Pet", None, n("5000000.img", None, n("info", None, n("life", 90)))),
        ),
    )


def test_extract_character_items():
    items = extract_items(_tree())
    cap = items[1002140]
    assert cap.tuc == 7
    assert cap.req_level == 10
    assert cap.inv_tab_id == 1
    assert cap.pet is False


def test_extract_skips_invalid_names():
    items = extract_items(_tree())
    assert all(isinstance(key, int) for key in items)
    assert not any(item.tuc == 1 for item in items.values())


def test_extract_grouped_items():
    items = extract_items(_tree())
    assert items[4000000].price == 5
    assert items[4000000].inv_tab_id == 4


def test_extract_consume_merges_info_and_spec():
    items = extract_items(_tree())
    potion = items[2000000]
    assert potion.price == 50
    assert potion.hp == 50


def test_extract_consume_without_info_still_added():
    items = extract_items(_tree())
    assert items[2000001].mp == 30
    assert items[2000001].price == 0


def test_extract_marks_pets():
    items = extract_items(_tree())
    pet = items[5000000]
    assert pet.pet is True
    assert pet.life == 90


def test_extract_empty_tree():
    assert extract_items(n("")) == {}