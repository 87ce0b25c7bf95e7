import pytest

from valhalla.nx.node import Node, parse_id, wrap_int


def n(name, value=None, *children):
    return Node(name, value, list(children))


@pytest.fixture
def tree():
    return n(
        "",
        None,
        n("Character", None, n("Cap", None, n("1002140.img", None, n("info", None, n("tuc", 7))))),
        n("Item", None),
    )


def test_find_nested_path(tree):
    node = tree.find("/Character/Cap/1002140.img/info/tuc")
    assert node is not None
    assert node.value == 7


def test_find_missing_returns_none(tree):
    assert tree.find("/Character/Shoes") is None
    assert tree.find("/Nope/Cap") is None


def test_find_empty_path_is_self(tree):
    assert tree.find("") is tree
    assert tree.find("/") is tree


def test_find_without_leading_slash(tree):
    assert tree.find("Character/Cap").name == "Cap"


def test_get_direct_child(tree):
    assert tree.get("Item").name == "Item"
    assert tree.get("Cap") is None


def test_iteration_and_len(tree):
    assert [child.name for child in tree] == ["Character", "Item"]
    assert len(tree) == 2


def test_wrap_int_negative():
    assert wrap_int(0xFFFF, 16) == -1
    assert wrap_int(0x8000, 16) == -32768


def test_wrap_int_keeps_in_range_values():
    for value in (0, 1, 32767, -32768, -5):
        assert wrap_int(value, 16) == value


def test_wrap_int_is_idempotent():
    for value in (123456789, -987654321, 1 << 40):
        once = wrap_int(value, 32)
        assert wrap_int(once, 32) == once
        assert -(1 << 31) <= once < (1 << 31)


def test_wrap_int_rejects_bad_width():
    with pytest.raises(ValueError):
        wrap_int(1, 0)


def test_parse_id_strips_extension():
    assert parse_id("1002140.img") == 1002140
    assert parse_id("2000000") == 2000000


def test_parse_id_rejects_non_numbers():
    with pytest.raises(ValueError):
        parse_id("abc.img")
    with pytest.raises(ValueError):
        parse_id(" 12.img")
    with pytest.raises(ValueError):
        parse_id("1_000.img")


def test_parse_id_rejects_out_of_range():
    with pytest.raises(ValueError):
        parse_id("99999999999.img")