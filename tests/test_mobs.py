from valhalla.nx.mobs import Mob, extract_mobs
from valhalla.nx.node import Node, wrap_int


def n(name, value=None, *children):
    return Node(name, value, list(children))


def tree(*mobs):
    return n("", None, n("Mob", None, *mobs))


def test_basic_stats_and_hp_follow_max():
    info = n(
        "info", None,
        n("maxHP", 125), n("maxMP", 10), n("level", 5), n("exp", 8),
        n("PADamage", 12), n("speed", -30), n("boss", 1), n("elemAttr", "F2"),
        n("fs", 10.5),
    )
    mobs = extract_mobs(tree(n("100100.img", None, info)))
    mob = mobs[100100]
    assert mob.max_hp == 125
    assert mob.hp == mob.max_hp
    assert mob.mp == mob.max_mp == 10
    assert mob.level == 5
    assert mob.exp == 8
    assert mob.pa_damage == 12
    assert mob.speed == -30
    assert mob.boss == 1
    assert mob.elem_attr == "F2"
    assert mob.fs == 10.5


def test_skills_map_skill_id_to_level():
    skill = n(
        "skill", None,
        n("0", None, n("skill", 120), n("level", 3), n("action", 1)),
        n("1", None, n("skill", 121), n("level", 2), n("effectAfter", 0)),
    )
    mob = extract_mobs(tree(n("1.img", None, n("info", None, skill))))[1]
    assert mob.skills == {120: 3, 121: 2}


def test_revives_keep_order():
    revive = n("revive", None, n("0", 100101), n("1", 100102))
    mob = extract_mobs(tree(n("2.img", None, n("info", None, revive))))[2]
    assert mob.revives == [100101, 100102]


def test_summon_type_is_signed_byte():
    info = n("info", None, n("summonType", 255), n("summonOption", 7))
    mob = extract_mobs(tree(n("3.img", None, info)))[3]
    assert mob.summon_type == wrap_int(255, 8)
    assert mob.summon_type < 0
    assert mob.summon_option == 7


def test_mob_without_info_gets_defaults():
    assert extract_mobs(tree(n("4.img"))) == {4: Mob()}


def test_non_numeric_names_are_skipped():
    mobs = extract_mobs(tree(n("bad.img", None, n("info")), n("5.img", None, n("info"))))
    assert list(mobs) == [5]


def test_unknown_options_are_ignored():
    info = n("info", None, n("mysteryField", 3), n("undead", 1))
    mob = extract_mobs(tree(n("6.img", None, info)))[6]
    assert mob == Mob(undead=1)


def test_missing_branch_gives_no_mobs():
    assert extract_mobs(n("")) == {}


def test_remove_after_and_tag_colours():
    info = n("info", None, n("removeAfter", "10"), n("hpTagColor", 4), n("hpTagBgcolor", 5))
    mob = extract_mobs(tree(n("7.img", None, info)))[7]
    assert mob.remove_after == "10"
    assert mob.hp_tag_color == 4
    assert mob.hp_tag_bg_color == 5


def test_mobs_do_not_share_skill_dicts():
    mobs = extract_mobs(tree(n("8.img", None, n("info")), n("9.img", None, n("info"))))
    mobs[8].skills[1] = 1
    assert mobs[9].skills == {}