import pytest

from valhalla.nx.node import Node
from valhalla.nx.skill_data import MobSkillLevel, PlayerSkill, extract_skills


def n(name, value=None, *children):
    return Node(name, value, list(children))


def skill_root(*sections):
    return n("", None, n("Skill", None, *sections))


def test_missing_skill_branch_gives_empty_maps():
    assert extract_skills(n("")) == ({}, {})


def test_player_skill_levels_are_ordered_by_level():
    root = skill_root(
        n("100.img", None,
          n("skill", None,
            n("1001003", None,
              n("level", None,
                n("2", None, n("pdd", 20), n("mpCon", 12), n("time", 60)),
                n("1", None, n("pdd", 10), n("mpCon", 10), n("ball", 1)))))),
    )
    players, mobs = extract_skills(root)
    assert mobs == {}
    levels = players[1001003]
    assert len(levels) == 2
    assert levels[0].pdd == 10
    assert levels[0].mp_con == 10
    assert levels[1].pdd == 20
    assert levels[1].time == 60


def test_player_skill_vectors_and_text():
    root = skill_root(
        n("200.img", None,
          n("skill", None,
            n("2001004", None,
              n("level", None,
                n("1", None,
                  n("lt", (-70, -30)),
                  n("rb", (70, 0)),
                  n("action", "alert"),
                  n("hs", "h1"),
                  n("mad", 25)))))),
    )
    skill = extract_skills(root)[0][2001004][0]
    assert skill.lt == (-70, -30)
    assert skill.rb == (70, 0)
    assert skill.action == "alert"
    assert skill.hs == "h1"
    assert skill.mad == 25


def test_mob_skill_section():
    root = skill_root(
        n("MobSkill.img", None,
          n("100", None,
            n("level", None,
              n("1", None, n("hp", 300), n("interval", 30), n("limit", 4),
                n("time", 10), n("lt", (-1, -1)), n("mpCon", 5)),
              n("2", None, n("summonEffect", 3))))),
    )
    players, mobs = extract_skills(root)
    assert players == {}
    first, second = mobs[100]
    assert first == MobSkillLevel(hp=300, mp_con=5, limit=4, interval=30, time=10)
    assert second.summon_effect == 3


def test_non_numeric_skill_ids_and_missing_levels_are_skipped():
    root = skill_root(
        n("300.img", None,
          n("skill", None,
            n("abc", None, n("level", None, n("1", None, n("x", 1)))),
            n("3000000", None, n("info", None)),
            n("3001003", None, n("level", None, n("1", None, n("x", 7)))))),
    )
    players, _ = extract_skills(root)
    assert list(players) == [3001003]
    assert players[3001003] == [PlayerSkill(x=7)]


def test_level_outside_range_raises():
    root = skill_root(
        n("400.img", None,
          n("skill", None,
            n("4001003", None, n("level", None, n("5", None, n("x", 1)))))),
    )
    with pytest.raises(ValueError):
        extract_skills(root)


def test_non_numeric_level_names_leave_default_entry():
    root = skill_root(
        n("MobSkill.img", None,
          n("120", None,
            n("level", None,
              n("1", None, n("hp", 9)),
              n("note", None)))),
    )
    levels = extract_skills(root)[1][120]
    assert levels == [MobSkillLevel(hp=9), MobSkillLevel()]