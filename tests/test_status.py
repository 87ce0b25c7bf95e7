import pytest

from valhalla.status import MobStatus


def test_source_values():
    assert MobStatus(0x8000000) is MobStatus.EMPTY
    assert MobStatus.combine(0x80000000) is MobStatus.NO_CLUE7
    assert MobStatus.combine(0x01) is MobStatus.WATK


def test_every_member_is_a_single_bit():
    assert all(MobStatus.combine(m) is m for m in MobStatus)
    assert all(int(m).bit_count() == 1 for m in MobStatus)
    assert len({int(m) for m in MobStatus}) == len(MobStatus.__members__)


def test_combine_of_all_fills_four_bytes():
    assert MobStatus.combine(*MobStatus) == 0xFFFFFFFF


def test_combine_empty_is_zero():
    assert MobStatus.combine() == 0


def test_combine_matches_or():
    combined = MobStatus.combine(MobStatus.STUN, MobStatus.POISON, MobStatus.EMPTY)
    assert combined == MobStatus.STUN | MobStatus.POISON | MobStatus.EMPTY
    assert MobStatus.POISON in combined
    assert MobStatus.SEAL not in combined


def test_combine_accepts_ints_and_is_idempotent():
    combined = MobStatus.combine(int(MobStatus.DOOM), MobStatus.DOOM)
    assert combined is MobStatus.DOOM


def test_combine_returns_mob_status():
    combined = MobStatus.combine(MobStatus.ACC, MobStatus.AVOID)
    assert isinstance(combined, MobStatus)
    assert combined & MobStatus.ACC == MobStatus.ACC


def test_combine_rejects_non_integers():
    with pytest.raises((TypeError, ValueError)):
        MobStatus.combine("stun")