import pytest

from valhalla import constants, skills
from valhalla.skills import JobSkills, MobSkill, MobStat, Skill, job_skills


def test_skill_values_from_source():
    assert Skill(1000002) is Skill.ENDURE
    assert Skill(50010010) is Skill.JUMP_DOWN
    assert Skill(4001344) is Skill.LUCKY_SEVEN


def test_skill_ids_are_unique():
    assert all(Skill(int(s)) is s for s in Skill)
    assert len(list(Skill)) == len(Skill.__members__)


def test_swordsman_skills():
    assert skills.SWORDSMAN.job_id == constants.WARRIOR_JOB_ID
    assert skills.SWORDSMAN.has(Skill.ENDURE)
    assert skills.SWORDSMAN["iron_body"] is Skill.IRON_BODY
    assert not skills.SWORDSMAN.has(Skill.RAGE)


def test_has_accepts_plain_int():
    assert skills.HERMIT.has(int(Skill.SHADOW_PARTNER))
    assert not skills.HERMIT.has(int(Skill.GM_SHADOW_PARTNER))


def test_magician_recovery_uses_crusader_skill():
    assert skills.MAGICIAN["improved_mp_recovery"] is Skill.IMPROVED_MP_RECOVERY
    assert not skills.MAGICIAN.has(Skill.MAG_IMPROVED_MP_RECOVERY)


def test_job_variants_have_distinct_ids():
    page = job_skills(constants.PAGE_JOB_ID)
    fighter = job_skills(constants.FIGHTER_JOB_ID)
    assert page.has(Skill.PAGE_POWER_GUARD)
    assert not page.has(Skill.POWER_GUARD)
    assert fighter.has(Skill.POWER_GUARD)
    assert not fighter.has(Skill.PAGE_POWER_GUARD)


def test_job_skills_lookup():
    assert job_skills(constants.SUPER_GM_JOB_ID) is skills.GM
    assert job_skills(constants.THIEF_JOB_ID) is skills.ROGUE
    assert job_skills(constants.BOWMAN_JOB_ID) is skills.ARCHER


@pytest.mark.parametrize("job_id", [constants.BEGINNER_JOB_ID, constants.GM_JOB_ID, 999])
def test_job_skills_unknown(job_id):
    with pytest.raises(KeyError):
        job_skills(job_id)


@pytest.mark.parametrize("job", skills.ALL_JOBS, ids=lambda j: j.name)
def test_every_job_round_trips(job: JobSkills):
    assert job_skills(job.job_id) is job
    assert all(job.has(s) for s in job.skills.values())


def test_job_skills_is_read_only():
    ranger = job_skills(constants.RANGER_JOB_ID)
    with pytest.raises(TypeError):
        ranger.skills["puppet"] = Skill.SNIPER_PUPPET
    assert ranger.has(Skill.PUPPET)


def test_mob_skill_values():
    assert MobSkill.SUMMON == 200
    assert MobSkill.SPEED_UP_AOE == 115
    assert MobSkill(131) is MobSkill.POISON_MIST


def test_mob_stat_physical_immune_matches_power_guard():
    assert MobStat(0x4000) is MobStat.PHYSICAL_IMMUNE
    assert MobStat(0x4000) is MobStat.POWER_GUARD_UP
    assert MobStat(0x4000000) is MobStat.SEAL_SKILL


def test_mob_stat_combination():
    combined = MobStat(0x80 | 0x200)
    assert MobStat.STUN in combined
    assert MobStat.POISON in combined
    assert MobStat.SEAL not in combined