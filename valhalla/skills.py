"""Player skill ids grouped by job, mob skill ids and mob stat masks."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from valhalla import constants


class Skill(enum.IntEnum):
    """Player skill identifiers."""

    # Swordsman - 100
    IMPROVED_MAX_HP_INCREASE = 1000001
    ENDURE = 1000002
    IRON_BODY = 1001003

    # Fighter - 110
    AXE_BOOSTER = 1101005
    AXE_MASTERY = 1100001
    POWER_GUARD = 1101007
    RAGE = 1101006
    SWORD_BOOSTER = 1101004
    SWORD_MASTERY = 1100000

    # Crusader - 111
    IMPROVED_MP_RECOVERY = 1110000
    ARMOR_CRASH = 1111007
    AXE_COMA = 1111006
    AXE_PANIC = 1111004
    COMBO_ATTACK = 1111002
    SHOUT = 1111008
    SWORD_COMA = 1111005
    SWORD_PANIC = 1111003

    # Page - 120
    BW_BOOSTER = 1201005
    BW_MASTERY = 1200001
    PAGE_POWER_GUARD = 1201007
    PAGE_SWORD_BOOSTER = 1201004
    PAGE_SWORD_MASTERY = 1200000
    THREATEN = 1201006

    # White Knight - 121
    WK_IMPROVED_MP_RECOVERY = 1210000
    BW_FIRE_CHARGE = 1211004
    BW_ICE_CHARGE = 1211006
    BW_LIT_CHARGE = 1211008
    CHARGE_BLOW = 1211002
    MAGIC_CRASH = 1211009
    SWORD_FIRE_CHARGE = 1211003
    SWORD_ICE_CHARGE = 1211005
    SWORD_LIT_CHARGE = 1211007

    # Spearman - 130
    HYPER_BODY = 1301007
    IRON_WILL = 1301006
    POLEARM_BOOSTER = 1301005
    POLEARM_MASTERY = 1300001
    SPEAR_BOOSTER = 1301004
    SPEAR_MASTERY = 1300000

    # Dragon Knight - 131
    DRAGON_BLOOD = 1311008
    DRAGON_ROAR = 1311006
    ELEMENTAL_RESISTANCE = 1310000
    POWER_CRASH = 1311007
    SACRIFICE = 1311005

    # Magician - 200
    MAG_IMPROVED_MP_RECOVERY = 2000000
    IMPROVED_MAX_MP_INCREASE = 2000001
    MAGIC_ARMOR = 2001003
    MAGIC_GUARD = 2001002
    MAGIC_CLAW = 2001005
    ENERGY_BOLT = 2001004

    # Fire/Poison Wizard - 210
    MEDITATION = 2101001
    MP_EATER = 2100000
    POISON_BREATH = 2101005
    FIRE_ARROW = 2101004
    SLOW = 2101003

    # Fire/Poison Mage - 211
    ELEMENT_AMPLIFICATION = 2110001
    ELEMENT_COMPOSITION = 2111006
    PARTIAL_RESISTANCE = 2110000
    POISON_MYST = 2111003
    SEAL = 2111004
    SPELL_BOOSTER = 2111005
    EXPLOSION = 2111002

    # Ice/Lightning Wizard - 220
    COLD_BEAM = 2201004
    IL_MEDITATION = 2201001
    IL_MP_EATER = 2200000
    IL_SLOW = 2201003
    THUNDER_BOLT = 2201005

    # Ice/Lightning Mage - 221
    IL_ELEMENT_AMPLIFICATION = 2210001
    IL_ELEMENT_COMPOSITION = 2211006
    ICE_STRIKE = 2211002
    IL_PARTIAL_RESISTANCE = 2210000
    IL_SEAL = 2211004
    IL_SPELL_BOOSTER = 2211005
    LIGHTNING = 2211003

    # Cleric - 230
    BLESS = 2301004
    HEAL = 2301002
    INVINCIBLE = 2301003
    CLERIC_MP_EATER = 2300000
    HOLY_ARROW = 2301005

    # Priest - 231
    DISPEL = 2311001
    DOOM = 2311005
    PRIEST_ELEMENTAL_RESISTANCE = 2310000
    HOLY_SYMBOL = 2311003
    MYSTIC_DOOR = 2311002
    SUMMON_DRAGON = 2311006

    # Archer - 300
    BLESSING_OF_AMAZON = 3000000
    CRITICAL_SHOT = 3000001
    FOCUS = 3001003

    # Hunter - 310
    POWER_KNOCKBACK = 3101003
    ARROW_BOMB = 3101005
    BOW_BOOSTER = 3101002
    BOW_MASTERY = 3100000
    SOUL_ARROW = 3101004

    # Ranger - 311
    MORTAL_BLOW = 3110001
    PUPPET = 3111002
    SILVER_HAWK = 3111005

    # Crossbowman - 320
    CB_POWER_KNOCKBACK = 3201003
    CROSSBOW_BOOSTER = 3201002
    CROSSBOW_MASTERY = 3200000
    CB_SOUL_ARROW = 3201004

    # Sniper - 321
    BLIZZARD = 3211003
    GOLDEN_EAGLE = 3211005
    SNIPER_MORTAL_BLOW = 3210001
    SNIPER_PUPPET = 3211002

    # Rogue - 400
    NIMBLE_BODY = 4000000
    DARK_SIGHT = 4001003
    DISORDER = 4001002
    DOUBLE_STAB = 4001334
    LUCKY_SEVEN = 4001344

    # Assassin - 410
    CLAW_BOOSTER = 4101003
    CLAW_MASTERY = 4100000
    CRITICAL_THROW = 4100001
    ASSASSIN_ENDURE = 4100002
    DRAIN = 4101005
    HASTE = 4101004

    # Hermit - 411
    ALCHEMIST = 4110000
    AVENGER = 4111005
    MESO_UP = 4111001
    SHADOW_MESO = 4111004
    SHADOW_PARTNER = 4111002
    SHADOW_WEB = 4111003

    # Bandit - 420
    DAGGER_BOOSTER = 4201002
    DAGGER_MASTERY = 4200000
    BANDIT_ENDURE = 4200001
    BANDIT_HASTE = 4201003
    SAVAGE_BLOW = 4201005
    STEAL = 4201004

    # Chief Bandit - 421
    ASSAULTER = 4211002
    BAND_OF_THIEVES = 4211004
    CHAKRA = 4211001
    MESO_EXPLOSION = 4211006
    MESO_GUARD = 4211005
    PICKPOCKET = 4211003

    # GM - 500
    GM_BLESS = 5001003
    GM_HASTE = 5001001
    HEAL_PLUS_DISPELL = 5001000
    HIDE = 5001004
    GM_HOLY_SYMBOL = 5001002
    RESURRECTION = 5001005
    SUPER_DRAGON_ROAR = 5001006
    TELEPORT = 5001007

    ITEM_EXPLOSION = 5001008
    GM_SHADOW_PARTNER = 5001009
    JUMP_DOWN = 50010010


@dataclass(frozen=True)
class JobSkills:
    """The skills a job has, keyed by a short role name such as ``"endure"``."""

    name: str
    job_id: int
    skills: Mapping[str, Skill]

    def has(self, skill: int) -> bool:
        """Whether ``skill`` belongs to this job."""
        return skill in self.skills.values()

    def __getitem__(self, role: str) -> Skill:
        return self.skills[role]


def _job(name: str, job_id: int, **skills: Skill) -> JobSkills:
    return JobSkills(name, job_id, MappingProxyType(dict(skills)))


S = Skill

SWORDSMAN = _job(
    "Swordsman", constants.WARRIOR_JOB_ID,
    improved_max_hp_increase=S.IMPROVED_MAX_HP_INCREASE,
    endure=S.ENDURE,
    iron_body=S.IRON_BODY,
)

FIGHTER = _job(
    "Fighter", constants.FIGHTER_JOB_ID,
    axe_booster=S.AXE_BOOSTER,
    axe_mastery=S.AXE_MASTERY,
    power_guard=S.POWER_GUARD,
    rage=S.RAGE,
    sword_booster=S.SWORD_BOOSTER,
    sword_mastery=S.SWORD_MASTERY,
)

CRUSADER = _job(
    "Crusader", constants.CRUSADER_JOB_ID,
    improved_mp_recovery=S.IMPROVED_MP_RECOVERY,
    armor_crash=S.ARMOR_CRASH,
    axe_coma=S.AXE_COMA,
    axe_panic=S.AXE_PANIC,
    combo_attack=S.COMBO_ATTACK,
    shout=S.SHOUT,
    sword_coma=S.SWORD_COMA,
    sword_panic=S.SWORD_PANIC,
)

PAGE = _job(
    "Page", constants.PAGE_JOB_ID,
    bw_booster=S.BW_BOOSTER,
    bw_mastery=S.BW_MASTERY,
    power_guard=S.PAGE_POWER_GUARD,
    sword_booster=S.PAGE_SWORD_BOOSTER,
    sword_mastery=S.PAGE_SWORD_MASTERY,
    threaten=S.THREATEN,
)

WHITE_KNIGHT = _job(
    "WhiteKnight", constants.WHITE_KNIGHT_JOB_ID,
    improved_mp_recovery=S.WK_IMPROVED_MP_RECOVERY,
    bw_fire_charge=S.BW_FIRE_CHARGE,
    bw_ice_charge=S.BW_ICE_CHARGE,
    bw_lit_charge=S.BW_LIT_CHARGE,
    charge_blow=S.CHARGE_BLOW,
    magic_crash=S.MAGIC_CRASH,
    sword_fire_charge=S.SWORD_FIRE_CHARGE,
    sword_ice_charge=S.SWORD_ICE_CHARGE,
    sword_lit_charge=S.SWORD_LIT_CHARGE,
)

SPEARMAN = _job(
    "Spearman", constants.SPEARMAN_JOB_ID,
    hyper_body=S.HYPER_BODY,
    iron_will=S.IRON_WILL,
    polearm_booster=S.POLEARM_BOOSTER,
    polearm_mastery=S.POLEARM_MASTERY,
    spear_booster=S.SPEAR_BOOSTER,
    spear_mastery=S.SPEAR_MASTERY,
)

DRAGON_KNIGHT = _job(
    "DragonKnight", constants.DRAGON_KNIGHT_JOB_ID,
    dragon_blood=S.DRAGON_BLOOD,
    dragon_roar=S.DRAGON_ROAR,
    elemental_resistance=S.ELEMENTAL_RESISTANCE,
    power_crash=S.POWER_CRASH,
    sacrifice=S.SACRIFICE,
)

# The magician's recovery entry refers to the crusader skill id, as the game data does.
MAGICIAN = _job(
    "Magician", constants.MAGICIAN_JOB_ID,
    improved_mp_recovery=S.IMPROVED_MP_RECOVERY,
    improved_max_mp_increase=S.IMPROVED_MAX_MP_INCREASE,
    magic_armor=S.MAGIC_ARMOR,
    magic_guard=S.MAGIC_GUARD,
    magic_claw=S.MAGIC_CLAW,
    energy_bolt=S.ENERGY_BOLT,
)

FP_WIZARD = _job(
    "FPWizard", constants.FIRE_POISON_WIZARD_JOB_ID,
    meditation=S.MEDITATION,
    mp_eater=S.MP_EATER,
    poison_breath=S.POISON_BREATH,
    fire_arrow=S.FIRE_ARROW,
    slow=S.SLOW,
)

FP_MAGE = _job(
    "FPMage", constants.FIRE_POISON_MAGE_JOB_ID,
    element_amplification=S.ELEMENT_AMPLIFICATION,
    element_composition=S.ELEMENT_COMPOSITION,
    partial_resistance=S.PARTIAL_RESISTANCE,
    poison_myst=S.POISON_MYST,
    seal=S.SEAL,
    spell_booster=S.SPELL_BOOSTER,
    explosion=S.EXPLOSION,
)

IL_WIZARD = _job(
    "ILWizard", constants.ICE_LIGHT_WIZARD_JOB_ID,
    cold_beam=S.COLD_BEAM,
    meditation=S.IL_MEDITATION,
    mp_eater=S.IL_MP_EATER,
    slow=S.IL_SLOW,
    thunder_bolt=S.THUNDER_BOLT,
)

IL_MAGE = _job(
    "ILMage", constants.ICE_LIGHT_MAGE_JOB_ID,
    element_amplification=S.IL_ELEMENT_AMPLIFICATION,
    element_composition=S.IL_ELEMENT_COMPOSITION,
    ice_strike=S.ICE_STRIKE,
    partial_resistance=S.IL_PARTIAL_RESISTANCE,
    seal=S.IL_SEAL,
    spell_booster=S.IL_SPELL_BOOSTER,
    lightning=S.LIGHTNING,
)

CLERIC = _job(
    "Cleric", constants.CLERIC_JOB_ID,
    bless=S.BLESS,
    heal=S.HEAL,
    invincible=S.INVINCIBLE,
    mp_eater=S.CLERIC_MP_EATER,
    holy_arrow=S.HOLY_ARROW,
)

PRIEST = _job(
    "Priest", constants.PRIEST_JOB_ID,
    dispel=S.DISPEL,
    doom=S.DOOM,
    elemental_resistance=S.PRIEST_ELEMENTAL_RESISTANCE,
    holy_symbol=S.HOLY_SYMBOL,
    mystic_door=S.MYSTIC_DOOR,
    summon_dragon=S.SUMMON_DRAGON,
)

ARCHER = _job(
    "Archer", constants.BOWMAN_JOB_ID,
    blessing_of_amazon=S.BLESSING_OF_AMAZON,
    critical_shot=S.CRITICAL_SHOT,
    focus=S.FOCUS,
)

HUNTER = _job(
    "Hunter", constants.HUNTER_JOB_ID,
    power_knockback=S.POWER_KNOCKBACK,
    arrow_bomb=S.ARROW_BOMB,
    bow_booster=S.BOW_BOOSTER,
    bow_mastery=S.BOW_MASTERY,
    soul_arrow=S.SOUL_ARROW,
)

RANGER = _job(
    "Ranger", constants.RANGER_JOB_ID,
    mortal_blow=S.MORTAL_BLOW,
    puppet=S.PUPPET,
    silver_hawk=S.SILVER_HAWK,
)

CROSSBOWMAN = _job(
    "Crossbowman", constants.CROSSBOWMAN_JOB_ID,
    power_knockback=S.CB_POWER_KNOCKBACK,
    crossbow_booster=S.CROSSBOW_BOOSTER,
    crossbow_mastery=S.CROSSBOW_MASTERY,
    soul_arrow=S.CB_SOUL_ARROW,
)

SNIPER = _job(
    "Sniper", constants.SNIPER_JOB_ID,
    blizzard=S.BLIZZARD,
    golden_eagle=S.GOLDEN_EAGLE,
    mortal_blow=S.SNIPER_MORTAL_BLOW,
    puppet=S.SNIPER_PUPPET,
)

ROGUE = _job(
    "Rogue", constants.THIEF_JOB_ID,
    nimble_body=S.NIMBLE_BODY,
    dark_sight=S.DARK_SIGHT,
    disorder=S.DISORDER,
    double_stab=S.DOUBLE_STAB,
    lucky_seven=S.LUCKY_SEVEN,
)

ASSASSIN = _job(
    "Assassin", constants.ASSASSIN_JOB_ID,
    claw_booster=S.CLAW_BOOSTER,
    claw_mastery=S.CLAW_MASTERY,
    critical_throw=S.CRITICAL_THROW,
    endure=S.ASSASSIN_ENDURE,
    drain=S.DRAIN,
    haste=S.HASTE,
)

HERMIT = _job(
    "Hermit", constants.HERMIT_JOB_ID,
    alchemist=S.ALCHEMIST,
    avenger=S.AVENGER,
    meso_up=S.MESO_UP,
    shadow_meso=S.SHADOW_MESO,
    shadow_partner=S.SHADOW_PARTNER,
    shadow_web=S.SHADOW_WEB,
)

BANDIT = _job(
    "Bandit", constants.BANDIT_JOB_ID,
    dagger_booster=S.DAGGER_BOOSTER,
    dagger_mastery=S.DAGGER_MASTERY,
    endure=S.BANDIT_ENDURE,
    haste=S.BANDIT_HASTE,
    savage_blow=S.SAVAGE_BLOW,
    steal=S.STEAL,
)

CHIEF_BANDIT = _job(
    "ChiefBandit", constants.CHIEF_BANDIT_JOB_ID,
    assaulter=S.ASSAULTER,
    band_of_thieves=S.BAND_OF_THIEVES,
    chakra=S.CHAKRA,
    meso_explosion=S.MESO_EXPLOSION,
    meso_guard=S.MESO_GUARD,
    pickpocket=S.PICKPOCKET,
)

GM = _job(
    "GM", constants.SUPER_GM_JOB_ID,
    bless=S.GM_BLESS,
    haste=S.GM_HASTE,
    heal_plus_dispell=S.HEAL_PLUS_DISPELL,
    hide=S.HIDE,
    holy_symbol=S.GM_HOLY_SYMBOL,
    resurrection=S.RESURRECTION,
    super_dragon_roar=S.SUPER_DRAGON_ROAR,
    teleport=S.TELEPORT,
    item_explosion=S.ITEM_EXPLOSION,
    shadow_partner=S.GM_SHADOW_PARTNER,
    jump_down=S.JUMP_DOWN,
)

del S

ALL_JOBS = (
    SWORDSMAN, FIGHTER, CRUSADER, PAGE, WHITE_KNIGHT, SPEARMAN, DRAGON_KNIGHT,
    MAGICIAN, FP_WIZARD, FP_MAGE, IL_WIZARD, IL_MAGE, CLERIC, PRIEST,
    ARCHER, HUNTER, RANGER, CROSSBOWMAN, SNIPER,
    ROGUE, ASSASSIN, HERMIT, BANDIT, CHIEF_BANDIT,
    GM,
)

_BY_JOB_ID = {job.job_id: job for job in ALL_JOBS}


def job_skills(job_id: int) -> JobSkills:
    """The skill set of ``job_id``; raises KeyError for a job without one."""
    try:
        return _BY_JOB_ID[job_id]
    except KeyError:
        raise KeyError(f"no skill set for job id {job_id}") from None


class MobSkill(enum.IntEnum):
    """Mob skill identifiers."""

    WEAPON_ATTACK_UP = 100
    WEAPON_ATTACK_UP_AOE = 110
    MAGIC_ATTACK_UP = 101
    MAGIC_ATTACK_UP_AOE = 111
    WEAPON_DEFENCE_UP = 102
    WEAPON_DEFENCE_UP_AOE = 112
    MAGIC_DEFENCE_UP = 103
    MAGIC_DEFENCE_UP_AOE = 113
    HEAL_AOE = 114
    SPEED_UP_AOE = 115
    SEAL = 120
    DARKNESS = 121
    WEAKNESS = 122
    STUN = 123
    CURSE = 124
    POISON = 125
    SLOW = 126
    DISPEL = 127
    SEDUCE = 128
    SEND_TO_TOWN = 129
    POISON_MIST = 131
    CRAZY_SKULL = 132
    ZOMBIFY = 133
    WEAPON_IMMUNITY = 140
    MAGIC_IMMUNITY = 141
    ARMOR_SKILL = 142
    WEAPON_DAMAGE_REFLECT = 143
    MAGIC_DAMAGE_REFLECT = 144
    ANY_DAMAGE_REFLECT = 145
    MC_WEAPON_ATTACK_UP = 150
    MC_MAGIC_ATTACK_UP = 151
    MC_WEAPON_DEFENSE_UP = 152
    MC_MAGIC_DEFENSE_UP = 153
    MC_ACCURACY_UP = 154
    MC_AVOID_UP = 155
    MC_SPEED_UP = 156
    MC_SEAL = 157  # not used in Monster Carnival
    SUMMON = 200


class MobStat(enum.IntFlag):
    """Mob stat bits applied by mob skills."""

    PHYSICAL_DAMAGE = 0x1
    PHYSICAL_DEFENSE = 0x2
    MAGIC_DAMAGE = 0x4
    MAGIC_DEFENSE = 0x8
    ACCURRENCY = 0x10
    EVASION = 0x20
    SPEED = 0x40
    STUN = 0x80
    FREEZE = 0x100
    POISON = 0x200
    SEAL = 0x400
    DARKNESS = 0x800
    POWER_UP = 0x1000
    MAGIC_UP = 0x2000
    POWER_GUARD_UP = 0x4000
    MAGIC_GUARD_UP = 0x8000
    DOOM = 0x10000
    WEB = 0x20000
    PHYSICAL_IMMUNE = 0x4000
    MAGIC_IMMUNE = 0x80000
    HARD_SKIN = 0x200000
    AMBUSH = 0x400000
    VENOM = 0x1000000
    BLIND = 0x2000000
    SEAL_SKILL = 0x4000000