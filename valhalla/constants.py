"""Game-wide constants: protocol version, stat masks, job ids and the EXP table."""

WORLD_NAMES = (
    "Scania", "Bera", "Broa", "Windia", "Khaini", "Bellocan", "Mardia", "Kradia",
    "Yellonde", "Demethos", "Galicia", "El Nido", "Zenith", "Arcania", "Chaos",
    "Nova", "Renegates",
)

MAPLE_VERSION = 28
CLIENT_HEADER_SIZE = 4
INTERSERVER_HEADER_SIZE = 4
OPCODE_LENGTH = 1

MAX_ITEM_STACK = 200

# Stat update masks
HP_ID = 0x400
MAX_HP_ID = 0x800
MP_ID = 0x1000
MAX_MP_ID = 0x2000
STR_ID = 0x40
DEX_ID = 0x80
INT_ID = 0x100
LUK_ID = 0x200
LEVEL_ID = 0x10
JOB_ID = 0x20
EXP_ID = 0x10000
AP_ID = 0x4000
SP_ID = 0x8000
FAME_ID = 0x20000
MESOS_ID = 0x40000

# HP / MP gained per level
BEGINNER_HP_ADD, BEGINNER_MP_ADD = 12, 10
WARRIOR_HP_ADD, WARRIOR_MP_ADD = 24, 4
MAGICIAN_HP_ADD, MAGICIAN_MP_ADD = 10, 6
BOWMAN_HP_ADD, BOWMAN_MP_ADD = 20, 14
THIEF_HP_ADD, THIEF_MP_ADD = 20, 14
ADMIN_HP_ADD, ADMIN_MP_ADD = 150, 150

# Job ids
BEGINNER_JOB_ID = 0

WARRIOR_JOB_ID = 100
FIGHTER_JOB_ID = 110
CRUSADER_JOB_ID = 111
PAGE_JOB_ID = 120
WHITE_KNIGHT_JOB_ID = 121
SPEARMAN_JOB_ID = 130
DRAGON_KNIGHT_JOB_ID = 131

MAGICIAN_JOB_ID = 200
FIRE_POISON_WIZARD_JOB_ID = 210
FIRE_POISON_MAGE_JOB_ID = 211
ICE_LIGHT_WIZARD_JOB_ID = 220
ICE_LIGHT_MAGE_JOB_ID = 221
CLERIC_JOB_ID = 230
PRIEST_JOB_ID = 231

BOWMAN_JOB_ID = 300
HUNTER_JOB_ID = 310
RANGER_JOB_ID = 311
CROSSBOWMAN_JOB_ID = 320
SNIPER_JOB_ID = 321

THIEF_JOB_ID = 400
ASSASSIN_JOB_ID = 410
HERMIT_JOB_ID = 411
BANDIT_JOB_ID = 420
CHIEF_BANDIT_JOB_ID = 421

GM_JOB_ID = 500
SUPER_GM_JOB_ID = 510

MAX_HP_VALUE = MAX_MP_VALUE = 32767

MAX_PARTY_SIZE = 6
MAX_GUILD_SIZE = 255

# Guild operation codes
GUILD_CREATE_DIALOGUE = 0x02
GUILD_INVITE = 0x05
GUILD_ACCEPT_INVITE = 0x06
GUILD_LEAVE = 0x07
GUILD_EXPEL = 0x08
GUILD_UPDATE_TITLE_NAMES = 0x0D
GUILD_RANK_CHANGE = 0x0E
GUILD_EMBLEM_CHANGE = 0x0F
GUILD_NOTICE_CHANGE = 0x10
GUILD_CONTRACT_SIGN = 0x1E
GUILD_REJECT_INVITE = 0x37

# Quest states
QUEST_LOST_ITEM, QUEST_STARTED, QUEST_COMPLETED, QUEST_FORFEIT = range(4)

# Fame results
(
    FAME_NOTIFY_SOURCE,
    FAME_INCORRECT_USER,
    FAME_UNDER_LEVEL,
    FAME_THIS_DAY,
    FAME_THIS_MONTH,
    FAME_NOTIFY_TARGET,
) = range(6)

# EXP_TABLE[n] is the experience needed to advance from level n + 1.
EXP_TABLE = (
    # levels 1-10
    15, 34, 57, 92, 135, 372, 560, 840, 1_242, 1_144,
    # levels 11-30
    1_573, 2_144, 2_800, 3_640, 4_700, 5_893, 7_360, 9_144, 11_120, 13_477,
    16_268, 19_320, 22_880, 27_008, 31_477, 36_600, 42_444, 48_720, 55_813, 63_800,
    # levels 31-70
    86_784, 98_208, 110_932, 124_432, 139_372,
    155_865, 173_280, 192_400, 213_345, 235_372,
    259_392, 285_532, 312_928, 342_624, 374_760,
    408_336, 445_544, 483_532, 524_160, 567_772,
    598_886, 631_704, 666_321, 702_836, 741_351,
    781_976, 824_828, 870_028, 917_625, 967_995,
    1_021_041, 1_076_994, 1_136_013, 1_198_266, 1_263_930,
    1_333_194, 1_406_252, 1_483_314, 1_564_600, 1_650_340,
    # levels 71-120
    1_740_778, 1_836_173, 1_936_794, 2_042_930, 2_154_882,
    2_272_970, 2_397_528, 2_528_912, 2_667_496, 2_813_674,
    2_967_863, 3_130_502, 3_302_053, 3_483_005, 3_673_873,
    3_875_201, 4_087_562, 4_311_559, 4_547_832, 4_797_053,
    5_059_931, 5_337_215, 5_629_694, 5_938_202, 6_263_614,
    6_606_860, 6_968_915, 7_350_811, 7_753_635, 8_178_534,
    8_626_718, 9_099_462, 9_598_112, 10_124_088, 10_678_888,
    11_264_090, 11_881_362, 12_532_461, 13_219_239, 13_943_653,
    14_707_765, 15_513_750, 16_363_902, 17_260_644, 18_206_527,
    19_204_245, 20_256_637, 21_366_700, 22_537_594, 23_772_654,
    # levels 121-200
    25_075_395, 26_449_526, 27_898_960, 29_427_822, 31_040_466,
    32_741_483, 34_535_716, 36_428_273, 38_424_542, 40_530_206,
    42_751_262, 45_094_030, 47_565_183, 50_171_755, 52_921_167,
    55_821_246, 58_880_250, 62_106_888, 65_510_344, 69_100_311,
    72_887_008, 76_881_216, 81_094_306, 85_594_273, 90_225_770,
    95_170_142, 100_385_466, 105_886_589, 111_689_174, 117_809_740,
    124_265_714, 131_075_474, 138_258_410, 145_834_970, 153_826_726,
    162_256_430, 171_148_082, 180_526_997, 190_419_876, 200_854_885,
    211_861_732, 223_471_711, 223_471_711, 248_635_353, 262_260_570,
    276_632_449, 291_791_906, 307_782_102, 324_648_562, 342_439_302,
    361_204_976, 380_999_008, 401_877_754, 423_900_654, 447_130_410,
    471_633_156, 497_478_653, 524_740_482, 553_496_261, 583_827_855,
    615_821_622, 649_568_646, 685_165_008, 722_712_050, 762_316_670,
    804_091_623, 848_155_844, 894_634_784, 943_660_770, 995_373_379,
    1_049_919_840, 1_107_455_447, 1_168_144_006, 1_232_158_297, 1_299_680_571,
    1_370_903_066, 1_446_028_554, 1_525_246_918, 1_608_855_764, 1_697_021_059,
)