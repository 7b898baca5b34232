# =============================================================================
# CREATURE STATS
# =============================================================================
STAT_HP = 0
STAT_ATK = 1
STAT_DEF = 2
STAT_SPATK = 3
STAT_SPDEF = 4
STAT_SPD = 5
NUM_STATS = 6

MAX_STAT_VALUE = 99999  # every derived stat is clamped to this
HP_STAT_BONUS = 10  # HP gets level + 10 on top of the raw value
OTHER_STAT_BONUS = 5  # non-HP stats get a flat +5, so DEF/SPDEF are never below 5

# =============================================================================
# IDENTITY / GENERATION
# =============================================================================
MAX_CREATURE_ID = 0xFFFFFFFF  # identifiers are unsigned 32-bit
IV_BITS = 5  # each hidden value is one 5-bit group of the identifier
MAX_IV = 31
IV_MASK = 0x1F

GENDER_ROLL_MODULUS = 256
GENDER_ROLL_DIVISOR = 32  # (id % 256) / 32 lands in [0, 8)

SHINY_THRESHOLD = 32  # (trainer ^ secret ^ high16 ^ low16) < 32 -> shiny
SALT_MAX = 0xFFFF  # trainer and secret salts are 16-bit

# =============================================================================
# LIMITS
# =============================================================================
MIN_LEVEL = 1
MAX_LEVEL = 100
MAX_MON_MOVES = 4
PARTY_SIZE = 6

# =============================================================================
# TYPE EFFECTIVENESS MULTIPLIERS (x10 integer encoding)
# =============================================================================
TYPE_MUL_NO_EFFECT = 0  # x0.0 (immune)
TYPE_MUL_NOT_EFFECTIVE = 5  # x0.5 (not very effective)
TYPE_MUL_NORMAL = 10  # x1.0 (normal effectiveness)
TYPE_MUL_SUPER_EFFECTIVE = 20  # x2.0 (super effective)

# =============================================================================
# DAMAGE CALCULATION
# =============================================================================
DAMAGE_RANDOM_MIN = 85  # inclusive, percent
DAMAGE_RANDOM_MAX = 100  # inclusive, percent
STAB_MULTIPLIER = 1.5
CRITICAL_HIT_ODDS = 4  # 1 in 4
CRITICAL_HIT_MULTIPLIER = 2

# =============================================================================
# AI
# =============================================================================
AI_STATUS_MOVE_SCORE = 1
AI_FAVORABLE_SCORE = 2
AI_UNFAVORABLE_SCORE = -2
AI_STRONG_STAT_RATIO = 0.75  # ratio at or below -> x2
AI_LEANING_STAT_RATIO = 0.875  # ratio at or below -> x1.5
AI_POWER_SCORE_DIVISOR = 5
AI_RANK_ROLL_RANGE = 8  # walk down one rank while rand(8) >= 5
AI_RANK_ADVANCE_MIN = 5

# =============================================================================
# BATTLE MESSAGES
# =============================================================================
MSG_CRITICAL_HIT = "A critical hit!"
MSG_SUPER_EFFECTIVE = "It's super effective!"
MSG_NOT_VERY_EFFECTIVE = "It's not very effective!"
MSG_NO_EFFECT = "It doesn't affect {name}!"
MSG_NO_ENERGY = "{name} has no energy\nleft to battle!"
