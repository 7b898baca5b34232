from enum import IntEnum


class MoveCategory(IntEnum):
    PHYSICAL = 0
    SPECIAL = 1
    STATUS = 2


class Move(IntEnum):
    """Move IDs (national move numbering)"""

    NONE = 0
    POUND = 1
    DOUBLE_SLAP = 3
    SCRATCH = 10
    GUST = 16
    VINE_WHIP = 22
    SAND_ATTACK = 28
    TACKLE = 33
    TAIL_WHIP = 39
    BITE = 44
    GROWL = 45
    SING = 47
    SUPERSONIC = 48
    EMBER = 52
    WATER_GUN = 55
    LEECH_SEED = 73
    RAZOR_LEAF = 75
    STRING_SHOT = 81
    THUNDER_SHOCK = 84
    THUNDER_WAVE = 86
    ROCK_THROW = 88
    CONFUSION = 93
    HYPNOSIS = 95
    QUICK_ATTACK = 98
    SMOKESCREEN = 108
    WITHDRAW = 110
    DEFENSE_CURL = 111
    LICK = 122
    TRANSFORM = 144
    BUBBLE = 145
    HYPER_FANG = 158
    STRUGGLE = 165
    ROLLOUT = 205
    DISARMING_VOICE = 574
