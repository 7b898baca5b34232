from enum import IntEnum


class Stat(IntEnum):
    """Stat slots, in the order hidden values are packed into the identifier"""

    HP = 0
    ATK = 1
    DEF = 2
    SPATK = 3
    SPDEF = 4
    SPD = 5


class GrowthRate(IntEnum):
    """Experience growth curves"""

    ERRATIC = 0
    FAST = 1
    MEDIUM_FAST = 2
    MEDIUM_SLOW = 3
    SLOW = 4
    FLUCTUATING = 5


class Gender(IntEnum):
    GENDERLESS = -1
    MALE = 0
    FEMALE = 1


class Side(IntEnum):
    """Which controller owns a creature"""

    PLAYER = 0
    ENEMY = 1


class AiType(IntEnum):
    RANDOM = 0
    SMART_RANDOM = 1
    SMART = 2


class MoveResult(IntEnum):
    EFFECTIVE = 0
    SUPER_EFFECTIVE = 1
    NOT_VERY_EFFECTIVE = 2
    NO_EFFECT = 3
    OTHER = 4
