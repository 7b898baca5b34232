from enum import IntEnum


class Species(IntEnum):
    """Species IDs (national dex numbering)"""

    NONE = 0
    BULBASAUR = 1
    CHARMANDER = 4
    SQUIRTLE = 7
    CATERPIE = 10
    PIDGEY = 16
    RATTATA = 19
    PIKACHU = 25
    CLEFAIRY = 35
    GEODUDE = 74
    MAGNEMITE = 81
    GASTLY = 92
    DITTO = 132
