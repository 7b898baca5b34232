"""
Identity & generation

Everything hidden about a creature comes from its 32-bit identifier:
- hidden values: six consecutive 5-bit groups, most significant first (bits 31..2)
- gender: (id % 256) / 32 compared against the species' male ratio
- shiny: trainer/secret salts XOR the identifier's two 16-bit halves
"""

import logging
from typing import Optional

from src.battle_core.constants import GENDER_ROLL_DIVISOR, GENDER_ROLL_MODULUS, IV_BITS, IV_MASK, NUM_STATS, SHINY_THRESHOLD
from src.battle_core.enums import Gender
from src.battle_core.modifiers import IntegerHolder, ModifierRegistry, RarityRateBoosterModifier
from src.battle_core.schema.species_info import SpeciesInfo

logger = logging.getLogger(__name__)

_TOP_GROUP_SHIFT = 32 - IV_BITS  # 27


def get_hidden_values(creature_id: int) -> list[int]:
    """Split the top 30 bits of the identifier into six 5-bit values (HP, ATK, DEF, SPATK, SPDEF, SPD)."""
    return [(creature_id >> (_TOP_GROUP_SHIFT - IV_BITS * i)) & IV_MASK for i in range(NUM_STATS)]


def pack_hidden_values(hidden_values: list[int]) -> int:
    """Inverse of get_hidden_values for the 30-bit slice (low 2 bits are zero)."""
    packed = 0
    for value in hidden_values:
        packed = (packed << IV_BITS) | (value & IV_MASK)
    return packed << (32 - IV_BITS * NUM_STATS)


def get_gender(creature_id: int, species_info: SpeciesInfo) -> Gender:
    if species_info.malePercent is None:
        return Gender.GENDERLESS
    gender_chance = (creature_id % GENDER_ROLL_MODULUS) / GENDER_ROLL_DIVISOR
    if gender_chance < species_info.malePercent:
        return Gender.MALE
    return Gender.FEMALE


def get_shiny_threshold(modifiers: Optional[ModifierRegistry] = None) -> int:
    threshold = IntegerHolder(SHINY_THRESHOLD)
    if modifiers is not None:
        modifiers.apply_modifiers(RarityRateBoosterModifier, threshold)
    return threshold.value


def roll_shiny(creature_id: int, trainer_id: int, secret_id: int, modifiers: Optional[ModifierRegistry] = None) -> bool:
    rand1 = (creature_id >> 16) & 0xFFFF
    rand2 = creature_id & 0xFFFF

    e = trainer_id ^ secret_id
    f = rand1 ^ rand2

    threshold = get_shiny_threshold(modifiers)
    shiny = (e ^ f) < threshold
    if shiny:
        logger.debug("Shiny roll %d under threshold %d (id=%d)", e ^ f, threshold, creature_id)
    return shiny
