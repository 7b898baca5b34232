"""
Experience & leveling

Growth curves give the cumulative exp needed to reach a level. Level 1 always
needs 0 exp; every curve is strictly increasing from there up to MAX_LEVEL.
"""

import logging
import math
from typing import Callable, Optional

from src.battle_core.constants import MAX_LEVEL, MIN_LEVEL
from src.battle_core.enums import GrowthRate
from src.battle_core.modifiers import ModifierRegistry
from src.battle_core.schema.creature import Creature
from src.battle_core.stat_calculator import calculate_stats

logger = logging.getLogger(__name__)


def _erratic(n: int) -> int:
    if n < 50:
        return n**3 * (100 - n) // 50
    if n < 68:
        return n**3 * (150 - n) // 100
    if n < 98:
        return n**3 * ((1911 - 10 * n) // 3) // 500
    return n**3 * (160 - n) // 100


def _fast(n: int) -> int:
    return 4 * n**3 // 5


def _medium_fast(n: int) -> int:
    return n**3


def _medium_slow(n: int) -> int:
    return 6 * n**3 // 5 - 15 * n**2 + 100 * n - 140


def _slow(n: int) -> int:
    return 5 * n**3 // 4


def _fluctuating(n: int) -> int:
    if n < 15:
        return n**3 * ((n + 1) // 3 + 24) // 50
    if n < 36:
        return n**3 * (n + 14) // 50
    return n**3 * (n // 2 + 32) // 50


GROWTH_CURVES: dict[GrowthRate, Callable[[int], int]] = {
    GrowthRate.ERRATIC: _erratic,
    GrowthRate.FAST: _fast,
    GrowthRate.MEDIUM_FAST: _medium_fast,
    GrowthRate.MEDIUM_SLOW: _medium_slow,
    GrowthRate.SLOW: _slow,
    GrowthRate.FLUCTUATING: _fluctuating,
}


def get_level_total_exp(level: int, growth_rate: GrowthRate) -> int:
    """Cumulative exp required to reach `level` on the given curve"""
    if level <= MIN_LEVEL:
        return 0
    return GROWTH_CURVES[growth_rate](level)


def add_experience(creature: Creature, amount: int, modifiers: Optional[ModifierRegistry] = None) -> int:
    """
    Add exp, level up as many times as the curve allows, and refresh stats.

    Levels stop at MAX_LEVEL; exp past the MAX_LEVEL threshold is discarded.
    Returns the number of levels gained.
    """
    if amount < 0:
        raise ValueError("Experience cannot be removed")

    growth_rate = creature.get_species_info().growthRate
    start_level = creature.level

    # Only the added amount is capped; exp already stored above the cap stays
    max_exp = get_level_total_exp(MAX_LEVEL, growth_rate)
    creature.exp = max(creature.exp, min(creature.exp + amount, max_exp))
    while creature.level < MAX_LEVEL and creature.exp >= get_level_total_exp(creature.level + 1, growth_rate):
        creature.level += 1
    creature.levelExp = creature.exp - get_level_total_exp(creature.level, growth_rate)

    levels_gained = creature.level - start_level
    if levels_gained:
        logger.debug("%s grew to Lv.%d (+%d)", creature.name, creature.level, levels_gained)
        calculate_stats(creature, modifiers)
    return levels_gained


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def get_exp_value(defeated: Creature, victor_level: int) -> int:
    """Exp awarded to a victor of `victor_level` for defeating `defeated`; higher-level victors earn less"""
    level = defeated.level
    base_exp = defeated.get_species_info().baseExp

    defeated_term = 2 * level + 10
    combined_term = level + victor_level + 10
    level_ratio = (_round_half_up(math.sqrt(defeated_term)) * defeated_term**2) / (_round_half_up(math.sqrt(combined_term)) * combined_term**2)

    return math.floor(((base_exp * level) / 5) * level_ratio) + 1
