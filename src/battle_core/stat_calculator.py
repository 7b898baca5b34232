import logging
import math
from typing import Optional

from src.battle_core.constants import HP_STAT_BONUS, MAX_STAT_VALUE, OTHER_STAT_BONUS
from src.battle_core.enums import Stat
from src.battle_core.modifiers import BaseStatBoosterModifier, ModifierRegistry
from src.battle_core.schema.creature import Creature

logger = logging.getLogger(__name__)


def compute_stat(base: int, hidden_value: int, level: int, is_hp: bool) -> int:
    # No effort values: the raw term is floor((2 * base + iv) * level / 100)
    value = math.floor((2 * base + hidden_value) * level * 0.01)
    if is_hp:
        return min(value + level + HP_STAT_BONUS, MAX_STAT_VALUE)
    return min(value + OTHER_STAT_BONUS, MAX_STAT_VALUE)


def get_base_stats(creature: Creature, modifiers: Optional[ModifierRegistry] = None) -> list[int]:
    """Species base stats after every matching BaseStatBoosterModifier (the species data is not touched)"""
    base_stats = list(creature.get_species_info().baseStats)
    if modifiers is not None:
        modifiers.apply_modifiers(BaseStatBoosterModifier, creature.id, base_stats)
    return base_stats


def calculate_stats(creature: Creature, modifiers: Optional[ModifierRegistry] = None) -> None:
    """
    Recompute all six stats in place and reconcile current hp.

    HP reconciliation:
    - no hp yet, or hp above the new max -> hp = new max
    - max went up -> hp rises by exactly the difference
    - otherwise hp is left alone
    """
    base_stats = get_base_stats(creature, modifiers)
    last_max_hp = creature.get_max_hp()
    stats = list(creature.stats)

    for stat in Stat:
        is_hp = stat == Stat.HP
        value = compute_stat(base_stats[stat], creature.hiddenValues[stat], creature.level, is_hp)
        if is_hp:
            if creature.hp is None or creature.hp > value:
                creature.hp = value
            elif last_max_hp and value > last_max_hp:
                creature.hp += value - last_max_hp
        stats[stat] = value

    creature.stats = stats
    logger.debug("%s Lv.%d stats %s hp %d", creature.name, creature.level, stats, creature.hp)
