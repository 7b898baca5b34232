"""
Modifier hook registry

Modifiers are multiplicative adjustments applied at fixed extension points:
- rarity roll: RarityRateBoosterModifier raises the shiny threshold
- stat calculation: BaseStatBoosterModifier raises one base stat of one creature

The registry is passed explicitly into generation and stat calculation; there is
no global modifier state.
"""

import logging
import math
from typing import Type as TypingType

from src.battle_core.enums import Stat

logger = logging.getLogger(__name__)


class IntegerHolder:
    """Mutable int cell so modifiers can adjust a value in place"""

    def __init__(self, value: int):
        self.value = value


class Modifier:
    """Base class for registry hooks. Subclasses override match() and apply()."""

    def match(self, *args) -> bool:
        return True

    def apply(self, *args) -> bool:
        raise NotImplementedError


class RarityRateBoosterModifier(Modifier):
    """Multiplies the shiny threshold. Multipliers below 1 are ignored so the threshold never drops."""

    def __init__(self, multiplier: float = 2.0):
        self.multiplier = multiplier

    def match(self, *args) -> bool:
        return len(args) == 1 and isinstance(args[0], IntegerHolder)

    def apply(self, *args) -> bool:
        threshold: IntegerHolder = args[0]
        threshold.value = max(threshold.value, math.floor(threshold.value * self.multiplier))
        return True


class BaseStatBoosterModifier(Modifier):
    """Raises one base stat by `boost` (0.2 = +20%) for a single creature identifier"""

    def __init__(self, creature_id: int, stat: Stat, boost: float = 0.2):
        self.creature_id = creature_id
        self.stat = stat
        self.boost = boost

    def match(self, *args) -> bool:
        return len(args) == 2 and args[0] == self.creature_id

    def apply(self, *args) -> bool:
        base_stats: list[int] = args[1]
        base_stats[self.stat] = math.floor(base_stats[self.stat] * (1 + self.boost))
        return True


class ModifierRegistry:
    """Ordered set of active modifiers"""

    def __init__(self, modifiers: list[Modifier] | None = None):
        self.modifiers: list[Modifier] = list(modifiers or [])

    def register(self, modifier: Modifier) -> None:
        self.modifiers.append(modifier)

    def remove(self, modifier: Modifier) -> bool:
        if modifier in self.modifiers:
            self.modifiers.remove(modifier)
            return True
        return False

    def get_modifiers(self, modifier_type: TypingType[Modifier]) -> list[Modifier]:
        return [m for m in self.modifiers if isinstance(m, modifier_type)]

    def apply_modifiers(self, modifier_type: TypingType[Modifier], *args) -> bool:
        """Apply every matching modifier of `modifier_type`, in registration order.

        Returns True if at least one modifier applied.
        """
        applied = False
        for modifier in self.get_modifiers(modifier_type):
            if modifier.match(*args) and modifier.apply(*args):
                applied = True
        if applied:
            logger.debug("Applied %s modifiers", modifier_type.__name__)
        return applied

    def __len__(self) -> int:
        return len(self.modifiers)
