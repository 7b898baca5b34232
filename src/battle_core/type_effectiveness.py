from typing import Iterable, Optional

from src.battle_core.enums.type import Type
from src.battle_core.constants import TYPE_MUL_NO_EFFECT, TYPE_MUL_NOT_EFFECTIVE, TYPE_MUL_NORMAL, TYPE_MUL_SUPER_EFFECTIVE

_NO = TYPE_MUL_NO_EFFECT
_HALF = TYPE_MUL_NOT_EFFECTIVE
_DOUBLE = TYPE_MUL_SUPER_EFFECTIVE

# Format: (AttackingType, DefendingType, Multiplier) triplets.
# Pairs that are not listed are neutral (TYPE_MUL_NORMAL).
TYPE_EFFECTIVENESS_CHART: list[tuple[Type, Type, int]] = [
    # Normal
    (Type.NORMAL, Type.ROCK, _HALF),
    (Type.NORMAL, Type.GHOST, _NO),
    (Type.NORMAL, Type.STEEL, _HALF),
    # Fighting
    (Type.FIGHTING, Type.NORMAL, _DOUBLE),
    (Type.FIGHTING, Type.FLYING, _HALF),
    (Type.FIGHTING, Type.POISON, _HALF),
    (Type.FIGHTING, Type.ROCK, _DOUBLE),
    (Type.FIGHTING, Type.BUG, _HALF),
    (Type.FIGHTING, Type.GHOST, _NO),
    (Type.FIGHTING, Type.STEEL, _DOUBLE),
    (Type.FIGHTING, Type.PSYCHIC, _HALF),
    (Type.FIGHTING, Type.ICE, _DOUBLE),
    (Type.FIGHTING, Type.DARK, _DOUBLE),
    (Type.FIGHTING, Type.FAIRY, _HALF),
    # Flying
    (Type.FLYING, Type.FIGHTING, _DOUBLE),
    (Type.FLYING, Type.ROCK, _HALF),
    (Type.FLYING, Type.BUG, _DOUBLE),
    (Type.FLYING, Type.STEEL, _HALF),
    (Type.FLYING, Type.GRASS, _DOUBLE),
    (Type.FLYING, Type.ELECTRIC, _HALF),
    # Poison
    (Type.POISON, Type.POISON, _HALF),
    (Type.POISON, Type.GROUND, _HALF),
    (Type.POISON, Type.ROCK, _HALF),
    (Type.POISON, Type.GHOST, _HALF),
    (Type.POISON, Type.STEEL, _NO),
    (Type.POISON, Type.GRASS, _DOUBLE),
    (Type.POISON, Type.FAIRY, _DOUBLE),
    # Ground
    (Type.GROUND, Type.FLYING, _NO),
    (Type.GROUND, Type.POISON, _DOUBLE),
    (Type.GROUND, Type.ROCK, _DOUBLE),
    (Type.GROUND, Type.BUG, _HALF),
    (Type.GROUND, Type.STEEL, _DOUBLE),
    (Type.GROUND, Type.FIRE, _DOUBLE),
    (Type.GROUND, Type.GRASS, _HALF),
    (Type.GROUND, Type.ELECTRIC, _DOUBLE),
    # Rock
    (Type.ROCK, Type.FIGHTING, _HALF),
    (Type.ROCK, Type.FLYING, _DOUBLE),
    (Type.ROCK, Type.GROUND, _HALF),
    (Type.ROCK, Type.BUG, _DOUBLE),
    (Type.ROCK, Type.STEEL, _HALF),
    (Type.ROCK, Type.FIRE, _DOUBLE),
    (Type.ROCK, Type.ICE, _DOUBLE),
    # Bug
    (Type.BUG, Type.FIGHTING, _HALF),
    (Type.BUG, Type.FLYING, _HALF),
    (Type.BUG, Type.POISON, _HALF),
    (Type.BUG, Type.GHOST, _HALF),
    (Type.BUG, Type.STEEL, _HALF),
    (Type.BUG, Type.FIRE, _HALF),
    (Type.BUG, Type.GRASS, _DOUBLE),
    (Type.BUG, Type.PSYCHIC, _DOUBLE),
    (Type.BUG, Type.DARK, _DOUBLE),
    (Type.BUG, Type.FAIRY, _HALF),
    # Ghost
    (Type.GHOST, Type.NORMAL, _NO),
    (Type.GHOST, Type.GHOST, _DOUBLE),
    (Type.GHOST, Type.PSYCHIC, _DOUBLE),
    (Type.GHOST, Type.DARK, _HALF),
    # Steel
    (Type.STEEL, Type.ROCK, _DOUBLE),
    (Type.STEEL, Type.STEEL, _HALF),
    (Type.STEEL, Type.FIRE, _HALF),
    (Type.STEEL, Type.WATER, _HALF),
    (Type.STEEL, Type.ELECTRIC, _HALF),
    (Type.STEEL, Type.ICE, _DOUBLE),
    (Type.STEEL, Type.FAIRY, _DOUBLE),
    # Fire
    (Type.FIRE, Type.ROCK, _HALF),
    (Type.FIRE, Type.BUG, _DOUBLE),
    (Type.FIRE, Type.STEEL, _DOUBLE),
    (Type.FIRE, Type.FIRE, _HALF),
    (Type.FIRE, Type.WATER, _HALF),
    (Type.FIRE, Type.GRASS, _DOUBLE),
    (Type.FIRE, Type.ICE, _DOUBLE),
    (Type.FIRE, Type.DRAGON, _HALF),
    # Water
    (Type.WATER, Type.GROUND, _DOUBLE),
    (Type.WATER, Type.ROCK, _DOUBLE),
    (Type.WATER, Type.FIRE, _DOUBLE),
    (Type.WATER, Type.WATER, _HALF),
    (Type.WATER, Type.GRASS, _HALF),
    (Type.WATER, Type.DRAGON, _HALF),
    # Grass
    (Type.GRASS, Type.FLYING, _HALF),
    (Type.GRASS, Type.POISON, _HALF),
    (Type.GRASS, Type.GROUND, _DOUBLE),
    (Type.GRASS, Type.ROCK, _DOUBLE),
    (Type.GRASS, Type.BUG, _HALF),
    (Type.GRASS, Type.STEEL, _HALF),
    (Type.GRASS, Type.FIRE, _HALF),
    (Type.GRASS, Type.WATER, _DOUBLE),
    (Type.GRASS, Type.GRASS, _HALF),
    (Type.GRASS, Type.DRAGON, _HALF),
    # Electric
    (Type.ELECTRIC, Type.FLYING, _DOUBLE),
    (Type.ELECTRIC, Type.GROUND, _NO),
    (Type.ELECTRIC, Type.WATER, _DOUBLE),
    (Type.ELECTRIC, Type.GRASS, _HALF),
    (Type.ELECTRIC, Type.ELECTRIC, _HALF),
    (Type.ELECTRIC, Type.DRAGON, _HALF),
    # Psychic
    (Type.PSYCHIC, Type.FIGHTING, _DOUBLE),
    (Type.PSYCHIC, Type.POISON, _DOUBLE),
    (Type.PSYCHIC, Type.STEEL, _HALF),
    (Type.PSYCHIC, Type.PSYCHIC, _HALF),
    (Type.PSYCHIC, Type.DARK, _NO),
    # Ice
    (Type.ICE, Type.FLYING, _DOUBLE),
    (Type.ICE, Type.GROUND, _DOUBLE),
    (Type.ICE, Type.STEEL, _HALF),
    (Type.ICE, Type.FIRE, _HALF),
    (Type.ICE, Type.WATER, _HALF),
    (Type.ICE, Type.GRASS, _DOUBLE),
    (Type.ICE, Type.ICE, _HALF),
    (Type.ICE, Type.DRAGON, _DOUBLE),
    # Dragon
    (Type.DRAGON, Type.STEEL, _HALF),
    (Type.DRAGON, Type.DRAGON, _DOUBLE),
    (Type.DRAGON, Type.FAIRY, _NO),
    # Dark
    (Type.DARK, Type.FIGHTING, _HALF),
    (Type.DARK, Type.GHOST, _DOUBLE),
    (Type.DARK, Type.PSYCHIC, _DOUBLE),
    (Type.DARK, Type.DARK, _HALF),
    (Type.DARK, Type.FAIRY, _HALF),
    # Fairy
    (Type.FAIRY, Type.FIGHTING, _DOUBLE),
    (Type.FAIRY, Type.POISON, _HALF),
    (Type.FAIRY, Type.STEEL, _HALF),
    (Type.FAIRY, Type.FIRE, _HALF),
    (Type.FAIRY, Type.DRAGON, _DOUBLE),
    (Type.FAIRY, Type.DARK, _DOUBLE),
]

_CHART_LOOKUP: dict[tuple[Type, Type], int] = {(atk, dfn): mul for atk, dfn, mul in TYPE_EFFECTIVENESS_CHART}


class TypeEffectiveness:
    """Type chart lookups"""

    @staticmethod
    def get_effectiveness(attacking_type: Type, defending_type: Type) -> int:
        """
        Get type effectiveness between one attacking and one defending type.

        Returns:
            TYPE_MUL_NO_EFFECT (0) for immune (x0.0)
            TYPE_MUL_NOT_EFFECTIVE (5) for not very effective (x0.5)
            TYPE_MUL_NORMAL (10) for normal effectiveness (x1.0)
            TYPE_MUL_SUPER_EFFECTIVE (20) for super effective (x2.0)
        """
        return _CHART_LOOKUP.get((attacking_type, defending_type), TYPE_MUL_NORMAL)

    @staticmethod
    def get_type_damage_multiplier(attacking_type: Type, defending_type: Type) -> float:
        return TypeEffectiveness.get_effectiveness(attacking_type, defending_type) / TYPE_MUL_NORMAL

    @staticmethod
    def get_effectiveness_multiplier(attacking_type: Type, defending_type1: Type, defending_type2: Optional[Type] = None) -> float:
        """
        Combined multiplier against a single or dual-typed defender.

        Dual types multiply the two float multipliers, so the result is one of
        0.0, 0.25, 0.5, 1.0, 2.0 or 4.0.
        """
        multiplier = TypeEffectiveness.get_type_damage_multiplier(attacking_type, defending_type1)
        if defending_type2 is not None:
            multiplier *= TypeEffectiveness.get_type_damage_multiplier(attacking_type, defending_type2)
        return multiplier

    @staticmethod
    def against(attacking_type: Type, defending_types: Iterable[Type]) -> float:
        """Multiplier against a defender's list of one or two types"""
        types = list(defending_types)
        return TypeEffectiveness.get_effectiveness_multiplier(attacking_type, types[0], types[1] if len(types) > 1 else None)

    @staticmethod
    def is_immune(attacking_type: Type, defending_type: Type) -> bool:
        return TypeEffectiveness.get_effectiveness(attacking_type, defending_type) == TYPE_MUL_NO_EFFECT

    @staticmethod
    def is_super_effective(attacking_type: Type, defending_type: Type) -> bool:
        return TypeEffectiveness.get_effectiveness(attacking_type, defending_type) == TYPE_MUL_SUPER_EFFECTIVE


def get_type_damage_multiplier(attacking_type: Type, defending_type: Type) -> float:
    return TypeEffectiveness.get_type_damage_multiplier(attacking_type, defending_type)
