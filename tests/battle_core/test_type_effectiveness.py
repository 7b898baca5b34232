from src.battle_core.enums import Type
from src.battle_core.type_effectiveness import TypeEffectiveness, get_type_damage_multiplier


def test_single_type_multipliers():
    assert get_type_damage_multiplier(Type.FIRE, Type.GRASS) == 2.0
    assert get_type_damage_multiplier(Type.FIRE, Type.WATER) == 0.5
    assert get_type_damage_multiplier(Type.NORMAL, Type.GHOST) == 0.0
    assert get_type_damage_multiplier(Type.NORMAL, Type.FIRE) == 1.0


def test_dual_type_is_product():
    assert TypeEffectiveness.get_effectiveness_multiplier(Type.FIRE, Type.GRASS, Type.POISON) == 2.0
    assert TypeEffectiveness.get_effectiveness_multiplier(Type.ROCK, Type.FIRE, Type.FLYING) == 4.0
    assert TypeEffectiveness.get_effectiveness_multiplier(Type.GRASS, Type.FIRE, Type.FLYING) == 0.25
    assert TypeEffectiveness.against(Type.GROUND, [Type.ELECTRIC, Type.FLYING]) == 0.0


def test_immunity_helpers():
    assert TypeEffectiveness.is_immune(Type.GHOST, Type.NORMAL)
    assert TypeEffectiveness.is_immune(Type.DRAGON, Type.FAIRY)
    assert not TypeEffectiveness.is_immune(Type.FIRE, Type.WATER)
    assert TypeEffectiveness.is_super_effective(Type.ELECTRIC, Type.WATER)
