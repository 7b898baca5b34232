import asyncio

from src.battle_core.ai import choose_action
from src.battle_core.damage_calculator import DamageCalculator, classify_effectiveness
from src.battle_core.data.moves import get_move_data
from src.battle_core.enums import AiType, Gender, Move, MoveResult, Species
from src.battle_core.schema.creature import Creature, MoveSlot
from src.battle_core.stat_calculator import calculate_stats
from src.battle_core.utils.mon_factory import create_creature
from src.battle_core.utils.rng import BattleRng


class ScriptedRng(BattleRng):
    """Returns queued values from choice_index instead of rolling"""

    def __init__(self, values: list[int]):
        super().__init__(0)
        self.values = list(values)

    def choice_index(self, count: int) -> int:
        return self.values.pop(0) % count


def make_creature(species: Species, level: int = 10, stats: list[int] | None = None, hp: int | None = None) -> Creature:
    creature = Creature(id=0xFFFFFFFF, species=species, gender=Gender.MALE, hiddenValues=[31] * 6, level=level)
    if stats is None:
        calculate_stats(creature)
    else:
        creature.stats = list(stats)
        creature.hp = stats[0]
    if hp is not None:
        creature.hp = hp
    return creature


def test_damage_formula_with_stab_and_super_effective():
    attacker = make_creature(Species.CHARMANDER, stats=[30, 20, 20, 20, 20, 20])
    defender = make_creature(Species.BULBASAUR, stats=[100, 20, 20, 20, 20, 20])
    ember = get_move_data(Move.EMBER)

    # ((2*10/5+2)*40*20/20)/50 + 2 = 6.8; *1.5 stab *2.0 type = 20.4
    assert DamageCalculator.calculate_damage(attacker, defender, ember, is_critical=False, random_percent=100) == 21
    assert DamageCalculator.calculate_damage(attacker, defender, ember, is_critical=True, random_percent=100) == 42
    assert DamageCalculator.calculate_damage(attacker, defender, ember, is_critical=False, random_percent=85) == 18


def test_critical_super_effective_hit_messages_in_order():
    attacker = make_creature(Species.CHARMANDER, stats=[30, 20, 20, 20, 20, 20])
    defender = make_creature(Species.BULBASAUR, stats=[100, 20, 20, 20, 20, 20])
    calc = DamageCalculator(ScriptedRng([0, 15]))  # crit, then 85 + 15 = 100%

    outcome = calc.resolve_action(attacker, defender, MoveSlot(moveId=Move.EMBER))

    assert outcome.result == MoveResult.SUPER_EFFECTIVE
    assert outcome.damage == 42
    assert outcome.critical is True
    assert outcome.messages == ["A critical hit!", "It's super effective!"]
    assert defender.hp == 58


def test_neutral_hit_has_no_messages():
    attacker = make_creature(Species.RATTATA)
    defender = make_creature(Species.PIDGEY)
    calc = DamageCalculator(ScriptedRng([1, 0]))

    outcome = calc.resolve_action(attacker, defender, MoveSlot(moveId=Move.TACKLE))

    assert outcome.result == MoveResult.EFFECTIVE
    assert outcome.critical is False
    assert outcome.messages == []
    assert defender.hp == defender.get_max_hp() - outcome.damage


def test_not_very_effective_hit():
    attacker = make_creature(Species.CHARMANDER)
    defender = make_creature(Species.SQUIRTLE)
    outcome = DamageCalculator(ScriptedRng([3, 7])).resolve_action(attacker, defender, MoveSlot(moveId=Move.EMBER))

    assert outcome.result == MoveResult.NOT_VERY_EFFECTIVE
    assert outcome.messages == ["It's not very effective!"]
    assert outcome.damage > 0


def test_immune_target_takes_nothing_even_on_critical():
    attacker = make_creature(Species.RATTATA)
    defender = make_creature(Species.GASTLY)
    hp_before = defender.hp
    outcome = DamageCalculator(ScriptedRng([0, 15])).resolve_action(attacker, defender, MoveSlot(moveId=Move.TACKLE))

    assert outcome.result == MoveResult.NO_EFFECT
    assert outcome.damage == 0
    assert outcome.critical is False
    assert outcome.messages == ["It doesn't affect GASTLY!"]
    assert defender.hp == hp_before


def test_status_move_changes_nothing_and_rolls_nothing():
    attacker = make_creature(Species.BULBASAUR)
    defender = make_creature(Species.CHARMANDER)
    rng = BattleRng(77)
    outcome = DamageCalculator(rng).resolve_action(attacker, defender, MoveSlot(moveId=Move.GROWL))

    assert outcome.result == MoveResult.OTHER
    assert outcome.damage == 0
    assert outcome.messages == []
    assert defender.hp == defender.get_max_hp()
    assert rng.seed == 77


def test_hp_never_drops_below_zero():
    attacker = make_creature(Species.RATTATA, level=50)
    defender = make_creature(Species.CATERPIE, hp=1)
    outcome = DamageCalculator(BattleRng(5)).resolve_action(attacker, defender, MoveSlot(moveId=Move.HYPER_FANG))

    assert outcome.damage > 1
    assert defender.hp == 0
    assert defender.is_fainted()


def test_effectiveness_classification_boundaries():
    assert classify_effectiveness(4.0) == MoveResult.SUPER_EFFECTIVE
    assert classify_effectiveness(2.0) == MoveResult.SUPER_EFFECTIVE
    assert classify_effectiveness(1.0) == MoveResult.EFFECTIVE
    assert classify_effectiveness(0.5) == MoveResult.NOT_VERY_EFFECTIVE
    assert classify_effectiveness(0.25) == MoveResult.NOT_VERY_EFFECTIVE
    assert classify_effectiveness(0.0) == MoveResult.NO_EFFECT


def test_random_battles_keep_hp_in_range():
    rng = BattleRng(31337)
    calc = DamageCalculator(rng)
    species = [Species.BULBASAUR, Species.CHARMANDER, Species.SQUIRTLE, Species.PIKACHU, Species.GEODUDE, Species.MAGNEMITE, Species.GASTLY]
    for i in range(200):
        attacker = create_creature(species[i % len(species)], 5 + i % 40, rng)
        defender = create_creature(species[(i * 3 + 1) % len(species)], 5 + (i * 7) % 40, rng)
        for move_slot in attacker.moveset:
            outcome = calc.resolve_action(attacker, defender, move_slot)
            assert outcome.damage >= 0
            assert 0 <= defender.hp <= defender.get_max_hp()


def test_presenter_sees_committed_state():
    attacker = make_creature(Species.PIKACHU)
    defender = make_creature(Species.SQUIRTLE)
    seen: list[int] = []

    async def presenter(outcome):
        await asyncio.sleep(0)
        seen.append(defender.hp)

    calc = DamageCalculator(BattleRng(8))
    outcome = asyncio.run(calc.resolve_action_async(attacker, defender, MoveSlot(moveId=Move.THUNDER_SHOCK), presenter))

    assert seen == [max(defender.get_max_hp() - outcome.damage, 0)]
    assert outcome.result == MoveResult.SUPER_EFFECTIVE


def test_unusable_slots_are_rejected_without_changes():
    attacker = make_creature(Species.RATTATA)
    defender = make_creature(Species.PIDGEY)
    rng = BattleRng(21)
    calc = DamageCalculator(rng)

    for move_slot in (MoveSlot(moveId=Move.TACKLE, disableTurns=3), MoveSlot(moveId=Move.TACKLE, ppUsed=35)):
        pp_used = move_slot.ppUsed
        outcome = calc.resolve_action(attacker, defender, move_slot)

        assert outcome.usable is False
        assert outcome.damage == 0
        assert outcome.messages == []
        assert move_slot.ppUsed == pp_used
        assert defender.hp == defender.get_max_hp()
        assert rng.seed == 21


def test_resolving_consumes_pp_until_struggle():
    attacker = make_creature(Species.RATTATA, stats=[100, 5, 5, 5, 5, 5])
    attacker.moveset = [MoveSlot(moveId=Move.TACKLE)]
    defender = make_creature(Species.PIDGEY, stats=[99999, 5, 99999, 5, 99999, 5])
    calc = DamageCalculator(BattleRng(2))

    for _ in range(35):
        assert calc.resolve_action(attacker, defender, attacker.moveset[0]).usable
    assert attacker.moveset[0].ppUsed == 35
    assert not calc.resolve_action(attacker, defender, attacker.moveset[0]).usable

    struggle = choose_action(attacker, defender, BattleRng(2), AiType.SMART_RANDOM)
    assert struggle.moveId == Move.STRUGGLE
    for _ in range(3):
        assert calc.resolve_action(attacker, defender, struggle).usable
    assert struggle.ppUsed == 0


def test_status_move_still_costs_pp():
    attacker = make_creature(Species.BULBASAUR)
    defender = make_creature(Species.CHARMANDER)
    growl = MoveSlot(moveId=Move.GROWL)
    DamageCalculator(BattleRng(1)).resolve_action(attacker, defender, growl)
    assert growl.ppUsed == 1


def test_creatures_without_stats_get_them_before_resolving():
    attacker = Creature(id=0xFFFFFFFF, species=Species.CHARMANDER, gender=Gender.MALE, hiddenValues=[31] * 6, level=10)
    defender = Creature(id=0xFFFFFFFF, species=Species.BULBASAUR, gender=Gender.MALE, hiddenValues=[31] * 6, level=10)

    outcome = DamageCalculator(BattleRng(4)).resolve_action(attacker, defender, MoveSlot(moveId=Move.EMBER))

    assert attacker.hp == attacker.get_max_hp() > 0
    assert outcome.damage > 0
    assert defender.hp == max(defender.get_max_hp() - outcome.damage, 0)
