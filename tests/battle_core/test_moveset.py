import logging

from src.battle_core.data.moves import is_damaging_move
from src.battle_core.enums import Gender, Move, Species
from src.battle_core.moveset import generate_moveset, get_move_pool
from src.battle_core.schema.creature import Creature
from src.battle_core.utils.rng import BattleRng


def make_creature(species: Species, level: int) -> Creature:
    return Creature(id=0, species=species, gender=Gender.MALE, hiddenValues=[0] * 6, level=level)


def test_move_pool_stops_at_level_and_dedupes():
    table = [(1, Move.TACKLE), (1, Move.TACKLE), (3, Move.GROWL), (9, Move.EMBER), (2, Move.BITE)]
    assert get_move_pool(table, 5) == [Move.TACKLE, Move.GROWL]


def test_damaging_move_takes_first_slot():
    table = {Species.BULBASAUR: [(1, Move.TACKLE), (1, Move.GROWL), (7, Move.EMBER)]}
    for seed in range(25):
        creature = make_creature(Species.BULBASAUR, 5)
        generate_moveset(creature, BattleRng(seed), table)
        assert [m.moveId for m in creature.moveset] == [Move.TACKLE, Move.GROWL]


def test_moveset_capped_at_four_distinct_moves():
    for seed in range(25):
        creature = make_creature(Species.BULBASAUR, 20)
        generate_moveset(creature, BattleRng(seed))
        move_ids = [m.moveId for m in creature.moveset]
        assert len(move_ids) == 4
        assert len(set(move_ids)) == 4
        assert is_damaging_move(move_ids[0])


def test_small_pool_is_taken_whole():
    creature = make_creature(Species.CATERPIE, 30)
    generate_moveset(creature, BattleRng(3))
    assert [m.moveId for m in creature.moveset] == [Move.TACKLE, Move.STRING_SHOT]


def test_status_only_pool():
    table = {Species.CATERPIE: [(1, Move.GROWL), (1, Move.STRING_SHOT)]}
    creature = make_creature(Species.CATERPIE, 5)
    generate_moveset(creature, BattleRng(11), table)
    assert sorted(m.moveId for m in creature.moveset) == sorted([Move.GROWL, Move.STRING_SHOT])


def test_new_slots_start_fresh():
    creature = make_creature(Species.PIKACHU, 11)
    generate_moveset(creature, BattleRng(5))
    assert all(m.ppUsed == 0 and m.ppUp == 0 and m.disableTurns == 0 for m in creature.moveset)


def test_missing_table_entry_gives_empty_moveset(caplog):
    creature = make_creature(Species.DITTO, 30)
    with caplog.at_level(logging.WARNING, logger="src.battle_core.moveset"):
        generate_moveset(creature, BattleRng(1))
    assert creature.moveset == []
    assert "DITTO" in caplog.text


def test_level_below_every_entry_gives_empty_moveset():
    table = {Species.SQUIRTLE: [(4, Move.TAIL_WHIP), (7, Move.BUBBLE)]}
    creature = make_creature(Species.SQUIRTLE, 3)
    generate_moveset(creature, BattleRng(1), table)
    assert creature.moveset == []


def test_generation_is_reproducible():
    a = make_creature(Species.RATTATA, 25)
    b = make_creature(Species.RATTATA, 25)
    generate_moveset(a, BattleRng(99))
    generate_moveset(b, BattleRng(99))
    assert a.moveset == b.moveset
