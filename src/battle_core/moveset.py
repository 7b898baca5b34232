import logging
from typing import Optional

from src.battle_core.constants import MAX_MON_MOVES
from src.battle_core.data.level_moves import LEVEL_MOVES, LevelMoves
from src.battle_core.data.moves import is_damaging_move
from src.battle_core.enums import Move, Species
from src.battle_core.schema.creature import Creature, MoveSlot
from src.battle_core.utils.rng import BattleRng

logger = logging.getLogger(__name__)


def get_move_pool(level_moves: LevelMoves, level: int) -> list[Move]:
    """Distinct moves learnable at or below `level`, in table order. The table must be sorted by level."""
    move_pool: list[Move] = []
    for min_level, move in level_moves:
        if level < min_level:
            break
        if move not in move_pool:
            move_pool.append(move)
    return move_pool


def generate_moveset(creature: Creature, rng: BattleRng, level_moves: Optional[dict[Species, LevelMoves]] = None) -> None:
    """
    Replace the creature's moveset with up to four random moves from its level table.

    One damaging move, if any is learnable, always takes the first slot. A species
    with no table entry gets an empty moveset.
    """
    table = LEVEL_MOVES if level_moves is None else level_moves
    creature.moveset = []

    all_level_moves = table.get(creature.species)
    if not all_level_moves:
        logger.warning("No level moves for species %s; moveset left empty", creature.species.name)
        return

    move_pool = get_move_pool(all_level_moves, creature.level)
    attack_move_pool = [m for m in move_pool if is_damaging_move(m)]

    if attack_move_pool:
        attack_move = attack_move_pool[rng.choice_index(len(attack_move_pool))]
        creature.moveset.append(MoveSlot(moveId=attack_move))
        move_pool.remove(attack_move)

    while move_pool and len(creature.moveset) < MAX_MON_MOVES:
        move = move_pool.pop(rng.choice_index(len(move_pool)))
        creature.moveset.append(MoveSlot(moveId=move))

    logger.debug("%s Lv.%d moveset %s", creature.name, creature.level, [m.get_name() for m in creature.moveset])
