import logging
import math
from typing import Optional

from src.battle_core.constants import (
    AI_FAVORABLE_SCORE,
    AI_LEANING_STAT_RATIO,
    AI_POWER_SCORE_DIVISOR,
    AI_RANK_ADVANCE_MIN,
    AI_RANK_ROLL_RANGE,
    AI_STATUS_MOVE_SCORE,
    AI_STRONG_STAT_RATIO,
    AI_UNFAVORABLE_SCORE,
)
from src.battle_core.enums import AiType, Move, MoveCategory, Stat
from src.battle_core.schema.creature import Creature, MoveSlot
from src.battle_core.type_effectiveness import TypeEffectiveness
from src.battle_core.utils.rng import BattleRng

logger = logging.getLogger(__name__)


def get_struggle() -> MoveSlot:
    return MoveSlot(moveId=Move.STRUGGLE, ppUsed=0, ppUp=0)


def _stat_bias_multiplier(strong: int, weak: int) -> float:
    """x2 / x1.5 when the attacking stat clearly outweighs the other one"""
    if strong <= weak:
        return 1.0
    stat_ratio = weak / strong
    if stat_ratio <= AI_STRONG_STAT_RATIO:
        return 2.0
    if stat_ratio <= AI_LEANING_STAT_RATIO:
        return 1.5
    return 1.0


def score_move(user: Creature, target: Creature, move_slot: MoveSlot) -> float:
    move = move_slot.get_move()
    if move.category == MoveCategory.STATUS:
        return AI_STATUS_MOVE_SCORE

    effectiveness = TypeEffectiveness.against(move.type, target.types)
    score: float = AI_UNFAVORABLE_SCORE if (effectiveness - 1) ** 2 * effectiveness < 1 else AI_FAVORABLE_SCORE
    if score:
        if move.category == MoveCategory.PHYSICAL:
            score *= _stat_bias_multiplier(user.stats[Stat.ATK], user.stats[Stat.SPATK])
        else:
            score *= _stat_bias_multiplier(user.stats[Stat.SPATK], user.stats[Stat.ATK])
        score += math.floor(move.power / AI_POWER_SCORE_DIVISOR)
    return score


def get_move_scores(user: Creature, target: Creature, move_pool: list[MoveSlot]) -> list[float]:
    return [score_move(user, target, m) for m in move_pool]


def rank_moves(user: Creature, target: Creature, move_pool: list[MoveSlot]) -> list[MoveSlot]:
    """Best first; equal scores keep their moveset order"""
    scores = get_move_scores(user, target, move_pool)
    order = sorted(range(len(move_pool)), key=lambda i: -scores[i])
    logger.debug("move scores %s", {move_pool[i].get_name(): scores[i] for i in order})
    return [move_pool[i] for i in order]


def pick_rank(rng: BattleRng, count: int) -> int:
    """Walk down the ranking while rand(8) >= 5, stopping at the last rank."""
    rank = 0
    while rank < count - 1 and rng.choice_index(AI_RANK_ROLL_RANGE) >= AI_RANK_ADVANCE_MIN:
        rank += 1
    return rank


def choose_action(opponent: Creature, target: Creature, rng: BattleRng, ai_type: Optional[AiType] = None) -> MoveSlot:
    """
    Pick the opponent's next move against `target`.

    Falls back to Struggle when nothing in the moveset is usable.
    """
    ai_type = opponent.aiType if ai_type is None else ai_type
    move_pool = opponent.get_usable_moves()

    if not move_pool:
        return get_struggle()
    if len(move_pool) == 1:
        return move_pool[0]

    if ai_type == AiType.RANDOM:
        return move_pool[rng.choice_index(len(move_pool))]

    sorted_move_pool = rank_moves(opponent, target, move_pool)
    rank = 0
    if ai_type == AiType.SMART_RANDOM:
        rank = pick_rank(rng, len(sorted_move_pool))
    return sorted_move_pool[rank]
