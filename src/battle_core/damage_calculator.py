"""
Move resolution - damage, critical hits and effectiveness for one action.

Resolution is two-phase:
1. resolve_action() rolls, computes and commits the hp change synchronously
2. resolve_action_async() additionally awaits a presenter with the committed
   outcome, so animation/sound timing never affects battle state
"""

import logging
import math
from typing import Awaitable, Callable, Optional

from src.battle_core.constants import (
    CRITICAL_HIT_MULTIPLIER,
    CRITICAL_HIT_ODDS,
    DAMAGE_RANDOM_MAX,
    DAMAGE_RANDOM_MIN,
    MSG_CRITICAL_HIT,
    MSG_NO_EFFECT,
    MSG_NOT_VERY_EFFECTIVE,
    MSG_SUPER_EFFECTIVE,
    STAB_MULTIPLIER,
)
from src.battle_core.enums import Move, MoveCategory, MoveResult, Stat
from src.battle_core.schema.action_outcome import ActionOutcome
from src.battle_core.schema.battle_move import BattleMove
from src.battle_core.schema.creature import Creature, MoveSlot
from src.battle_core.stat_calculator import calculate_stats
from src.battle_core.type_effectiveness import TypeEffectiveness
from src.battle_core.utils.rng import BattleRng

logger = logging.getLogger(__name__)

Presenter = Callable[[ActionOutcome], Awaitable[None]]


def classify_effectiveness(type_multiplier: float) -> MoveResult:
    if type_multiplier >= 2:
        return MoveResult.SUPER_EFFECTIVE
    if type_multiplier >= 1:
        return MoveResult.EFFECTIVE
    if type_multiplier > 0:
        return MoveResult.NOT_VERY_EFFECTIVE
    return MoveResult.NO_EFFECT


def get_effectiveness_message(result: MoveResult, defender: Creature) -> Optional[str]:
    if result == MoveResult.SUPER_EFFECTIVE:
        return MSG_SUPER_EFFECTIVE
    if result == MoveResult.NOT_VERY_EFFECTIVE:
        return MSG_NOT_VERY_EFFECTIVE
    if result == MoveResult.NO_EFFECT:
        return MSG_NO_EFFECT.format(name=defender.name)
    return None


class DamageCalculator:
    """
    Resolves one move from an attacker against a defender.

    All randomness (critical roll, then damage variance) comes from the
    session rng passed in, in that order.
    """

    def __init__(self, rng: BattleRng):
        self.rng = rng

    @staticmethod
    def get_stab_multiplier(attacker: Creature, move: BattleMove) -> float:
        return STAB_MULTIPLIER if move.type in attacker.types else 1.0

    @staticmethod
    def get_type_multiplier(defender: Creature, move: BattleMove) -> float:
        return TypeEffectiveness.against(move.type, defender.types)

    @staticmethod
    def calculate_damage(attacker: Creature, defender: Creature, move: BattleMove, is_critical: bool, random_percent: int) -> int:
        """
        Damage for a damaging move with the random parts already rolled.

        ceil(((2*L/5 + 2) * power * atk / def / 50 + 2) * stab * type * rand/100) * crit
        """
        is_physical = move.category == MoveCategory.PHYSICAL
        attack = attacker.stats[Stat.ATK if is_physical else Stat.SPATK]
        defense = defender.stats[Stat.DEF if is_physical else Stat.SPDEF]

        stab_multiplier = DamageCalculator.get_stab_multiplier(attacker, move)
        type_multiplier = DamageCalculator.get_type_multiplier(defender, move)
        critical_multiplier = CRITICAL_HIT_MULTIPLIER if is_critical else 1

        base_damage = (((2 * attacker.level / 5 + 2) * move.power * attack / defense) / 50) + 2
        damage = math.ceil(base_damage * stab_multiplier * type_multiplier * (random_percent / 100)) * critical_multiplier
        return max(damage, 0)

    def resolve_action(self, attacker: Creature, defender: Creature, move_slot: MoveSlot) -> ActionOutcome:
        """
        Apply `move_slot` from attacker to defender and return the committed outcome.

        The slot's pp is consumed as part of the action. A disabled or pp-exhausted
        slot is rejected with `usable=False` and leaves every creature untouched.
        Struggle is never charged pp.
        """
        move = move_slot.get_move()

        if move_slot.moveId != Move.STRUGGLE and not move_slot.use():
            logger.debug("%s is not usable (pp %d/%d, disabled %d)", move_slot.get_name(), move_slot.ppUsed, move_slot.get_max_pp(), move_slot.disableTurns)
            return ActionOutcome(move=move.moveId, result=MoveResult.OTHER, usable=False)

        # Creatures restored without a stat pass have no hp yet
        for creature in (attacker, defender):
            if creature.hp is None:
                calculate_stats(creature)

        if move.category == MoveCategory.STATUS:
            return ActionOutcome(move=move.moveId, result=MoveResult.OTHER)

        is_critical = self.rng.choice_index(CRITICAL_HIT_ODDS) == 0
        random_percent = self.rng.rand_range(DAMAGE_RANDOM_MIN, DAMAGE_RANDOM_MAX)
        type_multiplier = self.get_type_multiplier(defender, move)

        damage = self.calculate_damage(attacker, defender, move, is_critical, random_percent)
        logger.debug("damage %d %s power=%d roll=%d crit=%s type=%.2f", damage, move.name, move.power, random_percent, is_critical, type_multiplier)

        messages: list[str] = []
        if damage:
            defender.hp = max(defender.hp - damage, 0)
            if is_critical:
                messages.append(MSG_CRITICAL_HIT)

        result = classify_effectiveness(type_multiplier)
        effectiveness_message = get_effectiveness_message(result, defender)
        if effectiveness_message:
            messages.append(effectiveness_message)

        return ActionOutcome(move=move.moveId, result=result, damage=damage, critical=is_critical and damage > 0, messages=messages)

    async def resolve_action_async(self, attacker: Creature, defender: Creature, move_slot: MoveSlot, presenter: Optional[Presenter] = None) -> ActionOutcome:
        """Commit the action, then wait for the presenter to acknowledge the outcome."""
        outcome = self.resolve_action(attacker, defender, move_slot)
        if presenter is not None:
            await presenter(outcome)
        return outcome
