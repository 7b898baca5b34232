"""
Battle session - explicit owner of everything the core functions need.

One session holds one rng, the trainer/secret salts, the active modifiers,
the player's party and the single active enemy. Each operation threads that
state into the module-level functions; nothing is looked up globally.
"""

import logging
import time
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from src.battle_core import ai, experience
from src.battle_core.constants import SALT_MAX
from src.battle_core.damage_calculator import DamageCalculator, Presenter
from src.battle_core.enums import AiType, Side, Species
from src.battle_core.log import configure_logging
from src.battle_core.modifiers import Modifier, ModifierRegistry
from src.battle_core.moveset import generate_moveset
from src.battle_core.party import Party, capture
from src.battle_core.schema.action_outcome import ActionOutcome
from src.battle_core.schema.creature import Creature, MoveSlot
from src.battle_core.stat_calculator import calculate_stats
from src.battle_core.utils.mon_factory import create_creature
from src.battle_core.utils.rng import BattleRng

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SessionConfig(BaseModel):
    """Per-session settings"""

    seed: Optional[int] = Field(default=None, ge=0, le=0xFFFFFFFF, description="rng seed; time-based when None")
    trainerId: Optional[int] = Field(default=None, ge=0, le=SALT_MAX, description="drawn from the rng when None")
    secretId: Optional[int] = Field(default=None, ge=0, le=SALT_MAX, description="drawn from the rng when None")
    enemyAiType: AiType = AiType.SMART_RANDOM
    logLevel: Optional[LogLevel] = Field(default=None, description="configure package logging at this level when set")

    @field_validator("logLevel", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


class BattleSession:
    def __init__(self, config: Optional[SessionConfig] = None):
        self.config = config or SessionConfig()
        if self.config.logLevel:
            configure_logging(self.config.logLevel)

        seed = self.config.seed if self.config.seed is not None else int(time.time())
        self.rng = BattleRng(seed)
        self.trainer_id = self.config.trainerId if self.config.trainerId is not None else self.rng.rand16()
        self.secret_id = self.config.secretId if self.config.secretId is not None else self.rng.rand16()

        self.modifiers = ModifierRegistry()
        self.party = Party()
        self.enemy: Optional[Creature] = None
        self.damage_calculator = DamageCalculator(self.rng)

    # =================================================================
    # MODIFIERS
    # =================================================================

    def add_modifier(self, modifier: Modifier) -> None:
        self.modifiers.register(modifier)

    # =================================================================
    # CREATION
    # =================================================================

    def create_creature(self, species: Species, level: int, owner: Side = Side.PLAYER, clone_source: Optional[Creature] = None) -> Creature:
        return create_creature(
            species,
            level,
            self.rng,
            trainer_id=self.trainer_id,
            secret_id=self.secret_id,
            modifiers=self.modifiers,
            clone_source=clone_source,
            owner=owner,
            ai_type=self.config.enemyAiType,
        )

    def add_party_member(self, species: Species, level: int) -> Optional[Creature]:
        creature = self.create_creature(species, level, owner=Side.PLAYER)
        return creature if self.party.add(creature) else None

    def spawn_enemy(self, species: Species, level: int) -> Creature:
        self.enemy = self.create_creature(species, level, owner=Side.ENEMY)
        return self.enemy

    def capture_enemy(self) -> Optional[Creature]:
        if self.enemy is None:
            return None
        return capture(self.enemy, self.party, self.modifiers)

    # =================================================================
    # CORE OPERATIONS
    # =================================================================

    def compute_stats(self, creature: Creature) -> None:
        calculate_stats(creature, self.modifiers)

    def generate_moveset(self, creature: Creature) -> None:
        generate_moveset(creature, self.rng)

    def resolve_action(self, attacker: Creature, defender: Creature, move_slot: MoveSlot) -> ActionOutcome:
        return self.damage_calculator.resolve_action(attacker, defender, move_slot)

    async def resolve_action_async(self, attacker: Creature, defender: Creature, move_slot: MoveSlot, presenter: Optional[Presenter] = None) -> ActionOutcome:
        return await self.damage_calculator.resolve_action_async(attacker, defender, move_slot, presenter)

    def add_experience(self, creature: Creature, amount: int) -> int:
        return experience.add_experience(creature, amount, self.modifiers)

    def award_victory(self, victor: Creature, defeated: Creature) -> int:
        """Give `victor` the exp for defeating `defeated` and count the win. Returns the exp awarded."""
        amount = experience.get_exp_value(defeated, victor.level)
        victor.winCount += 1
        self.add_experience(victor, amount)
        return amount

    def choose_action(self, opponent: Creature, target: Creature) -> MoveSlot:
        return ai.choose_action(opponent, target, self.rng)
