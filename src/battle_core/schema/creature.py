import math
from typing import Annotated, Optional

from pydantic import BaseModel, Field

from src.battle_core.constants import MAX_CREATURE_ID, MAX_IV, MAX_MON_MOVES, MAX_STAT_VALUE, NUM_STATS
from src.battle_core.data.moves import get_move_data
from src.battle_core.data.species import get_species_info
from src.battle_core.enums import Species, Move, Type, Stat, Gender, Side, AiType
from src.battle_core.schema.battle_move import BattleMove
from src.battle_core.schema.species_info import SpeciesInfo

HiddenValue = Annotated[int, Field(ge=0, le=MAX_IV)]
StatValue = Annotated[int, Field(ge=0, le=MAX_STAT_VALUE)]


class MoveSlot(BaseModel):
    """A learned move and its per-creature usage state"""

    moveId: Move
    ppUsed: int = Field(ge=0, default=0)
    ppUp: int = Field(ge=0, default=0)  # bonus capacity on top of the move's base pp
    disableTurns: int = Field(ge=0, default=0)

    def get_move(self) -> BattleMove:
        return get_move_data(self.moveId)

    def get_name(self) -> str:
        return self.get_move().name.upper()

    def get_max_pp(self) -> int:
        return self.get_move().pp + self.ppUp

    def is_usable(self) -> bool:
        if self.disableTurns > 0:
            return False
        return self.ppUsed < self.get_max_pp()

    def use(self) -> bool:
        """Consume one pp. Leaves the slot untouched and returns False if not usable."""
        if not self.is_usable():
            return False
        self.ppUsed += 1
        return True

    def tick_disable(self) -> None:
        if self.disableTurns > 0:
            self.disableTurns -= 1


class Creature(BaseModel):
    """
    Creature instance - the persisted/exchanged record.

    Owned by exactly one controller (`owner`). Stats are always derived by
    stat_calculator.calculate_stats; never edit them by hand.
    """

    # Identity, fixed at creation and kept across ownership transfer
    id: int = Field(ge=0, le=MAX_CREATURE_ID)
    species: Species
    gender: Gender
    shiny: bool = False
    hiddenValues: list[HiddenValue] = Field(min_length=NUM_STATS, max_length=NUM_STATS)

    # Progress
    level: int = Field(ge=1)
    exp: int = Field(ge=0, default=0)
    levelExp: int = Field(ge=0, default=0)  # exp earned past the current level's threshold
    winCount: int = Field(ge=0, default=0)

    # Derived stats and health; hp is None until the first stat calculation
    stats: list[StatValue] = Field(default_factory=lambda: [0] * NUM_STATS, min_length=NUM_STATS, max_length=NUM_STATS)
    hp: Optional[int] = Field(default=None, ge=0)

    moveset: list[MoveSlot] = Field(default_factory=list, max_length=MAX_MON_MOVES)

    # Controller
    owner: Side = Side.PLAYER
    aiType: AiType = AiType.SMART_RANDOM  # read only for enemy-owned creatures

    def get_species_info(self) -> SpeciesInfo:
        return get_species_info(self.species)

    @property
    def name(self) -> str:
        return self.get_species_info().name.upper()

    @property
    def types(self) -> list[Type]:
        return list(self.get_species_info().types)

    def is_player(self) -> bool:
        return self.owner == Side.PLAYER

    def get_max_hp(self) -> int:
        return self.stats[Stat.HP]

    def get_hp_ratio(self) -> float:
        max_hp = self.get_max_hp()
        if not max_hp:
            return 0.0
        return math.floor(((self.hp or 0) / max_hp) * 100) / 100

    def is_fainted(self) -> bool:
        return not self.hp

    def try_select_move(self, move_index: int) -> bool:
        """Whether the move in `move_index` can be chosen this turn"""
        if move_index < 0 or move_index >= len(self.moveset):
            return False
        return self.moveset[move_index].is_usable()

    def get_usable_moves(self) -> list[MoveSlot]:
        return [m for m in self.moveset if m.is_usable()]
