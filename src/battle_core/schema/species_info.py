from typing import Optional

from pydantic import BaseModel, Field

from src.battle_core.enums import Species, Type, GrowthRate


class SpeciesInfo(BaseModel):
    """Static per-species data, shared by every creature of that species"""

    speciesId: Species
    name: str
    generation: int = Field(ge=1, default=1)

    # Base stats in stat slot order: HP, ATK, DEF, SPATK, SPDEF, SPD
    baseStats: list[int] = Field(min_length=6, max_length=6)

    # One or two elemental types
    types: list[Type] = Field(min_length=1, max_length=2)

    growthRate: GrowthRate
    baseExp: int = Field(ge=0)

    # Male chance on the 0..8 scale the gender roll uses (7 = 87.5% male); None = genderless
    malePercent: Optional[float] = Field(default=None, ge=0, le=8)
    genderDiffs: bool = False

    @property
    def type1(self) -> Type:
        return self.types[0]

    @property
    def type2(self) -> Optional[Type]:
        return self.types[1] if len(self.types) > 1 else None
