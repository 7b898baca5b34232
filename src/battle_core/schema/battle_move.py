from pydantic import BaseModel, Field

from src.battle_core.enums import Move, MoveCategory, Type


class BattleMove(BaseModel):
    """Static move definition"""

    moveId: Move
    name: str
    type: Type
    category: MoveCategory
    power: int = Field(ge=0, le=255)  # 0 for status moves
    accuracy: int = Field(ge=0, le=100)  # percent; not rolled separately
    pp: int = Field(ge=1, le=64)  # base usable count

    def is_damaging(self) -> bool:
        return self.category != MoveCategory.STATUS
