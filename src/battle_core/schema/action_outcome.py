from pydantic import BaseModel, Field

from src.battle_core.enums import Move, MoveResult


class ActionOutcome(BaseModel):
    """Result of resolving one move, handed to the presentation layer"""

    move: Move
    result: MoveResult
    damage: int = Field(ge=0, default=0)
    critical: bool = False

    # False when the slot was disabled or out of pp; nothing was changed
    usable: bool = True

    # Notification events in display order (critical hit before effectiveness)
    messages: list[str] = Field(default_factory=list)
