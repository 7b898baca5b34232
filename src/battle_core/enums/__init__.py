from src.battle_core.enums.move import Move, MoveCategory
from src.battle_core.enums.type import Type
from src.battle_core.enums.species import Species
from src.battle_core.enums.other import Stat, GrowthRate, Gender, Side, AiType, MoveResult
