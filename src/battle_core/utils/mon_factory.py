import logging
from typing import Optional

from src.battle_core.constants import NUM_STATS
from src.battle_core.data.level_moves import LevelMoves
from src.battle_core.data.species import get_species_info
from src.battle_core.enums import AiType, Gender, Side, Species
from src.battle_core.experience import get_level_total_exp
from src.battle_core.identity import get_gender, get_hidden_values, roll_shiny
from src.battle_core.modifiers import ModifierRegistry
from src.battle_core.moveset import generate_moveset
from src.battle_core.schema.creature import Creature
from src.battle_core.stat_calculator import calculate_stats
from src.battle_core.utils.rng import BattleRng

logger = logging.getLogger(__name__)


def create_creature(
    species: Species,
    level: int,
    rng: Optional[BattleRng],
    trainer_id: int = 0,
    secret_id: int = 0,
    modifiers: Optional[ModifierRegistry] = None,
    clone_source: Optional[Creature] = None,
    owner: Side = Side.PLAYER,
    ai_type: AiType = AiType.SMART_RANDOM,
    level_moves: Optional[dict[Species, LevelMoves]] = None,
) -> Creature:
    """
    Build a creature and run its first stat calculation.

    Fresh creatures draw their moveset and then a 32-bit identifier from `rng`;
    hidden values, gender and shininess all follow from that identifier.
    A `clone_source` (ownership transfer) instead contributes its identity,
    health, stats, moveset and win count verbatim, and draws nothing.
    """
    info = get_species_info(species)

    if clone_source is not None:
        creature = Creature(
            id=clone_source.id,
            species=species,
            gender=clone_source.gender,
            shiny=clone_source.shiny,
            hiddenValues=list(clone_source.hiddenValues),
            level=level,
            exp=clone_source.exp or get_level_total_exp(level, info.growthRate),
            levelExp=clone_source.levelExp,
            winCount=clone_source.winCount,
            stats=list(clone_source.stats),
            hp=clone_source.hp,
            moveset=[m.model_copy() for m in clone_source.moveset],
            owner=owner,
            aiType=ai_type,
        )
        calculate_stats(creature, modifiers)
        return creature

    if rng is None:
        raise ValueError("A new creature needs an rng")

    creature = Creature(
        id=0,
        species=species,
        gender=Gender.GENDERLESS,
        hiddenValues=[0] * NUM_STATS,
        level=level,
        exp=get_level_total_exp(level, info.growthRate),
        owner=owner,
        aiType=ai_type,
    )
    generate_moveset(creature, rng, level_moves)

    creature.id = rng.rand32()
    creature.hiddenValues = get_hidden_values(creature.id)
    creature.gender = get_gender(creature.id, info)
    creature.shiny = roll_shiny(creature.id, trainer_id, secret_id, modifiers)

    calculate_stats(creature, modifiers)
    logger.debug("Created %s Lv.%d id=%d shiny=%s", creature.name, level, creature.id, creature.shiny)
    return creature
