from src.battle_core.enums import Move, MoveCategory, Type
from src.battle_core.errors import UnknownMoveError
from src.battle_core.schema.battle_move import BattleMove

_PHYSICAL = MoveCategory.PHYSICAL
_SPECIAL = MoveCategory.SPECIAL
_STATUS = MoveCategory.STATUS


def _move(move: Move, name: str, type: Type, category: MoveCategory, power: int, accuracy: int, pp: int) -> BattleMove:
    return BattleMove(moveId=move, name=name, type=type, category=category, power=power, accuracy=accuracy, pp=pp)


BATTLE_MOVES: dict[Move, BattleMove] = {
    m.moveId: m
    for m in (
        _move(Move.POUND, "Pound", Type.NORMAL, _PHYSICAL, 40, 100, 35),
        _move(Move.DOUBLE_SLAP, "Double Slap", Type.NORMAL, _PHYSICAL, 15, 85, 10),
        _move(Move.SCRATCH, "Scratch", Type.NORMAL, _PHYSICAL, 40, 100, 35),
        _move(Move.GUST, "Gust", Type.FLYING, _SPECIAL, 40, 100, 35),
        _move(Move.VINE_WHIP, "Vine Whip", Type.GRASS, _PHYSICAL, 45, 100, 25),
        _move(Move.SAND_ATTACK, "Sand Attack", Type.GROUND, _STATUS, 0, 100, 15),
        _move(Move.TACKLE, "Tackle", Type.NORMAL, _PHYSICAL, 40, 100, 35),
        _move(Move.TAIL_WHIP, "Tail Whip", Type.NORMAL, _STATUS, 0, 100, 30),
        _move(Move.BITE, "Bite", Type.DARK, _PHYSICAL, 60, 100, 25),
        _move(Move.GROWL, "Growl", Type.NORMAL, _STATUS, 0, 100, 40),
        _move(Move.SING, "Sing", Type.NORMAL, _STATUS, 0, 55, 15),
        _move(Move.SUPERSONIC, "Supersonic", Type.NORMAL, _STATUS, 0, 55, 20),
        _move(Move.EMBER, "Ember", Type.FIRE, _SPECIAL, 40, 100, 25),
        _move(Move.WATER_GUN, "Water Gun", Type.WATER, _SPECIAL, 40, 100, 25),
        _move(Move.LEECH_SEED, "Leech Seed", Type.GRASS, _STATUS, 0, 90, 10),
        _move(Move.RAZOR_LEAF, "Razor Leaf", Type.GRASS, _PHYSICAL, 55, 95, 25),
        _move(Move.STRING_SHOT, "String Shot", Type.BUG, _STATUS, 0, 95, 40),
        _move(Move.THUNDER_SHOCK, "Thunder Shock", Type.ELECTRIC, _SPECIAL, 40, 100, 30),
        _move(Move.THUNDER_WAVE, "Thunder Wave", Type.ELECTRIC, _STATUS, 0, 90, 20),
        _move(Move.ROCK_THROW, "Rock Throw", Type.ROCK, _PHYSICAL, 50, 90, 15),
        _move(Move.CONFUSION, "Confusion", Type.PSYCHIC, _SPECIAL, 50, 100, 25),
        _move(Move.HYPNOSIS, "Hypnosis", Type.PSYCHIC, _STATUS, 0, 60, 20),
        _move(Move.QUICK_ATTACK, "Quick Attack", Type.NORMAL, _PHYSICAL, 40, 100, 30),
        _move(Move.SMOKESCREEN, "Smokescreen", Type.NORMAL, _STATUS, 0, 100, 20),
        _move(Move.WITHDRAW, "Withdraw", Type.WATER, _STATUS, 0, 100, 40),
        _move(Move.DEFENSE_CURL, "Defense Curl", Type.NORMAL, _STATUS, 0, 100, 40),
        _move(Move.LICK, "Lick", Type.GHOST, _PHYSICAL, 30, 100, 30),
        _move(Move.TRANSFORM, "Transform", Type.NORMAL, _STATUS, 0, 100, 10),
        _move(Move.BUBBLE, "Bubble", Type.WATER, _SPECIAL, 40, 100, 30),
        _move(Move.HYPER_FANG, "Hyper Fang", Type.NORMAL, _PHYSICAL, 80, 90, 15),
        _move(Move.STRUGGLE, "Struggle", Type.NORMAL, _PHYSICAL, 50, 100, 1),
        _move(Move.ROLLOUT, "Rollout", Type.ROCK, _PHYSICAL, 30, 90, 20),
        _move(Move.DISARMING_VOICE, "Disarming Voice", Type.FAIRY, _SPECIAL, 40, 100, 15),
    )
}


def get_move_data(move: Move) -> BattleMove:
    """Look up the static definition for a move id.

    Raises UnknownMoveError for ids missing from BATTLE_MOVES (including Move.NONE).
    """
    try:
        return BATTLE_MOVES[Move(move)]
    except (KeyError, ValueError):
        raise UnknownMoveError(move) from None


def is_damaging_move(move: Move) -> bool:
    return get_move_data(move).is_damaging()
