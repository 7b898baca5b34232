from src.battle_core.enums import Move, Species

# Species -> [(min_level, move)], ascending by min_level.
# Ditto is deliberately absent: it learns nothing by level.
LevelMoves = list[tuple[int, Move]]

LEVEL_MOVES: dict[Species, LevelMoves] = {
    Species.BULBASAUR: [(1, Move.TACKLE), (1, Move.GROWL), (7, Move.LEECH_SEED), (9, Move.VINE_WHIP), (19, Move.RAZOR_LEAF)],
    Species.CHARMANDER: [(1, Move.SCRATCH), (1, Move.GROWL), (7, Move.EMBER), (13, Move.SMOKESCREEN)],
    Species.SQUIRTLE: [(1, Move.TACKLE), (4, Move.TAIL_WHIP), (7, Move.BUBBLE), (10, Move.WITHDRAW), (13, Move.WATER_GUN)],
    Species.CATERPIE: [(1, Move.TACKLE), (1, Move.STRING_SHOT)],
    Species.PIDGEY: [(1, Move.TACKLE), (5, Move.SAND_ATTACK), (9, Move.GUST), (13, Move.QUICK_ATTACK)],
    Species.RATTATA: [(1, Move.TACKLE), (1, Move.TAIL_WHIP), (7, Move.QUICK_ATTACK), (13, Move.HYPER_FANG), (20, Move.BITE)],
    Species.PIKACHU: [(1, Move.THUNDER_SHOCK), (1, Move.GROWL), (6, Move.TAIL_WHIP), (8, Move.THUNDER_WAVE), (11, Move.QUICK_ATTACK)],
    Species.CLEFAIRY: [(1, Move.POUND), (1, Move.GROWL), (4, Move.SING), (7, Move.DOUBLE_SLAP), (10, Move.DISARMING_VOICE)],
    Species.GEODUDE: [(1, Move.TACKLE), (1, Move.DEFENSE_CURL), (6, Move.ROLLOUT), (11, Move.ROCK_THROW)],
    Species.MAGNEMITE: [(1, Move.TACKLE), (6, Move.SUPERSONIC), (11, Move.THUNDER_SHOCK)],
    Species.GASTLY: [(1, Move.HYPNOSIS), (1, Move.LICK), (12, Move.CONFUSION)],
}
