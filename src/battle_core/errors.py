class BattleCoreError(Exception):
    """Base for internal errors."""


class UnknownSpeciesError(BattleCoreError):
    def __init__(self, species: int):
        super().__init__(f"No species data for id {int(species)}")
        self.species = species


class UnknownMoveError(BattleCoreError):
    def __init__(self, move: int):
        super().__init__(f"No move data for id {int(move)}")
        self.move = move
