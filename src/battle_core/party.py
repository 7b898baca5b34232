import logging
from typing import Optional

from src.battle_core.constants import MSG_NO_ENERGY, PARTY_SIZE
from src.battle_core.enums import Side
from src.battle_core.modifiers import ModifierRegistry
from src.battle_core.schema.creature import Creature
from src.battle_core.utils.mon_factory import create_creature

logger = logging.getLogger(__name__)


def filter_non_fainted(creature: Creature) -> Optional[str]:
    """Switch-in filter: a message explaining why `creature` can't be picked, or None if it can"""
    if not creature.hp:
        return MSG_NO_ENERGY.format(name=creature.name)
    return None


class Party:
    """The player's roster, at most PARTY_SIZE player-owned creatures; slot 0 is the active one"""

    def __init__(self, members: Optional[list[Creature]] = None):
        self.members: list[Creature] = []
        for member in members or []:
            self.add(member)

    def is_full(self) -> bool:
        return len(self.members) >= PARTY_SIZE

    def add(self, creature: Creature) -> bool:
        if self.is_full():
            return False
        creature.owner = Side.PLAYER
        self.members.append(creature)
        return True

    def get_active(self) -> Optional[Creature]:
        return self.members[0] if self.members else None

    def get_available(self) -> list[Creature]:
        return [m for m in self.members if filter_non_fainted(m) is None]

    def switch_in(self, index: int) -> Optional[str]:
        """Move the member at `index` to the active slot. Returns the refusal message, or None on success."""
        if index < 0 or index >= len(self.members):
            return "Invalid party slot"
        refusal = filter_non_fainted(self.members[index])
        if refusal is not None:
            return refusal
        self.members[0], self.members[index] = self.members[index], self.members[0]
        return None

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self):
        return iter(self.members)


def capture(enemy: Creature, party: Party, modifiers: Optional[ModifierRegistry] = None) -> Optional[Creature]:
    """
    Transfer a caught enemy into the party.

    The enemy is cloned into a player-owned creature (identity kept verbatim)
    when there is room. Either way the enemy leaves the field with 0 hp.
    """
    caught: Optional[Creature] = None
    if not party.is_full():
        caught = create_creature(enemy.species, enemy.level, rng=None, modifiers=modifiers, clone_source=enemy, owner=Side.PLAYER)
        party.add(caught)
        logger.info("Caught %s (id=%d)", caught.name, caught.id)
    else:
        logger.info("Party full; %s was not added", enemy.name)
    enemy.hp = 0
    return caught
