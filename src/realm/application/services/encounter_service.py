from __future__ import annotations

import random
from typing import Optional

from realm.application.dtos import EncounterOutcome
from realm.domain.models.character import Character
from realm.domain.models.location import LocationId


_AMBUSHERS = (
    "a cutpurse with a rusty knife",
    "a drunken mercenary",
    "a pack of street urchins",
    "a hooded thug",
    "a rabid alley dog",
)


class AmbushEncounterService:
    """Default street ambush: a flat chance of a short scuffle on arrival.

    The ambush report is returned in ``messages``; the location shows it on
    its first redraw.
    """

    def __init__(
        self,
        chance: float = 0.10,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.chance = max(0.0, min(1.0, float(chance)))
        self.rng = rng or random.Random()

    def resolve(self, player: Character, location_id: LocationId) -> EncounterOutcome:
        if not player.alive:
            return EncounterOutcome(occurred=False, player_still_viable=False)
        if self.rng.random() >= self.chance:
            return EncounterOutcome(occurred=False, player_still_viable=True)

        foe = self.rng.choice(_AMBUSHERS)
        damage = self.rng.randint(1, max(2, 3 * int(player.level)))
        dealt = player.take_damage(damage)
        messages = [f"You are ambushed by {foe}!", f"You take {dealt} damage."]
        if not player.alive:
            messages.append("You collapse in the street...")
        return EncounterOutcome(occurred=True, player_still_viable=player.alive, messages=tuple(messages))
