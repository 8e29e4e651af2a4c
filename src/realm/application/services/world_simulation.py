from __future__ import annotations

import logging
import random
from typing import Optional

from realm.application.registry import LocationRegistry
from realm.application.services.event_bus import EventBus
from realm.domain.events import WorldEventTriggered, WorldTicked
from realm.domain.models.character import Character
from realm.domain.models.world import WorldState


logger = logging.getLogger(__name__)

_WORLD_EVENTS = (
    "Bells ring from the castle: the king has issued a new decree.",
    "A merchant caravan rolls into the marketplace, prices tumble.",
    "Rumours spread that {name} was seen in the company of thieves.",
    "A priest on Anchor Road praises the deeds of {name}.",
    "Smoke rises over the dark alley; the guards are nowhere to be seen.",
    "A stranger leaves a sealed letter at the inn, addressed to {name}.",
)


class WorldSimulation:
    """Background world state advanced by the tick scheduler.

    NPCs wander along registry exits and the market index drifts each tick;
    every ``ticks_per_day`` ticks the calendar moves on.
    """

    def __init__(
        self,
        world: WorldState,
        registry: LocationRegistry,
        event_bus: EventBus,
        *,
        world_event_chance: float = 0.05,
        ticks_per_day: int = 12,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.world = world
        self.registry = registry
        self.event_bus = event_bus
        self.world_event_chance = max(0.0, min(1.0, float(world_event_chance)))
        self.ticks_per_day = max(1, int(ticks_per_day))
        self.rng = rng or random.Random()

    def periodic_update(self) -> None:
        world = self.world
        world.tick_count += 1
        if world.tick_count % self.ticks_per_day == 0:
            world.day += 1
        self._move_npcs()
        self._drift_market()
        self.event_bus.publish(WorldTicked(tick=world.tick_count, day=world.day, market_index=world.market_index))

    def roll_world_event(self, player: Character) -> None:
        if self.rng.random() >= self.world_event_chance:
            return
        text = self.rng.choice(_WORLD_EVENTS).format(name=player.name)
        self.world.record_event(text)
        logger.info("World event on day %d: %s", self.world.day, text)
        self.event_bus.publish(WorldEventTriggered(player_name=player.name, text=text, day=self.world.day))

    def _move_npcs(self) -> None:
        for name in sorted(self.world.npc_locations):
            where = self.world.npc_locations[name]
            node = self.registry.find(where)
            if node is None or not node.exits or self.rng.random() < 0.5:
                continue
            self.world.npc_locations[name] = self.rng.choice(node.exits)

    def _drift_market(self) -> None:
        drift = self.rng.randint(-3, 3)
        self.world.market_index = max(50, min(150, self.world.market_index + drift))
