from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from realm.application.dtos import StatusView
from realm.application.ports import Terminal
from realm.application.registry import LocationRegistry
from realm.domain.models.character import Character
from realm.domain.models.location import LocationNode
from realm.domain.models.session import SessionCursor
from realm.domain.models.world import WorldState


@dataclass
class LocationContext:
    node: LocationNode
    cursor: SessionCursor
    registry: LocationRegistry
    terminal: Terminal
    world: WorldState
    notices: List[str] = field(default_factory=list)

    @property
    def player(self) -> Character:
        return self.cursor.player

    @property
    def is_hub(self) -> bool:
        return self.node.identity is self.registry.hub

    def status_view(self) -> StatusView:
        player = self.player
        return StatusView(
            name=player.name,
            level=player.level,
            hp_current=player.hp_current,
            hp_max=player.hp_max,
            experience=player.experience,
            gold=player.gold,
            bank_gold=player.bank_gold,
            turn=self.cursor.turn_count,
            location_name=self.node.display_name,
            day=self.world.day,
        )
