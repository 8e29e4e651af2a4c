from __future__ import annotations

import logging
from typing import Iterable, Optional

from realm.application.dtos import EncounterOutcome
from realm.application.ports import EncounterService
from realm.application.services.event_bus import EventBus
from realm.domain.events import EncounterResolved
from realm.domain.models.character import Character
from realm.domain.models.location import DEFAULT_SAFE_LOCATIONS, LocationId


logger = logging.getLogger(__name__)


class EncounterGate:
    def __init__(
        self,
        service: EncounterService,
        safe_locations: Iterable[LocationId] = DEFAULT_SAFE_LOCATIONS,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.service = service
        self.safe_locations = frozenset(LocationId(item) for item in safe_locations)
        self.event_bus = event_bus

    def is_exempt(self, location_id: LocationId) -> bool:
        return location_id in self.safe_locations

    def check(self, player: Character, location_id: LocationId) -> EncounterOutcome:
        """Roll the entry encounter for ``location_id``; safe locations never roll."""
        if self.is_exempt(location_id):
            return EncounterOutcome(occurred=False, player_still_viable=bool(player.alive))

        outcome = self.service.resolve(player, location_id)
        if outcome.occurred:
            logger.info(
                "Encounter on entry to %s (viable=%s)",
                location_id.value,
                outcome.player_still_viable,
            )
            if self.event_bus is not None:
                self.event_bus.publish(
                    EncounterResolved(
                        player_name=player.name,
                        location_id=location_id.value,
                        player_still_viable=outcome.player_still_viable,
                    )
                )
        return outcome
