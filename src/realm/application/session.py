from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from realm.application.location_controller import LocationController
from realm.application.navigation import Transition, TransitionKind
from realm.application.ports import Terminal
from realm.application.registry import LocationRegistry, RegisteredLocation
from realm.application.services.encounter_gate import EncounterGate
from realm.application.services.event_bus import EventBus
from realm.application.services.persistence_gate import PersistenceGate
from realm.application.services.world_tick import WorldTickScheduler
from realm.domain.errors import ConfigurationError
from realm.domain.events import LocationEntered
from realm.domain.models.location import LocationId
from realm.domain.models.session import SessionCursor
from realm.domain.models.world import WorldState


logger = logging.getLogger(__name__)

ControllerFactory = Callable[[RegisteredLocation], LocationController]


@dataclass
class SessionOutcome:
    cursor: SessionCursor
    final_transition: Transition
    visited: List[LocationId] = field(default_factory=list)


class GameSession:
    """Owns the session cursor and activates one location controller at a time."""

    def __init__(
        self,
        registry: LocationRegistry,
        *,
        terminal: Terminal,
        world: WorldState,
        encounter_gate: EncounterGate,
        persistence_gate: PersistenceGate,
        tick_scheduler: WorldTickScheduler,
        event_bus: Optional[EventBus] = None,
        controller_factory: Optional[ControllerFactory] = None,
    ) -> None:
        if not registry.sealed:
            registry.validate()
        self.registry = registry
        self.terminal = terminal
        self.world = world
        self.encounter_gate = encounter_gate
        self.persistence_gate = persistence_gate
        self.tick_scheduler = tick_scheduler
        self.event_bus = event_bus
        self.controller_factory = controller_factory or self._build_controller

    def _build_controller(self, entry: RegisteredLocation) -> LocationController:
        return LocationController(
            entry.node,
            entry.behavior,
            registry=self.registry,
            terminal=self.terminal,
            world=self.world,
            encounter_gate=self.encounter_gate,
            persistence_gate=self.persistence_gate,
            tick_scheduler=self.tick_scheduler,
        )

    def play(self, cursor: SessionCursor, start: Optional[LocationId] = None) -> SessionOutcome:
        location_id = LocationId(start if start is not None else cursor.current_location)
        visited: List[LocationId] = []

        while True:
            entry = self._activate(location_id)
            visited.append(entry.node.identity)
            if self.event_bus is not None:
                self.event_bus.publish(
                    LocationEntered(
                        player_name=cursor.player.name,
                        location_id=entry.node.identity.value,
                        turn=cursor.turn_count,
                    )
                )

            transition = self.controller_factory(entry).run(cursor)
            logger.debug("Left %s via %s", entry.node.identity.value, transition.kind.value)

            if transition.kind is TransitionKind.NAVIGATE:
                location_id = transition.destination
                continue
            if transition.kind is TransitionKind.EXIT and entry.node.identity is not self.registry.hub:
                location_id = self.registry.hub
                continue
            return SessionOutcome(cursor=cursor, final_transition=transition, visited=visited)

    def _activate(self, location_id: Optional[LocationId]) -> RegisteredLocation:
        if location_id is None or location_id not in self.registry:
            raise ConfigurationError(f"Navigation to unregistered location: {location_id!r}")
        return self.registry.resolve(location_id)
