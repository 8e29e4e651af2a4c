from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

from realm.application.dtos import EncounterOutcome, LocationScreen, StatusView
from realm.domain.models.character import Character
from realm.domain.models.location import LocationId
from realm.domain.models.session import SessionCursor

if TYPE_CHECKING:
    from realm.application.locations.context import LocationContext
    from realm.application.navigation import ChoiceResult


class Terminal(Protocol):
    def clear(self) -> None:
        ...

    def write_line(self, text: str = "", style: Optional[str] = None) -> None:
        ...

    def read_line(self, prompt: str = "") -> str:
        ...

    def pause(self, message: str = "Press ENTER to continue...") -> None:
        ...

    def show_location(self, screen: LocationScreen) -> None:
        ...

    def show_status(self, status: StatusView) -> None:
        ...


class LocationBehavior(Protocol):
    def render(self, ctx: "LocationContext") -> None:
        ...

    def handle_choice(self, ctx: "LocationContext", choice: str) -> "ChoiceResult":
        ...


class EncounterService(Protocol):
    def resolve(self, player: Character, location_id: LocationId) -> EncounterOutcome:
        ...


class PersistenceService(Protocol):
    def save(self, cursor: SessionCursor) -> None:
        ...


class WorldSimulationService(Protocol):
    def periodic_update(self) -> None:
        ...

    def roll_world_event(self, player: Character) -> None:
        ...
