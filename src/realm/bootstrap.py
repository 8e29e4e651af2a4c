import logging
import random
from dataclasses import dataclass
from typing import Optional

from realm.application.ports import Terminal
from realm.application.registry import LocationRegistry
from realm.application.services.encounter_gate import EncounterGate
from realm.application.services.encounter_service import AmbushEncounterService
from realm.application.services.event_bus import EventBus
from realm.application.services.persistence_gate import PersistenceGate
from realm.application.services.world_simulation import WorldSimulation
from realm.application.services.world_tick import WorldTickScheduler
from realm.application.session import GameSession
from realm.config import EngineSettings
from realm.domain.models.character import Character
from realm.domain.models.session import SessionCursor
from realm.domain.models.world import WorldState
from realm.domain.repositories import SessionRepository
from realm.infrastructure.inmemory.inmemory_session_repo import InMemorySessionRepository
from realm.infrastructure.inmemory.town_map import STARTING_NPCS, build_town_registry


logger = logging.getLogger(__name__)


@dataclass
class Game:
    settings: EngineSettings
    registry: LocationRegistry
    world: WorldState
    event_bus: EventBus
    session_repo: SessionRepository
    session: GameSession

    def new_cursor(self, player_name: str) -> SessionCursor:
        return SessionCursor(player=Character(name=player_name), current_location=self.settings.start_location)

    def resume_or_create(self, player_name: str) -> SessionCursor:
        cursor = self.session_repo.load(player_name)
        if cursor is not None and cursor.is_alive:
            logger.info("Resuming autosave for %s at %s", player_name, cursor.current_location.value)
            return cursor
        return self.new_cursor(player_name)


def _build_session_repo(settings: EngineSettings) -> SessionRepository:
    if not settings.database_url:
        return InMemorySessionRepository()
    # SQLAlchemy is only imported when a database URL is configured.
    from realm.infrastructure.db.sql_session_repo import SqlSessionRepository

    return SqlSessionRepository.from_url(settings.database_url)


def create_game(
    settings: Optional[EngineSettings] = None,
    *,
    terminal: Optional[Terminal] = None,
    session_repo: Optional[SessionRepository] = None,
    registry: Optional[LocationRegistry] = None,
    rng: Optional[random.Random] = None,
) -> Game:
    settings = settings or EngineSettings.from_env()
    if terminal is None:
        from realm.presentation.terminal import RichTerminal

        terminal = RichTerminal()
    rng = rng or random.Random(settings.seed)
    registry = registry or build_town_registry()
    if not registry.sealed:
        registry.validate()
    session_repo = session_repo or _build_session_repo(settings)

    event_bus = EventBus()
    world = WorldState(npc_locations={name: where for name, where in STARTING_NPCS.items() if where in registry})
    simulation = WorldSimulation(
        world,
        registry,
        event_bus,
        world_event_chance=settings.world_event_chance,
        rng=rng,
    )
    encounter_gate = EncounterGate(
        AmbushEncounterService(chance=settings.encounter_chance, rng=rng),
        safe_locations=settings.safe_locations,
        event_bus=event_bus,
    )
    session = GameSession(
        registry,
        terminal=terminal,
        world=world,
        encounter_gate=encounter_gate,
        persistence_gate=PersistenceGate(session_repo, event_bus=event_bus),
        tick_scheduler=WorldTickScheduler(simulation, modulus=settings.tick_modulus),
        event_bus=event_bus,
    )
    return Game(
        settings=settings,
        registry=registry,
        world=world,
        event_bus=event_bus,
        session_repo=session_repo,
        session=session,
    )
