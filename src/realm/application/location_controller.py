from __future__ import annotations

import logging

from realm.application.locations.context import LocationContext
from realm.application.navigation import Transition
from realm.application.ports import LocationBehavior, Terminal
from realm.application.registry import LocationRegistry
from realm.application.services.encounter_gate import EncounterGate
from realm.application.services.persistence_gate import PersistenceGate
from realm.application.services.world_tick import WorldTickScheduler
from realm.domain.models.location import LocationNode
from realm.domain.models.session import SessionCursor
from realm.domain.models.world import WorldState


logger = logging.getLogger(__name__)

CHOICE_PROMPT = "Your choice: "
INVALID_CHOICE_NOTICE = "Invalid choice!"
AUTOSAVE_FAILED_NOTICE = "Autosave failed; your progress is only held in memory."


class LocationController:
    """Runs one location's interactive loop for the active session.

    Each iteration autosaves, redraws, reads one line and dispatches it. Only
    handled, non-empty input costs a turn, and the world tick is checked
    against the post-increment turn value. The controller hands back a
    ``Transition`` as soon as the handler asks to leave; handler exceptions
    propagate untouched.
    """

    def __init__(
        self,
        node: LocationNode,
        behavior: LocationBehavior,
        *,
        registry: LocationRegistry,
        terminal: Terminal,
        world: WorldState,
        encounter_gate: EncounterGate,
        persistence_gate: PersistenceGate,
        tick_scheduler: WorldTickScheduler,
    ) -> None:
        self.node = node
        self.behavior = behavior
        self.registry = registry
        self.terminal = terminal
        self.world = world
        self.encounter_gate = encounter_gate
        self.persistence_gate = persistence_gate
        self.tick_scheduler = tick_scheduler

    def run(self, cursor: SessionCursor) -> Transition:
        cursor.current_location = self.node.identity
        cursor.player.location_id = self.node.identity.value

        encounter = self.encounter_gate.check(cursor.player, self.node.identity)
        if not encounter.player_still_viable:
            for line in encounter.messages:
                self.terminal.write_line(line, "bold red")
            logger.info("%s was incapacitated entering %s", cursor.player.name, self.node.identity.value)
            return Transition.incapacitated()

        ctx = LocationContext(
            node=self.node,
            cursor=cursor,
            registry=self.registry,
            terminal=self.terminal,
            world=self.world,
            notices=list(encounter.messages),
        )
        while cursor.is_alive:
            if not self.persistence_gate.persist(cursor):
                ctx.notices.append(AUTOSAVE_FAILED_NOTICE)
            self.behavior.render(ctx)

            choice = str(self.terminal.read_line(CHOICE_PROMPT) or "").strip()
            if not choice:
                continue

            result = self.behavior.handle_choice(ctx, choice)
            if result.navigation is not None:
                for line in result.messages:
                    self.terminal.write_line(line, "yellow")
                return Transition.from_navigation(result.navigation)

            if not result.handled:
                ctx.notices.append(INVALID_CHOICE_NOTICE)
                continue

            ctx.notices.extend(result.messages)
            cursor.advance_turn()
            self.tick_scheduler.on_turn(cursor)
            if result.exit_requested:
                return Transition.exit()

        return Transition.died()
