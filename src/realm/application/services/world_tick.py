from __future__ import annotations

import logging
from typing import Optional

from realm.application.ports import WorldSimulationService
from realm.domain.errors import ConfigurationError
from realm.domain.models.world import DEFAULT_TICK_MODULUS
from realm.domain.models.session import SessionCursor


logger = logging.getLogger(__name__)


class WorldTickScheduler:
    def __init__(self, simulation: WorldSimulationService, modulus: int = DEFAULT_TICK_MODULUS) -> None:
        if int(modulus) < 1:
            raise ConfigurationError(f"World tick modulus must be >= 1, got {modulus}")
        self.simulation = simulation
        self.modulus = int(modulus)
        self.ticks_fired = 0
        self._last_tick_turn: Optional[int] = None

    def is_due(self, turn_count: int) -> bool:
        return turn_count > 0 and turn_count % self.modulus == 0 and turn_count != self._last_tick_turn

    def on_turn(self, cursor: SessionCursor) -> bool:
        """Call after the turn counter was incremented; returns whether the world ticked."""
        turn = int(cursor.turn_count)
        if not self.is_due(turn):
            return False
        self._last_tick_turn = turn
        self.ticks_fired += 1
        logger.debug("World tick at turn %d", turn)
        self.simulation.periodic_update()
        self.simulation.roll_world_event(cursor.player)
        return True
