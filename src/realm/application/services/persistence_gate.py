from __future__ import annotations

import logging
from typing import Optional

from realm.application.ports import PersistenceService
from realm.application.services.event_bus import EventBus
from realm.domain.events import SessionSaved, SessionSaveFailed
from realm.domain.models.session import SessionCursor


logger = logging.getLogger(__name__)


class PersistenceGate:
    """Best-effort autosave run before every redraw.

    A failed save is logged and remembered in ``last_error``; the caller
    decides how to tell the player. Nothing here raises.
    """

    def __init__(self, service: PersistenceService, event_bus: Optional[EventBus] = None) -> None:
        self.service = service
        self.event_bus = event_bus
        self.last_error: Optional[Exception] = None
        self.save_count = 0

    def persist(self, cursor: SessionCursor) -> bool:
        try:
            self.service.save(cursor)
        except Exception as exc:
            self.last_error = exc
            logger.warning("Autosave failed for %s at turn %d: %s", cursor.save_key, cursor.turn_count, exc)
            self._publish(SessionSaveFailed(save_key=cursor.save_key, turn=cursor.turn_count, reason=str(exc)))
            return False

        self.last_error = None
        self.save_count += 1
        self._publish(SessionSaved(save_key=cursor.save_key, turn=cursor.turn_count))
        return True

    def _publish(self, event: object) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event)
