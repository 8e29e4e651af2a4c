import copy
from typing import Dict, Optional

from realm.domain.models.session import SessionCursor
from realm.domain.repositories import SessionRepository


class InMemorySessionRepository(SessionRepository):
    def __init__(self) -> None:
        self._snapshots: Dict[str, dict] = {}

    def save(self, cursor: SessionCursor) -> None:
        self._snapshots[cursor.save_key] = copy.deepcopy(cursor.to_dict())

    def load(self, player_name: str) -> Optional[SessionCursor]:
        row = self._snapshots.get(f"{player_name}_autosave")
        if row is None:
            return None
        return SessionCursor.from_dict(copy.deepcopy(row))
