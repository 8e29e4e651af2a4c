from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict

from realm.domain.models.character import Character
from realm.domain.models.location import LocationId


@dataclass
class SessionCursor:
    player: Character
    current_location: LocationId = LocationId.MAIN_STREET
    turn_count: int = 0

    @property
    def is_alive(self) -> bool:
        return bool(self.player.alive)

    @property
    def save_key(self) -> str:
        return f"{self.player.name}_autosave"

    def advance_turn(self) -> int:
        self.turn_count += 1
        return self.turn_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player": asdict(self.player),
            "current_location": self.current_location.value,
            "turn_count": int(self.turn_count),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SessionCursor":
        player_row = dict(payload.get("player") or {})
        return cls(
            player=Character(**player_row),
            current_location=LocationId.parse(payload.get("current_location", LocationId.MAIN_STREET.value)),
            turn_count=max(0, int(payload.get("turn_count", 0) or 0)),
        )
