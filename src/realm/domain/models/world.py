from dataclasses import dataclass, field
from typing import Dict, List

from realm.domain.models.location import LocationId


# Accepted turns between two world ticks.
DEFAULT_TICK_MODULUS = 5


@dataclass
class WorldState:
    day: int = 1
    tick_count: int = 0
    market_index: int = 100
    npc_locations: Dict[str, LocationId] = field(default_factory=dict)
    event_log: List[str] = field(default_factory=list)
    pending_announcements: List[str] = field(default_factory=list)

    def npcs_at(self, location_id: LocationId) -> List[str]:
        return sorted(name for name, where in self.npc_locations.items() if where == location_id)

    def record_event(self, text: str) -> None:
        self.event_log.append(text)
        self.pending_announcements.append(text)

    def drain_announcements(self) -> List[str]:
        rows = list(self.pending_announcements)
        self.pending_announcements.clear()
        return rows
