from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class LocationId(str, Enum):
    NOWHERE = "nowhere"
    MAIN_STREET = "main_street"
    INN = "inn"
    TEAM_CORNER = "team_corner"
    RECRUIT = "recruit"
    CHURCH = "church"
    DUNGEONS = "dungeons"
    WEAPON_SHOP = "weapon_shop"
    ARMOR_SHOP = "armor_shop"
    BANK = "bank"
    MARKETPLACE = "marketplace"
    DARK_ALLEY = "dark_alley"
    HEALER = "healer"
    ANCHOR_ROAD = "anchor_road"
    DORMITORY = "dormitory"
    TEMPLE = "temple"
    CASTLE = "castle"
    PRISON = "prison"
    HOME = "home"
    LEVEL_MASTER = "level_master"
    MAGIC_SHOP = "magic_shop"

    @classmethod
    def parse(cls, raw: str) -> "LocationId":
        """Accept either the enum value (``main_street``) or its name (``MAIN_STREET``)."""
        token = str(raw or "").strip()
        for member in cls:
            if token.lower() == member.value or token.upper() == member.name:
                return member
        raise ValueError(f"Unknown location id: {raw!r}")


# Session-level sentinel: navigating here ends the session.
TERMINATE = LocationId.NOWHERE

# Single-letter commands every standard location understands.
RESERVED_HOTKEYS = frozenset({"S", "Q", "?"})

# Home and sanctuaries are never ambushed; the dungeons and the prison run
# their own encounter handling.
DEFAULT_SAFE_LOCATIONS = frozenset(
    {
        LocationId.HOME,
        LocationId.CHURCH,
        LocationId.TEMPLE,
        LocationId.PRISON,
        LocationId.DUNGEONS,
    }
)


@dataclass(frozen=True)
class LocationNode:
    identity: LocationId
    display_name: str
    description: str = ""
    exits: Tuple[LocationId, ...] = field(default_factory=tuple)
    action_labels: Tuple[str, ...] = field(default_factory=tuple)
    hotkey: str = "?"

    def __post_init__(self) -> None:
        # Lists are accepted for convenience but the node itself stays immutable.
        object.__setattr__(self, "exits", tuple(self.exits))
        object.__setattr__(self, "action_labels", tuple(self.action_labels))
        object.__setattr__(self, "hotkey", str(self.hotkey or "").strip().upper())

    def leads_to(self, destination: LocationId) -> bool:
        return destination in self.exits
