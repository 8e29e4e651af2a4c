from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class EncounterOutcome:
    occurred: bool = False
    player_still_viable: bool = True
    messages: Tuple[str, ...] = ()


@dataclass
class LocationScreen:
    title: str
    description: str = ""
    people: List[str] = field(default_factory=list)
    actions: List[str] = field(default_factory=list)
    exits: List[Tuple[str, str]] = field(default_factory=list)
    status_line: str = ""
    notices: List[str] = field(default_factory=list)
    can_leave: bool = True


@dataclass
class StatusView:
    name: str
    level: int
    hp_current: int
    hp_max: int
    experience: int
    gold: int
    bank_gold: int
    turn: int
    location_name: str
    day: int
