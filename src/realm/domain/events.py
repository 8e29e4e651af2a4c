from dataclasses import dataclass


@dataclass
class LocationEntered:
    player_name: str
    location_id: str
    turn: int


@dataclass
class EncounterResolved:
    player_name: str
    location_id: str
    player_still_viable: bool


@dataclass
class WorldTicked:
    tick: int
    day: int
    market_index: int


@dataclass
class WorldEventTriggered:
    player_name: str
    text: str
    day: int


@dataclass
class SessionSaved:
    save_key: str
    turn: int


@dataclass
class SessionSaveFailed:
    save_key: str
    turn: int
    reason: str
