from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional

from realm.domain.errors import ConfigurationError
from realm.domain.models.location import DEFAULT_SAFE_LOCATIONS, LocationId
from realm.domain.models.world import DEFAULT_TICK_MODULUS


DEFAULT_ENCOUNTER_CHANCE = 0.10
DEFAULT_WORLD_EVENT_CHANCE = 0.05


def _read_int(env: Mapping[str, str], key: str, default: int, minimum: int | None = None) -> int:
    raw = str(env.get(key, "") or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from exc
    if minimum is not None and value < minimum:
        raise ConfigurationError(f"{key} must be >= {minimum}, got {value}")
    return value


def _read_chance(env: Mapping[str, str], key: str, default: float) -> float:
    raw = str(env.get(key, "") or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from exc
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{key} must be between 0 and 1, got {value}")
    return value


def _read_locations(env: Mapping[str, str], key: str, default: FrozenSet[LocationId]) -> FrozenSet[LocationId]:
    raw = env.get(key)
    if raw is None:
        return default
    parsed = set()
    for token in str(raw).split(","):
        if not token.strip():
            continue
        try:
            parsed.add(LocationId.parse(token))
        except ValueError as exc:
            raise ConfigurationError(f"{key} names an unknown location: {token.strip()!r}") from exc
    return frozenset(parsed)


@dataclass(frozen=True)
class EngineSettings:
    tick_modulus: int = DEFAULT_TICK_MODULUS
    encounter_chance: float = DEFAULT_ENCOUNTER_CHANCE
    world_event_chance: float = DEFAULT_WORLD_EVENT_CHANCE
    safe_locations: FrozenSet[LocationId] = field(default_factory=lambda: DEFAULT_SAFE_LOCATIONS)
    start_location: LocationId = LocationId.MAIN_STREET
    database_url: Optional[str] = None
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if int(self.tick_modulus) < 1:
            raise ConfigurationError(f"tick_modulus must be >= 1, got {self.tick_modulus}")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "EngineSettings":
        env = os.environ if env is None else env
        start_raw = str(env.get("REALM_START_LOCATION", "") or "").strip()
        try:
            start_location = LocationId.parse(start_raw) if start_raw else LocationId.MAIN_STREET
        except ValueError as exc:
            raise ConfigurationError(f"REALM_START_LOCATION names an unknown location: {start_raw!r}") from exc
        if start_location is LocationId.NOWHERE:
            raise ConfigurationError("REALM_START_LOCATION cannot be 'nowhere'")

        seed_raw = str(env.get("REALM_SEED", "") or "").strip()
        return cls(
            tick_modulus=_read_int(env, "REALM_TICK_MODULUS", DEFAULT_TICK_MODULUS, minimum=1),
            encounter_chance=_read_chance(env, "REALM_ENCOUNTER_CHANCE", DEFAULT_ENCOUNTER_CHANCE),
            world_event_chance=_read_chance(env, "REALM_WORLD_EVENT_CHANCE", DEFAULT_WORLD_EVENT_CHANCE),
            safe_locations=_read_locations(env, "REALM_SAFE_LOCATIONS", DEFAULT_SAFE_LOCATIONS),
            start_location=start_location,
            database_url=(str(env.get("REALM_DATABASE_URL", "") or "").strip() or None),
            seed=_read_int(env, "REALM_SEED", 0) if seed_raw else None,
            log_level=str(env.get("REALM_LOG_LEVEL", "WARNING") or "WARNING").strip().upper(),
        )
