from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from realm.application.ports import LocationBehavior
from realm.domain.errors import ConfigurationError
from realm.domain.models.location import RESERVED_HOTKEYS, TERMINATE, LocationId, LocationNode


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredLocation:
    node: LocationNode
    behavior: LocationBehavior


class LocationRegistry:
    """Graph of location nodes plus the behaviour that drives each one.

    Nodes are registered once, then ``validate`` seals the registry. Every
    structural problem (dangling exits, hotkey clashes, a missing hub) is
    reported there, before any player can walk into it.
    """

    def __init__(self, hub: LocationId = LocationId.MAIN_STREET) -> None:
        self._entries: Dict[LocationId, RegisteredLocation] = {}
        self._hub = LocationId(hub)
        self._sealed = False

    @property
    def hub(self) -> LocationId:
        return self._hub

    @property
    def sealed(self) -> bool:
        return self._sealed

    def register(self, node: LocationNode, behavior: LocationBehavior) -> None:
        if self._sealed:
            raise ConfigurationError(f"Registry is sealed; cannot register {node.identity.value}")
        if node.identity is TERMINATE:
            raise ConfigurationError("The terminate sentinel cannot be registered as a location")
        if node.identity in self._entries:
            raise ConfigurationError(f"Location registered twice: {node.identity.value}")
        self._entries[node.identity] = RegisteredLocation(node=node, behavior=behavior)

    def validate(self) -> "LocationRegistry":
        problems: List[str] = []
        if self._hub not in self._entries:
            problems.append(f"hub location {self._hub.value} is not registered")

        for identity, entry in self._entries.items():
            node = entry.node
            if not node.hotkey or len(node.hotkey) != 1:
                problems.append(f"{identity.value}: hotkey must be a single character, got {node.hotkey!r}")
            seen_keys: Dict[str, LocationId] = {}
            for destination in node.exits:
                if destination not in self._entries:
                    problems.append(f"{identity.value}: exit to unregistered location {destination.value}")
                    continue
                key = self._entries[destination].node.hotkey
                if key in RESERVED_HOTKEYS or key.isdigit():
                    problems.append(f"{identity.value}: exit {destination.value} uses reserved hotkey {key!r}")
                if key in seen_keys:
                    problems.append(
                        f"{identity.value}: exits {seen_keys[key].value} and {destination.value} share hotkey {key!r}"
                    )
                seen_keys[key] = destination

        if problems:
            raise ConfigurationError("Invalid location graph: " + "; ".join(problems))
        self._sealed = True
        logger.debug("Location registry sealed with %d locations", len(self._entries))
        return self

    def resolve(self, location_id: LocationId) -> RegisteredLocation:
        try:
            return self._entries[LocationId(location_id)]
        except (KeyError, ValueError) as exc:
            raise ConfigurationError(f"Unknown location: {location_id!r}") from exc

    def get(self, location_id: LocationId) -> LocationNode:
        return self.resolve(location_id).node

    def find(self, location_id: LocationId) -> Optional[LocationNode]:
        entry = self._entries.get(location_id)
        return entry.node if entry is not None else None

    def exits_of(self, location_id: LocationId) -> Tuple[LocationNode, ...]:
        return tuple(self._entries[destination].node for destination in self.get(location_id).exits)

    def can_navigate(self, source: LocationId, destination: LocationId) -> bool:
        node = self.find(source)
        return node is not None and node.leads_to(destination) and destination in self._entries

    def __contains__(self, location_id: object) -> bool:
        return location_id in self._entries

    def __iter__(self) -> Iterator[LocationNode]:
        return (entry.node for entry in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
