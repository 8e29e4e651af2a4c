"""Control-transfer values passed from location handlers to the session owner.

A handler never unwinds the stack to leave a location. It returns a
``ChoiceResult`` and any sub-menu that receives one hands it straight back to
its caller, so "asked to leave" always travels as a value and can't be
confused with, or swallowed by, ordinary error handling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from realm.domain.models.location import TERMINATE, LocationId


@dataclass(frozen=True)
class Navigation:
    destination: LocationId

    @property
    def terminates(self) -> bool:
        return self.destination is TERMINATE


@dataclass
class ChoiceResult:
    handled: bool = True
    exit_requested: bool = False
    navigation: Optional[Navigation] = None
    messages: List[str] = field(default_factory=list)

    @classmethod
    def stay(cls, *messages: str) -> "ChoiceResult":
        return cls(messages=[str(m) for m in messages])

    @classmethod
    def exit(cls, *messages: str) -> "ChoiceResult":
        return cls(exit_requested=True, messages=[str(m) for m in messages])

    @classmethod
    def navigate(cls, destination: LocationId, *messages: str) -> "ChoiceResult":
        return cls(navigation=Navigation(LocationId(destination)), messages=[str(m) for m in messages])

    @classmethod
    def terminate(cls, *messages: str) -> "ChoiceResult":
        return cls(navigation=Navigation(TERMINATE), messages=[str(m) for m in messages])

    @classmethod
    def unrecognized(cls) -> "ChoiceResult":
        return cls(handled=False)

    @property
    def leaves_location(self) -> bool:
        return self.navigation is not None or self.exit_requested


class TransitionKind(str, Enum):
    NAVIGATE = "navigate"
    TERMINATE = "terminate"
    EXIT = "exit"
    INCAPACITATED = "incapacitated"
    DIED = "died"


@dataclass(frozen=True)
class Transition:
    kind: TransitionKind
    destination: Optional[LocationId] = None

    @classmethod
    def from_navigation(cls, navigation: Navigation) -> "Transition":
        if navigation.terminates:
            return cls(TransitionKind.TERMINATE)
        return cls(TransitionKind.NAVIGATE, navigation.destination)

    @classmethod
    def exit(cls) -> "Transition":
        return cls(TransitionKind.EXIT)

    @classmethod
    def incapacitated(cls) -> "Transition":
        return cls(TransitionKind.INCAPACITATED)

    @classmethod
    def died(cls) -> "Transition":
        return cls(TransitionKind.DIED)
