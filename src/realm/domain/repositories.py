from abc import ABC, abstractmethod
from typing import Optional

from realm.domain.models.session import SessionCursor


class SessionRepository(ABC):
    @abstractmethod
    def save(self, cursor: SessionCursor) -> None:
        raise NotImplementedError

    @abstractmethod
    def load(self, player_name: str) -> Optional[SessionCursor]:
        raise NotImplementedError

    def exists(self, player_name: str) -> bool:
        """Convenience check used by the entry point before offering a resume."""
        return self.load(player_name) is not None
