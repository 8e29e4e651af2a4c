from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Character:
    name: str
    level: int = 1
    experience: int = 0
    hp_max: int = 20
    hp_current: int = 20
    gold: int = 100
    bank_gold: int = 0
    alive: bool = True
    location_id: Optional[str] = None
    flags: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.hp_max = max(1, int(self.hp_max))
        self.hp_current = max(0, min(int(self.hp_current), self.hp_max))
        if self.hp_current == 0:
            self.alive = False

    def take_damage(self, amount: int) -> int:
        dealt = max(0, int(amount))
        self.hp_current = max(0, self.hp_current - dealt)
        if self.hp_current == 0:
            self.alive = False
        return dealt

    def heal(self, amount: int | None = None) -> int:
        if not self.alive:
            return 0
        missing = self.hp_max - self.hp_current
        restored = missing if amount is None else max(0, min(int(amount), missing))
        self.hp_current += restored
        return restored

    def spend_gold(self, amount: int) -> bool:
        cost = int(amount)
        if cost < 0 or cost > self.gold:
            return False
        self.gold -= cost
        return True
