import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from lockdrop.allocation import InvalidParametersError, _require_int


@dataclass(frozen=True)
class ProgramProgress:
    """How far the lockdrop is towards its hard cap, and how long it stays open."""
    total_locked: int
    hard_cap_amount: int
    ends_at: Optional[datetime] = None

    def __post_init__(self):
        _require_int("Total locked amount", self.total_locked)
        _require_int("Hard cap amount", self.hard_cap_amount)
        if self.total_locked < 0:
            raise InvalidParametersError("Total locked amount cannot be negative")
        if self.hard_cap_amount <= 0:
            raise InvalidParametersError("Hard cap amount must be positive")

    @property
    def fill_ratio(self) -> float:
        if self.total_locked >= self.hard_cap_amount:
            return 1.0
        return self.total_locked / self.hard_cap_amount

    @property
    def fill_percent(self) -> float:
        return self.fill_ratio * 100

    @property
    def remaining_capacity(self) -> int:
        return max(self.hard_cap_amount - self.total_locked, 0)

    @property
    def is_full(self) -> bool:
        return self.total_locked >= self.hard_cap_amount

    def days_left(self, now: datetime) -> int:
        if self.ends_at is None:
            raise ValueError("Program end date is not set")
        remaining = self.ends_at - now
        if remaining <= timedelta(0):
            return 0
        return math.ceil(remaining / timedelta(days=1))
