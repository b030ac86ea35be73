"""Employee model: one team member's month."""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional

from .shift import ShiftKind


@dataclass
class Employee:
    """
    A team member and their schedule for one month.

    ``schedule`` holds one entry per day (index 0 is day 1). Rest days are
    fixed at construction; everything else starts as ``UNSET`` and is filled
    by the rotation scheduler. ``day_quota`` and ``evening_quota`` are the
    remaining targets while scheduling and the achieved counts afterwards.
    """

    name: str
    schedule: List[ShiftKind] = field(default_factory=list)
    day_quota: int = 0
    evening_quota: int = 0
    mid_count: int = 0
    rest_count: int = 0
    evening_quota_override: Optional[int] = None

    @classmethod
    def with_rest_days(
        cls,
        name: str,
        day_count: int,
        rest_days: Iterable[int],
        evening_quota_override: Optional[int] = None,
    ) -> "Employee":
        """Create an employee whose 1-based ``rest_days`` are pre-marked REST."""
        rest = set(rest_days)
        schedule = [
            ShiftKind.REST if d in rest else ShiftKind.UNSET
            for d in range(1, day_count + 1)
        ]
        return cls(
            name=name,
            schedule=schedule,
            rest_count=len(rest),
            evening_quota_override=evening_quota_override,
        )

    @property
    def day_count(self) -> int:
        return len(self.schedule)

    @property
    def rest_days(self) -> FrozenSet[int]:
        """1-based indices of the days marked REST."""
        return frozenset(i + 1 for i, s in enumerate(self.schedule) if s == ShiftKind.REST)

    def count(self, kind: ShiftKind) -> int:
        """Number of days currently holding ``kind``."""
        return sum(1 for s in self.schedule if s == kind)

    @property
    def working_days(self) -> int:
        """Days holding a Day, Evening or Mid shift."""
        return sum(1 for s in self.schedule if s.is_work)

    @property
    def is_complete(self) -> bool:
        """True once no day is UNSET."""
        return ShiftKind.UNSET not in self.schedule

    def codes(self) -> str:
        """Schedule as a compact string of shift codes, e.g. ``"EEDRR..."``."""
        return "".join(s.value for s in self.schedule)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "schedule": [s.value for s in self.schedule],
            "day": self.day_quota,
            "evening": self.evening_quota,
            "mid": self.mid_count,
            "rest": self.rest_count,
            "evening_quota_override": self.evening_quota_override,
        }
