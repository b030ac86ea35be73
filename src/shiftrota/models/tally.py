"""Per-day shift counts across the team."""
from dataclasses import dataclass

from .shift import ShiftKind


@dataclass
class DailyTally:
    """How many employees hold each shift kind on one day."""
    day_index: int  # 1-based day of month
    day: int = 0
    evening: int = 0
    mid: int = 0
    rest: int = 0

    @property
    def total(self) -> int:
        return self.day + self.evening + self.mid + self.rest

    def get(self, kind: ShiftKind) -> int:
        """Count for ``kind`` (0 for UNSET)."""
        return {
            ShiftKind.DAY: self.day,
            ShiftKind.EVENING: self.evening,
            ShiftKind.MID: self.mid,
            ShiftKind.REST: self.rest,
        }.get(kind, 0)

    def to_dict(self) -> dict:
        return {
            "day_index": self.day_index,
            "day": self.day,
            "evening": self.evening,
            "mid": self.mid,
            "rest": self.rest,
        }
