"""Shift kind definitions."""
from enum import Enum


class ShiftKind(str, Enum):
    """Category assigned to an employee for one calendar day."""
    UNSET = "-"     # Not yet assigned
    DAY = "D"
    EVENING = "E"
    MID = "M"
    REST = "R"

    @property
    def label(self) -> str:
        """Human-readable name used in report headers."""
        return {
            ShiftKind.UNSET: "Unset",
            ShiftKind.DAY: "Day",
            ShiftKind.EVENING: "Evening",
            ShiftKind.MID: "Mid",
            ShiftKind.REST: "Rest",
        }[self]

    @property
    def is_work(self) -> bool:
        """True for Day, Evening and Mid."""
        return self in (ShiftKind.DAY, ShiftKind.EVENING, ShiftKind.MID)

    @classmethod
    def from_string(cls, s: str) -> "ShiftKind":
        """Parse a shift from its code or name (case-insensitive)."""
        mapping = {
            "d": cls.DAY, "day": cls.DAY, "白": cls.DAY,
            "e": cls.EVENING, "eve": cls.EVENING, "evening": cls.EVENING, "晚": cls.EVENING,
            "m": cls.MID, "mid": cls.MID, "中": cls.MID,
            "r": cls.REST, "rest": cls.REST, "off": cls.REST, "休": cls.REST,
            "-": cls.UNSET, "": cls.UNSET, "unset": cls.UNSET,
        }
        key = str(s).strip().lower()
        if key not in mapping:
            raise ValueError(f"unknown shift kind: {s!r}")
        return mapping[key]


# Kinds counted in tallies and totals, in report order
COUNTED_KINDS = [ShiftKind.DAY, ShiftKind.EVENING, ShiftKind.MID, ShiftKind.REST]
