"""Rota result model."""
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List

import pandas as pd

from .employee import Employee
from .shift import COUNTED_KINDS
from .tally import DailyTally


@dataclass
class RotaResult:
    """Finished month rota: scheduled employees plus daily tallies."""

    year: int
    month: int
    day_count: int
    employees: List[Employee] = field(default_factory=list)
    tallies: List[DailyTally] = field(default_factory=list)
    weekdays: List[str] = field(default_factory=list)

    # Rest days as requested, for fidelity checks
    requested_rest: Dict[str, FrozenSet[int]] = field(default_factory=dict)

    # Backward-fill clamps, as messages
    warnings: List[str] = field(default_factory=list)

    @property
    def month_key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def to_dataframe(self) -> pd.DataFrame:
        """Employee × day matrix of shift codes, with total columns."""
        columns = [str(d) for d in range(1, self.day_count + 1)]
        if not self.employees:
            return pd.DataFrame(columns=["name"] + columns + [k.label for k in COUNTED_KINDS])

        rows = []
        for e in self.employees:
            row: Dict[str, Any] = {"name": e.name}
            row.update({c: s.value for c, s in zip(columns, e.schedule)})
            row["Day"] = e.day_quota
            row["Evening"] = e.evening_quota
            row["Mid"] = e.mid_count
            row["Rest"] = e.rest_count
            rows.append(row)
        return pd.DataFrame(rows)

    def tallies_to_dataframe(self) -> pd.DataFrame:
        """Shift kind × day matrix of head counts."""
        data = {
            str(t.day_index): [t.get(k) for k in COUNTED_KINDS]
            for t in self.tallies
        }
        return pd.DataFrame(data, index=[k.label for k in COUNTED_KINDS])

    def summary(self) -> Dict[str, Any]:
        """Get summary dictionary for display."""
        return {
            "month": self.month_key,
            "days": self.day_count,
            "employees": len(self.employees),
            "mid_shifts": sum(e.mid_count for e in self.employees),
            "warnings": len(self.warnings),
        }
