"""
Schedule Checks
===============
Verify a finished rota: every day assigned, rest days untouched, no evening
directly followed by a day shift, quota counters consistent with the
schedule, and daily tallies summing to the team size.
"""
from dataclasses import dataclass, field
from typing import Dict, List

from shiftrota.models.rota import RotaResult
from shiftrota.models.shift import ShiftKind
from shiftrota.utils.logging_setup import get_logger, log_check

logger = get_logger("shiftrota.engine.validation")


@dataclass
class Violation:
    """Single violation with details."""
    type: str  # "unset_day", "rest_changed", "evening_to_day", "quota_mismatch", "tally_mismatch"
    severity: str  # "critical", "warning"
    day: int  # 1-based, 0 when not tied to a day
    message: str
    employee: str = ""


@dataclass
class ValidationResult:
    """Violation counts for a rota."""
    unset_days: int = 0
    rest_changed: int = 0
    evening_to_day: int = 0
    quota_mismatch: int = 0
    tally_mismatch: int = 0

    violations: List[Violation] = field(default_factory=list)

    def add_violation(self, v: Violation):
        self.violations.append(v)

    def as_dict(self) -> Dict[str, int]:
        return {
            "unset_days": self.unset_days,
            "rest_changed": self.rest_changed,
            "evening_to_day": self.evening_to_day,
            "quota_mismatch": self.quota_mismatch,
            "tally_mismatch": self.tally_mismatch,
        }

    @property
    def has_critical_issues(self) -> bool:
        return any(self.as_dict().values())

    def get_critical_violations(self) -> List[Violation]:
        return [v for v in self.violations if v.severity == "critical"]


def validate_rota(result: RotaResult) -> ValidationResult:
    """
    Check a finished rota and count violations.

    Rest fidelity is only checked for employees present in
    ``result.requested_rest``.
    """
    res = ValidationResult()
    n = result.day_count

    for e in result.employees:
        for i, s in enumerate(e.schedule):
            if s == ShiftKind.UNSET:
                res.unset_days += 1
                res.add_violation(Violation("unset_day", "critical", i + 1, "day left unassigned", e.name))

        requested = result.requested_rest.get(e.name)
        if requested is not None:
            for d in sorted(requested.symmetric_difference(e.rest_days)):
                res.rest_changed += 1
                res.add_violation(Violation("rest_changed", "critical", d, "rest day added or removed", e.name))

        for i in range(len(e.schedule) - 1):
            if e.schedule[i] == ShiftKind.EVENING and e.schedule[i + 1] == ShiftKind.DAY:
                res.evening_to_day += 1
                res.add_violation(Violation("evening_to_day", "critical", i + 2, "day shift right after evening", e.name))

        counts = (
            (ShiftKind.DAY, e.day_quota),
            (ShiftKind.EVENING, e.evening_quota),
            (ShiftKind.MID, e.mid_count),
            (ShiftKind.REST, e.rest_count),
        )
        for kind, expected in counts:
            actual = e.count(kind)
            if actual != expected:
                res.quota_mismatch += 1
                res.add_violation(Violation(
                    "quota_mismatch", "critical", 0,
                    f"{kind.label}: counter {expected}, schedule has {actual}", e.name,
                ))
        if e.day_quota + e.evening_quota + e.mid_count + e.rest_count != n:
            res.quota_mismatch += 1
            res.add_violation(Violation("quota_mismatch", "critical", 0, f"counters do not sum to {n}", e.name))

    team = len(result.employees)
    if len(result.tallies) != n:
        res.tally_mismatch += 1
        res.add_violation(Violation("tally_mismatch", "critical", 0, f"{len(result.tallies)} tallies for {n} days"))
    for t in result.tallies:
        if t.total != team:
            res.tally_mismatch += 1
            res.add_violation(Violation("tally_mismatch", "critical", t.day_index, f"tally sums to {t.total}, team is {team}"))

    for name, count in res.as_dict().items():
        log_check(logger, name, count == 0, f"{count} found" if count else "")
    return res
