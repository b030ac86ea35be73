"""
Rotation Scheduler
==================
Greedy month fill for one employee at a time.

The longest rest block is the anchor. Shifts resume right after it, evenings
first, and run forward to the end of the month; then the days before the
anchor are filled walking backward, day shifts first. Every time the sweep
meets another rest block the preferred shift flips. Finally any evening that
is directly followed by a day shift turns that day shift into a mid shift.

The heuristic is deterministic and order-dependent; the tie-break and toggle
rules below are part of its behavior.
"""
from dataclasses import dataclass
from typing import Dict, List

from shiftrota.engine.anchor import find_anchor
from shiftrota.engine.quota import compute_quotas
from shiftrota.models.employee import Employee
from shiftrota.models.shift import ShiftKind
from shiftrota.utils.logging_setup import get_logger

logger = get_logger("shiftrota.engine.rotation")

DAY = ShiftKind.DAY
EVENING = ShiftKind.EVENING
MID = ShiftKind.MID
REST = ShiftKind.REST


@dataclass
class QuotaClamp:
    """A backward-fill assignment made with its quota already at zero."""
    employee: str
    day_index: int  # 1-based
    shift: ShiftKind

    def __str__(self) -> str:
        return f"{self.employee}: day {self.day_index} assigned {self.shift.label} with no quota left"


def _switch_if_exhausted(cur: ShiftKind, left: Dict[ShiftKind, int]) -> ShiftKind:
    """Move to the other working shift when ``cur`` has no quota left."""
    if left[cur] == 0:
        return DAY if cur == EVENING else EVENING
    return cur


def _toggle_after_rest(cur: ShiftKind, left: Dict[ShiftKind, int]) -> ShiftKind:
    """Preferred shift once a rest block has been crossed."""
    if cur == EVENING and left[DAY] > 0:
        return DAY
    return EVENING


class RotationScheduler:
    """
    Fills employee schedules in place.

    Each call to ``schedule`` handles one employee independently; clamps seen
    during backward fills accumulate in ``clamps`` across calls.
    """

    def __init__(self):
        self.clamps: List[QuotaClamp] = []

    def schedule(self, employee: Employee) -> Employee:
        """Compute quotas, fill every non-rest day, apply the transition rule."""
        n = employee.day_count
        compute_quotas(employee, n)

        start, length = find_anchor(employee.schedule)
        logger.debug(f"{employee.name}: anchor start={start + 1} length={length}")

        left = {DAY: employee.day_quota, EVENING: employee.evening_quota}
        self._fill_forward(employee, start + length, left)
        self._fill_backward(employee, start - 1, left)

        mids = apply_transition_rule(employee)
        logger.info(
            f"{employee.name}: day={employee.day_quota} evening={employee.evening_quota} "
            f"mid={employee.mid_count} rest={employee.rest_count}"
            + (f" ({mids} evening→day converted)" if mids else "")
        )
        return employee

    def schedule_all(self, employees: List[Employee]) -> List[Employee]:
        for e in employees:
            self.schedule(e)
        return employees

    def _fill_forward(self, employee: Employee, i: int, left: Dict[ShiftKind, int]) -> None:
        """Fill from index ``i`` to the last day, evenings first."""
        schedule = employee.schedule
        n = len(schedule)
        cur = EVENING
        while i < n:
            cur = _switch_if_exhausted(cur, left)

            if schedule[i] == REST:
                cur = _toggle_after_rest(cur, left)
                while i < n and schedule[i] == REST:
                    i += 1
                continue

            schedule[i] = cur
            left[cur] -= 1
            i += 1

    def _fill_backward(self, employee: Employee, i: int, left: Dict[ShiftKind, int]) -> None:
        """Fill from index ``i`` down to the first day, day shifts first."""
        schedule = employee.schedule
        cur = DAY
        while i >= 0:
            cur = _switch_if_exhausted(cur, left)

            if schedule[i] == REST:
                cur = _toggle_after_rest(cur, left)
                while i >= 0 and schedule[i] == REST:
                    i -= 1
                continue

            schedule[i] = cur
            if left[cur] > 0:
                left[cur] -= 1
            else:
                clamp = QuotaClamp(employee.name, i + 1, cur)
                self.clamps.append(clamp)
                logger.warning(f"Quota clamp: {clamp}")
            i -= 1


def apply_transition_rule(employee: Employee) -> int:
    """
    Replace each Day that directly follows an Evening with a Mid.

    Adjusts ``day_quota`` and ``mid_count`` and returns how many days changed.
    """
    schedule = employee.schedule
    changed = 0
    for i in range(len(schedule) - 1):
        if schedule[i] == EVENING and schedule[i + 1] == DAY:
            schedule[i + 1] = MID
            employee.day_quota -= 1
            employee.mid_count += 1
            changed += 1
    return changed
