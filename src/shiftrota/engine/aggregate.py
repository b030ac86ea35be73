"""Daily tallies across the team."""
from typing import List, Optional, Sequence

from shiftrota.models.employee import Employee
from shiftrota.models.shift import ShiftKind
from shiftrota.models.tally import DailyTally
from shiftrota.utils.logging_setup import get_logger

logger = get_logger("shiftrota.engine.aggregate")

_FIELD = {
    ShiftKind.DAY: "day",
    ShiftKind.EVENING: "evening",
    ShiftKind.MID: "mid",
    ShiftKind.REST: "rest",
}


def aggregate(employees: Sequence[Employee], day_count: Optional[int] = None) -> List[DailyTally]:
    """
    Count, for each day, how many employees hold each shift kind.

    Args:
        employees: Scheduled employees, all covering the same month
        day_count: Month length; taken from the first employee when omitted

    Raises:
        ValueError: if schedules have different lengths
    """
    if day_count is None:
        day_count = employees[0].day_count if employees else 0

    tallies = [DailyTally(day_index=d + 1) for d in range(day_count)]
    for e in employees:
        if e.day_count != day_count:
            raise ValueError(f"{e.name}: schedule covers {e.day_count} days, expected {day_count}")
        for tally, shift in zip(tallies, e.schedule):
            field_name = _FIELD.get(shift)
            if field_name:
                setattr(tally, field_name, getattr(tally, field_name) + 1)

    logger.debug(f"Aggregated {len(employees)} employees over {day_count} days")
    return tallies
