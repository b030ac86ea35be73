"""End-to-end rota build: validated roster in, finished rota out."""
from typing import Sequence

from shiftrota.engine.aggregate import aggregate
from shiftrota.engine.rotation import RotationScheduler
from shiftrota.models.rota import RotaResult
from shiftrota.models.validated import RosterInput
from shiftrota.utils.calendar_utils import WEEKDAY_LABELS_EN, weekday_labels
from shiftrota.utils.logging_setup import SchedulerLogger
from shiftrota.utils.structured_logging import bind_context, clear_context, get_structured_logger

slog = SchedulerLogger("shiftrota.engine.pipeline")
events = get_structured_logger("shiftrota.engine.pipeline")


def build_rota(roster: RosterInput, weekday_names: Sequence[str] = WEEKDAY_LABELS_EN) -> RotaResult:
    """
    Schedule every employee of ``roster`` and tally the month.

    The roster is already validated, so nothing here rejects input. Each
    employee is scheduled independently of the others.
    """
    n = roster.day_count
    bind_context(month=f"{roster.year:04d}-{roster.month:02d}")
    try:
        slog.phase(f"Rota {roster.year:04d}-{roster.month:02d}")
        slog.detail("days", n)
        slog.detail("employees", len(roster.employees))

        employees = roster.to_employees()
        requested = {r.name: frozenset(r.rest_days) for r in roster.employees}

        scheduler = RotationScheduler()
        for e in employees:
            slog.enter(e.name)
            scheduler.schedule(e)
            slog.exit(e.codes())
            events.debug("employee_scheduled", employee=e.name, day=e.day_quota,
                         evening=e.evening_quota, mid=e.mid_count, rest=e.rest_count)

        tallies = aggregate(employees, n)
        result = RotaResult(
            year=roster.year,
            month=roster.month,
            day_count=n,
            employees=employees,
            tallies=tallies,
            weekdays=weekday_labels(roster.year, roster.month, weekday_names),
            requested_rest=requested,
            warnings=[str(c) for c in scheduler.clamps],
        )
        events.info("rota_built", **result.summary())
        return result
    finally:
        clear_context()
