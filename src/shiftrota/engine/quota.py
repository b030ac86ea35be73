"""Day/evening quota split for one employee."""
from shiftrota.models.employee import Employee
from shiftrota.utils.logging_setup import get_logger, log_function_call

logger = get_logger("shiftrota.engine.quota")


@log_function_call
def compute_quotas(employee: Employee, day_count: int) -> Employee:
    """
    Set ``day_quota`` and ``evening_quota`` for ``employee``.

    Working days are split evenly with the odd day going to evenings. An
    ``evening_quota_override`` fixes the evening count and gives the rest of
    the working days to day shifts. ``mid_count`` is reset to 0.

    Raises:
        ValueError: if the employee rests more days than the month has, or the
            override is negative or larger than the working days.
    """
    if employee.rest_count > day_count:
        raise ValueError(
            f"{employee.name}: {employee.rest_count} rest days in a {day_count}-day month"
        )
    working = day_count - employee.rest_count

    override = employee.evening_quota_override
    if override is not None:
        if not 0 <= override <= working:
            raise ValueError(
                f"{employee.name}: evening quota {override} not in 0..{working}"
            )
        employee.evening_quota = override
        employee.day_quota = working - override
    else:
        employee.day_quota = working // 2
        employee.evening_quota = working - employee.day_quota

    employee.mid_count = 0
    logger.debug(
        f"{employee.name}: rest={employee.rest_count} day={employee.day_quota} "
        f"evening={employee.evening_quota}"
        + (" (override)" if override is not None else "")
    )
    return employee
