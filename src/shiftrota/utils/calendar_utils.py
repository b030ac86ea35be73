"""Month length, weekday labels and ``YYYY-MM`` parsing."""
import calendar
import re
from datetime import date
from typing import List, Sequence, Tuple

# Monday-first, matching date.weekday()
WEEKDAY_LABELS_EN = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
WEEKDAY_LABELS_ZH = ["一", "二", "三", "四", "五", "六", "日"]

_YEAR_MONTH_RE = re.compile(r"^\s*(\d{1,4})-(\d{1,2})\s*$")


def check_year_month(year: int, month: int) -> None:
    """Raise ValueError unless (year, month) is a valid calendar month."""
    if not 1 <= year <= 9999:
        raise ValueError(f"year out of range: {year}")
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month (28..31)."""
    check_year_month(year, month)
    return calendar.monthrange(year, month)[1]


def weekday_labels(year: int, month: int, labels: Sequence[str] = WEEKDAY_LABELS_EN) -> List[str]:
    """Weekday label for each day of the month, day 1 first."""
    n = days_in_month(year, month)
    return [labels[date(year, month, d).weekday()] for d in range(1, n + 1)]


def parse_year_month(text: str) -> Tuple[int, int]:
    """
    Parse ``"YYYY-MM"`` into ``(year, month)``.

    Raises:
        ValueError: on malformed text or an out-of-range month.
    """
    m = _YEAR_MONTH_RE.match(str(text))
    if not m:
        raise ValueError(f"expected YYYY-MM, got {text!r}")
    year, month = int(m.group(1)), int(m.group(2))
    check_year_month(year, month)
    return year, month
