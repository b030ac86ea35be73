"""
Pydantic Validated Models
=========================
Validation layer for roster input and run configuration.

Everything the scheduler relies on is checked here, before any employee is
scheduled, so an invalid roster aborts the run with no partial output.
``pydantic.ValidationError`` subclasses ``ValueError``.

Usage:
    from shiftrota.models.validated import RosterInput

    roster = RosterInput(year=2023, month=4, employees=[
        {"name": "Alice", "rest_days": [5, 12, 18, 19, 26]},
    ])
    employees = roster.to_employees()
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shiftrota.models.employee import Employee
from shiftrota.utils.calendar_utils import days_in_month


class EmployeeRequest(BaseModel):
    """One employee's requested rest days."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    rest_days: List[int] = Field(default_factory=list)
    rest_count: Optional[int] = Field(default=None, ge=0, description="Declared number of rest days")
    evening_quota_override: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_rest_days(self):
        """Reject duplicates and a declared count that disagrees with the list."""
        seen = set()
        for d in self.rest_days:
            if d in seen:
                raise ValueError(f"{self.name}: rest day {d} listed twice")
            seen.add(d)
        if self.rest_count is not None and self.rest_count != len(self.rest_days):
            raise ValueError(
                f"{self.name}: declared {self.rest_count} rest days "
                f"but {len(self.rest_days)} were given"
            )
        return self

    def check_against_month(self, day_count: int) -> None:
        """Checks that need the month length."""
        for d in self.rest_days:
            if not 1 <= d <= day_count:
                raise ValueError(f"{self.name}: rest day {d} outside 1..{day_count}")
        if len(self.rest_days) > day_count:
            raise ValueError(f"{self.name}: {len(self.rest_days)} rest days in a {day_count}-day month")
        working = day_count - len(self.rest_days)
        if self.evening_quota_override is not None and self.evening_quota_override > working:
            raise ValueError(
                f"{self.name}: evening quota {self.evening_quota_override} "
                f"exceeds {working} working days"
            )


class RosterInput(BaseModel):
    """A validated month roster: the month plus every employee's request."""

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    employees: List[EmployeeRequest] = Field(default_factory=list)

    @field_validator("employees")
    @classmethod
    def unique_names(cls, v: List[EmployeeRequest]) -> List[EmployeeRequest]:
        names = [e.name for e in v]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"duplicate employee names: {', '.join(dupes)}")
        return v

    @model_validator(mode="after")
    def check_employees(self):
        """Cross-field validation against the month length."""
        n = self.day_count
        for e in self.employees:
            e.check_against_month(n)
        return self

    @property
    def day_count(self) -> int:
        return days_in_month(self.year, self.month)

    def to_employees(self) -> List[Employee]:
        """Build fresh Employee records with rest days pre-marked."""
        n = self.day_count
        return [
            Employee.with_rest_days(e.name, n, e.rest_days, e.evening_quota_override)
            for e in self.employees
        ]


class WeekdayLocale(str, Enum):
    """Weekday label sets available to the reports."""
    EN = "en"
    ZH = "zh"


class ValidatedRotaConfig(BaseModel):
    """
    Pydantic-validated run configuration.

    Used at the CLI boundary; converts to the dataclass RotaConfig.
    """

    model_config = ConfigDict(use_enum_values=True, validate_assignment=True)

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    xlsx_path: Optional[str] = None
    write_xlsx: bool = True
    json_path: Optional[str] = None
    output_dir: str = "."
    weekday_locale: WeekdayLocale = WeekdayLocale.EN
    color: bool = True
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return v

    def to_dataclass(self):
        """Convert to dataclass RotaConfig."""
        from shiftrota.models.config import RotaConfig

        return RotaConfig.from_dict(self.model_dump())
