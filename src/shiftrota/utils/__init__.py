"""Utilities package for the shift rota."""
from .calendar_utils import days_in_month, parse_year_month, weekday_labels
from .logging_setup import (
    TRACE,
    SchedulerLogger,
    get_logger,
    log_check,
    log_function_call,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_function_call",
    "log_check",
    "SchedulerLogger",
    "TRACE",
    "days_in_month",
    "weekday_labels",
    "parse_year_month",
]
