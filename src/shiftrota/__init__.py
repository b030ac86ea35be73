"""Monthly shift rota: greedy day/evening/mid assignment around requested rest days."""
from shiftrota.engine import build_rota, validate_rota
from shiftrota.models import DailyTally, Employee, RotaResult, ShiftKind
from shiftrota.models.validated import EmployeeRequest, RosterInput

__version__ = "0.1.0"

__all__ = [
    "build_rota",
    "validate_rota",
    "Employee",
    "EmployeeRequest",
    "RosterInput",
    "RotaResult",
    "DailyTally",
    "ShiftKind",
]
