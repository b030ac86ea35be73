# shiftrota/models - Data models for the rota
from .config import RotaConfig
from .employee import Employee
from .rota import RotaResult
from .shift import COUNTED_KINDS, ShiftKind
from .tally import DailyTally

__all__ = [
    "Employee",
    "ShiftKind", "COUNTED_KINDS",
    "DailyTally",
    "RotaConfig",
    "RotaResult",
]
