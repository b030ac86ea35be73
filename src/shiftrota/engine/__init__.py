# shiftrota/engine - Greedy monthly rotation
from .aggregate import aggregate
from .anchor import find_anchor
from .pipeline import build_rota
from .quota import compute_quotas
from .rotation import QuotaClamp, RotationScheduler, apply_transition_rule
from .validation import ValidationResult, Violation, validate_rota

__all__ = [
    "build_rota",
    "compute_quotas",
    "find_anchor",
    "RotationScheduler",
    "QuotaClamp",
    "apply_transition_rule",
    "aggregate",
    "validate_rota",
    "ValidationResult",
    "Violation",
]
