"""
Results Export for Analysis
============================
Exports a finished rota to JSON for scripts and spreadsheets downstream.
"""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from shiftrota.engine.validation import ValidationResult
from shiftrota.models.rota import RotaResult
from shiftrota.utils.logging_setup import get_logger

logger = get_logger("shiftrota.io.results_export")


def results_to_dict(result: RotaResult, validation: Optional[ValidationResult] = None) -> Dict[str, Any]:
    """Plain-dict view of the rota, suitable for ``json.dumps``."""
    data: Dict[str, Any] = {
        "meta": {
            "month": result.month_key,
            "days": result.day_count,
            "exported_at": datetime.now().isoformat(timespec="seconds"),
        },
        "summary": result.summary(),
        "weekdays": list(result.weekdays),
        "employees": [
            {
                "name": e.name,
                "codes": e.codes(),
                "rest_days": sorted(e.rest_days),
                "shifts": {
                    "day": e.day_quota,
                    "evening": e.evening_quota,
                    "mid": e.mid_count,
                    "rest": e.rest_count,
                },
                "working_days": e.working_days,
                "evening_quota_override": e.evening_quota_override,
            }
            for e in result.employees
        ],
        "tallies": [t.to_dict() for t in result.tallies],
        "warnings": list(result.warnings),
    }
    if validation is not None:
        data["validation"] = validation.as_dict()
    return data


def export_results(
    result: RotaResult,
    output: Union[str, Path],
    validation: Optional[ValidationResult] = None,
) -> Path:
    """
    Write the rota as JSON.

    Returns:
        Path to the exported JSON file
    """
    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(results_to_dict(result, validation), f, ensure_ascii=False, indent=2)
    logger.info(f"Results exported to {path}")
    return path
