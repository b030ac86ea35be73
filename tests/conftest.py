"""Pytest configuration and fixtures."""
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from shiftrota.models.employee import Employee
from shiftrota.models.validated import RosterInput
from shiftrota.utils.structured_logging import configure_structlog

# Rest requests used throughout; April 2023 has 30 days
ALICE_REST = [5, 12, 18, 19, 26]
ALICE_CODES = "EMDDR" + "EEEEEE" + "R" + "DDDDD" + "RR" + "EEEEEE" + "R" + "DDDD"


@pytest.fixture
def reset_rota_logger():
    """Drop handlers installed by setup_logging and restore the default structlog renderer."""
    yield
    logging.getLogger("shiftrota").handlers.clear()
    configure_structlog()


@pytest.fixture
def alice():
    """Unscheduled employee with the reference rest pattern in a 30-day month."""
    return Employee.with_rest_days("Alice", 30, ALICE_REST)


@pytest.fixture
def april_roster():
    """Small April 2023 team."""
    return RosterInput(year=2023, month=4, employees=[
        {"name": "Alice", "rest_days": ALICE_REST, "rest_count": 5},
        {"name": "Bob", "rest_days": [1, 2, 3, 15, 30]},
        {"name": "Chen", "rest_days": [7, 8, 21, 22], "evening_quota_override": 4},
        {"name": "Dana", "rest_days": []},
    ])


@pytest.fixture
def roster_lines_path(tmp_path):
    """Roster file in the line format."""
    path = tmp_path / "april.txt"
    path.write_text(
        "# name rest_count days...\n"
        "Alice 5 5 12 18 19 26\n"
        "\n"
        "Bob 5 1 2 3 15 30\n"
        "Chen 4 7 8 21 22 evening=4\n",
        encoding="utf-8",
    )
    return path
