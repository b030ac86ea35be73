"""Roster loading from the line format and from CSV."""
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd

from shiftrota.models.validated import RosterInput
from shiftrota.utils.logging_setup import get_logger

logger = get_logger("shiftrota.io.roster_loader")

_SPLIT_RE = re.compile(r"[\s,;]+")


def _parse_int(token: Any, what: str) -> int:
    """Strict int conversion; accepts integral floats such as ``5.0``."""
    text = str(token).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        f = float(text)
    except ValueError:
        raise ValueError(f"{what}: not an integer: {token!r}") from None
    if not f.is_integer():
        raise ValueError(f"{what}: not an integer: {token!r}")
    return int(f)


def _optional_int(value: Any, what: str) -> Optional[int]:
    if value is None or str(value).strip() == "":
        return None
    return _parse_int(value, what)


def parse_roster_line(line: str) -> Dict[str, Any]:
    """
    Parse ``<name> <rest_count> <d1> <d2> ... [evening=<n>]``.

    ``Alice 5 5 12 18 19 26`` declares five rest days. A trailing
    ``evening=<n>`` token sets a fixed evening quota for that employee.
    """
    tokens = line.split()
    if len(tokens) < 2:
        raise ValueError(f"expected '<name> <rest_count> <days...>', got {line!r}")
    name = tokens[0]

    override = None
    if tokens[-1].lower().startswith("evening="):
        override = _parse_int(tokens.pop().split("=", 1)[1], f"{name} evening quota")

    rest_count = _parse_int(tokens[1], f"{name} rest count")
    days = [_parse_int(t, f"{name} rest day") for t in tokens[2:]]
    if len(days) != rest_count:
        raise ValueError(f"{name}: declared {rest_count} rest days but {len(days)} were given")

    return {
        "name": name,
        "rest_count": rest_count,
        "rest_days": days,
        "evening_quota_override": override,
    }


def parse_roster_lines(lines: Iterable[str]) -> List[Dict[str, Any]]:
    """Parse every non-blank, non-comment line."""
    entries = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        try:
            entries.append(parse_roster_line(line))
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from None
    return entries


def load_roster_csv(source: Union[str, Path, pd.DataFrame]) -> List[Dict[str, Any]]:
    """
    Load roster entries from a CSV file or DataFrame.

    Columns: ``name`` (required), ``rest_days`` (days separated by spaces,
    commas or semicolons), optional ``rest_count`` and ``evening_quota``. Fully blank
    rows are skipped; a row with data but no name is rejected.
    """
    if isinstance(source, pd.DataFrame):
        df = source.copy()
    else:
        df = pd.read_csv(source, dtype=str, keep_default_na=False)

    df = df.fillna("")

    if "name" not in df.columns:
        raise ValueError("CSV must have a 'name' column")

    entries = []
    for idx, (_, row) in enumerate(df.iterrows()):
        name = str(row["name"]).strip()
        if not name:
            filled = [c for c in ("rest_days", "rest_count", "evening_quota") if str(row.get(c, "")).strip()]
            if filled:
                raise ValueError(f"row {idx + 1}: blank name with {', '.join(filled)} set")
            continue

        raw_days = str(row.get("rest_days", "")).strip()
        days = [_parse_int(t, f"{name} rest day") for t in _SPLIT_RE.split(raw_days) if t]

        entries.append({
            "name": name,
            "rest_days": days,
            "rest_count": _optional_int(row.get("rest_count"), f"{name} rest count"),
            "evening_quota_override": _optional_int(row.get("evening_quota"), f"{name} evening quota"),
        })
    return entries


def load_roster(
    path: Union[str, Path],
    year: int,
    month: int,
    fmt: Optional[str] = None,
) -> RosterInput:
    """
    Load and validate a roster file for the given month.

    ``fmt`` is "csv" or "lines"; when omitted, ``.csv`` files go through
    pandas and anything else is read as the line format.

    Raises:
        ValueError: on malformed files or invalid rosters
    """
    path = Path(path)
    if fmt is None:
        fmt = "csv" if path.suffix.lower() == ".csv" else "lines"
    if fmt not in ("csv", "lines"):
        raise ValueError(f"unknown roster format: {fmt!r}")

    if fmt == "csv":
        entries = load_roster_csv(path)
    else:
        entries = parse_roster_lines(path.read_text(encoding="utf-8").splitlines())
    logger.info(f"Loaded {len(entries)} employees from {path}")
    return RosterInput(year=year, month=month, employees=entries)


def roster_to_dataframe(roster: RosterInput) -> pd.DataFrame:
    """Roster as a DataFrame in the CSV layout, for display or saving."""
    columns = ["name", "rest_days", "rest_count", "evening_quota"]
    if not roster.employees:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame([
        {
            "name": e.name,
            "rest_days": " ".join(str(d) for d in e.rest_days),
            "rest_count": len(e.rest_days),
            "evening_quota": "" if e.evening_quota_override is None else e.evening_quota_override,
        }
        for e in roster.employees
    ], columns=columns)


def save_roster(roster: RosterInput, path: Union[str, Path]) -> None:
    """Save a roster as CSV readable by ``load_roster_csv``."""
    roster_to_dataframe(roster).to_csv(path, index=False)
