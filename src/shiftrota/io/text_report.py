"""Plain-text rota report for the console."""
import sys
from typing import List, Optional, TextIO

from shiftrota.models.rota import RotaResult
from shiftrota.models.shift import COUNTED_KINDS, ShiftKind

RED = "\033[31m"
RESET = "\033[0m"

NAME_WIDTH = 10


def _cell(shift: ShiftKind, color: bool) -> str:
    code = shift.value if shift != ShiftKind.UNSET else " "
    if color and shift == ShiftKind.REST:
        return f"  {RED}{code}{RESET}"
    return f"{code:>3}"


def render_text(result: RotaResult, color: bool = False) -> str:
    """
    Render the rota as a fixed-width table.

    One row per employee (a code per day, then Day/Evening/Mid/Rest totals),
    followed by one row per shift kind with the daily head counts.
    """
    n = result.day_count
    lines: List[str] = []

    header = f"{'Date':<{NAME_WIDTH}}" + "".join(f"{d:>3}" for d in range(1, n + 1))
    header += "".join(f"{k.label[:3]:>5}" for k in COUNTED_KINDS)
    lines.append(header)
    if result.weekdays:
        lines.append(f"{'':<{NAME_WIDTH}}" + "".join(f"{w[:2]:>3}" for w in result.weekdays))

    for e in result.employees:
        row = f"{e.name[:NAME_WIDTH]:<{NAME_WIDTH}}"
        row += "".join(_cell(s, color) for s in e.schedule)
        row += "".join(f"{v:>5}" for v in (e.day_quota, e.evening_quota, e.mid_count, e.rest_count))
        lines.append(row)

    for kind in COUNTED_KINDS:
        row = f"{kind.label:<{NAME_WIDTH}}" + "".join(f"{t.get(kind):>3}" for t in result.tallies)
        lines.append(row)

    return "\n".join(lines) + "\n"


def print_report(result: RotaResult, stream: Optional[TextIO] = None, color: Optional[bool] = None) -> None:
    """Write the text report; colors default to on for terminals."""
    stream = stream or sys.stdout
    if color is None:
        color = stream.isatty()
    stream.write(render_text(result, color=color))
    for w in result.warnings:
        stream.write(f"warning: {w}\n")
