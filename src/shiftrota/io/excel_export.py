"""Excel export of the month rota."""
import io
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, Side
from openpyxl.utils import get_column_letter

from shiftrota.models.rota import RotaResult
from shiftrota.models.shift import COUNTED_KINDS, ShiftKind
from shiftrota.utils.logging_setup import get_logger

logger = get_logger("shiftrota.io.excel_export")

THIN = Side(border_style="thin", color="000000")
BORDER_THIN = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)
CENTER = Alignment(horizontal="center", vertical="center")
REST_FONT = Font(color="FF0000")
BOLD = Font(bold=True)

# Totals columns after the day columns; the leave columns are placeholders
TOTAL_HEADERS = ["Day", "Evening", "Mid", "Rest", "Annual leave", "Remaining leave"]

FIRST_DAY_COL = 2
HEADER_ROWS = 3  # title, dates, weekdays


def default_filename(result: RotaResult, now: Optional[datetime] = None) -> str:
    """``rota_<YYYY>-<MM>_<timestamp>.xlsx``."""
    now = now or datetime.now()
    return f"rota_{result.month_key}_{now.strftime('%Y-%m-%d_%H%M%S')}.xlsx"


def _write(ws, row: int, col: int, value, font: Optional[Font] = None):
    cell = ws.cell(row=row, column=col, value=value)
    cell.border = BORDER_THIN
    cell.alignment = CENTER
    if font is not None:
        cell.font = font
    return cell


def build_workbook(result: RotaResult, sheet_title: str = "Rota") -> Workbook:
    """
    Build the rota workbook.

    Layout: merged title row, a row of dates, a row of weekdays, one row per
    employee with totals on the right, then one row per shift kind with the
    daily head counts.
    """
    n = result.day_count
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title

    last_day_col = FIRST_DAY_COL + n - 1
    for col in range(FIRST_DAY_COL, last_day_col + 1):
        ws.column_dimensions[get_column_letter(col)].width = 4
    ws.column_dimensions["A"].width = 14

    # Title
    ws.merge_cells(start_row=1, start_column=FIRST_DAY_COL, end_row=1, end_column=last_day_col)
    _write(ws, 1, FIRST_DAY_COL, f"{result.month_key} rota", BOLD)

    # Dates and weekdays
    _write(ws, 2, 1, "Date")
    for d in range(1, n + 1):
        _write(ws, 2, FIRST_DAY_COL + d - 1, d, BOLD)
    for d, label in enumerate(result.weekdays):
        _write(ws, 3, FIRST_DAY_COL + d, label)

    # Totals headers span the date and weekday rows
    for i, title in enumerate(TOTAL_HEADERS):
        col = last_day_col + 1 + i
        ws.column_dimensions[get_column_letter(col)].width = 9
        ws.merge_cells(start_row=2, start_column=col, end_row=3, end_column=col)
        _write(ws, 2, col, title)

    # Employees
    for r, e in enumerate(result.employees, start=HEADER_ROWS + 1):
        _write(ws, r, 1, e.name)
        for d, shift in enumerate(e.schedule):
            value = shift.label if shift != ShiftKind.UNSET else ""
            _write(ws, r, FIRST_DAY_COL + d, value, REST_FONT if shift == ShiftKind.REST else None)
        totals = [e.day_quota, e.evening_quota, e.mid_count, e.rest_count, 0, 0]
        for i, v in enumerate(totals):
            _write(ws, r, last_day_col + 1 + i, v)

    # Daily head counts
    start = HEADER_ROWS + len(result.employees) + 1
    for k, kind in enumerate(COUNTED_KINDS):
        row = start + k
        _write(ws, row, 1, kind.label, BOLD)
        for t in result.tallies:
            _write(ws, row, FIRST_DAY_COL + t.day_index - 1, t.get(kind))

    ws.freeze_panes = ws.cell(row=HEADER_ROWS + 1, column=FIRST_DAY_COL)
    return wb


def export_to_excel(
    result: RotaResult,
    output: Union[str, Path, io.BytesIO, None] = None,
    output_dir: Union[str, Path] = ".",
) -> Union[Path, io.BytesIO]:
    """
    Save the rota workbook.

    Args:
        result: Finished rota
        output: File path or BytesIO buffer; None picks ``default_filename``
            inside ``output_dir``

    Returns:
        The path written, or the buffer
    """
    wb = build_workbook(result)
    if isinstance(output, io.BytesIO):
        wb.save(output)
        return output

    path = Path(output) if output else Path(output_dir) / default_filename(result)
    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(str(path))
    logger.info(f"Workbook written to {path}")
    return path
