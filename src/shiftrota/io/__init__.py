# shiftrota/io - Input/output handling
from .excel_export import export_to_excel
from .results_export import export_results
from .roster_loader import load_roster, load_roster_csv, parse_roster_lines, save_roster
from .text_report import print_report, render_text

__all__ = [
    "load_roster", "load_roster_csv", "parse_roster_lines", "save_roster",
    "export_to_excel", "export_results",
    "render_text", "print_report",
]
