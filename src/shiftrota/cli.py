from __future__ import annotations

import argparse
import json
import sys

from pydantic import ValidationError

from shiftrota.engine.pipeline import build_rota
from shiftrota.engine.validation import validate_rota
from shiftrota.io.excel_export import export_to_excel
from shiftrota.io.results_export import export_results
from shiftrota.io.roster_loader import load_roster
from shiftrota.io.text_report import print_report
from shiftrota.models.validated import ValidatedRotaConfig
from shiftrota.utils.calendar_utils import WEEKDAY_LABELS_EN, WEEKDAY_LABELS_ZH, parse_year_month
from shiftrota.utils.logging_setup import SchedulerLogger, get_logger, setup_logging
from shiftrota.utils.structured_logging import configure_structlog

logger = get_logger("shiftrota.cli")
slog = SchedulerLogger("shiftrota.cli")

EXIT_INVALID = 2


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="shiftrota", description="Monthly day/evening/mid shift rota")
    p.add_argument("--month", required=True, help="Month to schedule, YYYY-MM")
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument("--roster",
                        help="Roster file: CSV by .csv suffix, otherwise one '<name> <rest_count> <days...>' line per employee")
    source.add_argument("--csv", help="Roster CSV (name, rest_days, rest_count, evening_quota), any suffix")
    p.add_argument("--xlsx", dest="xlsx_path", default=None, help="Workbook path (default: auto-named)")
    p.add_argument("--no-xlsx", dest="write_xlsx", action="store_false", help="Skip the workbook")
    p.add_argument("--output-dir", default=".", help="Directory for the auto-named workbook")
    p.add_argument("--json", dest="json_path", default=None, help="Also write results as JSON")
    p.add_argument("--weekdays", dest="weekday_locale", choices=["en", "zh"], default="en")
    p.add_argument("--no-color", dest="color", action="store_false")
    p.add_argument("--log-level", default="WARNING")
    p.add_argument("--log-file", default=None)
    p.add_argument("--json-logs", action="store_true", help="Render structured events as JSON")
    p.add_argument("-v", "--verbose", action="count", default=0)
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    log_level = args.log_level
    if args.verbose:
        log_level = "INFO" if args.verbose == 1 else "DEBUG"

    try:
        year, month = parse_year_month(args.month)
        cfg = ValidatedRotaConfig(
            year=year,
            month=month,
            xlsx_path=args.xlsx_path,
            write_xlsx=args.write_xlsx,
            json_path=args.json_path,
            output_dir=args.output_dir,
            weekday_locale=args.weekday_locale,
            color=args.color,
            log_level=log_level,
            log_file=args.log_file,
        ).to_dataclass()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    setup_logging(level=cfg.log_level, log_file=cfg.log_file)
    configure_structlog(json_output=args.json_logs)

    try:
        if args.csv:
            roster = load_roster(args.csv, cfg.year, cfg.month, fmt="csv")
        else:
            roster = load_roster(args.roster, cfg.year, cfg.month)
    except ValidationError as e:
        for err in e.errors():
            print(f"error: {err['msg']}", file=sys.stderr)
        return EXIT_INVALID
    except (OSError, ValueError) as e:
        logger.error(f"Roster rejected: {e}")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    names = WEEKDAY_LABELS_ZH if cfg.weekday_locale == "zh" else WEEKDAY_LABELS_EN
    result = build_rota(roster, weekday_names=names)
    validation = validate_rota(result)

    print_report(result, color=cfg.color and sys.stdout.isatty())

    if cfg.write_xlsx:
        slog.step("Writing workbook")
        path = export_to_excel(result, cfg.xlsx_path, output_dir=cfg.output_dir)
        print(f"Workbook: {path}")
    if cfg.json_path:
        slog.step("Writing JSON results")
        export_results(result, cfg.json_path, validation)

    if validation.has_critical_issues:
        print(json.dumps(validation.as_dict()), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
