"""End-to-end tests for the command line."""
import json

import pytest

from shiftrota.cli import EXIT_INVALID, main

pytestmark = pytest.mark.usefixtures("reset_rota_logger")


class TestCLI:
    def test_text_report_and_json(self, roster_lines_path, tmp_path, capsys):
        out = tmp_path / "rota.json"
        code = main(["--month", "2023-04", "--roster", str(roster_lines_path), "--no-xlsx", "--json", str(out)])

        assert code == 0
        stdout = capsys.readouterr().out
        assert stdout.startswith("Date")
        assert "Alice" in stdout
        data = json.loads(out.read_text(encoding="utf-8"))
        assert [e["name"] for e in data["employees"]] == ["Alice", "Bob", "Chen"]

    def test_writes_workbook(self, roster_lines_path, tmp_path, capsys):
        xlsx = tmp_path / "rota.xlsx"
        code = main(["--month", "2023-04", "--roster", str(roster_lines_path), "--xlsx", str(xlsx)])

        assert code == 0
        assert xlsx.exists()
        assert f"Workbook: {xlsx}" in capsys.readouterr().out

    def test_bad_month(self, roster_lines_path, capsys):
        code = main(["--month", "2023-13", "--roster", str(roster_lines_path), "--no-xlsx"])
        assert code == EXIT_INVALID
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "month" in captured.err

    def test_invalid_roster_produces_no_report(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("Alice 2 3 3\n", encoding="utf-8")
        code = main(["--month", "2023-04", "--roster", str(path), "--no-xlsx"])

        assert code == EXIT_INVALID
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "twice" in captured.err

    def test_missing_roster_file(self, tmp_path, capsys):
        code = main(["--month", "2023-04", "--roster", str(tmp_path / "nope.txt"), "--no-xlsx"])
        assert code == EXIT_INVALID
        assert capsys.readouterr().out == ""

    def test_csv_option_ignores_suffix(self, tmp_path, capsys):
        path = tmp_path / "team.txt"
        path.write_text("name,rest_days,evening_quota\nAlice,5 12 18 19 26,\nBob,1 2 3,14\n", encoding="utf-8")
        code = main(["--month", "2023-04", "--csv", str(path), "--no-xlsx"])

        assert code == 0
        stdout = capsys.readouterr().out
        assert "Alice" in stdout
        assert "Bob" in stdout

    def test_csv_blank_name_rejected(self, tmp_path, capsys):
        path = tmp_path / "team.csv"
        path.write_text("name,rest_days\nAlice,5\n ,3 4 9\n", encoding="utf-8")
        code = main(["--month", "2023-04", "--csv", str(path), "--no-xlsx"])

        assert code == EXIT_INVALID
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "blank name" in captured.err

    def test_roster_and_csv_are_exclusive(self, roster_lines_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--month", "2023-04", "--roster", str(roster_lines_path), "--csv", str(roster_lines_path)])
        assert exc.value.code == 2
        assert "not allowed with" in capsys.readouterr().err

    def test_json_logs(self, roster_lines_path, capsys):
        code = main(["--month", "2023-04", "--roster", str(roster_lines_path), "--no-xlsx",
                     "--log-level", "INFO", "--json-logs"])

        assert code == 0
        err = capsys.readouterr().err
        assert '"event": "rota_built"' in err
