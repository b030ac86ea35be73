"""Tests for month length, weekday labels and YYYY-MM parsing."""
import pytest

from shiftrota.utils.calendar_utils import (
    WEEKDAY_LABELS_ZH,
    days_in_month,
    parse_year_month,
    weekday_labels,
)


class TestDaysInMonth:
    @pytest.mark.parametrize("year,month,expected", [
        (2023, 1, 31),
        (2023, 2, 28),
        (2024, 2, 29),
        (1900, 2, 28),
        (2000, 2, 29),
        (2023, 4, 30),
        (2023, 12, 31),
    ])
    def test_lengths(self, year, month, expected):
        assert days_in_month(year, month) == expected

    @pytest.mark.parametrize("year,month", [(2023, 0), (2023, 13), (0, 5)])
    def test_out_of_range(self, year, month):
        with pytest.raises(ValueError):
            days_in_month(year, month)


class TestWeekdayLabels:
    def test_march_2023(self):
        labels = weekday_labels(2023, 3)
        assert len(labels) == 31
        assert labels[0] == "Wed"  # 1 March 2023
        assert labels[4] == "Sun"

    def test_chinese_labels(self):
        assert weekday_labels(2023, 3, WEEKDAY_LABELS_ZH)[0] == "三"


class TestParseYearMonth:
    def test_valid(self):
        assert parse_year_month("2023-03") == (2023, 3)
        assert parse_year_month(" 2023-3 ") == (2023, 3)

    @pytest.mark.parametrize("text", ["2023/03", "March", "2023-", ""])
    def test_malformed(self, text):
        with pytest.raises(ValueError, match="YYYY-MM"):
            parse_year_month(text)

    def test_month_out_of_range(self):
        with pytest.raises(ValueError, match="month"):
            parse_year_month("2023-13")
