"""Tests for quota split, anchor search and the rotation scheduler."""
import logging

import pytest

from conftest import ALICE_CODES
from shiftrota.engine.anchor import find_anchor
from shiftrota.engine.quota import compute_quotas
from shiftrota.engine.rotation import RotationScheduler, _switch_if_exhausted, apply_transition_rule
from shiftrota.models.employee import Employee
from shiftrota.models.shift import ShiftKind


def _codes(text):
    return [ShiftKind.from_string(c) for c in text]


class TestComputeQuotas:
    """Tests for compute_quotas."""

    def test_even_split_remainder_to_evening(self, alice):
        compute_quotas(alice, 30)
        assert alice.rest_count == 5
        assert alice.day_quota == 12
        assert alice.evening_quota == 13
        assert alice.mid_count == 0

    def test_even_working_days(self):
        e = Employee.with_rest_days("A", 30, [1, 2, 3, 4])
        compute_quotas(e, 30)
        assert (e.day_quota, e.evening_quota) == (13, 13)

    def test_override(self):
        e = Employee.with_rest_days("A", 31, [10], evening_quota_override=4)
        compute_quotas(e, 31)
        assert e.evening_quota == 4
        assert e.day_quota == 26

    def test_rest_exceeds_month(self):
        e = Employee(name="A", rest_count=32)
        with pytest.raises(ValueError):
            compute_quotas(e, 31)

    def test_override_out_of_range(self):
        e = Employee.with_rest_days("A", 30, range(1, 29), evening_quota_override=3)
        with pytest.raises(ValueError):
            compute_quotas(e, 30)


class TestFindAnchor:
    """Tests for the longest rest block search."""

    def test_no_rest(self):
        assert find_anchor(_codes("-" * 30)) == (0, 0)

    def test_longest_block(self, alice):
        assert find_anchor(alice.schedule) == (17, 2)

    def test_tie_keeps_earliest(self):
        assert find_anchor(_codes("--RR---RR---")) == (2, 2)

    def test_later_longer_block_wins(self):
        assert find_anchor(_codes("R----RRR--")) == (5, 3)

    def test_block_at_month_end_ignored(self):
        assert find_anchor(_codes("R------RRR")) == (0, 1)

    def test_all_rest(self):
        assert find_anchor(_codes("RRRR")) == (0, 0)


class TestSwitchIfExhausted:
    def test_keeps_cursor_with_quota_left(self):
        left = {ShiftKind.DAY: 0, ShiftKind.EVENING: 2}
        assert _switch_if_exhausted(ShiftKind.EVENING, left) == ShiftKind.EVENING

    def test_switches_to_other_kind(self):
        left = {ShiftKind.DAY: 3, ShiftKind.EVENING: 0}
        assert _switch_if_exhausted(ShiftKind.EVENING, left) == ShiftKind.DAY

    def test_switches_once_when_both_exhausted(self):
        left = {ShiftKind.DAY: 0, ShiftKind.EVENING: 0}
        assert _switch_if_exhausted(ShiftKind.EVENING, left) == ShiftKind.DAY
        assert _switch_if_exhausted(ShiftKind.DAY, left) == ShiftKind.EVENING


class TestTransitionRule:
    def test_evening_then_day_becomes_mid(self):
        e = Employee(name="A", schedule=_codes("EDDED"), day_quota=3, evening_quota=2)
        changed = apply_transition_rule(e)
        assert changed == 2
        assert e.codes() == "EMDEM"
        assert e.day_quota == 1
        assert e.mid_count == 2

    def test_rest_breaks_adjacency(self):
        e = Employee(name="A", schedule=_codes("ERD"), day_quota=1, evening_quota=1, rest_count=1)
        assert apply_transition_rule(e) == 0
        assert e.codes() == "ERD"


class TestRotationScheduler:
    """Tests for RotationScheduler.schedule."""

    def test_reference_pattern(self, alice):
        RotationScheduler().schedule(alice)
        assert alice.codes() == ALICE_CODES
        assert alice.day_quota == 11
        assert alice.evening_quota == 13
        assert alice.mid_count == 1
        assert alice.rest_count == 5
        assert alice.day_quota + alice.evening_quota + alice.mid_count == 25

    def test_zero_rest_forward_fill_covers_month(self):
        e = Employee.with_rest_days("A", 30, [])
        RotationScheduler().schedule(e)
        assert e.codes() == "E" * 15 + "M" + "D" * 14
        assert (e.day_quota, e.evening_quota, e.mid_count) == (14, 15, 1)

    def test_single_working_day_in_middle(self):
        rest = [d for d in range(1, 31) if d != 16]
        e = Employee.with_rest_days("A", 30, rest)
        scheduler = RotationScheduler()
        scheduler.schedule(e)
        assert e.schedule[15] == ShiftKind.EVENING
        assert e.count(ShiftKind.REST) == 29
        assert (e.day_quota, e.evening_quota) == (0, 1)
        assert scheduler.clamps == []

    def test_single_working_day_first(self):
        e = Employee.with_rest_days("A", 30, range(2, 31))
        RotationScheduler().schedule(e)
        assert e.codes() == "E" + "R" * 29

    def test_single_working_day_last(self):
        e = Employee.with_rest_days("A", 30, range(1, 30))
        RotationScheduler().schedule(e)
        assert e.codes() == "R" * 29 + "E"

    def test_evening_override(self):
        e = Employee.with_rest_days("A", 30, [], evening_quota_override=4)
        RotationScheduler().schedule(e)
        assert e.codes() == "EEEE" + "M" + "D" * 25
        assert (e.day_quota, e.evening_quota, e.mid_count) == (25, 4, 1)

    def test_zero_evening_override(self):
        e = Employee.with_rest_days("A", 30, [], evening_quota_override=0)
        scheduler = RotationScheduler()
        scheduler.schedule(e)
        assert e.codes() == "D" * 30
        assert scheduler.clamps == []

    def test_all_rest(self):
        e = Employee.with_rest_days("A", 28, range(1, 29))
        RotationScheduler().schedule(e)
        assert e.codes() == "R" * 28
        assert (e.day_quota, e.evening_quota, e.mid_count) == (0, 0, 0)

    def test_rest_days_untouched(self, alice):
        before = alice.rest_days
        RotationScheduler().schedule(alice)
        assert alice.rest_days == before

    def test_deterministic(self):
        a = Employee.with_rest_days("A", 31, [3, 4, 10, 20, 21, 22, 31])
        b = Employee.with_rest_days("A", 31, [3, 4, 10, 20, 21, 22, 31])
        RotationScheduler().schedule(a)
        RotationScheduler().schedule(b)
        assert a.schedule == b.schedule

    def test_backward_clamp_is_recorded_and_logged(self, caplog):
        e = Employee(name="A", schedule=_codes("---"))
        scheduler = RotationScheduler()
        left = {ShiftKind.DAY: 1, ShiftKind.EVENING: 0}

        with caplog.at_level(logging.WARNING, logger="shiftrota.engine.rotation"):
            scheduler._fill_backward(e, 2, left)

        assert e.codes() == "DED"
        assert [c.day_index for c in scheduler.clamps] == [2, 1]
        assert left == {ShiftKind.DAY: 0, ShiftKind.EVENING: 0}
        assert "Quota clamp" in caplog.text
