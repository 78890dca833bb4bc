"""Tests for routine totals, validation and MM:SS formatting."""

import pytest

from readygo.timer.routine import Routine, default_routine, format_clock


class TestTotals:

    def test_reference_routine_totals(self):
        r = Routine(work_seconds=30, rest_seconds=20, rounds=10)
        assert r.per_round_seconds == 50
        assert r.total_seconds == 500
        assert format_clock(r.total_seconds) == "08:20"

    def test_no_rest(self):
        r = Routine(work_seconds=45, rest_seconds=0, rounds=4)
        assert r.total_seconds == 180

    def test_startable(self):
        assert Routine(work_seconds=0, rest_seconds=5, rounds=1).is_startable
        assert Routine(work_seconds=5, rest_seconds=0, rounds=1).is_startable
        assert not Routine(work_seconds=0, rest_seconds=0, rounds=5).is_startable

    def test_summary(self):
        r = Routine(work_seconds=90, rest_seconds=30, rounds=3)
        assert r.summary == "Work 01:30 / Rest 00:30 / 3 rounds / Total 06:00"


class TestValidation:

    def test_zero_rounds_rejected(self):
        with pytest.raises(ValueError):
            Routine(rounds=0)

    @pytest.mark.parametrize("work, rest", [(-1, 10), (10, -1)])
    def test_negative_durations_rejected(self, work, rest):
        with pytest.raises(ValueError):
            Routine(work_seconds=work, rest_seconds=rest)

    def test_routine_is_frozen(self):
        r = Routine()
        with pytest.raises(AttributeError):
            r.rounds = 3  # type: ignore[misc]


class TestDefaults:

    def test_default_routine(self):
        r = default_routine()
        assert r.name == "Default"
        assert (r.work_seconds, r.rest_seconds, r.rounds) == (30, 20, 10)
        assert r.cues_enabled is True
        assert r.id.startswith("r_")


class TestFormatClock:

    @pytest.mark.parametrize("seconds, text", [
        (0, "00:00"),
        (9, "00:09"),
        (60, "01:00"),
        (500, "08:20"),
        (3599, "59:59"),
        (3600, "60:00"),
        (6000, "100:00"),
    ])
    def test_format(self, seconds, text):
        assert format_clock(seconds) == text

    def test_negative_clamped(self):
        assert format_clock(-5) == "00:00"
