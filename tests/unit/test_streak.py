# ABOUTME: Unit tests for the reading-streak state machine and StreakTracker persistence.
# ABOUTME: Covers same-day idempotence, continuation, reset, future dates, and bad stored data.

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any

import pytest

from readlog.core.streak import (
    StreakState,
    StreakTracker,
    advance_streak,
    parse_reading_date,
    parse_streak_days,
)
from readlog.db.kv import LAST_READING_DATE_KEY, STREAK_KEY
from tests.fixtures.storage import MemoryKeyValueStore, UnavailableKeyValueStore

TODAY = date(2025, 10, 15)


class TestAdvanceStreak:
    """Tests for the pure transition function."""

    def test_no_previous_date_is_zero(self) -> None:
        assert advance_streak(StreakState(streak_days=5), TODAY).streak_days == 0

    def test_same_day_is_unchanged(self) -> None:
        state = StreakState(streak_days=3, last_reading_date=TODAY)
        assert advance_streak(state, TODAY) == state

    def test_same_day_is_idempotent(self) -> None:
        state = StreakState(streak_days=3, last_reading_date=TODAY)
        for _ in range(5):
            state = advance_streak(state, TODAY)
        assert state.streak_days == 3

    def test_previous_day_continues(self) -> None:
        state = StreakState(streak_days=3, last_reading_date=TODAY - timedelta(days=1))
        assert advance_streak(state, TODAY).streak_days == 4

    def test_previous_day_from_zero_is_one(self) -> None:
        state = StreakState(streak_days=0, last_reading_date=TODAY - timedelta(days=1))
        assert advance_streak(state, TODAY).streak_days == 1

    def test_repeated_next_day_evaluations_keep_counting(self) -> None:
        """Each evaluation against a one-day-old record moves the counter."""
        state = StreakState(streak_days=1, last_reading_date=TODAY - timedelta(days=1))
        state = advance_streak(state, TODAY)
        assert state.streak_days == 2
        state = advance_streak(state, TODAY)
        assert state.streak_days == 3

    @pytest.mark.parametrize("gap", [2, 3, 30, 400])
    def test_gap_resets_to_zero(self, gap: int) -> None:
        state = StreakState(streak_days=12, last_reading_date=TODAY - timedelta(days=gap))
        assert advance_streak(state, TODAY).streak_days == 0

    def test_future_date_is_unchanged(self, caplog: Any) -> None:
        state = StreakState(streak_days=4, last_reading_date=TODAY + timedelta(days=2))
        with caplog.at_level(logging.WARNING):
            assert advance_streak(state, TODAY) == state
        assert any("after" in r.message for r in caplog.records)

    def test_keeps_last_reading_date(self) -> None:
        last = TODAY - timedelta(days=1)
        assert advance_streak(StreakState(2, last), TODAY).last_reading_date == last

    def test_month_boundary(self) -> None:
        state = StreakState(streak_days=2, last_reading_date=date(2025, 9, 30))
        assert advance_streak(state, date(2025, 10, 1)).streak_days == 3


class TestParsing:
    """Tests for decoding stored streak values."""

    def test_parses_javascript_iso_timestamp(self) -> None:
        assert parse_reading_date("2025-10-15T23:10:00.000Z") == date(2025, 10, 15)

    def test_parses_plain_date(self) -> None:
        assert parse_reading_date("2025-10-15") == date(2025, 10, 15)

    def test_offset_is_converted_to_utc_day(self) -> None:
        """01:30 at +02:00 is still the previous UTC day."""
        assert parse_reading_date("2025-10-15T01:30:00+02:00") == date(2025, 10, 14)

    @pytest.mark.parametrize("raw", [None, "", "yesterday", "15/10/2025"])
    def test_bad_date_is_none(self, raw: str | None) -> None:
        assert parse_reading_date(raw) is None

    @pytest.mark.parametrize(("raw", "expected"), [("3", 3), (None, 0), ("x", 0), ("-2", 0)])
    def test_streak_days(self, raw: str | None, expected: int) -> None:
        assert parse_streak_days(raw) == expected


def _clock(moment: datetime):
    return lambda: moment


class TestStreakTracker:
    """Tests for StreakTracker persistence and its two transitions."""

    def test_fresh_state(self, memory_kv: MemoryKeyValueStore) -> None:
        assert StreakTracker(memory_kv).state() == StreakState()

    def test_record_event_only_stamps_date(self, memory_kv: MemoryKeyValueStore) -> None:
        memory_kv.data[STREAK_KEY] = "2"
        now = datetime(2025, 10, 15, 20, 0, tzinfo=timezone.utc)

        StreakTracker(memory_kv).record_event(now)

        assert memory_kv.data[STREAK_KEY] == "2"
        assert memory_kv.data[LAST_READING_DATE_KEY] == "2025-10-15T20:00:00+00:00"

    def test_record_event_uses_clock(self, memory_kv: MemoryKeyValueStore) -> None:
        now = datetime(2025, 10, 15, 9, 30, tzinfo=timezone.utc)
        StreakTracker(memory_kv, clock=_clock(now)).record_event()
        assert StreakTracker(memory_kv).state().last_reading_date == date(2025, 10, 15)

    def test_evaluate_next_day_continues_and_persists(
        self, memory_kv: MemoryKeyValueStore
    ) -> None:
        memory_kv.data[STREAK_KEY] = "2"
        memory_kv.data[LAST_READING_DATE_KEY] = "2025-10-14T21:00:00+00:00"
        tracker = StreakTracker(
            memory_kv, clock=_clock(datetime(2025, 10, 15, 8, 0, tzinfo=timezone.utc))
        )

        state = tracker.evaluate_for_today()

        assert state.streak_days == 3
        assert memory_kv.data[STREAK_KEY] == "3"

    def test_evaluate_uses_calendar_days_not_hours(self, memory_kv: MemoryKeyValueStore) -> None:
        """23:59 to 00:01 the next day is one calendar day."""
        memory_kv.data[STREAK_KEY] = "1"
        memory_kv.data[LAST_READING_DATE_KEY] = "2025-10-14T23:59:00+00:00"
        tracker = StreakTracker(
            memory_kv, clock=_clock(datetime(2025, 10, 15, 0, 1, tzinfo=timezone.utc))
        )
        assert tracker.evaluate_for_today().streak_days == 2

    def test_evaluate_after_gap_resets(self, memory_kv: MemoryKeyValueStore) -> None:
        memory_kv.data[STREAK_KEY] = "9"
        memory_kv.data[LAST_READING_DATE_KEY] = "2025-10-10T12:00:00+00:00"
        tracker = StreakTracker(
            memory_kv, clock=_clock(datetime(2025, 10, 15, 12, 0, tzinfo=timezone.utc))
        )
        assert tracker.evaluate_for_today().streak_days == 0
        assert memory_kv.data[STREAK_KEY] == "0"

    def test_two_phase_session(self, memory_kv: MemoryKeyValueStore) -> None:
        """Log on day 1, evaluate on day 2, log again, evaluate on day 3."""
        day1 = datetime(2025, 10, 13, 19, 0, tzinfo=timezone.utc)
        day2 = day1 + timedelta(days=1)
        day3 = day2 + timedelta(days=1)

        StreakTracker(memory_kv, clock=_clock(day1)).record_event()
        assert StreakTracker(memory_kv, clock=_clock(day1)).evaluate_for_today().streak_days == 0

        assert StreakTracker(memory_kv, clock=_clock(day2)).evaluate_for_today().streak_days == 1
        StreakTracker(memory_kv, clock=_clock(day2)).record_event()

        assert StreakTracker(memory_kv, clock=_clock(day3)).evaluate_for_today().streak_days == 2

    def test_no_date_evaluates_to_zero(self, memory_kv: MemoryKeyValueStore) -> None:
        memory_kv.data[STREAK_KEY] = "6"
        assert StreakTracker(memory_kv).evaluate_for_today().streak_days == 0

    def test_unavailable_storage(self, caplog: Any) -> None:
        tracker = StreakTracker(UnavailableKeyValueStore())
        with caplog.at_level(logging.WARNING):
            assert tracker.evaluate_for_today() == StreakState()
            tracker.record_event()
        messages = " ".join(r.message for r in caplog.records)
        assert "unavailable" in messages
        assert "Could not record" in messages
