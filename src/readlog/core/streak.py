# ABOUTME: Daily reading-streak state machine and its persistence.
# ABOUTME: record_event stamps the last reading date; evaluate_for_today applies the transition.

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone

from readlog.db.kv import LAST_READING_DATE_KEY, STREAK_KEY, KeyValueStore, StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreakState:
    """Consecutive reading days and the calendar day of the last logged session."""

    streak_days: int = 0
    last_reading_date: date | None = None


def advance_streak(state: StreakState, today: date) -> StreakState:
    """Apply one evaluation of the streak state machine for `today`.

    - no recorded date: streak is 0
    - same day: unchanged
    - previous day: streak + 1 (at least 1)
    - gap of two or more days: streak resets to 0
    - recorded date in the future: unchanged
    """
    if state.last_reading_date is None:
        return replace(state, streak_days=0)

    diff_days = (today - state.last_reading_date).days
    if diff_days == 1:
        return replace(state, streak_days=max(1, state.streak_days + 1))
    if diff_days > 1:
        return replace(state, streak_days=0)
    if diff_days < 0:
        logger.warning(
            "Last reading date %s is after %s, leaving streak unchanged",
            state.last_reading_date,
            today,
        )
    return state


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _to_utc_date(moment: datetime) -> date:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date()


def parse_reading_date(raw: str | None) -> date | None:
    """Parse a stored ISO-8601 date or date-time into its UTC calendar day."""
    if not raw:
        return None
    try:
        # fromisoformat only accepts a trailing "Z" from Python 3.11 on
        moment = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        logger.warning("Ignoring malformed last reading date %r", raw)
        return None
    return _to_utc_date(moment)


def parse_streak_days(raw: str | None) -> int:
    """Parse the stored streak counter, degrading to 0."""
    if raw is None:
        return 0
    try:
        days = int(raw)
    except ValueError:
        logger.warning("Ignoring malformed streak value %r", raw)
        return 0
    return max(days, 0)


class StreakTracker:
    """Persisted streak with two named transitions.

    record_event() only stamps the last reading date. The streak counter
    moves when evaluate_for_today() runs, once per session load.
    """

    def __init__(
        self, kv: KeyValueStore, clock: Callable[[], datetime] = _utc_now
    ) -> None:
        self._kv = kv
        self._clock = clock

    def state(self) -> StreakState:
        """Current persisted state, without applying a transition."""
        try:
            streak_raw = self._kv.get(STREAK_KEY)
            last_raw = self._kv.get(LAST_READING_DATE_KEY)
        except StorageError as exc:
            logger.warning("Streak state unavailable, starting from zero: %s", exc)
            return StreakState()
        return StreakState(
            streak_days=parse_streak_days(streak_raw),
            last_reading_date=parse_reading_date(last_raw),
        )

    def evaluate_for_today(self) -> StreakState:
        """Advance the streak for the current UTC day and persist the counter."""
        today = _to_utc_date(self._clock())
        new_state = advance_streak(self.state(), today)
        try:
            self._kv.set(STREAK_KEY, str(new_state.streak_days))
        except StorageError as exc:
            logger.warning("Could not persist streak: %s", exc)
        return new_state

    def record_event(self, now: datetime | None = None) -> None:
        """Stamp a reading session at `now` (default: the tracker's clock)."""
        moment = now or self._clock()
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        try:
            self._kv.set(LAST_READING_DATE_KEY, moment.isoformat())
        except StorageError as exc:
            logger.warning("Could not record reading session: %s", exc)
