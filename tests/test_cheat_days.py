"""Tests for the weekly cheat-day allowance."""

from datetime import UTC, datetime

from fasting_tracker.domain.models import CheatDayState
from fasting_tracker.services.cheat_days import (
    WEEK_MS,
    CheatDayAllowance,
    week_start_ms,
)
from tests.conftest import EPOCH_2026, hours


def _ms(*args: int, tz=UTC) -> int:  # type: ignore[no-untyped-def]
    return int(datetime(*args, tzinfo=tz).timestamp() * 1000)


def test_quota_is_used_up_then_refused() -> None:
    allowance = CheatDayAllowance.fresh(EPOCH_2026, weekly_quota=2)

    assert allowance.use() is True
    assert allowance.use() is True
    assert allowance.use() is False
    assert allowance.state.remaining_days == 0


def test_quota_returns_after_sunday_rollover() -> None:
    # Thursday 2026-01-01, quota exhausted.
    allowance = CheatDayAllowance(
        CheatDayState(remaining_days=0, last_reset=EPOCH_2026), 2
    )

    assert allowance.maybe_reset_weekly(_ms(2026, 1, 3, 23, 59)) is False
    assert allowance.use() is False

    assert allowance.maybe_reset_weekly(_ms(2026, 1, 4, 0, 1)) is True
    assert allowance.state.remaining_days == 2
    assert allowance.use() is True


def test_reset_happens_once_per_sunday() -> None:
    sunday_morning = _ms(2026, 1, 4, 8)
    allowance = CheatDayAllowance(
        CheatDayState(remaining_days=0, last_reset=EPOCH_2026), 1
    )

    assert allowance.maybe_reset_weekly(sunday_morning) is True
    allowance.use()

    assert allowance.maybe_reset_weekly(sunday_morning + hours(10)) is False
    assert allowance.state.remaining_days == 0


def test_long_idle_app_resets_on_first_check() -> None:
    # Last reset Friday, next check Tuesday: a Sunday passed in between.
    friday = _ms(2026, 1, 2, 12)
    tuesday = _ms(2026, 1, 6, 9)
    allowance = CheatDayAllowance(CheatDayState(remaining_days=0, last_reset=friday), 1)

    assert allowance.maybe_reset_weekly(tuesday) is True
    assert allowance.state == CheatDayState(remaining_days=1, last_reset=tuesday)


def test_full_week_elapsed_resets() -> None:
    allowance = CheatDayAllowance(
        CheatDayState(remaining_days=0, last_reset=EPOCH_2026), 3
    )

    assert allowance.maybe_reset_weekly(EPOCH_2026 + WEEK_MS) is True
    assert allowance.state.remaining_days == 3


def test_clock_moving_backward_does_not_reset() -> None:
    allowance = CheatDayAllowance(
        CheatDayState(remaining_days=0, last_reset=EPOCH_2026), 1
    )

    assert allowance.maybe_reset_weekly(EPOCH_2026 - hours(1)) is False
    assert allowance.state.remaining_days == 0


def test_manual_reset_restores_quota() -> None:
    allowance = CheatDayAllowance.fresh(EPOCH_2026, weekly_quota=1)
    allowance.use()

    state = allowance.manual_reset(EPOCH_2026 + 5)

    assert state == CheatDayState(remaining_days=1, last_reset=EPOCH_2026 + 5)


def test_week_start_uses_local_timezone() -> None:
    # 2026-01-04 02:00 UTC is still Saturday evening in New York.
    now = _ms(2026, 1, 4, 2)

    assert week_start_ms(now, "UTC") == _ms(2026, 1, 4)
    assert week_start_ms(now, "America/New_York") == _ms(2025, 12, 28, 5)
