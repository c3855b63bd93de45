"""Statistics derived from the fasting history."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from fasting_tracker.domain.models import FastingHistory, FastingRecord
from fasting_tracker.domain.stats import DayOverview, FastWindow, StatsSummary

DAY_MS = 24 * 3_600_000
OVERVIEW_DAYS = 30


def format_stats(history: FastingHistory) -> StatsSummary:
    """Return the aggregates formatted for display."""
    longest = history.longest_fast_hours
    shortest = history.shortest_fast_hours
    return StatsSummary(
        successful_fasts=history.successful_fasts,
        longest_fast=f"{longest:.1f} hours" if longest else "N/A",
        shortest_fast=f"{shortest:.1f} hours" if shortest else "N/A",
    )


def daily_overview(
    records: Iterable[FastingRecord],
    now: int,
    timezone_name: str = "UTC",
    days: int = OVERVIEW_DAYS,
) -> list[DayOverview]:
    """Group records by local start day over the last ``days`` days.

    Days are returned oldest first and include days with no records.
    """
    tz = ZoneInfo(timezone_name)
    today = datetime.fromtimestamp(now / 1000, tz=tz).date()
    first_day = today - timedelta(days=max(days, 1) - 1)
    buckets: dict[date, list[FastingRecord]] = {
        first_day + timedelta(days=offset): [] for offset in range(max(days, 1))
    }
    for record in records:
        day = datetime.fromtimestamp(record.start_time / 1000, tz=tz).date()
        if day in buckets:
            buckets[day].append(record)
    return [_overview_day(day, day_records, tz) for day, day_records in buckets.items()]


def _overview_day(
    day: date, records: list[FastingRecord], tz: ZoneInfo
) -> DayOverview:
    midnight = datetime(day.year, day.month, day.day, tzinfo=tz)
    day_start = int(midnight.timestamp() * 1000)
    windows = tuple(_window(record, day_start) for record in records)
    return DayOverview(
        day=day,
        records=tuple(records),
        windows=windows,
        has_successful_fast=any(record.completed for record in records),
        has_incomplete_fast=any(
            not record.completed and record.duration_hours > 0 for record in records
        ),
        has_cheat_day=any(record.is_cheat_day for record in records),
    )


def _window(record: FastingRecord, day_start: int) -> FastWindow:
    start_percent = max(0.0, (record.start_time - day_start) / DAY_MS * 100)
    end_percent = min(100.0, (record.end_time - day_start) / DAY_MS * 100)
    return FastWindow(
        start_percent=start_percent,
        end_percent=max(start_percent, end_percent),
        completed=record.completed,
    )
