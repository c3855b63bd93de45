"""Domain models for history statistics."""

from dataclasses import dataclass
from datetime import date

from fasting_tracker.domain.models import FastingRecord


@dataclass(frozen=True)
class FastWindow:
    """Position of a record within its start day, as percentages of the day."""

    start_percent: float
    end_percent: float
    completed: bool


@dataclass(frozen=True)
class DayOverview:
    """Records that started on a single local day."""

    day: date
    records: tuple[FastingRecord, ...]
    windows: tuple[FastWindow, ...]
    has_successful_fast: bool
    has_incomplete_fast: bool
    has_cheat_day: bool


@dataclass(frozen=True)
class StatsSummary:
    """Display-ready aggregate figures."""

    successful_fasts: int
    longest_fast: str
    shortest_fast: str
