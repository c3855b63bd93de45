"""Domain models for the fasting tracker.

All instants are integer milliseconds since the Unix epoch.
"""

from dataclasses import dataclass, field

MS_PER_HOUR = 3_600_000
MIN_FASTING_HOURS = 1
MAX_FASTING_HOURS = 72
DEFAULT_FASTING_HOURS = 16


@dataclass(frozen=True)
class FastSettings:
    """User-configurable fasting duration."""

    fasting_hours: int = DEFAULT_FASTING_HOURS

    @property
    def target_ms(self) -> int:
        """Return the configured fasting duration in milliseconds."""
        return self.fasting_hours * MS_PER_HOUR


@dataclass(frozen=True)
class FastSession:
    """The current fast, either idle or active since ``start_time``."""

    is_active: bool = False
    start_time: int | None = None

    def __post_init__(self) -> None:
        if self.is_active != (self.start_time is not None):
            raise ValueError("start_time must be set exactly when the fast is active")

    @classmethod
    def idle(cls) -> "FastSession":
        """Return a session with no fast in progress."""
        return cls(is_active=False, start_time=None)

    @classmethod
    def active(cls, start_time: int) -> "FastSession":
        """Return a session started at ``start_time``."""
        return cls(is_active=True, start_time=start_time)


@dataclass(frozen=True)
class TimeRemaining:
    """Countdown until the configured fast ends."""

    hours: int
    minutes: int
    seconds: int
    is_complete: bool

    @property
    def total_seconds(self) -> int:
        """Return the remaining time in whole seconds."""
        return self.hours * 3600 + self.minutes * 60 + self.seconds


@dataclass(frozen=True)
class FastingRecord:
    """A finished fast or a logged cheat day."""

    start_time: int
    end_time: int
    duration_hours: float
    completed: bool

    @property
    def is_cheat_day(self) -> bool:
        """Return True for the zero-duration entries logged by cheat days."""
        return not self.completed and self.duration_hours == 0


@dataclass(frozen=True)
class FastingHistory:
    """Rolling record window plus all-time aggregates over completed fasts.

    ``shortest_fast_hours`` is None until the first completed fast.
    """

    records: tuple[FastingRecord, ...] = field(default_factory=tuple)
    longest_fast_hours: float = 0.0
    shortest_fast_hours: float | None = None
    successful_fasts: int = 0


@dataclass(frozen=True)
class CheatDayState:
    """Weekly cheat-day allowance."""

    remaining_days: int
    last_reset: int


@dataclass(frozen=True)
class FastStatus:
    """Snapshot of the current fast for display."""

    session: FastSession
    settings: FastSettings
    remaining: TimeRemaining
    headline: str
    countdown: str
