"""Mock clock providers for testing."""

from datetime import datetime, timedelta, timezone

from dishka import Scope, provide

from pulse.domain.service import Clock
from pulse.util.di.infrastructure.clock import ClockProvider

DEFAULT_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FixedClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, now: datetime = DEFAULT_NOW) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current = self.current + delta

    def set(self, now: datetime) -> None:
        self.current = now


class MockClockProvider(ClockProvider):
    """Mock clock provider with a settable time."""

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_clock(self) -> Clock:
        """Provide a fixed clock, fresh per test."""
        return FixedClock()
