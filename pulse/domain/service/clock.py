"""Clock abstraction.

Lifecycle checks compare stored timestamps against "now"; the clock is
injected so callers never reach for the wall clock directly.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from pulse.domain.model.common import utc_now


class Clock(ABC):
    """Source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Current time, timezone-aware UTC."""
        pass


class SystemClock(Clock):
    """Wall clock."""

    def now(self) -> datetime:
        return utc_now()
