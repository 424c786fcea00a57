"""Mock providers for testing."""

from .clock import FixedClock, MockClockProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "FixedClock",
    "MockClockProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
