"""In-memory transaction manager for testing."""

import asyncio
from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import AsyncIterator, Iterable

from pulse.domain.repository import TransactionManager

from .base import InMemoryRepository

_active_manager: ContextVar[object | None] = ContextVar(
    "in_memory_active_manager", default=None
)


class InMemoryTransactionManager(TransactionManager):
    """Serialises units of work and rolls repositories back on failure.

    Outer transactions hold a lock, which stands in for row locks. Nested
    transactions in the same task behave like savepoints.
    """

    def __init__(self, repositories: Iterable[InMemoryRepository]) -> None:
        self._repositories = list(repositories)
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if _active_manager.get() is self:
            async with self._rollback_on_error():
                yield
            return

        async with self._lock:
            token = _active_manager.set(self)
            try:
                async with self._rollback_on_error():
                    yield
            finally:
                _active_manager.reset(token)

    @asynccontextmanager
    async def _rollback_on_error(self) -> AsyncIterator[None]:
        states = [repository.snapshot() for repository in self._repositories]
        try:
            yield
        except BaseException:
            for repository, state in zip(self._repositories, states):
                repository.restore(state)
            raise
