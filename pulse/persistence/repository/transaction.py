"""PostgreSQL transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from pulse.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Runs a unit of work inside a SAVEPOINT of the request session.

    A failure rolls back to the savepoint only, so the request session stays
    usable after an ``IntegrityError``. The outer request transaction is
    committed by the session provider.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
