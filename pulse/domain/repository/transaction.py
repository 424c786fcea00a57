"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Runs invariant-critical, multi-step sequences atomically.

    Everything executed inside ``transaction()`` commits together or not at
    all. Rows read through ``*_for_update`` repository methods inside the
    transaction stay locked until it ends.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic unit of work.

        Usage:
            async with transaction_manager.transaction():
                claim = await claims.find_by_id_for_update(claim_id)
                ...

        Raises:
            Whatever the body raises, after rolling back
        """
        pass
