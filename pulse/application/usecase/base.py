"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar
from uuid import UUID

from pulse.domain.error import DomainError, ErrorCode

T = TypeVar("T")


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_id(value: str, id_type: Callable[[UUID], T]) -> T:
    """Parse a UUID string into a typed identifier.

    Args:
        value: Raw identifier from the caller
        id_type: Identifier NewType, e.g. ``PollId``

    Returns:
        Typed identifier

    Raises:
        ValidationError: INVALID_ID if the value is not a UUID
    """
    try:
        return id_type(UUID(value))
    except (TypeError, ValueError):
        raise DomainError.from_code(ErrorCode.INVALID_ID, f"Invalid id: {value!r}")
