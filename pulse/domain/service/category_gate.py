"""Category preconditions for hosting polls."""

from pulse.domain.error import DomainError, ErrorCode
from pulse.domain.repository import CategoryRepository
from pulse.domain.value import CategoryDomain, CategoryId, CategoryStatus

from .base import Service
from .inheritance_service import InheritanceService


class CategoryGate(Service):
    """Checks that a category may host polls.

    Shared by admin and user polls: the category must be an existing POLL
    child, ACTIVE on its own, and effectively ACTIVE with both claimable and
    request-allowed resolving to YES.
    """

    def __init__(
        self,
        category_repository: CategoryRepository,
        inheritance_service: InheritanceService,
    ) -> None:
        self.category_repository = category_repository
        self.inheritance_service = inheritance_service

    async def ensure_allowed(self, category_id: CategoryId) -> None:
        """Raise the first failing category precondition.

        Raises:
            NotFoundError: CATEGORY_NOT_FOUND
            BusinessRuleViolationError: CATEGORY_NOT_CHILD, CATEGORY_NOT_ACTIVE,
                CATEGORY_NOT_ALLOWED
        """
        category = await self.category_repository.find_by_id(category_id)
        if category is None or category.domain != CategoryDomain.POLL:
            raise DomainError.from_code(ErrorCode.CATEGORY_NOT_FOUND)
        if category.is_parent:
            raise DomainError.from_code(ErrorCode.CATEGORY_NOT_CHILD)
        if category.status != CategoryStatus.ACTIVE:
            raise DomainError.from_code(ErrorCode.CATEGORY_NOT_ACTIVE)

        effective = await self.inheritance_service.resolve_effective(category_id)
        if effective is None:
            raise DomainError.from_code(ErrorCode.CATEGORY_NOT_FOUND)
        if not effective.is_active:
            raise DomainError.from_code(ErrorCode.CATEGORY_NOT_ACTIVE)
        if not effective.allows_participation:
            raise DomainError.from_code(ErrorCode.CATEGORY_NOT_ALLOWED)
