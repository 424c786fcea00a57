"""Poll config (template) domain service."""

import re
from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from pulse.domain.error import DomainError, ErrorCode
from pulse.domain.model.poll_config import PollConfig
from pulse.domain.repository import CategoryRepository, PollConfigRepository
from pulse.domain.value import (
    CategoryDomain,
    CategoryId,
    CategoryStatus,
    PollConfigId,
    PollConfigStatus,
    PollPermissions,
    PollRules,
    PollTheme,
    PollUiTemplate,
    Slug,
)

from .base import Service
from .clock import Clock

FALLBACK_SLUG = "poll-config"
MAX_BASE_SLUG_LENGTH = 100


class PollConfigDraft(BaseModel):
    """Fields of a new poll config."""

    name: str = Field(min_length=1)
    category_id: CategoryId
    ui_template: PollUiTemplate
    theme: PollTheme
    rules: PollRules = Field(default_factory=PollRules)
    permissions: PollPermissions = Field(default_factory=PollPermissions)
    status: PollConfigStatus = PollConfigStatus.DRAFT


class PollConfigChanges(BaseModel):
    """Partial update of a poll config."""

    name: str | None = Field(default=None, min_length=1)
    category_id: CategoryId | None = None
    ui_template: PollUiTemplate | None = None
    theme: PollTheme | None = None
    rules: PollRules | None = None
    permissions: PollPermissions | None = None
    status: PollConfigStatus | None = None


def validate_template_rules(template: PollUiTemplate, rules: PollRules) -> None:
    """Check option bounds against the UI template.

    Raises:
        ValidationError: INVALID_TEMPLATE_RULES
    """
    content = rules.content_rules
    if content is None:
        return

    min_options, max_options = content.min_options, content.max_options

    if template == PollUiTemplate.YES_NO:
        if (min_options and min_options != 2) or (max_options and max_options != 2):
            raise DomainError.from_code(
                ErrorCode.INVALID_TEMPLATE_RULES,
                "YES_NO template must have exactly 2 options",
            )

    if template in (PollUiTemplate.STANDARD_LIST, PollUiTemplate.RATING):
        if min_options is not None and min_options < 2:
            raise DomainError.from_code(
                ErrorCode.INVALID_TEMPLATE_RULES,
                "List and rating templates require at least 2 options",
            )

    if min_options is not None and max_options is not None and min_options > max_options:
        raise DomainError.from_code(
            ErrorCode.INVALID_TEMPLATE_RULES, "minOptions exceeds maxOptions"
        )


class PollConfigService(Service):
    """Domain service for poll template operations."""

    def __init__(
        self,
        poll_config_repository: PollConfigRepository,
        category_repository: CategoryRepository,
        clock: Clock,
    ) -> None:
        """Initialize poll config service.

        Args:
            poll_config_repository: Poll config repository
            category_repository: Category repository
            clock: Time source
        """
        self.poll_config_repository = poll_config_repository
        self.category_repository = category_repository
        self.clock = clock

    async def get_config(self, config_id: PollConfigId) -> PollConfig:
        """Get a poll config or raise NOT_FOUND."""
        config = await self.poll_config_repository.find_by_id(config_id)
        if config is None:
            raise DomainError.from_code(ErrorCode.NOT_FOUND)
        return config

    async def create(self, draft: PollConfigDraft) -> PollConfig:
        """Create a poll config at version 1.

        Args:
            draft: Config fields

        Returns:
            Created config with a unique slug derived from its name

        Raises:
            ValidationError: INVALID_TEMPLATE_RULES
            NotFoundError: CATEGORY_NOT_FOUND
            BusinessRuleViolationError: CATEGORY_NOT_CHILD, CATEGORY_NOT_ACTIVE
        """
        with logfire.span(
            "poll_config_service.create",
            name=draft.name,
            category_id=str(draft.category_id),
            ui_template=draft.ui_template.value,
        ):
            validate_template_rules(draft.ui_template, draft.rules)
            await self._ensure_child_active_category(draft.category_id)

            now = self.clock.now()
            config = PollConfig(
                id=PollConfigId(uuid4()),
                name=draft.name,
                slug=await self.generate_unique_slug(draft.name),
                category_id=draft.category_id,
                status=draft.status,
                version=1,
                ui_template=draft.ui_template,
                theme=draft.theme,
                rules=draft.rules,
                permissions=draft.permissions,
                created_at=now,
                updated_at=now,
            )
            saved = await self.poll_config_repository.save(config)
            logfire.info(
                "Poll config created", config_id=str(saved.id), slug=str(saved.slug)
            )
            return saved

    async def update(
        self, config_id: PollConfigId, changes: PollConfigChanges
    ) -> PollConfig:
        """Update a poll config and bump its version.

        Template rules are re-validated against the merged template and rules.

        Raises:
            NotFoundError: NOT_FOUND, CATEGORY_NOT_FOUND
            ValidationError: INVALID_TEMPLATE_RULES
            BusinessRuleViolationError: CATEGORY_NOT_CHILD, CATEGORY_NOT_ACTIVE
        """
        with logfire.span(
            "poll_config_service.update",
            config_id=str(config_id),
            fields=sorted(changes.model_fields_set),
        ):
            existing = await self.get_config(config_id)

            update = {
                field: getattr(changes, field)
                for field in changes.model_fields_set
                if getattr(changes, field) is not None
            }

            validate_template_rules(
                update.get("ui_template", existing.ui_template),
                update.get("rules", existing.rules),
            )
            if "category_id" in update:
                await self._ensure_child_active_category(update["category_id"])

            update["version"] = existing.version + 1
            update["updated_at"] = self.clock.now()
            saved = await self.poll_config_repository.save(
                existing.model_copy(update=update)
            )
            logfire.info(
                "Poll config updated", config_id=str(config_id), version=saved.version
            )
            return saved

    async def publish(self, config_id: PollConfigId) -> PollConfig:
        """Activate a poll config and bump its version."""
        with logfire.span("poll_config_service.publish", config_id=str(config_id)):
            existing = await self.get_config(config_id)
            saved = await self.poll_config_repository.save(
                existing.model_copy(
                    update={
                        "status": PollConfigStatus.ACTIVE,
                        "version": existing.version + 1,
                        "updated_at": self.clock.now(),
                    }
                )
            )
            logfire.info(
                "Poll config published", config_id=str(config_id), version=saved.version
            )
            return saved

    async def clone(self, config_id: PollConfigId) -> PollConfig:
        """Copy a poll config into a fresh DRAFT at version 1."""
        with logfire.span("poll_config_service.clone", config_id=str(config_id)):
            existing = await self.get_config(config_id)

            now = self.clock.now()
            copy = existing.model_copy(
                update={
                    "id": PollConfigId(uuid4()),
                    "name": f"{existing.name} (Copy)",
                    "slug": await self.generate_unique_slug(f"{existing.name}-copy"),
                    "status": PollConfigStatus.DRAFT,
                    "version": 1,
                    "created_at": now,
                    "updated_at": now,
                }
            )
            saved = await self.poll_config_repository.save(copy)
            logfire.info(
                "Poll config cloned", source_id=str(config_id), config_id=str(saved.id)
            )
            return saved

    async def generate_unique_slug(self, name: str) -> Slug:
        """Derive a slug from a name, appending ``-1``, ``-2``... on collision.

        Args:
            name: Config name

        Returns:
            Slug not currently used by any config
        """
        base = self._slugify(name) or FALLBACK_SLUG
        candidate = base
        suffix = 1
        while await self.poll_config_repository.find_by_slug(Slug(candidate)):
            candidate = f"{base}-{suffix}"
            suffix += 1
            logfire.debug("Slug collision", base_slug=base, attempt=candidate)
        return Slug(candidate)

    @staticmethod
    def _slugify(name: str) -> str:
        slug = re.sub(r"[^a-z0-9]+", "-", name.strip().lower())
        return slug.strip("-")[:MAX_BASE_SLUG_LENGTH].strip("-")

    async def _ensure_child_active_category(self, category_id: CategoryId) -> None:
        category = await self.category_repository.find_by_id(category_id)
        if category is None or category.domain != CategoryDomain.POLL:
            logfire.warn("Poll config category not found", category_id=str(category_id))
            raise DomainError.from_code(ErrorCode.CATEGORY_NOT_FOUND)
        if category.is_parent:
            raise DomainError.from_code(ErrorCode.CATEGORY_NOT_CHILD)
        if category.status != CategoryStatus.ACTIVE:
            raise DomainError.from_code(ErrorCode.CATEGORY_NOT_ACTIVE)
