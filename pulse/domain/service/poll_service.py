"""Admin poll lifecycle domain service."""

import secrets
from uuid import uuid4

import logfire
from pydantic import AwareDatetime, BaseModel, Field

from pulse.domain.error import DomainError, ErrorCode
from pulse.domain.model.poll import Poll, PollInvite
from pulse.domain.repository import (
    PollConfigRepository,
    PollInviteRepository,
    PollRepository,
)
from pulse.domain.value import (
    CategoryId,
    InviteToken,
    PollConfigId,
    PollConfigStatus,
    PollId,
    PollInviteId,
    PollStatus,
    PollVisibility,
)

from .base import Service
from .category_gate import CategoryGate
from .clock import Clock
from .inheritance_service import InheritanceService


class PollDraft(BaseModel):
    """Fields of a new admin poll."""

    title: str = Field(min_length=1)
    description: str | None = None
    category_id: CategoryId
    poll_config_id: PollConfigId
    start_at: AwareDatetime | None = None
    end_at: AwareDatetime | None = None


class PollChanges(BaseModel):
    """Partial update of a DRAFT poll."""

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    category_id: CategoryId | None = None
    poll_config_id: PollConfigId | None = None
    start_at: AwareDatetime | None = None
    end_at: AwareDatetime | None = None


class PollService(Service):
    """Domain service for the admin poll state machine.

    DRAFT -> PUBLISHED -> CLOSED, one-directional. Category and config health
    is checked on create, on any update touching them, and again on publish.
    """

    def __init__(
        self,
        poll_repository: PollRepository,
        poll_invite_repository: PollInviteRepository,
        poll_config_repository: PollConfigRepository,
        category_gate: CategoryGate,
        inheritance_service: InheritanceService,
        clock: Clock,
    ) -> None:
        """Initialize poll service.

        Args:
            poll_repository: Poll repository
            poll_invite_repository: Poll invite repository
            poll_config_repository: Poll config repository
            category_gate: Category precondition checks
            inheritance_service: Inheritance resolver
            clock: Time source
        """
        self.poll_repository = poll_repository
        self.poll_invite_repository = poll_invite_repository
        self.poll_config_repository = poll_config_repository
        self.category_gate = category_gate
        self.inheritance_service = inheritance_service
        self.clock = clock

    async def get_poll(self, poll_id: PollId) -> Poll:
        """Get a poll or raise NOT_FOUND."""
        poll = await self.poll_repository.find_by_id(poll_id)
        if poll is None:
            raise DomainError.from_code(ErrorCode.NOT_FOUND)
        return poll

    async def create(self, draft: PollDraft) -> Poll:
        """Create a DRAFT poll.

        Args:
            draft: Poll fields

        Returns:
            Created poll

        Raises:
            NotFoundError: CATEGORY_NOT_FOUND, CONFIG_NOT_FOUND
            BusinessRuleViolationError: CATEGORY_NOT_CHILD, CATEGORY_NOT_ACTIVE,
                CATEGORY_NOT_ALLOWED, CONFIG_NOT_ACTIVE
        """
        with logfire.span(
            "poll_service.create",
            category_id=str(draft.category_id),
            poll_config_id=str(draft.poll_config_id),
        ):
            await self.category_gate.ensure_allowed(draft.category_id)
            await self._ensure_active_config(draft.poll_config_id)

            now = self.clock.now()
            poll = Poll(
                id=PollId(uuid4()),
                title=draft.title,
                description=draft.description,
                category_id=draft.category_id,
                poll_config_id=draft.poll_config_id,
                status=PollStatus.DRAFT,
                start_at=draft.start_at,
                end_at=draft.end_at,
                created_at=now,
                updated_at=now,
            )
            saved = await self.poll_repository.save(poll)
            logfire.info("Poll created", poll_id=str(saved.id))
            return saved

    async def update(self, poll_id: PollId, changes: PollChanges) -> Poll:
        """Update a DRAFT poll.

        Raises:
            NotFoundError: NOT_FOUND, or a category/config not-found code
            BusinessRuleViolationError: NOT_EDITABLE unless DRAFT, or a
                category/config precondition
        """
        with logfire.span(
            "poll_service.update",
            poll_id=str(poll_id),
            fields=sorted(changes.model_fields_set),
        ):
            existing = await self.get_poll(poll_id)
            if existing.status != PollStatus.DRAFT:
                logfire.warn(
                    "Poll not editable", poll_id=str(poll_id), status=existing.status.value
                )
                raise DomainError.from_code(ErrorCode.NOT_EDITABLE)

            update = {
                field: getattr(changes, field)
                for field in changes.model_fields_set
                if getattr(changes, field) is not None or field == "description"
            }
            if "category_id" in update:
                await self.category_gate.ensure_allowed(update["category_id"])
            if "poll_config_id" in update:
                await self._ensure_active_config(update["poll_config_id"])

            update["updated_at"] = self.clock.now()
            saved = await self.poll_repository.save(existing.model_copy(update=update))
            logfire.info("Poll updated", poll_id=str(poll_id))
            return saved

    async def publish(self, poll_id: PollId) -> Poll:
        """Publish a DRAFT poll, stamping ``start_at`` if unset.

        Category and config health are re-validated; they may have changed
        since the draft was created.

        Raises:
            NotFoundError: NOT_FOUND
            BusinessRuleViolationError: INVALID_STATUS unless DRAFT, or a
                category/config precondition
        """
        with logfire.span("poll_service.publish", poll_id=str(poll_id)):
            existing = await self.get_poll(poll_id)
            if existing.status != PollStatus.DRAFT:
                logfire.warn(
                    "Invalid publish transition",
                    poll_id=str(poll_id),
                    status=existing.status.value,
                )
                raise DomainError.from_code(ErrorCode.INVALID_STATUS)

            await self.category_gate.ensure_allowed(existing.category_id)
            await self._ensure_active_config(existing.poll_config_id)

            now = self.clock.now()
            saved = await self.poll_repository.save(
                existing.model_copy(
                    update={
                        "status": PollStatus.PUBLISHED,
                        "start_at": existing.start_at or now,
                        "updated_at": now,
                    }
                )
            )
            logfire.info("Poll published", poll_id=str(poll_id))
            return saved

    async def close(self, poll_id: PollId) -> Poll:
        """Close a PUBLISHED poll, stamping ``end_at`` if unset.

        Raises:
            NotFoundError: NOT_FOUND
            BusinessRuleViolationError: INVALID_STATUS unless PUBLISHED
        """
        with logfire.span("poll_service.close", poll_id=str(poll_id)):
            existing = await self.get_poll(poll_id)
            if existing.status != PollStatus.PUBLISHED:
                logfire.warn(
                    "Invalid close transition",
                    poll_id=str(poll_id),
                    status=existing.status.value,
                )
                raise DomainError.from_code(ErrorCode.INVALID_STATUS)

            now = self.clock.now()
            saved = await self.poll_repository.save(
                existing.model_copy(
                    update={
                        "status": PollStatus.CLOSED,
                        "end_at": existing.end_at or now,
                        "updated_at": now,
                    }
                )
            )
            logfire.info("Poll closed", poll_id=str(poll_id))
            return saved

    async def issue_invites(self, poll_id: PollId, count: int) -> list[PollInvite]:
        """Mint invite tokens for an admin poll.

        Args:
            poll_id: Poll ID
            count: Number of tokens

        Returns:
            Created invites

        Raises:
            NotFoundError: NOT_FOUND
            BusinessRuleViolationError: INVALID_STATUS if the poll is CLOSED
        """
        with logfire.span("poll_service.issue_invites", poll_id=str(poll_id), count=count):
            poll = await self.get_poll(poll_id)
            if poll.status == PollStatus.CLOSED:
                raise DomainError.from_code(ErrorCode.INVALID_STATUS)

            now = self.clock.now()
            invites = [
                PollInvite(
                    id=PollInviteId(uuid4()),
                    poll_id=poll_id,
                    token=InviteToken(secrets.token_urlsafe(24)),
                    created_at=now,
                )
                for _ in range(count)
            ]
            saved = await self.poll_invite_repository.save_many(invites)
            logfire.info("Poll invites issued", poll_id=str(poll_id), count=len(saved))
            return saved

    async def list_feed(self) -> list[Poll]:
        """Published polls open to everyone right now.

        Skips polls that have not started, whose category is not effectively
        ACTIVE, or whose config is non-public or invite-only.
        """
        with logfire.span("poll_service.list_feed"):
            now = self.clock.now()
            feed: list[Poll] = []
            for poll in await self.poll_repository.find_by_status(PollStatus.PUBLISHED):
                if poll.start_at is not None and poll.start_at > now:
                    continue
                effective = await self.inheritance_service.resolve_effective(
                    poll.category_id
                )
                if effective is None or not effective.is_active:
                    continue
                config = await self.poll_config_repository.find_by_id(poll.poll_config_id)
                if config is None:
                    continue
                visibility = config.permissions.visibility or PollVisibility.PUBLIC
                if visibility != PollVisibility.PUBLIC or config.invite_only:
                    continue
                feed.append(poll)

            logfire.info("Feed listed", count=len(feed))
            return feed

    async def _ensure_active_config(self, config_id: PollConfigId) -> None:
        config = await self.poll_config_repository.find_by_id(config_id)
        if config is None:
            raise DomainError.from_code(ErrorCode.CONFIG_NOT_FOUND)
        if config.status != PollConfigStatus.ACTIVE:
            raise DomainError.from_code(ErrorCode.CONFIG_NOT_ACTIVE)
