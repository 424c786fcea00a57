"""Unit tests for VoteService."""

import asyncio
from datetime import timedelta
from uuid import uuid4

import pytest

from pulse.domain.error import (
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from pulse.domain.model import Vote
from pulse.domain.repository import (
    PollConfigRepository,
    PollInviteRepository,
    PollRepository,
    TransactionManager,
    VoteRepository,
)
from pulse.domain.service import Clock, PollService, VoteAuditLog, VoteService
from pulse.domain.value import (
    ContentRules,
    InviteToken,
    PollId,
    PollPermissions,
    PollRules,
    PollStatus,
    PollUiTemplate,
    UserId,
)
from pulse.persistence.repository.inmemory import InMemoryVoteRepository
from tests.conftest import make_poll
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

RESPONSE = {"selectedOptions": ["a"]}


class RacingVoteRepository(InMemoryVoteRepository):
    """Never sees earlier votes in its lookups, as if a rival cast is in flight."""

    async def find_by_poll_and_user(self, poll_id, user_id):
        return None

    async def find_by_poll_and_invite(self, poll_id, invite_id):
        return None


class FailingAuditLog(VoteAuditLog):
    def record(self, vote: Vote) -> None:
        raise RuntimeError("audit sink down")


async def _service_with(env, vote_repository, audit_log=None) -> VoteService:
    return VoteService(
        vote_repository=vote_repository,
        poll_repository=await env.get(PollRepository),
        poll_config_repository=await env.get(PollConfigRepository),
        poll_invite_repository=await env.get(PollInviteRepository),
        transaction_manager=await env.get(TransactionManager),
        audit_log=audit_log or VoteAuditLog(),
        clock=await env.get(Clock),
    )


class TestCastVote:
    """Tests for cast_vote."""

    @pytest.mark.asyncio
    async def test_authenticated_vote_on_public_poll(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        poll = await make_poll(unit_env)
        user_id = UserId(uuid4())

        # Act
        vote = await vote_service.cast_vote(poll.id, RESPONSE, user_id=user_id)

        # Assert
        assert vote.poll_id == poll.id
        assert vote.poll_config_id == poll.poll_config_id
        assert vote.user_id == user_id
        assert vote.invite_id is None
        assert vote.response == RESPONSE

    @pytest.mark.asyncio
    async def test_vote_binds_user_and_invite(self, unit_env):
        """A vote cast with both facets should carry both."""
        vote_service = await unit_env.get(VoteService)
        poll_service = await unit_env.get(PollService)
        poll = await make_poll(unit_env)
        (invite,) = await poll_service.issue_invites(poll.id, 1)
        user_id = UserId(uuid4())

        vote = await vote_service.cast_vote(
            poll.id, RESPONSE, user_id=user_id, invite_token=invite.token
        )

        assert vote.user_id == user_id
        assert vote.invite_id == invite.id

    @pytest.mark.asyncio
    async def test_unknown_poll(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.cast_vote(PollId(uuid4()), RESPONSE, user_id=uuid4())

        assert exc_info.value.code == ErrorCode.NOT_FOUND

    @pytest.mark.asyncio
    async def test_draft_poll_is_not_published(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        poll = await make_poll(unit_env, status=PollStatus.DRAFT)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await vote_service.cast_vote(poll.id, RESPONSE, user_id=UserId(uuid4()))

        assert exc_info.value.code == ErrorCode.POLL_NOT_PUBLISHED

    @pytest.mark.asyncio
    async def test_future_start_is_not_started(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        clock = await unit_env.get(Clock)
        poll = await make_poll(unit_env, start_at=clock.now() + timedelta(minutes=5))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await vote_service.cast_vote(poll.id, RESPONSE, user_id=UserId(uuid4()))

        assert exc_info.value.code == ErrorCode.POLL_NOT_STARTED

    @pytest.mark.asyncio
    async def test_end_is_exclusive(self, unit_env):
        """A poll whose end_at equals now has ended."""
        vote_service = await unit_env.get(VoteService)
        clock = await unit_env.get(Clock)
        poll = await make_poll(unit_env, end_at=clock.now())

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await vote_service.cast_vote(poll.id, RESPONSE, user_id=UserId(uuid4()))

        assert exc_info.value.code == ErrorCode.POLL_ENDED

    @pytest.mark.asyncio
    async def test_past_end_records_nothing(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        vote_repository = await unit_env.get(VoteRepository)
        clock = await unit_env.get(Clock)
        poll = await make_poll(unit_env, end_at=clock.now() - timedelta(hours=1))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await vote_service.cast_vote(poll.id, RESPONSE, user_id=UserId(uuid4()))

        assert exc_info.value.code == ErrorCode.POLL_ENDED
        assert await vote_repository.count_by_poll(poll.id) == 0

    @pytest.mark.asyncio
    async def test_invite_only_requires_invite(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        poll = await make_poll(unit_env, permissions=PollPermissions(invite_only=True))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await vote_service.cast_vote(poll.id, RESPONSE, user_id=UserId(uuid4()))

        assert exc_info.value.code == ErrorCode.INVITE_REQUIRED

    @pytest.mark.asyncio
    async def test_invite_only_without_any_identity(self, unit_env):
        """Invite-only polls ask for an invite even from anonymous callers."""
        vote_service = await unit_env.get(VoteService)
        vote_repository = await unit_env.get(VoteRepository)
        poll = await make_poll(unit_env, permissions=PollPermissions(invite_only=True))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await vote_service.cast_vote(poll.id, RESPONSE)

        assert exc_info.value.code == ErrorCode.INVITE_REQUIRED
        assert await vote_repository.count_by_poll(poll.id) == 0

    @pytest.mark.asyncio
    async def test_invite_only_accepts_anonymous_invite(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        poll_service = await unit_env.get(PollService)
        poll = await make_poll(unit_env, permissions=PollPermissions(invite_only=True))
        (invite,) = await poll_service.issue_invites(poll.id, 1)

        vote = await vote_service.cast_vote(
            poll.id, RESPONSE, invite_token=invite.token
        )

        assert vote.user_id is None
        assert vote.invite_id == invite.id

    @pytest.mark.asyncio
    async def test_public_poll_needs_some_identity(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        poll = await make_poll(unit_env)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await vote_service.cast_vote(poll.id, RESPONSE)

        assert exc_info.value.code == ErrorCode.AUTH_OR_INVITE_REQUIRED

    @pytest.mark.asyncio
    async def test_invite_for_other_poll_is_invalid(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        poll_service = await unit_env.get(PollService)
        poll = await make_poll(unit_env)
        other = await make_poll(unit_env)
        (invite,) = await poll_service.issue_invites(other.id, 1)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await vote_service.cast_vote(poll.id, RESPONSE, invite_token=invite.token)

        assert exc_info.value.code == ErrorCode.INVALID_INVITE

    @pytest.mark.asyncio
    async def test_unknown_invite_is_invalid(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        poll = await make_poll(unit_env)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await vote_service.cast_vote(
                poll.id, RESPONSE, invite_token=InviteToken("nope")
            )

        assert exc_info.value.code == ErrorCode.INVALID_INVITE


class TestOneVotePerIdentity:
    """Tests for duplicate vote handling."""

    @pytest.mark.asyncio
    async def test_second_vote_by_user(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        poll = await make_poll(unit_env)
        user_id = UserId(uuid4())
        await vote_service.cast_vote(poll.id, RESPONSE, user_id=user_id)

        with pytest.raises(ConflictError) as exc_info:
            await vote_service.cast_vote(poll.id, RESPONSE, user_id=user_id)

        assert exc_info.value.code == ErrorCode.ALREADY_VOTED

    @pytest.mark.asyncio
    async def test_reused_invite(self, unit_env):
        """An invite spent anonymously cannot be reused by a signed-in user."""
        vote_service = await unit_env.get(VoteService)
        poll_service = await unit_env.get(PollService)
        poll = await make_poll(unit_env)
        (invite,) = await poll_service.issue_invites(poll.id, 1)
        await vote_service.cast_vote(poll.id, RESPONSE, invite_token=invite.token)

        with pytest.raises(ConflictError) as exc_info:
            await vote_service.cast_vote(
                poll.id, RESPONSE, user_id=UserId(uuid4()), invite_token=invite.token
            )

        assert exc_info.value.code == ErrorCode.ALREADY_VOTED

    @pytest.mark.asyncio
    async def test_store_conflict_maps_to_already_voted(self, unit_env):
        """A uniqueness violation at insert time surfaces as ALREADY_VOTED."""
        # Arrange
        repository = RacingVoteRepository()
        vote_service = await _service_with(unit_env, repository)
        poll = await make_poll(unit_env)
        user_id = UserId(uuid4())
        await vote_service.cast_vote(poll.id, RESPONSE, user_id=user_id)

        # Act / Assert
        with pytest.raises(ConflictError) as exc_info:
            await vote_service.cast_vote(poll.id, RESPONSE, user_id=user_id)

        assert exc_info.value.code == ErrorCode.ALREADY_VOTED
        assert await repository.count_by_poll(poll.id) == 1

    @pytest.mark.asyncio
    async def test_concurrent_votes_record_one(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        poll = await make_poll(unit_env)
        user_id = UserId(uuid4())

        results = await asyncio.gather(
            vote_service.cast_vote(poll.id, RESPONSE, user_id=user_id),
            vote_service.cast_vote(poll.id, RESPONSE, user_id=user_id),
            return_exceptions=True,
        )

        votes = [r for r in results if isinstance(r, Vote)]
        errors = [r for r in results if isinstance(r, DomainError)]
        assert len(votes) == 1
        assert [e.code for e in errors] == [ErrorCode.ALREADY_VOTED]


class TestResponseShape:
    """Tests for response validation against the poll config."""

    @pytest.mark.asyncio
    async def test_response_must_be_object(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        poll = await make_poll(unit_env)

        with pytest.raises(ValidationError) as exc_info:
            await vote_service.cast_vote(poll.id, ["a"], user_id=UserId(uuid4()))

        assert exc_info.value.code == ErrorCode.INVALID_RESPONSE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("selected", [["a"], ["a", "b", "c", "d"]])
    async def test_selection_outside_bounds(self, unit_env, selected):
        vote_service = await unit_env.get(VoteService)
        poll = await make_poll(
            unit_env,
            rules=PollRules(content_rules=ContentRules(min_options=2, max_options=3)),
        )

        with pytest.raises(ValidationError):
            await vote_service.cast_vote(
                poll.id, {"selectedOptions": selected}, user_id=UserId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_yes_no_choice(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        poll = await make_poll(unit_env, ui_template=PollUiTemplate.YES_NO)

        with pytest.raises(ValidationError):
            await vote_service.cast_vote(
                poll.id, {"choice": "MAYBE"}, user_id=UserId(uuid4())
            )
        vote = await vote_service.cast_vote(
            poll.id, {"choice": "YES"}, user_id=UserId(uuid4())
        )

        assert vote.response == {"choice": "YES"}

    @pytest.mark.asyncio
    async def test_rating_value_must_be_numeric(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        poll = await make_poll(unit_env, ui_template=PollUiTemplate.RATING)

        with pytest.raises(ValidationError):
            await vote_service.cast_vote(
                poll.id, {"value": "high"}, user_id=UserId(uuid4())
            )


class TestAuditLog:
    """Tests for the best-effort audit trail."""

    @pytest.mark.asyncio
    async def test_audit_failure_keeps_vote(self, unit_env):
        repository = InMemoryVoteRepository()
        vote_service = await _service_with(unit_env, repository, FailingAuditLog())
        poll = await make_poll(unit_env)

        vote = await vote_service.cast_vote(poll.id, RESPONSE, user_id=UserId(uuid4()))

        assert await repository.find_by_poll_and_user(poll.id, vote.user_id) == vote
