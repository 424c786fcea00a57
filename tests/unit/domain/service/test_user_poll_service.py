"""Unit tests for UserPollService."""

from datetime import timedelta
from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from pulse.domain.error import (
    BusinessRuleViolationError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from pulse.domain.service import (
    Clock,
    InviteService,
    InviteTargets,
    NewInviteGroup,
    UserPollDraft,
    UserPollService,
)
from pulse.domain.value import (
    InviteStatus,
    StartMode,
    UserId,
    UserPollId,
    UserPollStatus,
    UserPollType,
    YesNo,
)
from tests.conftest import make_poll_category
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _draft(category_id, **overrides) -> UserPollDraft:
    fields = {
        "category_id": category_id,
        "type": UserPollType.SINGLE_CHOICE,
        "title": "Where should we eat?",
        "options": ["Pizza", "Sushi", "Tacos"],
        "start_mode": StartMode.INSTANT,
    }
    fields.update(overrides)
    return UserPollDraft(**fields)


async def _live_poll(env, creator_id: UserId, **overrides):
    service = await env.get(UserPollService)
    category = await make_poll_category(env)
    return await service.create(creator_id, _draft(category.id, **overrides))


class TestCreateUserPoll:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_instant_start_is_live_now(self, unit_env):
        # Arrange
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        category = await make_poll_category(unit_env)
        creator_id = UserId(uuid4())

        # Act
        poll = await service.create(creator_id, _draft(category.id))

        # Assert
        assert poll.status == UserPollStatus.LIVE
        assert poll.start_at == clock.now()
        assert poll.creator_id == creator_id
        assert poll.is_invite_only is True
        assert [(o.label, o.display_order) for o in poll.options] == [
            ("Pizza", 0),
            ("Sushi", 1),
            ("Tacos", 2),
        ]

    @pytest.mark.asyncio
    async def test_scheduled_start(self, unit_env):
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        category = await make_poll_category(unit_env)
        start = clock.now() + timedelta(hours=3)

        poll = await service.create(
            UserId(uuid4()),
            _draft(category.id, start_mode=StartMode.SCHEDULED, start_at=start),
        )

        assert poll.status == UserPollStatus.SCHEDULED
        assert poll.start_at == start

    @pytest.mark.asyncio
    @pytest.mark.parametrize("offset", [None, timedelta(0), timedelta(minutes=-1)])
    async def test_scheduled_start_must_be_future(self, unit_env, offset):
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        category = await make_poll_category(unit_env)
        start = clock.now() + offset if offset is not None else None

        with pytest.raises(ValidationError) as exc_info:
            await service.create(
                UserId(uuid4()),
                _draft(category.id, start_mode=StartMode.SCHEDULED, start_at=start),
            )

        assert exc_info.value.code == ErrorCode.INVALID_START_AT

    @pytest.mark.asyncio
    async def test_end_must_follow_start(self, unit_env):
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        category = await make_poll_category(unit_env)

        with pytest.raises(ValidationError) as exc_info:
            await service.create(
                UserId(uuid4()), _draft(category.id, end_at=clock.now())
            )

        assert exc_info.value.code == ErrorCode.END_AT_BEFORE_START

    @pytest.mark.asyncio
    async def test_category_must_allow_participation(self, unit_env):
        service = await unit_env.get(UserPollService)
        category = await make_poll_category(unit_env, request_allowed=YesNo.NO)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.create(UserId(uuid4()), _draft(category.id))

        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_ALLOWED

    def test_draft_needs_options(self):
        with pytest.raises(PydanticValidationError):
            _draft(uuid4(), options=[])

    @pytest.mark.parametrize("field", ["start_at", "end_at"])
    def test_draft_rejects_naive_timestamps(self, field):
        with pytest.raises(PydanticValidationError):
            _draft(
                uuid4(),
                start_mode=StartMode.SCHEDULED,
                **{field: "2099-01-01T10:00:00"},
            )


class TestEndAndExtend:
    """Tests for end and extend."""

    @pytest.mark.asyncio
    async def test_end_closes_and_stamps(self, unit_env):
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        creator_id = UserId(uuid4())
        poll = await _live_poll(unit_env, creator_id)

        ended = await service.end(creator_id, poll.id)

        assert ended.status == UserPollStatus.CLOSED
        assert ended.end_at == clock.now()

    @pytest.mark.asyncio
    async def test_end_is_idempotent(self, unit_env):
        """Ending a closed poll should return it unchanged."""
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        creator_id = UserId(uuid4())
        poll = await _live_poll(unit_env, creator_id)
        first = await service.end(creator_id, poll.id)
        clock.advance(timedelta(hours=1))

        second = await service.end(creator_id, poll.id)

        assert second == first

    @pytest.mark.asyncio
    async def test_end_keeps_existing_end_at(self, unit_env):
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        creator_id = UserId(uuid4())
        end_at = clock.now() + timedelta(days=2)
        poll = await _live_poll(unit_env, creator_id, end_at=end_at)

        ended = await service.end(creator_id, poll.id)

        assert ended.end_at == end_at

    @pytest.mark.asyncio
    async def test_end_by_stranger(self, unit_env):
        service = await unit_env.get(UserPollService)
        poll = await _live_poll(unit_env, UserId(uuid4()))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.end(UserId(uuid4()), poll.id)

        assert exc_info.value.code == ErrorCode.NOT_FOUND_OR_FORBIDDEN

    @pytest.mark.asyncio
    async def test_end_missing_poll(self, unit_env):
        service = await unit_env.get(UserPollService)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.end(UserId(uuid4()), UserPollId(uuid4()))

        assert exc_info.value.code == ErrorCode.NOT_FOUND_OR_FORBIDDEN

    @pytest.mark.asyncio
    async def test_extend_moves_end(self, unit_env):
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        creator_id = UserId(uuid4())
        poll = await _live_poll(
            unit_env, creator_id, end_at=clock.now() + timedelta(hours=1)
        )
        new_end = clock.now() + timedelta(days=1)

        extended = await service.extend(creator_id, poll.id, new_end)

        assert extended.end_at == new_end
        assert extended.status == UserPollStatus.LIVE

    @pytest.mark.asyncio
    async def test_extend_into_past(self, unit_env):
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        creator_id = UserId(uuid4())
        poll = await _live_poll(unit_env, creator_id)

        with pytest.raises(ValidationError) as exc_info:
            await service.extend(creator_id, poll.id, clock.now())

        assert exc_info.value.code == ErrorCode.END_AT_IN_PAST

    @pytest.mark.asyncio
    async def test_extend_before_scheduled_start(self, unit_env):
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        creator_id = UserId(uuid4())
        poll = await _live_poll(
            unit_env,
            creator_id,
            start_mode=StartMode.SCHEDULED,
            start_at=clock.now() + timedelta(days=1),
        )

        with pytest.raises(ValidationError) as exc_info:
            await service.extend(creator_id, poll.id, clock.now() + timedelta(hours=1))

        assert exc_info.value.code == ErrorCode.END_AT_BEFORE_START

    @pytest.mark.asyncio
    async def test_extend_ended_poll(self, unit_env):
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        creator_id = UserId(uuid4())
        poll = await _live_poll(unit_env, creator_id)
        await service.end(creator_id, poll.id)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.extend(creator_id, poll.id, clock.now() + timedelta(days=1))

        assert exc_info.value.code == ErrorCode.POLL_ALREADY_CLOSED

    @pytest.mark.asyncio
    async def test_extend_lazily_expired_poll(self, unit_env):
        """A poll past its end_at reads CLOSED even though it was never ended."""
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        creator_id = UserId(uuid4())
        poll = await _live_poll(
            unit_env, creator_id, end_at=clock.now() + timedelta(hours=1)
        )
        clock.advance(timedelta(hours=2))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.extend(creator_id, poll.id, clock.now() + timedelta(days=1))

        assert exc_info.value.code == ErrorCode.POLL_ALREADY_CLOSED


class TestOwnerInvite:
    """Tests for create_owner_invite."""

    @pytest.mark.asyncio
    async def test_owner_invite_is_idempotent(self, unit_env):
        # Arrange
        service = await unit_env.get(UserPollService)
        creator_id = UserId(uuid4())
        poll = await _live_poll(unit_env, creator_id)

        # Act
        first = await service.create_owner_invite(creator_id, poll.id)
        second = await service.create_owner_invite(creator_id, poll.id)

        # Assert
        assert first.token == second.token
        assert first.mobile == f"user:{creator_id}"
        assert first.user_id == creator_id
        assert first.status == InviteStatus.PENDING

    @pytest.mark.asyncio
    async def test_new_invite_after_rejection(self, unit_env):
        service = await unit_env.get(UserPollService)
        invite_service = await unit_env.get(InviteService)
        creator_id = UserId(uuid4())
        poll = await _live_poll(unit_env, creator_id)
        first = await service.create_owner_invite(creator_id, poll.id)
        await invite_service.reject(first.token)

        second = await service.create_owner_invite(creator_id, poll.id)

        assert second.token != first.token

    @pytest.mark.asyncio
    async def test_scheduled_poll_is_not_live(self, unit_env):
        service = await unit_env.get(UserPollService)
        clock = await unit_env.get(Clock)
        creator_id = UserId(uuid4())
        poll = await _live_poll(
            unit_env,
            creator_id,
            start_mode=StartMode.SCHEDULED,
            start_at=clock.now() + timedelta(days=1),
        )

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.create_owner_invite(creator_id, poll.id)

        assert exc_info.value.code == ErrorCode.POLL_NOT_LIVE

    @pytest.mark.asyncio
    async def test_open_poll_needs_no_invite(self, unit_env):
        service = await unit_env.get(UserPollService)
        creator_id = UserId(uuid4())
        poll = await _live_poll(unit_env, creator_id, is_invite_only=False)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.create_owner_invite(creator_id, poll.id)

        assert exc_info.value.code == ErrorCode.POLL_NOT_INVITE_ONLY

    @pytest.mark.asyncio
    async def test_missing_poll(self, unit_env):
        service = await unit_env.get(UserPollService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.create_owner_invite(UserId(uuid4()), UserPollId(uuid4()))

        assert exc_info.value.code == ErrorCode.POLL_NOT_FOUND


class TestCreateInvites:
    """Tests for create_invites and invite groups."""

    @pytest.mark.asyncio
    async def test_mobiles_are_merged_on_normalised_form(self, unit_env):
        # Arrange
        service = await unit_env.get(UserPollService)
        creator_id = UserId(uuid4())
        poll = await _live_poll(unit_env, creator_id)
        group = await service.create_group(
            creator_id, "Family", ["+1 555 0100", "+15550101"]
        )

        # Act
        invites = await service.create_invites(
            creator_id,
            poll.id,
            InviteTargets(
                mobiles=["+1555 0101", "+15550102", "  "],
                existing_group_ids=[group.id],
            ),
        )

        # Assert
        assert [invite.mobile for invite in invites] == [
            "+15550100",
            "+15550101",
            "+15550102",
        ]
        assert len({str(invite.token) for invite in invites}) == 3

    @pytest.mark.asyncio
    async def test_existing_invites_keep_their_token(self, unit_env):
        service = await unit_env.get(UserPollService)
        creator_id = UserId(uuid4())
        poll = await _live_poll(unit_env, creator_id)
        (first,) = await service.create_invites(
            creator_id, poll.id, InviteTargets(mobiles=["+15550100"])
        )

        again = await service.create_invites(
            creator_id, poll.id, InviteTargets(mobiles=["+1 555 0100", "+15550199"])
        )

        assert again[0].id == first.id
        assert again[0].token == first.token
        assert again[1].mobile == "+15550199"

    @pytest.mark.asyncio
    async def test_rejected_invite_is_replaced(self, unit_env):
        service = await unit_env.get(UserPollService)
        invite_service = await unit_env.get(InviteService)
        creator_id = UserId(uuid4())
        poll = await _live_poll(unit_env, creator_id)
        (first,) = await service.create_invites(
            creator_id, poll.id, InviteTargets(mobiles=["+15550100"])
        )
        await invite_service.reject(first.token)

        (second,) = await service.create_invites(
            creator_id, poll.id, InviteTargets(mobiles=["+15550100"])
        )

        assert second.id != first.id
        assert second.status == InviteStatus.PENDING

    @pytest.mark.asyncio
    async def test_new_group_is_saved_and_used(self, unit_env):
        service = await unit_env.get(UserPollService)
        creator_id = UserId(uuid4())
        poll = await _live_poll(unit_env, creator_id)

        invites = await service.create_invites(
            creator_id,
            poll.id,
            InviteTargets(
                new_group=NewInviteGroup(name="Team", mobiles=["+1 555 0100"])
            ),
        )
        groups = await service.list_groups(creator_id)

        assert [invite.mobile for invite in invites] == ["+15550100"]
        assert [(g.name, g.members) for g in groups] == [("Team", ["+15550100"])]

    @pytest.mark.asyncio
    async def test_foreign_groups_are_ignored(self, unit_env):
        service = await unit_env.get(UserPollService)
        creator_id = UserId(uuid4())
        poll = await _live_poll(unit_env, creator_id)
        foreign = await service.create_group(UserId(uuid4()), "Theirs", ["+15550100"])

        invites = await service.create_invites(
            creator_id, poll.id, InviteTargets(existing_group_ids=[foreign.id])
        )

        assert invites == []

    @pytest.mark.asyncio
    async def test_only_owner_can_invite(self, unit_env):
        service = await unit_env.get(UserPollService)
        poll = await _live_poll(unit_env, UserId(uuid4()))

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.create_invites(
                UserId(uuid4()), poll.id, InviteTargets(mobiles=["+15550100"])
            )

        assert exc_info.value.code == ErrorCode.NOT_FOUND_OR_FORBIDDEN

    @pytest.mark.asyncio
    async def test_update_group_replaces_members(self, unit_env):
        service = await unit_env.get(UserPollService)
        owner_id = UserId(uuid4())
        group = await service.create_group(owner_id, "Old", ["+15550100"])

        updated = await service.update_group(
            owner_id, group.id, "New", ["+1 555 0101", "+15550101"]
        )

        assert updated.name == "New"
        assert updated.members == ["+15550101"]

    @pytest.mark.asyncio
    async def test_update_foreign_group(self, unit_env):
        service = await unit_env.get(UserPollService)
        group = await service.create_group(UserId(uuid4()), "Theirs", [])

        with pytest.raises(NotFoundError) as exc_info:
            await service.update_group(UserId(uuid4()), group.id, "Mine", [])

        assert exc_info.value.code == ErrorCode.GROUP_NOT_FOUND
