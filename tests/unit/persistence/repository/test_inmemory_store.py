"""Unit tests for the in-memory store used by the test container."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from pulse.domain.model import User, UserPollInvite
from pulse.domain.value import (
    InviteStatus,
    InviteToken,
    UserId,
    UserPollId,
    UserPollInviteId,
    UserRole,
)
from pulse.persistence.repository.inmemory import (
    InMemoryTransactionManager,
    InMemoryUserPollInviteRepository,
    InMemoryUserRepository,
)


def _user() -> User:
    return User(id=UserId(uuid4()), role=UserRole.USER, is_verified=False)


def _invite(poll_id: UserPollId, mobile: str, **fields) -> UserPollInvite:
    return UserPollInvite(
        id=UserPollInviteId(uuid4()),
        poll_id=poll_id,
        mobile=mobile,
        token=InviteToken(uuid4().hex),
        **fields,
    )


class TestInMemoryTransactionManager:
    """Tests for rollback and savepoint behaviour."""

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self):
        # Arrange
        users = InMemoryUserRepository()
        manager = InMemoryTransactionManager([users])
        kept = await users.save(_user())
        discarded = _user()

        # Act
        with pytest.raises(RuntimeError):
            async with manager.transaction():
                await users.save(discarded)
                raise RuntimeError("boom")

        # Assert
        assert await users.find_by_id(kept.id) == kept
        assert await users.find_by_id(discarded.id) is None

    @pytest.mark.asyncio
    async def test_nested_failure_keeps_outer_work(self):
        users = InMemoryUserRepository()
        manager = InMemoryTransactionManager([users])
        outer, inner = _user(), _user()

        async with manager.transaction():
            await users.save(outer)
            with pytest.raises(RuntimeError):
                async with manager.transaction():
                    await users.save(inner)
                    raise RuntimeError("boom")

        assert await users.find_by_id(outer.id) == outer
        assert await users.find_by_id(inner.id) is None


class TestInMemoryInviteUniqueness:
    """One live invite per (poll, mobile)."""

    @pytest.mark.asyncio
    async def test_duplicate_live_invite_is_rejected(self):
        repo = InMemoryUserPollInviteRepository()
        poll_id = UserPollId(uuid4())
        await repo.save(_invite(poll_id, "+15550100"))

        with pytest.raises(IntegrityError):
            await repo.save(_invite(poll_id, "+15550100"))

    @pytest.mark.asyncio
    async def test_rejected_invite_frees_the_mobile(self):
        repo = InMemoryUserPollInviteRepository()
        poll_id = UserPollId(uuid4())
        await repo.save(_invite(poll_id, "+15550100", status=InviteStatus.REJECTED))

        inserted = await repo.save_many_skip_duplicates(
            [_invite(poll_id, "+15550100"), _invite(poll_id, "+15550100")]
        )

        assert inserted == 1
        live = await repo.find_live_by_mobiles(poll_id, ["+15550100"])
        assert [invite.status for invite in live] == [InviteStatus.PENDING]
