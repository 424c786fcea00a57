"""Unit tests for UserPoll effective status."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from pulse.domain.model import UserPoll
from pulse.domain.value import (
    CategoryId,
    UserId,
    UserPollId,
    UserPollStatus,
    UserPollType,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _poll(status: UserPollStatus, start_at=None, end_at=None) -> UserPoll:
    return UserPoll(
        id=UserPollId(uuid4()),
        creator_id=UserId(uuid4()),
        category_id=CategoryId(uuid4()),
        title="Lunch?",
        type=UserPollType.YES_NO,
        status=status,
        start_at=start_at,
        end_at=end_at,
    )


class TestEffectiveStatus:
    """Tests for UserPoll.effective_status."""

    def test_closed_stays_closed(self):
        poll = _poll(UserPollStatus.CLOSED, end_at=NOW + timedelta(days=1))

        assert poll.effective_status(NOW) == UserPollStatus.CLOSED

    def test_live_past_end_reads_closed(self):
        poll = _poll(UserPollStatus.LIVE, start_at=NOW - timedelta(hours=2), end_at=NOW)

        assert poll.effective_status(NOW) == UserPollStatus.CLOSED

    def test_live_before_end_reads_live(self):
        poll = _poll(UserPollStatus.LIVE, start_at=NOW, end_at=NOW + timedelta(hours=1))

        assert poll.effective_status(NOW) == UserPollStatus.LIVE

    def test_scheduled_reads_live_once_started(self):
        poll = _poll(UserPollStatus.SCHEDULED, start_at=NOW - timedelta(minutes=1))

        assert poll.effective_status(NOW) == UserPollStatus.LIVE

    def test_scheduled_before_start_stays_scheduled(self):
        poll = _poll(UserPollStatus.SCHEDULED, start_at=NOW + timedelta(minutes=1))

        assert poll.effective_status(NOW) == UserPollStatus.SCHEDULED

    def test_end_wins_over_start(self):
        """A scheduled poll whose window has passed entirely reads CLOSED."""
        poll = _poll(
            UserPollStatus.SCHEDULED,
            start_at=NOW - timedelta(hours=2),
            end_at=NOW - timedelta(hours=1),
        )

        assert poll.effective_status(NOW) == UserPollStatus.CLOSED
