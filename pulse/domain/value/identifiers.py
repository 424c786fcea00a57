"""Strongly typed identifiers for Pulse domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
CategoryId = NewType("CategoryId", UUID)
PollConfigId = NewType("PollConfigId", UUID)
PollId = NewType("PollId", UUID)
PollInviteId = NewType("PollInviteId", UUID)
UserPollId = NewType("UserPollId", UUID)
UserPollOptionId = NewType("UserPollOptionId", UUID)
UserPollInviteId = NewType("UserPollInviteId", UUID)
InviteGroupId = NewType("InviteGroupId", UUID)
VoteId = NewType("VoteId", UUID)
ProfileId = NewType("ProfileId", UUID)
ProfileClaimId = NewType("ProfileClaimId", UUID)
ProfileRequestId = NewType("ProfileRequestId", UUID)
PsiVoteId = NewType("PsiVoteId", UUID)
