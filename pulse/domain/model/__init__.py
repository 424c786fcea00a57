"""Domain model entities for Pulse."""

from pulse.domain.model.category import Category
from pulse.domain.model.invite import InviteGroup, UserPollInvite
from pulse.domain.model.poll import Poll, PollInvite
from pulse.domain.model.poll_config import PollConfig
from pulse.domain.model.profile import Profile, ProfileClaim, ProfileRequest
from pulse.domain.model.psi_vote import PsiVote
from pulse.domain.model.user import User
from pulse.domain.model.user_poll import UserPoll, UserPollOption
from pulse.domain.model.vote import Vote

__all__ = [
    "Category",
    "InviteGroup",
    "Poll",
    "PollConfig",
    "PollInvite",
    "Profile",
    "ProfileClaim",
    "ProfileRequest",
    "PsiVote",
    "User",
    "UserPoll",
    "UserPollInvite",
    "UserPollOption",
    "Vote",
]
