"""Issue poll invites use case."""

from pydantic import BaseModel, Field

from pulse.config import Settings
from pulse.domain.service import PollService
from pulse.domain.value import PollId

from ..base import BaseUseCase, parse_id

MAX_INVITES_PER_REQUEST = 500


class IssueInvitesRequest(BaseModel):
    """Issue invites request."""

    poll_id: str  # UUID string
    count: int = Field(ge=1, le=MAX_INVITES_PER_REQUEST)


class PollInviteItem(BaseModel):
    """Minted invite token with its share link."""

    invite_id: str
    token: str
    share_url: str


class IssueInvitesResponse(BaseModel):
    """Issue invites response."""

    poll_id: str
    invites: list[PollInviteItem]


class IssueInvitesUseCase(BaseUseCase):
    """Use case for minting invite tokens of an admin poll."""

    def __init__(self, poll_service: PollService, settings: Settings) -> None:
        """Initialize issue invites use case.

        Args:
            poll_service: Poll domain service
            settings: Application settings (frontend URL for share links)
        """
        self.poll_service = poll_service
        self.settings = settings

    async def execute(self, request: IssueInvitesRequest) -> IssueInvitesResponse:
        """Mint ``count`` invite tokens.

        Raises:
            NotFoundError: NOT_FOUND
            BusinessRuleViolationError: INVALID_STATUS if the poll is closed
        """
        poll_id = parse_id(request.poll_id, PollId)
        invites = await self.poll_service.issue_invites(poll_id, request.count)
        frontend_url = self.settings.api.frontend_url
        return IssueInvitesResponse(
            poll_id=str(poll_id),
            invites=[
                PollInviteItem(
                    invite_id=str(invite.id),
                    token=str(invite.token),
                    share_url=f"{frontend_url}/polls/{poll_id}?invite={invite.token}",
                )
                for invite in invites
            ],
        )
