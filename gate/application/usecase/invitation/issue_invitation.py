"""Issue invitation use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from gate.application.usecase.base import BaseUseCase
from gate.domain.service import InvitationService
from gate.domain.value import Email


class IssueInvitationRequest(BaseModel):
    """Issue invitation request."""

    email: str
    issued_by: str  # Subject of the admitted token


class IssueInvitationResponse(BaseModel):
    """Issue invitation response."""

    code: str
    email: str
    expires_at: datetime


class IssueInvitationUseCase(BaseUseCase):
    """Use case for issuing an invitation code to an email."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize issue invitation use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: IssueInvitationRequest) -> IssueInvitationResponse:
        """Issue a code bound to the requested email.

        Raises:
            ValueError: If the email is blank
        """
        with logfire.span("issue_invitation.execute", issued_by=request.issued_by):
            email = Email(request.email)
            invitation = await self.invitation_service.issue_code(email.root)
            return IssueInvitationResponse(
                code=invitation.code.root,
                email=invitation.email,
                expires_at=invitation.expires_at,
            )
