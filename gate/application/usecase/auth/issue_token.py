"""Issue token use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from gate.application.usecase.base import BaseUseCase
from gate.domain.service import TokenService
from gate.domain.value import Email


class IssueTokenRequest(BaseModel):
    """Issue token request."""

    email: str


class IssueTokenResponse(BaseModel):
    """Issue token response."""

    token: str
    expire_at: datetime


class IssueTokenUseCase(BaseUseCase):
    """Use case for issuing an identity token to a caller."""

    def __init__(self, token_service: TokenService) -> None:
        """Initialize issue token use case.

        Args:
            token_service: Token domain service
        """
        self.token_service = token_service

    async def execute(self, request: IssueTokenRequest) -> IssueTokenResponse:
        """Issue a token for the requested email.

        Args:
            request: Request with the subject email

        Returns:
            Signed token and its expiry

        Raises:
            ValueError: If the email is blank
        """
        with logfire.span("issue_token.execute"):
            email = Email(request.email)
            issued = self.token_service.issue(email.root)
            return IssueTokenResponse(token=issued.token, expire_at=issued.expires_at)
