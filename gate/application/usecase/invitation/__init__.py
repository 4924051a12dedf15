"""Invitation use cases."""

from gate.application.usecase.invitation.issue_invitation import (
    IssueInvitationRequest,
    IssueInvitationResponse,
    IssueInvitationUseCase,
)
from gate.application.usecase.invitation.register import (
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)

__all__ = [
    "IssueInvitationRequest",
    "IssueInvitationResponse",
    "IssueInvitationUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
]
