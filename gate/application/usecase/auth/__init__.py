"""Auth use cases."""

from gate.application.usecase.auth.issue_token import (
    IssueTokenRequest,
    IssueTokenResponse,
    IssueTokenUseCase,
)
from gate.application.usecase.auth.login import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
)

__all__ = [
    "IssueTokenRequest",
    "IssueTokenResponse",
    "IssueTokenUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
]
