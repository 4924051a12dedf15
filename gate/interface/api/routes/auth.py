"""Authentication routes: token issuance and login."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from gate.application.usecase.auth import (
    IssueTokenRequest,
    IssueTokenResponse,
    IssueTokenUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
)
from gate.domain.error import CredentialMismatchError
from gate.domain.service import AccessGate
from gate.domain.service.access_gate import parse_bearer
from gate.interface.api.admission import admit_request
from gate.interface.error import bad_request, internal_error, invalid_credentials
from gate.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


class TokenAPIRequest(BaseModel):
    """API request for a token."""

    email: str | None = None


class LoginAPIRequest(BaseModel):
    """API request for login."""

    email: str
    password: str


@router.post("/token", response_model=IssueTokenResponse)
async def issue_token(
    body: TokenAPIRequest,
    issue_token_use_case: FromDishka[IssueTokenUseCase],
) -> IssueTokenResponse:
    """Issue a signed token for an email.

    Args:
        body: Request with the subject email
        issue_token_use_case: Issue token use case from DI

    Returns:
        Token and its expiry

    Raises:
        HTTPException: 400 if the email is missing or blank
    """
    if body.email is None or not body.email.strip():
        raise bad_request("Email is required")

    try:
        return await issue_token_use_case.execute(IssueTokenRequest(email=body.email))
    except ValueError:
        raise bad_request("Email is required")
    except Exception:
        logger.exception("Token issuance failed")
        raise internal_error()


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginAPIRequest,
    request: Request,
    access_gate: FromDishka[AccessGate],
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Log in with email and password.

    Rate limited per client address, then requires a bearer token. The
    presented token is stored with the new session.

    Raises:
        HTTPException: 429 when throttled, 401 when unauthenticated or the
            credentials do not match
    """
    admit_request(access_gate, request, rate_limited_route=True)
    token = parse_bearer(request.headers.get("Authorization"))

    try:
        return await login_use_case.execute(
            LoginRequest(email=body.email, password=body.password, token=token)
        )
    except CredentialMismatchError:
        raise invalid_credentials()
    except Exception:
        logger.exception("Login failed")
        raise internal_error()
