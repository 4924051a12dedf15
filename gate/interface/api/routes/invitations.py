"""Invitation routes: issuing codes and registering with them."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel

from gate.application.usecase.invitation import (
    IssueInvitationRequest,
    IssueInvitationResponse,
    IssueInvitationUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from gate.domain.error import AccountExistsError, InvitationInvalidError
from gate.domain.service import AccessGate
from gate.interface.api.admission import admit_request
from gate.interface.error import bad_request, internal_error, invalid_invitation
from gate.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["invitations"], route_class=DishkaRoute)


class InviteAPIRequest(BaseModel):
    """API request for an invitation code."""

    email: str


class RegisterAPIRequest(BaseModel):
    """API request for registration."""

    email: str
    password: str
    code: str


@router.post(
    "/invite",
    response_model=IssueInvitationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def issue_invitation(
    body: InviteAPIRequest,
    request: Request,
    access_gate: FromDishka[AccessGate],
    issue_invitation_use_case: FromDishka[IssueInvitationUseCase],
) -> IssueInvitationResponse:
    """Issue an invitation code bound to an email.

    Requires a bearer token.
    """
    admission = admit_request(access_gate, request)

    try:
        return await issue_invitation_use_case.execute(
            IssueInvitationRequest(email=body.email, issued_by=admission.subject)
        )
    except ValueError:
        raise bad_request("Email is required")
    except Exception:
        logger.exception("Invitation issuance failed")
        raise internal_error()


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    body: RegisterAPIRequest,
    request: Request,
    access_gate: FromDishka[AccessGate],
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Register an account with an invitation code.

    Requires a bearer token. The password is never echoed back.
    """
    admit_request(access_gate, request)

    try:
        return await register_use_case.execute(
            RegisterRequest(email=body.email, password=body.password, code=body.code)
        )
    except InvitationInvalidError as e:
        logger.info(f"Invitation rejected: reason={e.reason.value}")
        raise invalid_invitation()
    except AccountExistsError:
        raise bad_request("Account already exists")
    except ValueError:
        raise bad_request("Invalid email, password or code")
    except Exception:
        logger.exception("Registration failed")
        raise internal_error()
