"""Unit tests for RegisterUseCase."""

import pytest

from gate.application.usecase.invitation import RegisterRequest, RegisterUseCase
from gate.domain.error import AccountExistsError, InvitationInvalidError
from gate.domain.repository import InvitationRepository, UserRepository
from gate.domain.service import InvitationService, PasswordHasher
from gate.domain.value import InvitationRejection
from gate.util.clock import Clock
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_creates_user_and_consumes_code(self, unit_env):
        invitation_service = await unit_env.get(InvitationService)
        use_case = await unit_env.get(RegisterUseCase)
        user_repo = await unit_env.get(UserRepository)
        invitation_repo = await unit_env.get(InvitationRepository)
        hasher = await unit_env.get(PasswordHasher)
        invitation = await invitation_service.issue_code("new@x.com")

        response = await use_case.execute(
            RegisterRequest(
                email="new@x.com", password="s3cret", code=invitation.code.root
            )
        )

        assert response.email == "new@x.com"
        assert "s3cret" not in response.model_dump_json()
        user = await user_repo.find_by_email("new@x.com")
        assert user.password_hash != "s3cret"
        assert await hasher.verify(user.password_hash, "s3cret") is True
        assert (await invitation_repo.find_by_code(invitation.code)).used is True

    @pytest.mark.asyncio
    async def test_invalid_code_creates_no_user(self, unit_env):
        use_case = await unit_env.get(RegisterUseCase)
        user_repo = await unit_env.get(UserRepository)

        with pytest.raises(InvitationInvalidError) as exc_info:
            await use_case.execute(
                RegisterRequest(email="new@x.com", password="s3cret", code="bogus")
            )

        assert exc_info.value.reason == InvitationRejection.NOT_FOUND
        assert await user_repo.find_by_email("new@x.com") is None

    @pytest.mark.asyncio
    async def test_expired_code_rejected(self, unit_env):
        invitation_service = await unit_env.get(InvitationService)
        use_case = await unit_env.get(RegisterUseCase)
        clock = await unit_env.get(Clock)
        invitation = await invitation_service.issue_code("new@x.com")

        clock.advance(minutes=3)
        with pytest.raises(InvitationInvalidError) as exc_info:
            await use_case.execute(
                RegisterRequest(
                    email="new@x.com", password="s3cret", code=invitation.code.root
                )
            )

        assert exc_info.value.reason == InvitationRejection.EXPIRED

    @pytest.mark.asyncio
    async def test_existing_account_rejected_with_valid_code(self, unit_env):
        invitation_service = await unit_env.get(InvitationService)
        use_case = await unit_env.get(RegisterUseCase)
        user_repo = await unit_env.get(UserRepository)
        hasher = await unit_env.get(PasswordHasher)
        first = await invitation_service.issue_code("new@x.com")
        await use_case.execute(
            RegisterRequest(email="new@x.com", password="s3cret", code=first.code.root)
        )
        second = await invitation_service.issue_code("new@x.com")

        with pytest.raises(AccountExistsError):
            await use_case.execute(
                RegisterRequest(
                    email="new@x.com", password="other", code=second.code.root
                )
            )

        user = await user_repo.find_by_email("new@x.com")
        assert await hasher.verify(user.password_hash, "s3cret") is True

    @pytest.mark.asyncio
    async def test_reused_code_rejected_as_already_used(self, unit_env):
        invitation_service = await unit_env.get(InvitationService)
        use_case = await unit_env.get(RegisterUseCase)
        invitation = await invitation_service.issue_code("new@x.com")
        request = RegisterRequest(
            email="new@x.com", password="s3cret", code=invitation.code.root
        )
        await use_case.execute(request)

        with pytest.raises(InvitationInvalidError) as exc_info:
            await use_case.execute(request)

        assert exc_info.value.reason == InvitationRejection.ALREADY_USED

    @pytest.mark.asyncio
    async def test_unknown_code_does_not_reveal_registered_email(self, unit_env):
        invitation_service = await unit_env.get(InvitationService)
        use_case = await unit_env.get(RegisterUseCase)
        invitation = await invitation_service.issue_code("taken@x.com")
        await use_case.execute(
            RegisterRequest(
                email="taken@x.com", password="s3cret", code=invitation.code.root
            )
        )

        reasons = []
        for email in ("taken@x.com", "nobody@x.com"):
            with pytest.raises(InvitationInvalidError) as exc_info:
                await use_case.execute(
                    RegisterRequest(email=email, password="s3cret", code="bogus")
                )
            reasons.append(exc_info.value.reason)

        assert reasons == [InvitationRejection.NOT_FOUND] * 2

    @pytest.mark.asyncio
    async def test_password_over_72_bytes_rejected(self, unit_env):
        invitation_service = await unit_env.get(InvitationService)
        use_case = await unit_env.get(RegisterUseCase)
        invitation_repo = await unit_env.get(InvitationRepository)
        invitation = await invitation_service.issue_code("new@x.com")

        # 37 two-byte characters: 74 bytes
        with pytest.raises(ValueError):
            await use_case.execute(
                RegisterRequest(
                    email="new@x.com", password="é" * 37, code=invitation.code.root
                )
            )

        assert (await invitation_repo.find_by_code(invitation.code)).used is False

    @pytest.mark.asyncio
    async def test_password_of_exactly_72_bytes_accepted(self, unit_env):
        invitation_service = await unit_env.get(InvitationService)
        use_case = await unit_env.get(RegisterUseCase)
        invitation = await invitation_service.issue_code("new@x.com")

        response = await use_case.execute(
            RegisterRequest(
                email="new@x.com", password="p" * 72, code=invitation.code.root
            )
        )

        assert response.email == "new@x.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password,code",
        [("", "s3cret", "abc"), ("new@x.com", "", "abc"), ("new@x.com", "s3cret", "")],
    )
    async def test_blank_fields_rejected(self, unit_env, email, password, code):
        use_case = await unit_env.get(RegisterUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                RegisterRequest(email=email, password=password, code=code)
            )
