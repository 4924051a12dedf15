"""Unit tests for IssueTokenUseCase."""

import pytest

from gate.application.usecase.auth import IssueTokenRequest, IssueTokenUseCase
from gate.domain.service import TokenService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestIssueTokenUseCase:
    """Tests for IssueTokenUseCase."""

    @pytest.mark.asyncio
    async def test_issue_token_for_email(self, unit_env):
        use_case = await unit_env.get(IssueTokenUseCase)
        token_service = await unit_env.get(TokenService)

        response = await use_case.execute(IssueTokenRequest(email="a@x.com"))

        assert token_service.validate(response.token) == "a@x.com"
        assert response.expire_at > token_service.clock.now()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["", "   "])
    async def test_blank_email_rejected(self, unit_env, email):
        use_case = await unit_env.get(IssueTokenUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(IssueTokenRequest(email=email))
