"""Unit tests for ValidateTokenUseCase."""

import pytest

from blog.application.usecase.auth import (
    ValidateTokenRequest,
    ValidateTokenUseCase,
    parse_bearer_token,
)
from blog.domain.error import InactiveUserError, InvalidTokenError
from blog.domain.model import TokenPayload
from blog.domain.repository import UserRepository
from blog.domain.service import JWTService
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _user_and_token(env, **payload_overrides):
    user = await (await env.get(UserRepository)).save(make_user())
    jwt_service = await env.get(JWTService)
    payload = TokenPayload(
        sub=user.id, email=user.email, display_name=user.display_name
    ).model_copy(update=payload_overrides)
    return user, jwt_service.sign(payload).root


class TestParseBearerToken:
    """Tests for parse_bearer_token."""

    def test_extracts_token(self):
        assert parse_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    @pytest.mark.parametrize("header", [None, "", "Bearer ", "Basic abc", "bearer abc"])
    def test_rejects_missing_or_other_schemes(self, header):
        with pytest.raises(InvalidTokenError, match="Missing Bearer token"):
            parse_bearer_token(header)


class TestValidateToken:
    """Tests for authenticating by access token."""

    @pytest.mark.asyncio
    async def test_valid_token(self, unit_env):
        # Arrange
        user, token = await _user_and_token(unit_env)
        use_case = await unit_env.get(ValidateTokenUseCase)

        # Act
        response = await use_case.execute(
            ValidateTokenRequest.from_authorization_header(f"Bearer {token}")
        )

        # Assert
        assert response.valid is True
        assert response.user.id == user.id.root

    @pytest.mark.asyncio
    async def test_empty_token(self, unit_env):
        use_case = await unit_env.get(ValidateTokenUseCase)

        with pytest.raises(InvalidTokenError, match="Malformed"):
            await use_case.execute(ValidateTokenRequest(token=""))

    @pytest.mark.asyncio
    async def test_forged_token(self, unit_env):
        _, token = await _user_and_token(unit_env)
        use_case = await unit_env.get(ValidateTokenUseCase)
        header, payload, signature = token.split(".")

        with pytest.raises(InvalidTokenError):
            await use_case.execute(
                ValidateTokenRequest(token=f"{header}.{payload}.{signature[::-1]}")
            )

    @pytest.mark.asyncio
    async def test_expired_token(self, unit_env):
        _, token = await _user_and_token(unit_env, iat=1_000, exp=2_000)
        use_case = await unit_env.get(ValidateTokenUseCase)

        with pytest.raises(InvalidTokenError, match="expired"):
            await use_case.execute(ValidateTokenRequest(token=token))

    @pytest.mark.asyncio
    async def test_deleted_user(self, unit_env):
        # Arrange
        user, token = await _user_and_token(unit_env)
        await (await unit_env.get(UserRepository)).delete(user.id)
        use_case = await unit_env.get(ValidateTokenUseCase)

        # Act & Assert
        with pytest.raises(InvalidTokenError, match="not found"):
            await use_case.execute(ValidateTokenRequest(token=token))

    @pytest.mark.asyncio
    async def test_inactive_user(self, unit_env):
        # Arrange
        user, token = await _user_and_token(unit_env)
        repo = await unit_env.get(UserRepository)
        user.deactivate()
        await repo.save(user)
        use_case = await unit_env.get(ValidateTokenUseCase)

        # Act & Assert
        with pytest.raises(InactiveUserError):
            await use_case.execute(ValidateTokenRequest(token=token))
