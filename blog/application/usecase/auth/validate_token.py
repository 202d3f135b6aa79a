"""Validate token use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.mappers import UserItem, to_user_item
from blog.application.usecase.base import BaseUseCase
from blog.domain.error import (
    InactiveUserError,
    InvalidTokenError,
    NotFoundError,
    ValidationError,
)
from blog.domain.service import JWTService, UserService
from blog.domain.value import AccessToken

BEARER_PREFIX = "Bearer "


def parse_bearer_token(authorization: Optional[str]) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Args:
        authorization: Raw header value

    Returns:
        The token

    Raises:
        InvalidTokenError: If the header is missing or not a bearer header
    """
    header = authorization or ""
    token = header[len(BEARER_PREFIX) :].strip() if header.startswith(BEARER_PREFIX) else ""
    if not token:
        raise InvalidTokenError("Missing Bearer token")
    return token


class ValidateTokenRequest(BaseModel):
    """Validate token request."""

    token: str

    @classmethod
    def from_authorization_header(
        cls, authorization: Optional[str]
    ) -> "ValidateTokenRequest":
        """Build a request from an Authorization header.

        Raises:
            InvalidTokenError: If the header carries no bearer token
        """
        return cls(token=parse_bearer_token(authorization))


class ValidateTokenResponse(BaseModel):
    """Validate token response."""

    valid: bool
    user: UserItem


class ValidateTokenUseCase(BaseUseCase):
    """Use case for authenticating a request by its access token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize validate token use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: ValidateTokenRequest) -> ValidateTokenResponse:
        """Execute validate token flow.

        Args:
            request: Access token

        Returns:
            The user the token belongs to

        Raises:
            InvalidTokenError: If the token is malformed, forged, expired or
                its user no longer exists
            InactiveUserError: If the token's user is deactivated
        """
        with logfire.span("validate_token.execute"):
            try:
                token = AccessToken.create(request.token)
            except ValidationError as e:
                raise InvalidTokenError("Malformed token") from e

            payload = self.jwt_service.verify(token)
            if payload.is_expired():
                raise InvalidTokenError("Token has expired")

            try:
                user = await self.user_service.get_by_id(payload.sub)
            except NotFoundError as e:
                raise InvalidTokenError("Token user not found") from e

            if not user.is_active:
                logfire.warn("Token presented by inactive user", user_id=str(user.id))
                raise InactiveUserError()

            if not user.id.equals(payload.sub):
                raise InvalidTokenError("Token does not belong to user")

            return ValidateTokenResponse(valid=True, user=to_user_item(user))
