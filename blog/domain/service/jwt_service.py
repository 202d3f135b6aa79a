"""JWT token domain service."""

import logfire

from blog.config import AuthSettings
from blog.domain.error import DomainError, InvalidTokenError
from blog.domain.model import TokenPayload
from blog.domain.value import AccessToken
from blog.util.jwt import JWTError, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for access token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def sign(self, payload: TokenPayload) -> AccessToken:
        """Sign an access token.

        iat and exp default to now and now + the configured expiry.

        Args:
            payload: Token claims

        Returns:
            Signed access token
        """
        with logfire.span("jwt_service.sign", user_id=str(payload.sub)):
            token = create_token(payload.to_claims(), self.auth_settings)
            logfire.info("Access token signed", user_id=str(payload.sub))
            return AccessToken.create(token)

    def verify(self, token: AccessToken | str) -> TokenPayload:
        """Verify an access token and extract its payload.

        Args:
            token: Access token

        Returns:
            Token payload

        Raises:
            InvalidTokenError: If the token is malformed, forged or expired
        """
        with logfire.span("jwt_service.verify"):
            raw = token.root if isinstance(token, AccessToken) else token
            try:
                claims = verify_token(raw, self.auth_settings)
                payload = TokenPayload.from_claims(claims)
            except JWTError as e:
                logfire.warn("Access token rejected", error=str(e))
                raise InvalidTokenError(str(e)) from e
            except (DomainError, KeyError) as e:
                logfire.warn("Access token has invalid claims", error=str(e))
                raise InvalidTokenError("Invalid token claims") from e

            logfire.info("Access token verified", user_id=str(payload.sub))
            return payload
