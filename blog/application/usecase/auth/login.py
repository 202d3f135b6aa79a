"""Login use case."""

import logfire
from pydantic import BaseModel

from blog.application.mappers import UserItem, to_user_item
from blog.application.usecase.base import BaseUseCase
from blog.config import AuthSettings
from blog.domain.error import InvalidCredentialsError, ValidationError
from blog.domain.model import TokenPayload
from blog.domain.service import AuthService, JWTService, UserService
from blog.domain.value import Email


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int  # Seconds
    user: UserItem


class LoginUseCase(BaseUseCase):
    """Use case for email/password login."""

    def __init__(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
            user_service: User domain service
            auth_settings: Authentication settings
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.auth_settings = auth_settings

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Validate credentials (via AuthService)
        2. Stamp the login time (via UserService)
        3. Sign an access token (via JWTService)

        Args:
            request: Email and password

        Returns:
            Access token and the logged-in user

        Raises:
            InvalidCredentialsError: If the email is malformed or unknown,
                the password is wrong, or the user is inactive
        """
        with logfire.span("login.execute"):
            try:
                email = Email.create(request.email)
            except ValidationError as e:
                raise InvalidCredentialsError() from e

            user = await self.auth_service.validate_credentials(
                email, request.password
            )
            user = await self.user_service.record_login(user)

            token = self.jwt_service.sign(
                TokenPayload(
                    sub=user.id, email=user.email, display_name=user.display_name
                )
            )

            logfire.info("User logged in", user_id=str(user.id))
            return LoginResponse(
                access_token=token.root,
                expires_in=self.auth_settings.jwt_expiry_minutes * 60,
                user=to_user_item(user),
            )
