"""Auth use cases."""

from .login import LoginRequest, LoginResponse, LoginUseCase
from .validate_token import (
    ValidateTokenRequest,
    ValidateTokenResponse,
    ValidateTokenUseCase,
    parse_bearer_token,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "ValidateTokenRequest",
    "ValidateTokenResponse",
    "ValidateTokenUseCase",
    "parse_bearer_token",
]
