"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Raised when a value object rejects its input.

    Carries the message of the first violated rule.
    """

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class StructuralConstraintError(BusinessRuleViolationError):
    """Raised when a comment would break the one-level threading rule."""

    pass


class AuthorizationError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found (or is soft-deleted)."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthenticationError(DomainError):
    """Base error for failed authentication."""

    pass


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not authenticate."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Raised when an access token is malformed, expired or forged."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class InactiveUserError(AuthenticationError):
    """Raised when a deactivated user tries to authenticate."""

    def __init__(self, message: str = "User is inactive"):
        super().__init__(message)
