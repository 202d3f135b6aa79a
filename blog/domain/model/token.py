"""Access token payload."""

from datetime import datetime, timezone
from typing import Any, Optional

from blog.domain.value import DisplayName, Email, Uuid
from blog.domain.value.common import ValueObject


class TokenPayload(ValueObject):
    """Claims carried by an access token.

    iat and exp are epoch seconds, as in JWT. A payload without exp never
    expires.
    """

    sub: Uuid
    email: Email
    display_name: DisplayName
    iat: Optional[int] = None
    exp: Optional[int] = None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.exp is None:
            return False
        now = now or datetime.now(timezone.utc)
        return now.timestamp() > self.exp

    def to_claims(self) -> dict[str, Any]:
        """Plain claims dict for signing."""
        claims: dict[str, Any] = {
            "sub": self.sub.root,
            "email": self.email.root,
            "display_name": self.display_name.root,
        }
        if self.iat is not None:
            claims["iat"] = self.iat
        if self.exp is not None:
            claims["exp"] = self.exp
        return claims

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "TokenPayload":
        """Build a payload from decoded claims.

        Raises:
            ValidationError: If a claim violates its value object rules
            KeyError: If a required claim is missing
        """
        return cls(
            sub=Uuid.create(claims["sub"]),
            email=Email.create(claims["email"]),
            display_name=DisplayName.create(claims["display_name"]),
            iat=claims.get("iat"),
            exp=claims.get("exp"),
        )
