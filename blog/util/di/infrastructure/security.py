"""Security infrastructure providers."""

from dishka import Scope, provide

from blog.adapter.security.password import BcryptPasswordHasher
from blog.config import SecuritySettings
from blog.domain.service import PasswordHasher
from blog.util.di.base import ProviderBase


class SecurityProvider(ProviderBase):
    """Security component base."""

    __mock_component__ = "security"


class ProdSecurityProvider(SecurityProvider):
    """Production security provider using bcrypt."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_password_hasher(self, settings: SecuritySettings) -> PasswordHasher:
        """Provide bcrypt password hasher with the configured work factor."""
        return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
