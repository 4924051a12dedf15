"""Password hashing infrastructure providers."""

from dishka import Scope, provide

from gate.adapter.password import BcryptPasswordHasher
from gate.config import Settings
from gate.domain.service import PasswordHasher
from gate.util.di.base import ProviderBase


class PasswordProvider(ProviderBase):
    """Password hashing component base."""

    __mock_component__ = "password"


class ProdPasswordProvider(PasswordProvider):
    """Production password hashing provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_password_hasher(self, settings: Settings) -> PasswordHasher:
        """Provide bcrypt hasher with the configured cost factor."""
        return BcryptPasswordHasher(rounds=settings.passwords.bcrypt_rounds)
