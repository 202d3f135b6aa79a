"""Unit tests for password hashers."""

import pytest

from blog.adapter.security.password import BcryptPasswordHasher
from blog.domain.service import AuthService, PasswordHasher
from tests.di import MockPasswordHasher
from tests.harness import create_env_fixture

security_env = create_env_fixture(unmock={"security"})


class TestBcryptPasswordHasher:
    """Tests for BcryptPasswordHasher."""

    def test_hash_and_verify(self):
        # Arrange
        hasher = BcryptPasswordHasher(rounds=4)

        # Act
        hashed = hasher.hash("correct horse battery staple")

        # Assert
        assert hashed.startswith("$2")
        assert hasher.verify("correct horse battery staple", hashed)
        assert not hasher.verify("wrong", hashed)

    def test_hashes_are_salted(self):
        hasher = BcryptPasswordHasher(rounds=4)

        assert hasher.hash("same") != hasher.hash("same")

    def test_unparseable_hash_never_matches(self):
        hasher = BcryptPasswordHasher(rounds=4)

        assert hasher.verify("anything", "mock-sha256$deadbeef") is False

    def test_long_passwords_are_accepted(self):
        # Arrange
        hasher = BcryptPasswordHasher(rounds=4)
        password = "p" * 100

        # Act
        hashed = hasher.hash(password)

        # Assert
        assert hasher.verify(password, hashed)
        assert hasher.verify("p" * 72, hashed)

    @pytest.mark.asyncio
    async def test_container_provides_bcrypt_when_unmocked(self, security_env):
        hasher = await security_env.get(PasswordHasher)
        auth_service = await security_env.get(AuthService)

        assert isinstance(hasher, BcryptPasswordHasher)
        assert hasher.rounds == 4
        assert auth_service.hash_password("pw").startswith("$2")

    def test_unsalted_hasher_is_not_shipped_with_the_adapter(self):
        import blog.adapter.security.password as adapter

        assert not hasattr(adapter, "MockPasswordHasher")


class TestMockPasswordHasher:
    """Tests for MockPasswordHasher."""

    def test_deterministic(self):
        hasher = MockPasswordHasher()

        assert hasher.hash("pw") == hasher.hash("pw")
        assert hasher.hash("pw").startswith(MockPasswordHasher.PREFIX)

    def test_verify(self):
        hasher = MockPasswordHasher()
        hashed = hasher.hash("pw")

        assert hasher.verify("pw", hashed)
        assert not hasher.verify("other", hashed)
