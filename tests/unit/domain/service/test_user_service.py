"""Unit tests for UserService."""

import pytest

from conduit.domain.error import EMPTY_MSG, TAKEN_MSG, ValidationError
from conduit.domain.service import UserService
from conduit.domain.service.user_service import PASSWORD_TOO_LONG_MSG
from conduit.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import make_user


class TestRegister:
    """Tests for UserService.register()."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self):
        """Should store a bcrypt hash, never the password."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)

        # Act
        user = await service.register("jake", "jake@jake.jake", "jakejake")

        # Assert
        assert user.username == "jake"
        assert user.password_hash != "jakejake"
        assert user.password_hash.startswith("$2")
        assert await user_repo.find_by_username("jake") == user

    @pytest.mark.asyncio
    async def test_register_reports_all_blank_fields(self):
        """Should name every blank field in one error."""
        service = UserService(InMemoryUserRepository())

        with pytest.raises(ValidationError) as exc_info:
            await service.register("", " ", "")

        assert exc_info.value.errors == {
            "username": [EMPTY_MSG],
            "email": [EMPTY_MSG],
            "password": [EMPTY_MSG],
        }

    @pytest.mark.asyncio
    async def test_register_rejects_password_over_bcrypt_limit(self):
        """A password bcrypt can't hash is reported with the blank fields."""
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)

        with pytest.raises(ValidationError) as exc_info:
            await service.register("", "long@example.com", "é" * 37)

        assert exc_info.value.errors == {
            "username": [EMPTY_MSG],
            "password": [PASSWORD_TOO_LONG_MSG],
        }
        assert await user_repo.find_by_email("long@example.com") is None

    @pytest.mark.asyncio
    async def test_register_accepts_password_at_bcrypt_limit(self):
        """Exactly 72 bytes still hashes and verifies."""
        service = UserService(InMemoryUserRepository())
        password = "x" * 72

        await service.register("edge", "edge@example.com", password)

        user = await service.authenticate("edge@example.com", password)
        assert user.username == "edge"

    @pytest.mark.asyncio
    async def test_register_rejects_taken_username_and_email(self):
        """Should report both taken fields."""
        # Arrange
        user_repo = InMemoryUserRepository()
        await user_repo.save(make_user("jake", email="jake@jake.jake"))
        service = UserService(user_repo)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await service.register("jake", "jake@jake.jake", "secret")

        assert exc_info.value.errors == {
            "username": [TAKEN_MSG],
            "email": [TAKEN_MSG],
        }


class TestAuthenticate:
    """Tests for UserService.authenticate()."""

    @pytest.mark.asyncio
    async def test_authenticate_with_correct_password(self):
        """Should return the user for matching credentials."""
        service = UserService(InMemoryUserRepository())
        registered = await service.register("jake", "jake@jake.jake", "jakejake")

        user = await service.authenticate("jake@jake.jake", "jakejake")

        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_authenticate_with_wrong_password(self):
        """Should reject a wrong password without saying which part failed."""
        service = UserService(InMemoryUserRepository())
        await service.register("jake", "jake@jake.jake", "jakejake")

        with pytest.raises(ValidationError) as exc_info:
            await service.authenticate("jake@jake.jake", "wrong")

        assert exc_info.value.errors == {"email or password": ["is invalid"]}

    @pytest.mark.asyncio
    async def test_authenticate_unknown_email(self):
        """Should reject an unknown email the same way."""
        service = UserService(InMemoryUserRepository())

        with pytest.raises(ValidationError) as exc_info:
            await service.authenticate("nobody@example.com", "whatever")

        assert exc_info.value.errors == {"email or password": ["is invalid"]}


class TestGetByIds:
    """Tests for UserService.get_by_ids()."""

    @pytest.mark.asyncio
    async def test_returns_only_known_users(self):
        """Should map known IDs and skip unknown ones."""
        user_repo = InMemoryUserRepository()
        jake = make_user("jake")
        await user_repo.save(jake)
        service = UserService(user_repo)

        users = await service.get_by_ids([jake.id, make_user("ghost").id])

        assert users == {jake.id: jake}
