"""In-memory user repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from conduit.domain.model.user import User
from conduit.domain.repository.user import UserRepository
from conduit.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._db.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [self._db.users[uid] for uid in user_ids if uid in self._db.users]

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        for user in self._db.users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self._db.users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user, enforcing unique username and email."""
        for other in self._db.users.values():
            if other.id != user.id and (
                other.username == user.username or other.email == user.email
            ):
                raise IntegrityError("Duplicate user", None, Exception())
        self._db.users[user.id] = user
        return user
