"""User domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from conduit.domain.error import TAKEN_MSG, ValidationError
from conduit.domain.model.common import blank_fields, ensure_not_blank
from conduit.domain.model.user import User
from conduit.domain.repository import UserRepository
from conduit.domain.value import UserId
from conduit.util.password import (
    MAX_PASSWORD_BYTES,
    hash_password,
    password_too_long,
    verify_password,
)

from .base import Service

INVALID_CREDENTIALS = {"email or password": ["is invalid"]}
PASSWORD_TOO_LONG_MSG = f"is too long (maximum is {MAX_PASSWORD_BYTES} bytes)"


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Get several users keyed by ID.

        Args:
            user_ids: IDs to look up, duplicates allowed

        Returns:
            Mapping of ID to user for every ID that exists
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("user_service.get_by_ids", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            return {user.id: user for user in users}

    async def get_by_username(self, username: str) -> User | None:
        """Get a user by username.

        Args:
            username: Username to look up

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_by_username", username=username):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.info("User not found", username=username)
            return user

    async def register(self, username: str, email: str, password: str) -> User:
        """Register a new user.

        Args:
            username: Desired username
            email: Email address
            password: Plaintext password, stored only as a bcrypt hash

        Returns:
            Created user

        Raises:
            ValidationError: If fields are blank, the password is too long for
                bcrypt, or username/email are taken
        """
        with logfire.span("user_service.register", username=username):
            errors = blank_fields(username=username, email=email, password=password)
            if "password" not in errors and password_too_long(password):
                errors["password"] = [PASSWORD_TOO_LONG_MSG]
            if errors:
                raise ValidationError(errors)

            if await self.user_repository.find_by_username(username):
                errors["username"] = [TAKEN_MSG]
            if await self.user_repository.find_by_email(email):
                errors["email"] = [TAKEN_MSG]
            if errors:
                logfire.warn("Registration rejected", fields=sorted(errors))
                raise ValidationError(errors)

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=hash_password(password),
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race with a concurrent registration
                logfire.warn("Duplicate user on save", username=username)
                raise ValidationError({"username": [TAKEN_MSG], "email": [TAKEN_MSG]})

            logfire.info("User registered", user_id=str(saved.id), username=username)
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check a user's credentials.

        Args:
            email: Email address
            password: Plaintext password

        Returns:
            The matching user

        Raises:
            ValidationError: If the email is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate", email=email):
            ensure_not_blank(email=email, password=password)

            user = await self.user_repository.find_by_email(email)
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Login failed", email=email)
                raise ValidationError(INVALID_CREDENTIALS)

            logfire.info("User authenticated", user_id=str(user.id))
            return user
