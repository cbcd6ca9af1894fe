"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from conduit.domain.model.common import DomainModel
from conduit.domain.value import UserId


class User(DomainModel):
    """User aggregate root.

    Username and email are unique across users; the password is only ever
    held as a bcrypt hash.
    """

    id: UserId
    username: str
    email: str
    password_hash: str = Field(repr=False)
    bio: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
