"""Response views.

Views serialize with camelCase keys (``favoritesCount``, ``tagList``) and
can still be built from snake_case field names.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for everything rendered into a JSON response body."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfileView(CamelModel):
    """Public profile of an author, relative to the viewer."""

    username: str
    bio: str | None = None
    image: str | None = None
    following: bool = False


class ArticleView(CamelModel):
    """Article as seen by the viewer."""

    slug: str
    title: str
    description: str
    body: str
    tag_list: list[str]
    created_at: datetime
    updated_at: datetime
    favorited: bool
    favorites_count: int
    author: ProfileView


class CommentView(CamelModel):
    """Comment as seen by the viewer."""

    id: str
    body: str
    created_at: datetime
    updated_at: datetime
    author: ProfileView


class UserView(CamelModel):
    """Authenticated user with their token."""

    username: str
    email: str
    token: str
    bio: str | None = None
    image: str | None = None
