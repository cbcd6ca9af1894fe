"""Article aggregate root."""

from datetime import datetime

from pydantic import Field

from conduit.domain.model.common import DomainModel, ensure_not_blank
from conduit.domain.value import ArticleId, Slug, UserId


class Article(DomainModel):
    """Article aggregate root.

    Business rules:
    - Slug derives from the title and is unique across articles
    - Title, description and body are never blank
    - Author is fixed at creation
    - favorites_count mirrors the number of favorites rows for the article
    """

    id: ArticleId
    slug: Slug
    title: str
    description: str
    body: str
    author_id: UserId
    author_username: str
    tag_list: list[str] = Field(default_factory=list)  # Normalized, insertion order
    favorites_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def validate_content(self) -> None:
        """Check the user-editable fields.

        Raises:
            ValidationError: Naming every blank field
        """
        ensure_not_blank(
            title=self.title, description=self.description, body=self.body
        )
