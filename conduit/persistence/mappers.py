"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Sequence

from conduit.domain.model import Article, Comment, Favorite, Follow, Tag, User
from conduit.domain.value import (
    ArticleId,
    CommentId,
    Slug,
    TagId,
    TagName,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        bio=row.get("bio"),
        image=row.get("image"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_article(row: Dict[str, Any], tag_names: Sequence[str] = ()) -> Article:
    """Convert database row to Article domain model.

    Args:
        row: Database row as dict
        tag_names: Tag names linked to the article, in position order

    Returns:
        Article domain model
    """
    return Article(
        id=ArticleId(row["id"]),
        slug=Slug(row["slug"]),
        title=row["title"],
        description=row["description"],
        body=row["body"],
        author_id=UserId(row["author_id"]),
        author_username=row["author_username"],
        tag_list=list(tag_names),
        favorites_count=row["favorites_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict.

    Tags live in the article_tags table and are left out.
    """
    data = article.model_dump(exclude={"tag_list"})
    data["slug"] = article.slug.root
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        article_id=ArticleId(row["article_id"]),
        author_id=UserId(row["author_id"]),
        author_username=row["author_username"],
        body=row["body"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(row["id"]),
        name=TagName(row["name"]),
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {"id": tag.id, "name": tag.name.root, "created_at": tag.created_at}


def favorite_to_dict(favorite: Favorite) -> Dict[str, Any]:
    """Convert Favorite domain model to database dict."""
    return favorite.model_dump()


def follow_to_dict(follow: Follow) -> Dict[str, Any]:
    """Convert Follow domain model to database dict."""
    return follow.model_dump()
