"""Shared state for the in-memory repositories.

One InMemoryDatabase backs every in-memory repository of a test so that
cross-table behaviour (cascading deletes, favorited-by filters) matches
the PostgreSQL schema.
"""

from conduit.domain.model import Article, Comment, Favorite, Follow, Tag, User
from conduit.domain.value import ArticleId, CommentId, TagId, UserId


class InMemoryDatabase:
    """Tables held as dicts, keyed like their primary keys."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.articles: dict[ArticleId, Article] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.tags: dict[TagId, Tag] = {}
        self.favorites: dict[tuple[ArticleId, UserId], Favorite] = {}
        self.follows: dict[tuple[UserId, UserId], Follow] = {}

    def delete_article(self, article_id: ArticleId) -> None:
        """Remove an article and cascade to its comments and favorites."""
        self.articles.pop(article_id, None)
        self.comments = {
            cid: c for cid, c in self.comments.items() if c.article_id != article_id
        }
        self.favorites = {
            key: f for key, f in self.favorites.items() if key[0] != article_id
        }
