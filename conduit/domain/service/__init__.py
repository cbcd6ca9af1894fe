"""Domain services."""

from .article_service import ArticleService
from .authorization import Action, AuthorizationPolicy
from .base import Service
from .comment_service import CommentService
from .favorite_service import FavoriteService
from .tag_service import TagService
from .token_service import TokenService
from .user_service import UserService

__all__ = [
    "Action",
    "ArticleService",
    "AuthorizationPolicy",
    "CommentService",
    "FavoriteService",
    "Service",
    "TagService",
    "TokenService",
    "UserService",
]
