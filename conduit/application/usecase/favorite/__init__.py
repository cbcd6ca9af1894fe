"""Favorite use cases."""

from .favorite_article import (
    FavoriteArticleRequest,
    FavoriteArticleResponse,
    FavoriteArticleUseCase,
)
from .unfavorite_article import (
    UnfavoriteArticleRequest,
    UnfavoriteArticleResponse,
    UnfavoriteArticleUseCase,
)

__all__ = [
    "FavoriteArticleRequest",
    "FavoriteArticleResponse",
    "FavoriteArticleUseCase",
    "UnfavoriteArticleRequest",
    "UnfavoriteArticleResponse",
    "UnfavoriteArticleUseCase",
]
