"""Response views and their assembly."""

from .assembler import ViewAssembler
from .model import ArticleView, CamelModel, CommentView, ProfileView, UserView

__all__ = [
    "ArticleView",
    "CamelModel",
    "CommentView",
    "ProfileView",
    "UserView",
    "ViewAssembler",
]
