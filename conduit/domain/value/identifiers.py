"""Strongly typed identifiers for Conduit domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ArticleId = NewType("ArticleId", UUID)
CommentId = NewType("CommentId", UUID)
TagId = NewType("TagId", UUID)
