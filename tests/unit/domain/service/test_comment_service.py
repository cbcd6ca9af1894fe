"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from conduit.domain.error import EMPTY_MSG, NotFoundError, ValidationError
from conduit.domain.service import CommentService
from conduit.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
)
from tests.conftest import make_article, make_comment, make_user


@pytest.fixture
def comment_repo():
    return InMemoryCommentRepository(InMemoryDatabase())


class TestCreateComment:
    """Tests for CommentService.create_comment()."""

    @pytest.mark.asyncio
    async def test_create_comment(self, comment_repo):
        """Should store the comment against the article."""
        author = make_user()
        article = make_article(author)
        service = CommentService(comment_repo)

        comment = await service.create_comment(article, author, "Thank you so much!")

        assert comment.article_id == article.id
        assert comment.author_username == author.username
        assert await comment_repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    async def test_create_blank_comment_rejected(self, comment_repo):
        """Should reject a blank body."""
        author = make_user()
        service = CommentService(comment_repo)

        with pytest.raises(ValidationError) as exc_info:
            await service.create_comment(make_article(author), author, "  ")

        assert exc_info.value.errors == {"body": [EMPTY_MSG]}


class TestGetComments:
    """Tests for CommentService.get_comments()."""

    @pytest.mark.asyncio
    async def test_oldest_first(self, comment_repo):
        """Comments come back in the order they were written."""
        author = make_user()
        article = make_article(author)
        await comment_repo.save(make_comment(article, author, "second", age=10))
        await comment_repo.save(make_comment(article, author, "first", age=20))
        await comment_repo.save(make_comment(make_article(author, "Other"), author))

        comments = await CommentService(comment_repo).get_comments(article)

        assert [c.body for c in comments] == ["first", "second"]


class TestGetComment:
    """Tests for CommentService.get_comment()."""

    @pytest.mark.asyncio
    async def test_get_comment(self, comment_repo):
        """Should find a comment of the article by its ID string."""
        author = make_user()
        article = make_article(author)
        comment = await comment_repo.save(make_comment(article, author))

        found = await CommentService(comment_repo).get_comment(article, str(comment.id))

        assert found == comment

    @pytest.mark.asyncio
    async def test_comment_of_other_article_not_found(self, comment_repo):
        """A comment is only reachable through its own article."""
        author = make_user()
        comment = await comment_repo.save(make_comment(make_article(author), author))

        with pytest.raises(NotFoundError):
            await CommentService(comment_repo).get_comment(
                make_article(author, "Other"), str(comment.id)
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("comment_id", ["42", "not-a-uuid", str(uuid4())])
    async def test_bad_or_unknown_id_not_found(self, comment_repo, comment_id):
        """Malformed and unknown IDs are both not found."""
        with pytest.raises(NotFoundError):
            await CommentService(comment_repo).get_comment(
                make_article(make_user()), comment_id
            )
