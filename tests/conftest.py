"""Test configuration and shared builders."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest
from fastapi.testclient import TestClient

from conduit.domain.model import Article, Comment, User
from conduit.domain.value import ArticleId, CommentId, Slug, UserId
from conduit.interface.api.app import create_app
from tests.di import build_test_container

# Keep telemetry local; spans and logs are still recorded
logfire.configure(send_to_logfire=False, console=False)

# Stored hash of no particular password, for users that never log in
UNUSED_HASH = "$2b$04$abcdefghijklmnopqrstuu5x2bWmA6xrdVQqhDJDQNK3EY2lIq7Ie"


def make_user(username: str = "jake", **overrides) -> User:
    """Build a user without touching bcrypt."""
    fields = {
        "id": UserId(uuid4()),
        "username": username,
        "email": f"{username}@example.com",
        "password_hash": UNUSED_HASH,
    }
    fields.update(overrides)
    return User(**fields)


def make_article(author: User, title: str = "How to train your dragon", **overrides) -> Article:
    """Build an article authored by ``author``."""
    article_id = ArticleId(uuid4())
    fields = {
        "id": article_id,
        "slug": Slug.from_title(title, article_id),
        "title": title,
        "description": "Ever wonder how?",
        "body": "You have to believe",
        "author_id": author.id,
        "author_username": author.username,
    }
    fields.update(overrides)
    return Article(**fields)


def make_comment(article: Article, author: User, body: str = "Nice!", age: int = 0) -> Comment:
    """Build a comment; ``age`` pushes creation back by that many seconds."""
    created_at = datetime.now() - timedelta(seconds=age)
    return Comment(
        id=CommentId(uuid4()),
        article_id=article.id,
        author_id=author.id,
        author_username=author.username,
        body=body,
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def client():
    """Test client backed by in-memory persistence."""
    app_instance = create_app(container=build_test_container())
    return TestClient(app_instance)


def register(client: TestClient, username: str = "jake") -> str:
    """Register through the API and return the issued token."""
    response = client.post(
        "/api/users",
        json={
            "user": {
                "username": username,
                "email": f"{username}@example.com",
                "password": f"{username}-password",
            }
        },
    )
    assert response.status_code == 200, response.text
    return response.json()["user"]["token"]


def auth(token: str) -> dict[str, str]:
    """Authorization header for a token."""
    return {"Authorization": f"Token {token}"}


def post_article(
    client: TestClient, token: str, title: str = "How to train your dragon", **fields
) -> dict:
    """Create an article through the API and return its JSON."""
    article = {
        "title": title,
        "description": "Ever wonder how?",
        "body": "You have to believe",
        "tagList": [],
    }
    article.update(fields)
    response = client.post("/api/articles", json={"article": article}, headers=auth(token))
    assert response.status_code == 201, response.text
    return response.json()["article"]
