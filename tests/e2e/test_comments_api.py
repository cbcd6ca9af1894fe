"""End-to-end tests for the comment endpoints."""

from uuid import uuid4

from tests.conftest import auth, post_article, register


def _comment(client, token, slug, body="Thank you so much!"):
    return client.post(
        f"/api/articles/{slug}/comments",
        json={"comment": {"body": body}},
        headers=auth(token),
    )


class TestComments:
    """Comment lifecycle on an article."""

    def test_create_and_list(self, client):
        """Comments are listed oldest first with their authors."""
        # Arrange
        author = register(client, "jake")
        reader = register(client, "celeb")
        slug = post_article(client, author)["slug"]

        # Act
        first = _comment(client, reader, slug, "First!")
        second = _comment(client, author, slug, "Thanks")
        listed = client.get(f"/api/articles/{slug}/comments")

        # Assert
        assert first.status_code == 201
        assert first.json()["comment"]["author"]["username"] == "celeb"
        assert second.status_code == 201
        assert [c["body"] for c in listed.json()["comments"]] == ["First!", "Thanks"]

    def test_get_single_comment(self, client):
        token = register(client)
        slug = post_article(client, token)["slug"]
        comment_id = _comment(client, token, slug).json()["comment"]["id"]

        response = client.get(f"/api/articles/{slug}/comments/{comment_id}")

        assert response.status_code == 200
        assert response.json()["comment"]["id"] == comment_id

    def test_blank_comment(self, client):
        token = register(client)
        slug = post_article(client, token)["slug"]

        response = _comment(client, token, slug, "   ")

        assert response.status_code == 422
        assert response.json()["errors"] == {"body": ["Value can't be empty"]}

    def test_comment_requires_auth(self, client):
        token = register(client)
        slug = post_article(client, token)["slug"]

        response = client.post(
            f"/api/articles/{slug}/comments", json={"comment": {"body": "hi"}}
        )

        assert response.status_code == 401

    def test_comment_on_unknown_article(self, client):
        token = register(client)

        assert _comment(client, token, "no-such-article").status_code == 404

    def test_comment_through_other_article_not_found(self, client):
        """A comment ID only resolves under its own article."""
        token = register(client)
        first = post_article(client, token, "First")["slug"]
        second = post_article(client, token, "Second")["slug"]
        comment_id = _comment(client, token, first).json()["comment"]["id"]

        response = client.get(f"/api/articles/{second}/comments/{comment_id}")

        assert response.status_code == 404

    def test_unknown_and_malformed_comment_ids(self, client):
        token = register(client)
        slug = post_article(client, token)["slug"]

        assert client.get(f"/api/articles/{slug}/comments/{uuid4()}").status_code == 404
        assert client.get(f"/api/articles/{slug}/comments/42").status_code == 404


class TestDeleteComment:
    """DELETE /api/articles/{slug}/comments/{id}."""

    def test_author_deletes(self, client):
        token = register(client)
        slug = post_article(client, token)["slug"]
        comment_id = _comment(client, token, slug).json()["comment"]["id"]

        response = client.delete(
            f"/api/articles/{slug}/comments/{comment_id}", headers=auth(token)
        )

        assert response.status_code == 204
        assert client.get(f"/api/articles/{slug}/comments").json() == {"comments": []}

    def test_article_owner_cannot_delete_others_comment(self, client):
        owner = register(client, "jake")
        reader = register(client, "celeb")
        slug = post_article(client, owner)["slug"]
        comment_id = _comment(client, reader, slug).json()["comment"]["id"]

        response = client.delete(
            f"/api/articles/{slug}/comments/{comment_id}", headers=auth(owner)
        )

        assert response.status_code == 403

    def test_deleting_article_removes_comments(self, client):
        token = register(client)
        slug = post_article(client, token)["slug"]
        _comment(client, token, slug)

        client.delete(f"/api/articles/{slug}", headers=auth(token))
        post_article(client, token)

        assert client.get(f"/api/articles/{slug}/comments").json() == {"comments": []}
