"""End-to-end tests for the favorite endpoints."""

from tests.conftest import auth, post_article, register


class TestFavorites:
    """POST/DELETE /api/articles/{slug}/favorite."""

    def test_favorite_counts_distinct_users(self, client):
        """favoritesCount equals the number of users who favorited."""
        # Arrange
        author = register(client, "jake")
        fans = [register(client, name) for name in ("ann", "bob", "cid")]
        slug = post_article(client, author)["slug"]

        # Act
        responses = [
            client.post(f"/api/articles/{slug}/favorite", headers=auth(fan))
            for fan in fans
        ]

        # Assert
        assert [r.status_code for r in responses] == [200, 200, 200]
        assert responses[-1].json()["article"]["favoritesCount"] == 3
        assert responses[-1].json()["article"]["favorited"] is True
        assert "errors" not in responses[-1].json()

        as_author = client.get(f"/api/articles/{slug}", headers=auth(author))
        assert as_author.json()["article"]["favorited"] is False
        assert as_author.json()["article"]["favoritesCount"] == 3

    def test_double_favorite(self, client):
        """A repeat returns 422 with the unchanged article."""
        token = register(client)
        slug = post_article(client, token)["slug"]
        client.post(f"/api/articles/{slug}/favorite", headers=auth(token))

        response = client.post(f"/api/articles/{slug}/favorite", headers=auth(token))

        assert response.status_code == 422
        data = response.json()
        assert data["errors"] == {"article": ["is already favorited"]}
        assert data["article"]["favoritesCount"] == 1

    def test_unfavorite(self, client):
        token = register(client)
        slug = post_article(client, token)["slug"]
        client.post(f"/api/articles/{slug}/favorite", headers=auth(token))

        response = client.delete(f"/api/articles/{slug}/favorite", headers=auth(token))

        assert response.status_code == 200
        assert response.json()["article"]["favoritesCount"] == 0
        assert response.json()["article"]["favorited"] is False

    def test_unfavorite_never_favorited(self, client):
        token = register(client)
        slug = post_article(client, token)["slug"]

        response = client.delete(f"/api/articles/{slug}/favorite", headers=auth(token))

        assert response.status_code == 422
        assert response.json()["errors"] == {"article": ["is not favorited"]}
        assert response.json()["article"]["favoritesCount"] == 0

    def test_favorite_requires_auth(self, client):
        token = register(client)
        slug = post_article(client, token)["slug"]

        assert client.post(f"/api/articles/{slug}/favorite").status_code == 401

    def test_favorite_unknown_article(self, client):
        token = register(client)

        response = client.post(
            "/api/articles/no-such-article/favorite", headers=auth(token)
        )

        assert response.status_code == 404

    def test_list_favorited_by(self, client):
        jake = register(client, "jake")
        slug = post_article(client, jake, "Loved")["slug"]
        post_article(client, jake, "Ignored")
        client.post(f"/api/articles/{slug}/favorite", headers=auth(jake))

        response = client.get("/api/articles", params={"favorited": "jake"})

        assert [a["slug"] for a in response.json()["articles"]] == ["loved"]
        assert response.json()["articlesCount"] == 1
