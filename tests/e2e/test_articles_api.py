"""End-to-end tests for the article endpoints."""

from tests.conftest import auth, post_article, register


class TestCreateArticle:
    """POST /api/articles."""

    def test_create(self, client):
        """Should return 201 with the derived slug and camelCase keys."""
        # Arrange
        token = register(client, "jake")

        # Act
        response = client.post(
            "/api/articles",
            json={
                "article": {
                    "title": "How to train your dragon",
                    "description": "Ever wonder how?",
                    "body": "You have to believe",
                    "tagList": ["Dragons", "training", "dragons"],
                }
            },
            headers=auth(token),
        )

        # Assert
        assert response.status_code == 201
        article = response.json()["article"]
        assert article["slug"] == "how-to-train-your-dragon"
        assert article["tagList"] == ["dragons", "training"]
        assert article["favorited"] is False
        assert article["favoritesCount"] == 0
        assert article["author"] == {
            "username": "jake",
            "bio": None,
            "image": None,
            "following": False,
        }
        assert "createdAt" in article and "updatedAt" in article

    def test_create_requires_auth(self, client):
        response = client.post("/api/articles", json={"article": {"title": "x"}})

        assert response.status_code == 401

    def test_create_blank_fields(self, client):
        token = register(client)

        response = client.post(
            "/api/articles",
            json={"article": {"title": "  ", "body": "text"}},
            headers=auth(token),
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {
            "title": ["Value can't be empty"],
            "description": ["Value can't be empty"],
        }

    def test_create_duplicate_title(self, client):
        token = register(client)
        post_article(client, token, "Same title")

        response = client.post(
            "/api/articles",
            json={"article": {"title": "Same Title", "description": "d", "body": "b"}},
            headers=auth(token),
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {"slug": ["Value entered is taken"]}


class TestGetArticle:
    """GET /api/articles/{slug}."""

    def test_get_anonymously(self, client):
        token = register(client)
        created = post_article(client, token)

        response = client.get(f"/api/articles/{created['slug']}")

        assert response.status_code == 200
        assert response.json()["article"]["title"] == "How to train your dragon"

    def test_get_unknown_slug(self, client):
        response = client.get("/api/articles/no-such-article")

        assert response.status_code == 404
        assert "article" in response.json()["errors"]

    def test_bad_token_on_public_route(self, client):
        """A presented but unusable credential is rejected even when optional."""
        token = register(client)
        created = post_article(client, token)

        response = client.get(
            f"/api/articles/{created['slug']}", headers=auth("garbage")
        )

        assert response.status_code == 401


class TestUpdateArticle:
    """PUT /api/articles/{slug}."""

    def test_update_title_changes_slug_and_is_repeatable(self, client):
        """The slug follows the title; repeating the update is a no-op."""
        # Arrange
        token = register(client)
        post_article(client, token, "Original title")
        update = {"article": {"title": "Title should be updated"}}

        # Act
        first = client.put(
            "/api/articles/original-title", json=update, headers=auth(token)
        )
        second = client.put(
            "/api/articles/title-should-be-updated", json=update, headers=auth(token)
        )

        # Assert
        assert first.status_code == 200
        assert first.json()["article"]["slug"] == "title-should-be-updated"
        assert first.json()["article"]["description"] == "Ever wonder how?"
        assert second.status_code == 200
        assert second.json()["article"]["slug"] == "title-should-be-updated"
        assert client.get("/api/articles/original-title").status_code == 404

    def test_update_by_other_user_forbidden(self, client):
        owner = register(client, "jake")
        other = register(client, "celeb")
        created = post_article(client, owner)

        response = client.put(
            f"/api/articles/{created['slug']}",
            json={"article": {"body": "hijacked"}},
            headers=auth(other),
        )

        assert response.status_code == 403
        body = client.get(f"/api/articles/{created['slug']}").json()["article"]["body"]
        assert body == "You have to believe"

    def test_update_unauthenticated_before_lookup(self, client):
        """Missing credentials win over a missing article."""
        response = client.put(
            "/api/articles/does-not-exist", json={"article": {"body": "x"}}
        )

        assert response.status_code == 401


class TestDeleteArticle:
    """DELETE /api/articles/{slug}."""

    def test_delete(self, client):
        token = register(client)
        created = post_article(client, token)

        response = client.delete(
            f"/api/articles/{created['slug']}", headers=auth(token)
        )

        assert response.status_code == 204
        assert client.get(f"/api/articles/{created['slug']}").status_code == 404

    def test_delete_by_other_user_forbidden(self, client):
        owner = register(client, "jake")
        other = register(client, "celeb")
        created = post_article(client, owner)

        response = client.delete(
            f"/api/articles/{created['slug']}", headers=auth(other)
        )

        assert response.status_code == 403
        assert client.get(f"/api/articles/{created['slug']}").status_code == 200


class TestListArticles:
    """GET /api/articles."""

    def test_list_newest_first_with_total(self, client):
        token = register(client)
        for title in ["First", "Second", "Third"]:
            post_article(client, token, title)

        response = client.get("/api/articles", params={"limit": 2})

        assert response.status_code == 200
        data = response.json()
        assert [a["slug"] for a in data["articles"]] == ["third", "second"]
        assert data["articlesCount"] == 3

    def test_offset(self, client):
        token = register(client)
        for title in ["First", "Second", "Third"]:
            post_article(client, token, title)

        response = client.get("/api/articles", params={"offset": 2})

        assert [a["slug"] for a in response.json()["articles"]] == ["first"]

    def test_filter_by_tag_returns_subset(self, client):
        """Exactly the tagged articles, in their unfiltered relative order."""
        token = register(client)
        post_article(client, token, "Tagged one", tagList=["dragons"])
        post_article(client, token, "Untagged")
        post_article(client, token, "Tagged two", tagList=["Dragons", "cats"])

        everything = client.get("/api/articles").json()
        tagged = client.get("/api/articles", params={"tag": "dragons"}).json()

        unfiltered_slugs = [a["slug"] for a in everything["articles"]]
        tagged_slugs = [a["slug"] for a in tagged["articles"]]
        assert tagged_slugs == [
            s for s in unfiltered_slugs if s in {"tagged-one", "tagged-two"}
        ]
        assert tagged_slugs == ["tagged-two", "tagged-one"]
        assert "untagged" not in tagged_slugs
        assert tagged["articlesCount"] == 2

    def test_filter_by_author(self, client):
        jake = register(client, "jake")
        celeb = register(client, "celeb")
        post_article(client, jake, "By jake")
        post_article(client, celeb, "By celeb")

        response = client.get("/api/articles", params={"author": "celeb"})

        assert [a["slug"] for a in response.json()["articles"]] == ["by-celeb"]

    def test_filter_by_unknown_author(self, client):
        token = register(client)
        post_article(client, token)

        response = client.get("/api/articles", params={"author": "ghost"})

        assert response.status_code == 200
        assert response.json() == {"articles": [], "articlesCount": 0}

    def test_limit_out_of_range(self, client):
        assert client.get("/api/articles", params={"limit": 0}).status_code == 422
        assert client.get("/api/articles", params={"limit": 101}).status_code == 422

    def test_negative_offset(self, client):
        response = client.get("/api/articles", params={"offset": -1})

        assert response.status_code == 422
        assert "offset" in response.json()["errors"]
