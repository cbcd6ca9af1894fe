"""End-to-end tests for the user endpoints."""

from conduit.config import Settings
from conduit.domain.service import TokenService
from tests.conftest import auth, register


class TestRegistration:
    """POST /api/users."""

    def test_register(self, client):
        """Should return the user with a token and empty profile fields."""
        # Act
        response = client.post(
            "/api/users",
            json={
                "user": {
                    "username": "jake",
                    "email": "jake@jake.jake",
                    "password": "jakejake",
                }
            },
        )

        # Assert
        assert response.status_code == 200
        user = response.json()["user"]
        assert user["username"] == "jake"
        assert user["email"] == "jake@jake.jake"
        assert user["token"]
        assert user["bio"] is None
        assert user["image"] is None
        assert "password" not in user

    def test_register_blank_fields(self, client):
        """Should report every blank field."""
        response = client.post(
            "/api/users", json={"user": {"username": "", "email": "a@b.c"}}
        )

        assert response.status_code == 422
        assert response.json() == {
            "errors": {
                "username": ["Value can't be empty"],
                "password": ["Value can't be empty"],
            }
        }

    def test_register_password_too_long(self, client):
        """A password past bcrypt's 72-byte limit is a 422, not a crash."""
        response = client.post(
            "/api/users",
            json={
                "user": {
                    "username": "longpw",
                    "email": "l@example.com",
                    "password": "x" * 80,
                }
            },
        )

        assert response.status_code == 422
        assert response.json() == {
            "errors": {"password": ["is too long (maximum is 72 bytes)"]}
        }
        login = client.post(
            "/api/users/login",
            json={"user": {"email": "l@example.com", "password": "x" * 80}},
        )
        assert login.status_code == 422

    def test_register_taken_username(self, client):
        """A second registration with the same username is rejected."""
        register(client, "jake")

        response = client.post(
            "/api/users",
            json={
                "user": {
                    "username": "jake",
                    "email": "other@example.com",
                    "password": "secret",
                }
            },
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {"username": ["Value entered is taken"]}

    def test_register_without_envelope(self, client):
        """A body without the "user" key is malformed."""
        response = client.post("/api/users", json={"username": "jake"})

        assert response.status_code == 422
        assert "user" in response.json()["errors"]


class TestLogin:
    """POST /api/users/login."""

    def test_login(self, client):
        register(client, "jake")

        response = client.post(
            "/api/users/login",
            json={"user": {"email": "jake@example.com", "password": "jake-password"}},
        )

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "jake"

    def test_login_wrong_password(self, client):
        register(client, "jake")

        response = client.post(
            "/api/users/login",
            json={"user": {"email": "jake@example.com", "password": "nope"}},
        )

        assert response.status_code == 422
        assert response.json() == {"errors": {"email or password": ["is invalid"]}}


class TestCurrentUser:
    """GET /api/users."""

    def test_current_user_echoes_token(self, client):
        token = register(client, "jake")

        response = client.get("/api/users", headers=auth(token))

        assert response.status_code == 200
        assert response.json()["user"]["token"] == token
        assert response.json()["user"]["username"] == "jake"

    def test_without_credentials(self, client):
        """Should return 401 when not authenticated."""
        response = client.get("/api/users")

        assert response.status_code == 401
        assert "authorization" in response.json()["errors"]

    def test_with_invalid_token(self, client):
        response = client.get("/api/users", headers=auth("not-a-jwt"))

        assert response.status_code == 401

    def test_with_wrong_scheme(self, client):
        token = register(client, "jake")

        response = client.get("/api/users", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_for_unknown_user(self, client):
        """A valid token whose user no longer exists is rejected."""
        token = TokenService(Settings().auth).issue("ghost")

        response = client.get("/api/users", headers=auth(token))

        assert response.status_code == 401
        assert response.json()["errors"] == {
            "authorization": ["User not found for token"]
        }


class TestHealth:
    """GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
