"""Integration tests for authentication endpoints."""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.integration
class TestAuthRegister:
    """Tests for POST /api/auth/register."""

    def test_register_success(self, test_client: TestClient, api_prefix: str):
        """Successfully register a new user."""
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={
                "name": "New User",
                "email": "newuser@example.com",
                "password": "SecurePassword123!",
            },
        )

        assert response.status_code == 201
        data = response.json()

        assert set(data) == {"token", "user"}
        assert data["user"]["name"] == "New User"
        assert data["user"]["email"] == "newuser@example.com"
        assert "id" in data["user"]
        assert "created_at" in data["user"]
        assert "password" not in data["user"]
        assert "password_hash" not in data["user"]
        assert "SecurePassword123!" not in response.text

    @pytest.mark.parametrize("email", ["o'brien@example.com", "jörg@example.com"])
    def test_register_accepts_any_schema_valid_email(
        self,
        test_client: TestClient,
        api_prefix: str,
        email: str,
    ):
        """Addresses that pass request validation are not refused later."""
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={"name": "Someone", "email": email, "password": "secret123"},
        )

        assert response.status_code == 201, response.json()
        assert response.json()["user"]["email"] == email

    def test_register_duplicate_email(
        self,
        test_client: TestClient,
        registered_user: dict,
        registered_user_data: dict,
        api_prefix: str,
    ):
        """A second registration for the same email fails with 400."""
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={**registered_user_data, "name": "Someone Else"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "EMAIL_ALREADY_REGISTERED"
        assert "already registered" in response.json()["detail"].lower()

        users = test_client.get(
            f"{api_prefix}/users",
            headers={"Authorization": f"Bearer {registered_user['token']}"},
        ).json()
        assert len(users) == 1

    def test_register_duplicate_email_differs_only_in_case(
        self,
        test_client: TestClient,
        registered_user: dict,
        api_prefix: str,
    ):
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={
                "name": "Shouty",
                "email": "TEST@EXAMPLE.COM",
                "password": "SecurePassword123!",
            },
        )

        assert response.status_code == 400

    def test_register_short_password(self, test_client: TestClient, api_prefix: str):
        """Cannot register with a password under six characters."""
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={
                "name": "Weak",
                "email": "weakpass@example.com",
                "password": "abc",
            },
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_register_overlong_password(
        self,
        test_client: TestClient,
        api_prefix: str,
    ):
        """Passwords beyond bcrypt's 72 byte limit are rejected."""
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={
                "name": "Long",
                "email": "long@example.com",
                "password": "x" * 100,
            },
        )

        assert response.status_code == 400
        assert response.json()["code"] == "WEAK_PASSWORD"

    def test_register_invalid_email(self, test_client: TestClient, api_prefix: str):
        """Cannot register with an invalid email format."""
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={
                "name": "Bad Email",
                "email": "not-an-email",
                "password": "SecurePassword123!",
            },
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_register_missing_name(self, test_client: TestClient, api_prefix: str):
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={"email": "noname@example.com", "password": "SecurePassword123!"},
        )

        assert response.status_code == 400


@pytest.mark.integration
class TestAuthLogin:
    """Tests for POST /api/auth/login."""

    def test_login_success(
        self,
        test_client: TestClient,
        registered_user: dict,
        registered_user_data: dict,
        api_prefix: str,
    ):
        """Login returns a token and the user."""
        response = test_client.post(
            f"{api_prefix}/auth/login",
            json={
                "email": registered_user_data["email"],
                "password": registered_user_data["password"],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token"]
        assert data["user"]["id"] == registered_user["user"]["id"]
        assert "password" not in data["user"]

    def test_login_token_opens_profile_of_same_user(
        self,
        test_client: TestClient,
        registered_user: dict,
        registered_user_data: dict,
        api_prefix: str,
    ):
        login = test_client.post(
            f"{api_prefix}/auth/login",
            json={
                "email": registered_user_data["email"].upper(),
                "password": registered_user_data["password"],
            },
        )
        token = login.json()["token"]

        profile = test_client.get(
            f"{api_prefix}/users/profile",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert profile.status_code == 200
        assert profile.json()["id"] == registered_user["user"]["id"]

    def test_wrong_password_and_unknown_email_are_indistinguishable(
        self,
        test_client: TestClient,
        registered_user: dict,
        registered_user_data: dict,
        api_prefix: str,
    ):
        """Both failures return the same status and body."""
        wrong_password = test_client.post(
            f"{api_prefix}/auth/login",
            json={"email": registered_user_data["email"], "password": "WrongPass123"},
        )
        unknown_email = test_client.post(
            f"{api_prefix}/auth/login",
            json={"email": "nobody@example.com", "password": "WrongPass123"},
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json() == {
            "detail": "Invalid email or password",
            "code": "INVALID_CREDENTIALS",
        }

    def test_login_malformed_email_is_a_failed_login(
        self,
        test_client: TestClient,
        api_prefix: str,
    ):
        response = test_client.post(
            f"{api_prefix}/auth/login",
            json={"email": "not-an-email", "password": "whatever1"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    def test_login_missing_fields(self, test_client: TestClient, api_prefix: str):
        response = test_client.post(f"{api_prefix}/auth/login", json={})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.integration
class TestHealth:
    """Tests for the health check."""

    def test_health(self, test_client: TestClient):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
