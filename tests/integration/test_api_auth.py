"""
Integration tests for the registration, login and listing endpoints.
Uses TestClient against the real app with a fresh in-memory store per test.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from login_backend.application.use_cases.auth.register_user import RegisterUserUseCase
from login_backend.domain.constants import AuthMessages


ANA = {
    "nombre": "Ana Lopez",
    "dpi": "1234567890123",
    "email": "ana@example.com",
    "password": "secret1",
}


@pytest.fixture
def client(fresh_container):
    """Create test client backed by an empty user store."""
    from login_backend.main import app

    with TestClient(app) as c:
        yield c


class TestRootAPI:
    """Tests for GET /"""

    def test_lists_endpoints(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == AuthMessages.SERVICE_DESCRIPTION
        assert data["endpoints"] == {
            "register": "POST /register",
            "login": "POST /login",
            "users": "GET /users",
        }


class TestRegisterAPI:
    """Tests for POST /register"""

    def test_register_success(self, client):
        response = client.post("/register", json=ANA)
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == AuthMessages.REGISTERED
        assert data["user"]["id"] == 1
        assert data["user"]["nombre"] == "Ana Lopez"
        assert data["user"]["dpi"] == "1234567890123"
        assert "password" not in data["user"]

    def test_duplicate_email_returns_409(self, client):
        client.post("/register", json=ANA)
        response = client.post("/register", json={**ANA, "dpi": "9999999999999"})
        assert response.status_code == 409
        assert response.json() == {"message": AuthMessages.DUPLICATE_EMAIL}

    def test_duplicate_email_wins_over_duplicate_dpi(self, client):
        client.post("/register", json=ANA)
        client.post(
            "/register",
            json={"nombre": "Bob", "dpi": "9999999999999", "email": "bob@example.com", "password": "secret2"},
        )
        response = client.post("/register", json={**ANA, "email": "bob@example.com"})
        assert response.status_code == 409
        assert response.json()["message"] == AuthMessages.DUPLICATE_EMAIL

    def test_duplicate_dpi_returns_409(self, client):
        client.post("/register", json=ANA)
        response = client.post("/register", json={**ANA, "email": "otra@example.com"})
        assert response.status_code == 409
        assert response.json() == {"message": AuthMessages.DUPLICATE_NATIONAL_ID}

    def test_short_dpi_returns_400_and_stores_nothing(self, client):
        response = client.post("/register", json={**ANA, "dpi": "12345"})
        assert response.status_code == 400
        data = response.json()
        assert data["message"] == AuthMessages.INVALID_REGISTRATION
        assert data["errors"] == {"dpi": AuthMessages.INVALID_NATIONAL_ID}

        users = client.get("/users").json()
        assert users["total"] == 0

    def test_password_length_boundary(self, client):
        short = client.post("/register", json={**ANA, "password": "abc"})
        assert short.status_code == 400
        assert "password" in short.json()["errors"]

        ok = client.post("/register", json={**ANA, "password": "abcdef"})
        assert ok.status_code == 201

    def test_every_invalid_field_is_reported(self, client):
        response = client.post("/register", json={"dpi": "abc", "email": "nope"})
        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"nombre", "dpi", "email", "password"}

    def test_non_object_body_returns_400(self, client):
        response = client.post("/register", json=["not", "an", "object"])
        assert response.status_code == 400
        assert response.json() == {"message": AuthMessages.INVALID_BODY}

    def test_invalid_json_returns_400(self, client):
        response = client.post(
            "/register",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400


class TestUnencodableText:
    """Strings holding lone surrogates are rejected before anything is stored"""

    def test_register_with_surrogate_name_returns_400_and_stores_nothing(self, client):
        body = (
            b'{"nombre": "Ana \\ud800", "dpi": "1234567890123", '
            b'"email": "ana@example.com", "password": "secret1"}'
        )
        response = client.post("/register", content=body, headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"nombre"}

        users = client.get("/users")
        assert users.status_code == 200
        assert users.json()["total"] == 0

    def test_surrogate_password_response_does_not_reveal_known_email(self, client):
        client.post("/register", json=ANA)
        known = client.post(
            "/login",
            content=b'{"email": "ana@example.com", "password": "\\ud800abc"}',
            headers={"Content-Type": "application/json"},
        )
        unknown = client.post(
            "/login",
            content=b'{"email": "nadie@example.com", "password": "\\ud800abc"}',
            headers={"Content-Type": "application/json"},
        )
        assert known.status_code == unknown.status_code == 400
        assert known.content == unknown.content


class TestLoginAPI:
    """Tests for POST /login"""

    def test_login_success(self, client):
        client.post("/register", json=ANA)
        response = client.post("/login", json={"email": ANA["email"], "password": ANA["password"]})
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == AuthMessages.LOGGED_IN
        assert data["user"]["id"] == 1
        assert "password" not in data["user"]

    def test_missing_password_returns_400(self, client):
        response = client.post("/login", json={"email": ANA["email"]})
        assert response.status_code == 400
        data = response.json()
        assert data["message"] == AuthMessages.LOGIN_FIELDS_REQUIRED
        assert "password" in data["errors"]

    def test_wrong_password_returns_401(self, client):
        client.post("/register", json=ANA)
        response = client.post("/login", json={"email": ANA["email"], "password": "wrong"})
        assert response.status_code == 401
        assert response.json() == {"message": AuthMessages.INVALID_CREDENTIALS}

    def test_unknown_email_and_wrong_password_are_byte_identical(self, client):
        client.post("/register", json=ANA)
        unknown = client.post("/login", json={"email": "nadie@example.com", "password": ANA["password"]})
        wrong = client.post("/login", json={"email": ANA["email"], "password": "wrong"})
        assert unknown.status_code == wrong.status_code == 401
        assert unknown.content == wrong.content

    def test_login_does_not_create_users(self, client):
        client.post("/login", json={"email": "nadie@example.com", "password": "secret1"})
        assert client.get("/users").json()["total"] == 0


class TestUsersAPI:
    """Tests for GET /users"""

    def test_lists_redacted_users(self, client):
        client.post("/register", json=ANA)
        client.post(
            "/register",
            json={"nombre": "Bob", "dpi": "9999999999999", "email": "bob@example.com", "password": "secret2"},
        )
        response = client.get("/users")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [u["id"] for u in data["usuarios"]] == [1, 2]
        for user in data["usuarios"]:
            assert "password" not in user
            assert "fechaRegistro" in user


class TestScenario:
    """End-to-end flow: register, duplicate, login, wrong password"""

    def test_ana_lopez_flow(self, client):
        first = client.post("/register", json=ANA)
        assert first.status_code == 201
        assert first.json()["user"]["id"] == 1

        duplicate = client.post("/register", json={**ANA, "dpi": "9999999999999"})
        assert duplicate.status_code == 409
        assert duplicate.json()["message"] == AuthMessages.DUPLICATE_EMAIL

        login = client.post("/login", json={"email": "ana@example.com", "password": "secret1"})
        assert login.status_code == 200
        assert login.json()["user"]["id"] == 1

        wrong = client.post("/login", json={"email": "ana@example.com", "password": "wrong"})
        assert wrong.status_code == 401
        assert wrong.json()["message"] == AuthMessages.INVALID_CREDENTIALS


class TestInternalFailure:
    """Unhandled errors map to a generic 500"""

    @pytest.fixture
    def failing_client(self, fresh_container):
        from login_backend.main import app

        register_use_case = AsyncMock(spec=RegisterUserUseCase)
        register_use_case.execute.side_effect = RuntimeError("secret internal detail")
        container = MagicMock()
        container.get.return_value = register_use_case

        with patch("login_backend.api.auth_controller.get_container", return_value=container):
            with TestClient(app, raise_server_exceptions=False) as c:
                yield c

    def test_returns_generic_500(self, failing_client):
        response = failing_client.post("/register", json=ANA)
        assert response.status_code == 500
        assert response.json() == {"message": AuthMessages.INTERNAL_ERROR}
        assert "secret internal detail" not in response.text
        assert "Traceback" not in response.text
