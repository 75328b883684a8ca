"""Pytest configuration and fixtures"""
import os
import tempfile

# The storage singleton reads DATABASE_URL at import time
_DB_DIR = tempfile.mkdtemp(prefix="chirpy-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["APP_ENV"] = "testing"

import pytest

from api import create_app
from models import storage


@pytest.fixture(scope="function")
def store():
    """Fresh tables for each test"""
    storage.drop_all()
    storage.reload()
    yield storage
    storage.close()


@pytest.fixture(scope="function")
def app(store):
    app = create_app("testing")
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def jwt_secret(app) -> str:
    return app.config["JWT_SECRET"]


@pytest.fixture
def user_credentials() -> dict:
    return {"email": "walt@breakingbad.com", "password": "123456"}


@pytest.fixture
def register(client):
    """Register a user through the API and return the response body"""
    def _register(email: str, password: str) -> dict:
        response = client.post("/api/users", json={"email": email, "password": password})
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _register


@pytest.fixture
def login(client):
    """Log a user in through the API and return the response body"""
    def _login(email: str, password: str) -> dict:
        response = client.post("/api/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.get_json()
        return response.get_json()

    return _login


@pytest.fixture
def logged_in_user(register, login, user_credentials) -> dict:
    register(**user_credentials)
    return login(**user_credentials)


@pytest.fixture
def bearer():
    """Build an Authorization header for a token"""
    def _bearer(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}

    return _bearer
