"""Pytest fixtures for the API tests.

The FastAPI app runs against tests.fakes.FakeSupabase: every Supabase
dependency (anon, service-role and caller-scoped) is overridden with the
same in-memory store.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.dependencies import get_caller_supabase
from app.database.supabase_client import get_auth_supabase, get_service_supabase
from app.main import app
from tests.fakes import FakeSupabase

API = "/api/v1"


@pytest.fixture
def api_v1_prefix() -> str:
    return API


@pytest.fixture
def store() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def test_client(store):
    app.dependency_overrides[get_auth_supabase] = lambda: store
    app.dependency_overrides[get_service_supabase] = lambda: store
    app.dependency_overrides[get_caller_supabase] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


class UserHandle:
    def __init__(self, user_id: str, email: str, token: str):
        self.id = user_id
        self.email = email
        self.token = token

    @property
    def headers(self):
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture
def make_user(test_client, store):
    """Register and log in a user through the API; `admin=True` grants the admin role."""
    def _make(email: str, name: str = "", admin: bool = False) -> UserHandle:
        response = test_client.post(
            f"{API}/auth/register",
            json={"email": email, "password": "CampusPass123!", "name": name},
        )
        assert response.status_code == 201, response.text
        user_id = response.json()["user_id"]
        if admin:
            store.grant_role(user_id, "admin")
        login = test_client.post(
            f"{API}/auth/login",
            json={"email": email, "password": "CampusPass123!"},
        )
        assert login.status_code == 200, login.text
        return UserHandle(user_id, email, login.json()["access_token"])
    return _make


@pytest.fixture
def alice(make_user) -> UserHandle:
    return make_user("alice@campus.edu", name="Alice")


@pytest.fixture
def bob(make_user) -> UserHandle:
    return make_user("bob@campus.edu", name="Bob")


@pytest.fixture
def admin(make_user) -> UserHandle:
    return make_user("dean@campus.edu", name="Dean", admin=True)
