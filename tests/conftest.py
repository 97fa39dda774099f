"""
Shared fixtures: an in-memory user repository and a test app wired to it.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_user_repository
from config.settings import Settings
from database.models import User
from database.users import EDITABLE_FIELDS
from main import create_app
from utils.errors import PersistenceError

TEST_SECRET = "test-secret-key-with-enough-length-for-hs256"


class InMemoryUserRepository:
    """Same interface as ``database.users.UserRepository``, backed by a dict."""

    def __init__(self):
        self.users: Dict[uuid.UUID, User] = {}
        self.fail = False

    def _check(self) -> None:
        if self.fail:
            raise PersistenceError()

    async def get_by_id(self, user_id) -> Optional[User]:
        self._check()
        uid = uuid.UUID(str(user_id))
        return self.users.get(uid)

    async def get_by_email(self, email: str) -> Optional[User]:
        self._check()
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    async def create(self, **fields: Any) -> User:
        self._check()
        if any(u.email == fields["email"] for u in self.users.values()):
            raise PersistenceError()
        now = datetime.now(timezone.utc)
        user = User(user_id=uuid.uuid4(), created_at=now, updated_at=now, **fields)
        self.users[user.user_id] = user
        return user

    async def update_profile(self, user_id, fields: Dict[str, Any]) -> Optional[User]:
        self._check()
        user = self.users.get(uuid.UUID(str(user_id)))
        if user is None:
            return None
        for key, value in fields.items():
            if key in EDITABLE_FIELDS:
                setattr(user, key, value)
        user.updated_at = datetime.now(timezone.utc)
        return user


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret=TEST_SECRET,
        jwt_expiry_seconds=3600,
        bcrypt_rounds=4,
        db_auto_create=False,
        openrouter_api_key="",
        auth_cookie_secure=False,
        auth_cookie_samesite="lax",
        auth_cookie_domain=None,
    )


@pytest.fixture
def repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def app(settings, repo):
    application = create_app(settings)
    application.dependency_overrides[get_user_repository] = lambda: repo
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


ANA = {
    "firstName": "Ana",
    "lastName": "Silva",
    "phone": "123",
    "cityState": "SP",
    "email": "a@b.com",
    "password": "secret1",
}


@pytest.fixture
def ana() -> Dict[str, str]:
    return dict(ANA)


@pytest.fixture
def ana_token(client) -> str:
    """Register and log in the reference user, returning the bearer token."""
    assert client.post("/register", json=ANA).status_code == 201
    resp = client.post("/login", json={"email": ANA["email"], "password": ANA["password"]})
    assert resp.status_code == 200
    client.cookies.clear()
    return resp.json()["token"]
