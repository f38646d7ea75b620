"""
Shared fixtures: an app client that never touches Postgres.

The TestClient is used without its context manager, so the lifespan (pool
init and schema) does not run; repository functions are patched per test.
"""

import os
from datetime import datetime, timezone

os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient

from auth import dependencies as auth_dependencies
from auth import security
from main import app

CREATED_AT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_user_row(user_id: int = 1, username: str = "robin", **overrides) -> dict:
    row = {
        "id": user_id,
        "username": username,
        "email": f"{username}@example.com",
        "bio": "Love birdwatching",
        "created_at": CREATED_AT,
    }
    row.update(overrides)
    return row


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def current_user():
    """Authenticate every request as robin (user 1) without a token."""
    user = make_user_row()
    app.dependency_overrides[auth_dependencies.get_current_user] = lambda: user
    yield user
    app.dependency_overrides.pop(auth_dependencies.get_current_user, None)


@pytest.fixture
def auth_headers() -> dict:
    token = security.build_access_token(user_id=1, username="robin", email="robin@example.com")
    return {"Authorization": f"Bearer {token}"}
