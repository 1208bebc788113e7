from __future__ import annotations

import os
import tempfile
from pathlib import Path

_TEST_DIR = Path(tempfile.mkdtemp(prefix="jobtracker-tests-"))
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DIR / 'test.db'}"
os.environ["DATA_DIR"] = str(_TEST_DIR)
os.environ["JWT_SECRET"] = "test-secret-with-at-least-32-bytes-of-entropy"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["CORS_ORIGINS"] = "*"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from jobtracker.api.app import create_app  # noqa: E402
from jobtracker.db.base import Base  # noqa: E402
from jobtracker.db import models  # noqa: E402,F401
from jobtracker.db.session import engine  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture()
def login(client: TestClient):
    """Register ``username`` and return bearer headers for it."""

    def _login(username: str, password: str = "pw123") -> dict[str, str]:
        register_resp = client.post(
            "/register",
            json={"username": username, "password": password, "create_time": "2026-10-01T09:00:00Z"},
        )
        assert register_resp.status_code == 200
        login_resp = client.post("/login", json={"username": username, "password": password})
        assert login_resp.status_code == 200
        return {"Authorization": f"Bearer {login_resp.json()['token']}"}

    return _login
