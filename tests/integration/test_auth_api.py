import time

from fastapi.testclient import TestClient

from jobtracker.config import get_settings
from jobtracker.core.security import create_token


def _register(client: TestClient, **overrides):
    body = {"username": "alice", "password": "pw123", "create_time": "2026-10-01T09:00:00Z"}
    body.update(overrides)
    return client.post("/register", json=body)


def test_register_then_login_returns_token(client: TestClient) -> None:
    register_resp = _register(client)
    assert register_resp.status_code == 200
    assert register_resp.json() == {"success": True}

    login_resp = client.post("/login", json={"username": "alice", "password": "pw123"})
    assert login_resp.status_code == 200
    assert login_resp.json()["token"].count(".") == 2


def test_register_rejects_duplicate_username(client: TestClient) -> None:
    assert _register(client).status_code == 200
    duplicate = _register(client, password="other")
    assert duplicate.status_code == 400
    assert duplicate.json() == {"error": "Username already exists"}


def test_register_requires_all_fields(client: TestClient) -> None:
    assert client.post("/register", json={"username": "alice", "password": "pw123"}).status_code == 400
    assert _register(client, username="   ").status_code == 400
    assert _register(client, create_time="").status_code == 400


def test_login_rejects_unknown_user_and_wrong_password(client: TestClient) -> None:
    _register(client)
    for body in ({"username": "nobody", "password": "pw123"}, {"username": "alice", "password": "nope"}):
        response = client.post("/login", json=body)
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid username or password"}


def test_long_passwords_register_and_log_in(client: TestClient) -> None:
    long_password = "x" * 100
    assert _register(client, password=long_password).status_code == 200

    assert client.post("/login", json={"username": "alice", "password": long_password}).status_code == 200
    wrong = client.post("/login", json={"username": "alice", "password": "y" * 100})
    assert wrong.status_code == 401
    assert wrong.json() == {"error": "Invalid username or password"}


def test_login_requires_username_and_password(client: TestClient) -> None:
    response = client.post("/login", json={"username": "alice"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}


def test_malformed_json_body_is_a_bad_request(client: TestClient) -> None:
    response = client.post("/login", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400


def test_protected_route_requires_authorization_header(client: TestClient) -> None:
    response = client.get("/applications")
    assert response.status_code == 401
    assert response.json() == {"error": "Authorization header missing"}


def test_protected_route_rejects_bad_tokens_with_401(client: TestClient) -> None:
    for header in ("Bearer", "Bearer not.a.token", "Token abc.def.ghi"):
        response = client.get("/applications", headers={"Authorization": header})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}


def test_protected_route_rejects_expired_token_with_401(client: TestClient) -> None:
    token = create_token(
        {"USERNAME": "alice", "USER_ID": 1, "exp": int(time.time()) - 5},
        get_settings().jwt_secret,
    )
    response = client.get("/applications", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json() == {"error": "Token expired"}


def test_token_without_user_id_is_a_bad_request(client: TestClient) -> None:
    token = create_token({"USERNAME": "alice", "exp": int(time.time()) + 60}, get_settings().jwt_secret)
    response = client.get("/applications", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 400
