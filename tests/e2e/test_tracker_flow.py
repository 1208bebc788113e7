from fastapi.testclient import TestClient

from jobtracker.api.app import create_app


def test_register_login_add_and_list() -> None:
    client = TestClient(create_app())

    register_resp = client.post(
        "/register",
        json={"username": "alice", "password": "pw123", "create_time": "2026-10-19T08:00:00Z"},
    )
    assert register_resp.status_code == 200

    login_resp = client.post("/login", json={"username": "alice", "password": "pw123"})
    assert login_resp.status_code == 200
    headers = {"Authorization": f"Bearer {login_resp.json()['token']}"}

    add_resp = client.post(
        "/applications/add",
        json={"job_title": "Eng", "company_name": "Acme", "status": "Applied", "is_marked": False},
        headers=headers,
    )
    assert add_resp.status_code == 200
    assert add_resp.json() == {"success": True, "id": 1}

    list_resp = client.get("/applications", headers=headers)
    assert list_resp.status_code == 200
    results = list_resp.json()["results"]
    assert len(results) == 1
    assert results[0]["id"] == 1
    assert results[0]["job_title"] == "Eng"


def test_full_lifecycle_edit_summary_delete() -> None:
    client = TestClient(create_app())
    client.post("/register", json={"username": "carol", "password": "s3cret", "create_time": "now"})
    token = client.post("/login", json={"username": "carol", "password": "s3cret"}).json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    ids = [
        client.post(
            "/applications/add",
            json={"job_title": title, "company_name": "Initech", "status": "Applied"},
            headers=headers,
        ).json()["id"]
        for title in ("Backend", "Frontend")
    ]

    edit_resp = client.post(
        "/applications/edit",
        json={"id": ids[0], "job_title": "Backend", "company_name": "Initech", "status": "Rejected"},
        headers=headers,
    )
    assert edit_resp.json() == {"success": True}

    summary = client.get("/applications/summary", headers=headers).json()
    assert summary["total"] == 2
    assert summary["rejection_rate"] == 50.0

    delete_resp = client.post("/applications/delete", json={"application_id": ids}, headers=headers)
    assert delete_resp.json() == {"success": 2}
    assert client.get("/applications", headers=headers).json() == {"results": []}
