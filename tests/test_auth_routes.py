from fastapi.testclient import TestClient

from app.main import app


def test_login_bad_credentials_returns_json(client):
    resp = client.post("/api/login", json={"username": "nouser", "password": "bad"})
    assert resp.status_code == 401
    assert "application/json" in resp.headers.get("content-type", "").lower()


def test_register_validation(client, register):
    assert register(client, username="ab").status_code == 400
    assert register(client, username="bad name!").status_code == 400
    assert register(client, password="short").status_code == 400
    assert register(client).status_code == 200
    assert register(TestClient(app)).status_code == 409


def test_first_user_is_admin_only(client, register):
    register(client, username="founder")
    assert client.get("/api/me").json() == {"username": "founder", "isAdmin": True}

    other = TestClient(app)
    register(other, username="second")
    assert other.get("/api/me").json() == {"username": "second", "isAdmin": False}
    assert other.get("/api/admin/users").status_code == 403
    assert other.get("/admin", follow_redirects=False).status_code == 403


def test_login_logout_cycle(client, register):
    register(client, username="walker")
    client.post("/api/logout")
    assert client.get("/api/me").status_code == 401

    resp = client.post("/api/login", json={"username": "walker", "password": "password123"})
    assert resp.json() == {"ok": True, "redirect": "/"}
    assert client.get("/api/me").json()["username"] == "walker"


def test_pages_redirect_to_login_when_anonymous(client):
    for path in ("/", "/map", "/ashen", "/story", "/library", "/admin"):
        resp = client.get(path, follow_redirects=False)
        assert resp.status_code in (302, 303)
        assert resp.headers.get("location") == "/login"


def test_pages_render_when_logged_in(client, register):
    register(client)
    for path in ("/", "/map", "/ashen", "/story", "/library", "/admin"):
        resp = client.get(path)
        assert resp.status_code == 200
        assert "text/html" in resp.headers.get("content-type", "").lower()

    resp = client.get("/login", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers.get("location") == "/"


def test_admin_user_list_and_reset(client, register):
    register(client, username="founder")
    other = TestClient(app)
    register(other, username="grinder")
    other.post("/api/xp", json={"xp": 900})

    users = client.get("/api/admin/users").json()
    assert [u["username"] for u in users] == ["grinder", "founder"]
    assert users[0]["total_xp"] == 900

    assert client.post(f"/api/admin/reset-user/{users[0]['id']}").json() == {"ok": True}
    assert other.get("/api/state").json()["totalXP"] == 0
    assert client.post("/api/admin/reset-user/9999").status_code == 404
