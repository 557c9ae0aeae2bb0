from fastapi.testclient import TestClient

from sofaclean.main import app
from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD, auth_headers


def test_login_success(client, seed_admin):
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    data = resp.json()
    assert "access_token" in data
    assert data["admin"]["email"] == ADMIN_EMAIL
    assert "admin_session" in resp.cookies


def test_login_email_is_case_insensitive(client, seed_admin):
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL.upper(), "password": ADMIN_PASSWORD})
    assert resp.status_code == 200


def test_login_wrong_password(client, seed_admin):
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": "wrong"})
    assert resp.status_code == 401


def test_login_unknown_email(client, seed_admin):
    resp = client.post("/api/auth/login", json={"email": "nobody@sofaclean.test", "password": "x"})
    assert resp.status_code == 401


def test_me_authenticated(client, seed_admin):
    headers = auth_headers(client)
    resp = client.get("/api/auth/me", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["email"] == ADMIN_EMAIL


def test_me_with_session_cookie_only(seed_admin):
    session_client = TestClient(app)
    login = session_client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert login.status_code == 200
    resp = session_client.get("/api/auth/me")
    assert resp.status_code == 200


def test_me_unauthenticated(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401


def test_me_with_garbage_token(client, seed_admin):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_inactive_admin_rejected(client, db, seed_admin):
    headers = auth_headers(client)
    seed_admin.is_active = False
    db.commit()
    fresh = TestClient(app)
    resp = fresh.get("/api/auth/me", headers=headers)
    assert resp.status_code == 401


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_logout_clears_session_cookie(seed_admin):
    session_client = TestClient(app)
    session_client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    resp = session_client.post("/api/auth/logout")
    assert resp.status_code == 200
    assert session_client.get("/api/auth/me").status_code == 401
