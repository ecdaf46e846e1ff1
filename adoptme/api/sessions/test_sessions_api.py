# adoptme/api/sessions/test_sessions_api.py
"""회원가입/로그인/현재 사용자 API 통합 테스트"""
from datetime import timedelta

from adoptme.core.security import create_session_token

USER = {"first_name": "Edu", "last_name": "Galli", "email": "edu@correofalso.com", "password": "1234"}


def _session_cookie(response):
    set_cookie = response.headers.getlist("Set-Cookie")[0]
    name, value = set_cookie.split(";")[0].split("=", 1)
    return name, value


def test_register_user(client):
    response = client.post("/api/sessions/register", json=USER)

    assert response.status_code == 201
    payload = response.get_json()["payload"]
    assert "_id" in payload
    assert payload["email"] == USER["email"]
    assert payload["role"] == "user"
    assert payload["pets"] == []
    assert "password" not in payload

def test_password_is_stored_hashed(app, client):
    client.post("/api/sessions/register", json=USER)

    stored = app.services['db'].collection('users').find_one({"email": USER["email"]})
    assert stored["password"] != USER["password"]
    assert stored["password"].startswith("$2")

def test_register_duplicate_email_returns_409(client):
    assert client.post("/api/sessions/register", json=USER).status_code == 201

    response = client.post("/api/sessions/register", json={**USER, "email": "EDU@correofalso.com"})

    assert response.status_code == 409
    assert response.get_json()["error_code"] == "CONFLICT"

def test_register_with_missing_fields_returns_400(client):
    response = client.post("/api/sessions/register", json={"email": "x@y.com", "password": "1234"})

    assert response.status_code == 400
    details = response.get_json()["details"]
    assert "first_name" in details and "last_name" in details

def test_register_with_invalid_email_returns_400(client):
    response = client.post("/api/sessions/register", json={**USER, "email": "not-an-email"})

    assert response.status_code == 400

def test_register_with_password_over_72_bytes_returns_400(client):
    # 40글자지만 UTF-8로는 80바이트
    response = client.post("/api/sessions/register", json={**USER, "password": "ñ" * 40})

    assert response.status_code == 400
    assert "password" in response.get_json()["details"]

def test_register_with_72_byte_multibyte_password(client):
    response = client.post("/api/sessions/register", json={**USER, "password": "ñ" * 36})

    assert response.status_code == 201

def test_login_sets_coder_cookie(client, register_user):
    register_user()
    response = client.post("/api/sessions/login", json={"email": USER["email"], "password": USER["password"]})

    assert response.status_code == 200
    name, value = _session_cookie(response)
    assert name == "coderCookie"
    assert value
    assert "HttpOnly" in response.headers.getlist("Set-Cookie")[0]

def test_login_with_wrong_password_returns_401(client, register_user):
    register_user()
    response = client.post("/api/sessions/login", json={"email": USER["email"], "password": "nope"})

    assert response.status_code == 401
    assert not response.headers.getlist("Set-Cookie")

def test_login_with_unknown_email_returns_401(client):
    response = client.post("/api/sessions/login", json={"email": "ghost@correofalso.com", "password": "1234"})

    assert response.status_code == 401

def test_login_with_missing_fields_returns_400(client):
    response = client.post("/api/sessions/login", json={"email": USER["email"]})

    assert response.status_code == 400

def test_current_returns_logged_in_user(client, register_user):
    """로그인 쿠키로 /current를 호출하면 가입한 이메일이 반환되어야 함"""
    register_user()
    client.post("/api/sessions/login", json={"email": USER["email"], "password": USER["password"]})

    response = client.get("/api/sessions/current")

    assert response.status_code == 200
    assert response.get_json()["payload"]["email"] == USER["email"]
    assert "password" not in response.get_json()["payload"]

def test_current_with_explicit_cookie_header(app, register_user):
    register_user()
    login = app.test_client().post("/api/sessions/login", json={"email": USER["email"], "password": USER["password"]})
    name, value = _session_cookie(login)

    cookieless = app.test_client(use_cookies=False)
    response = cookieless.get("/api/sessions/current", headers={"Cookie": f"{name}={value}"})

    assert response.status_code == 200
    assert response.get_json()["payload"]["email"] == USER["email"]

def test_current_without_cookie_returns_401(client):
    response = client.get("/api/sessions/current")

    assert response.status_code == 401
    assert response.get_json()["status"] == "error"

def test_current_with_tampered_cookie_returns_401(app):
    cookieless = app.test_client(use_cookies=False)
    response = cookieless.get("/api/sessions/current", headers={"Cookie": "coderCookie=not.a.token"})

    assert response.status_code == 401

def test_current_with_expired_cookie_returns_401(app, register_user):
    user = register_user()
    token = create_session_token({"sub": user["_id"]}, app.config['SESSION_SECRET_KEY'], timedelta(seconds=-1))

    cookieless = app.test_client(use_cookies=False)
    response = cookieless.get("/api/sessions/current", headers={"Cookie": f"coderCookie={token}"})

    assert response.status_code == 401

def test_current_for_deleted_user_returns_401(client, register_user):
    user = register_user()
    client.post("/api/sessions/login", json={"email": USER["email"], "password": USER["password"]})
    client.delete(f"/api/users/{user['_id']}")

    response = client.get("/api/sessions/current")

    assert response.status_code == 401

def test_logout_clears_session(client, register_user):
    register_user()
    client.post("/api/sessions/login", json={"email": USER["email"], "password": USER["password"]})

    assert client.post("/api/sessions/logout").status_code == 200
    assert client.get("/api/sessions/current").status_code == 401
