from volunease.config import settings
from volunease.services.auth_service import get_token_issuer


def test_root_liveness(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Hello from VolunEase"


def test_jwt_sets_http_only_cookie(client):
    response = client.post("/api/jwt", json={"uid": "u1", "email": "u1@example.com"})

    assert response.status_code == 200
    assert response.json() == {"success": True}
    set_cookie = response.headers["set-cookie"].lower()
    assert set_cookie.startswith("token=")
    assert "httponly" in set_cookie
    assert "samesite=strict" in set_cookie
    assert "max-age=3600" in set_cookie


def test_guarded_route_without_cookie_is_unauthorized(client):
    response = client.post("/api/request-check", json={"postId": "p1", "volunteerId": "u1"})

    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorised"}


def test_tampered_cookie_is_unauthorized(client):
    response = client.post(
        "/api/request-check",
        json={"postId": "p1", "volunteerId": "u1"},
        headers={"Cookie": "token=abc.def.ghi"},
    )
    assert response.status_code == 401


def test_logout_clears_cookie(client, login):
    login("u1")
    assert client.post("/api/request-check", json={"postId": "p1", "volunteerId": "u1"}).status_code == 200

    response = client.post("/api/logout")

    assert response.json() == {"success": True}
    assert "max-age=0" in response.headers["set-cookie"].lower()
    assert client.post("/api/request-check", json={"postId": "p1", "volunteerId": "u1"}).status_code == 401


def test_session_with_reserved_claims_passes_the_guard(client, login):
    login("u1", aud="web", sub=42)

    response = client.post("/api/request-check", json={"postId": "p1", "volunteerId": "u1"})

    assert response.status_code == 200


def test_guard_reads_the_configured_cookie(client):
    token = get_token_issuer().issue({"uid": "u1"})

    response = client.post(
        "/api/request-check",
        json={"postId": "p1", "volunteerId": "u1"},
        headers={"Cookie": f"{settings.COOKIE_NAME}={token}"},
    )

    assert response.status_code == 200
