import pytest

from volunease.config import settings
from volunease.main import app

ALLOWED = "https://volunease.example"
OTHER = "https://elsewhere.example"


@pytest.fixture
def allowed_origins():
    """Point the CORS allow-list at ALLOWED and rebuild the middleware stack."""
    saved = list(settings.ALLOWED_URLS)
    settings.ALLOWED_URLS[:] = [ALLOWED]
    app.middleware_stack = None
    yield [ALLOWED]
    settings.ALLOWED_URLS[:] = saved
    app.middleware_stack = None


def test_allowed_origin_gets_credentialed_cors_headers(allowed_origins, client):
    response = client.get("/api/posts", headers={"Origin": ALLOWED})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED
    assert response.headers["access-control-allow-credentials"] == "true"


def test_other_origin_gets_no_cors_headers(allowed_origins, client):
    response = client.get("/api/posts", headers={"Origin": OTHER})

    assert "access-control-allow-origin" not in response.headers


def test_preflight_from_allowed_origin(allowed_origins, client):
    response = client.options(
        "/api/add-post",
        headers={"Origin": ALLOWED, "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED


def test_preflight_from_other_origin_is_refused(allowed_origins, client):
    response = client.options(
        "/api/add-post",
        headers={"Origin": OTHER, "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_request_without_origin_passes(allowed_origins, client):
    response = client.get("/api/posts")

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers
