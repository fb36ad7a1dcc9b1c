# Third-party imports
from fastapi.testclient import TestClient

# Local application imports
from app.settings import settings


def test_root(client: TestClient):
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["message"]


def test_health(client: TestClient, complaint_payload: dict):
    client.post("/api/complaints", json=complaint_payload)

    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["complaints"] == 1


def test_security_headers(client: TestClient):
    response = client.get("/api/complaints")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
    assert response.headers["Referrer-Policy"] == "no-referrer"
    assert "Strict-Transport-Security" in response.headers
    assert response.headers["X-Request-ID"]


def test_request_id_is_echoed(client: TestClient):
    response = client.get("/", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


def test_cors_reflects_origin(client: TestClient):
    response = client.options(
        "/api/complaints",
        headers={
            "Origin": "https://portal.example.org",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://portal.example.org"


def test_body_size_limit(client: TestClient):
    response = client.post(
        "/api/complaints",
        content=b" " * (settings.MAX_BODY_SIZE + 1),
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 413
    assert response.json()["error"]["code"] == "payload_too_large"


def test_body_size_limit_counts_chunked_uploads(client: TestClient):
    chunk = b" " * (1024 * 1024)
    chunks = settings.MAX_BODY_SIZE // len(chunk) + 1

    def stream():
        for _ in range(chunks):
            yield chunk

    response = client.post(
        "/api/complaints",
        content=stream(),
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 413
    assert response.json()["error"]["code"] == "payload_too_large"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_malformed_json_is_a_validation_error(client: TestClient):
    response = client.post(
        "/api/complaints",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "bad_request"


def test_unknown_route(client: TestClient):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json()["ok"] is False
