# Standard library imports
from collections.abc import Iterator
from pathlib import Path

# Third-party imports
from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

# Local application imports
from app.settings import settings
from app.services.auth import create_admin_token
from main import create_app

ADMIN_PASSWORD = "correct-horse-battery"
JWT_SECRET = "test-signing-secret-with-enough-length"


@pytest.fixture(autouse=True)
def test_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setattr(settings, "JWT_SECRET_KEY", JWT_SECRET)
    monkeypatch.setattr(settings, "TRUST_PROXY_HEADERS", True)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data.json"


@pytest.fixture
def app(data_file: Path) -> FastAPI:
    return create_app(data_file)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_admin_token()}"}


@pytest.fixture
def complaint_payload() -> dict[str, str]:
    return {
        "issueType": "Road",
        "title": "Pothole on Main St",
        "description": "Large pothole causing traffic issues",
        "location": "Main St & 5th",
    }
