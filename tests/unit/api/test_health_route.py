"""Unit tests for GET /v1/health."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.dependencies.booth import get_booth_kiosk_service
from src.api.routes.health import router
from src.bootstrap.booth import build_booth_kiosk
from src.config import TEST_BOOTH_CONFIG
from tests.helpers import FakeTimeAuthority


@pytest.fixture
def client() -> TestClient:
    kiosk = build_booth_kiosk(TEST_BOOTH_CONFIG, time_authority=FakeTimeAuthority())
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_booth_kiosk_service] = lambda: kiosk
    return TestClient(app)


class TestHealthRoute:
    """Tests for the health endpoint."""

    def test_health_reports_booth_and_phase(self, client: TestClient) -> None:
        response = client.get("/v1/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "booth_id": "TEST-1",
            "session_phase": "IDLE",
        }
