from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.adapters.digitalsac import DigitalSacAdapter
from app.types import GatewayCredential
from server.app import app
from server.config import Settings, get_settings
from tests.fixtures.gateway import CONNECTION_ID, GATEWAY_HOST, TOKEN


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "test")
    # Safe defaults for the DigitalSac adapter
    monkeypatch.setenv("DIGITALSAC_HOST", GATEWAY_HOST)
    monkeypatch.setenv("DIGITALSAC_TOKEN", TOKEN)
    monkeypatch.setenv("DIGITALSAC_CONNECTION_ID", CONNECTION_ID)
    monkeypatch.setenv("DISPATCH_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("MESSAGING_PROVIDER", "digitalsac")


@pytest.fixture()
def credential() -> GatewayCredential:
    return GatewayCredential(host=GATEWAY_HOST, token=TOKEN, connection_id=CONNECTION_ID)


@pytest.fixture()
def adapter() -> DigitalSacAdapter:
    return DigitalSacAdapter(timeout=5)


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    # Settings read the environment on creation; bypass the process-wide cache
    app.dependency_overrides[get_settings] = lambda: Settings()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
