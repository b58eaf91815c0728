import pytest

from app.services import (
    AlwaysReachableProbe,
    ConfiguredConnectionStatus,
    SettingsCredentialProvider,
)
from app.types import ConnectionStatus, GatewayCredential
from server.config import Settings
from tests.fixtures.gateway import CONNECTION_ID, GATEWAY_HOST, TOKEN


@pytest.mark.asyncio
async def test_probe_is_pass_through() -> None:
    probe = AlwaysReachableProbe()

    result = await probe.probe("+55 11 99999-8888")
    assert result.reachable is True
    assert result.normalized_phone == "5511999998888"

    # Even an empty number is reported reachable; validation happens at send time
    empty = await probe.probe(None)
    assert empty.reachable is True
    assert empty.normalized_phone == ""


@pytest.mark.asyncio
async def test_connection_status() -> None:
    status = ConfiguredConnectionStatus()

    assert await status.get_status(GatewayCredential(host=GATEWAY_HOST, token=TOKEN)) is (
        ConnectionStatus.WORKING
    )
    assert await status.get_status(GatewayCredential(host=GATEWAY_HOST)) is (
        ConnectionStatus.STOPPED
    )


def test_settings_credential_provider() -> None:
    credential = SettingsCredentialProvider(Settings()).get_credential()

    assert credential.host == GATEWAY_HOST
    assert credential.token == TOKEN
    assert credential.connection_id == CONNECTION_ID


def test_settings_credential_provider_missing_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DIGITALSAC_TOKEN", raising=False)
    monkeypatch.delenv("DIGITALSAC_CONNECTION_ID", raising=False)

    credential = SettingsCredentialProvider(Settings()).get_credential()

    assert credential.token == ""
    assert credential.connection_id is None
    assert not credential.is_complete()


def test_settings_timeout_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISPATCH_TIMEOUT_SECONDS", "not-a-number")
    assert Settings().dispatch_timeout_seconds == 15.0
