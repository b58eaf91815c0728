"""Gateway credential lookup backed by application settings."""

from __future__ import annotations

from app.types import CredentialProvider, GatewayCredential
from server.config import Settings


class SettingsCredentialProvider(CredentialProvider):
    """Builds a `GatewayCredential` from DIGITALSAC_* settings.

    Missing values are passed through as empty strings; the adapter decides
    that an incomplete credential is a configuration failure.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def get_credential(self) -> GatewayCredential:
        return GatewayCredential(
            host=self.settings.digitalsac_host or "",
            token=self.settings.digitalsac_token or "",
            connection_id=self.settings.digitalsac_connection_id or None,
        )
