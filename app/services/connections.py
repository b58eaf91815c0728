"""Connection status reporting.

The gateway keeps the WhatsApp session on its side, so there is nothing to
connect, disconnect or scan a QR code for. A connection is ready whenever a
host and token are configured.
"""

from __future__ import annotations

import logging
from typing import Optional

from app.types import ConnectionStatus, ConnectionStatusProvider, GatewayCredential

logger = logging.getLogger(__name__)


class ConfiguredConnectionStatus(ConnectionStatusProvider):
    """Reports WORKING for any fully configured credential, STOPPED otherwise."""

    async def get_status(
        self, credential: GatewayCredential, connection_id: Optional[str] = None
    ) -> ConnectionStatus:
        if not credential.is_complete():
            logger.warning(
                "DigitalSac settings incomplete",
                extra={"connection_id": connection_id or credential.connection_id},
            )
            return ConnectionStatus.STOPPED
        return ConnectionStatus.WORKING


_connection_status: Optional[ConfiguredConnectionStatus] = None


def get_connection_status() -> ConnectionStatusProvider:
    """Get or create the connection status instance."""
    global _connection_status
    if _connection_status is None:
        _connection_status = ConfiguredConnectionStatus()
    return _connection_status
