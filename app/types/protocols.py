from __future__ import annotations

from typing import Any, Optional, Protocol, Union

from .credentials import GatewayCredential
from .enums import ConnectionStatus
from .messages import OutboundMessage
from .results import ContactCheckResult, DispatchOutcome


class MessagingAdapter(Protocol):
    """Protocol for outbound WhatsApp gateway providers.

    Concrete implementations encapsulate the provider's wire format so routers
    remain provider-agnostic. Credentials are passed per call; adapters hold
    no configuration of their own beyond transport settings.

    Responsibilities:
        - Validate the call before touching the network
        - Convert `OutboundMessage` into the provider request and send it once
        - Report the result as a `DispatchOutcome`, never retrying

    Minimal example:
        >>> from app.types import DispatchOutcome, MessagingAdapter
        >>> class EchoAdapter(MessagingAdapter):
        ...     async def send_message(self, credential, phone, message, external_key):
        ...         return {"echo": message.text}
        ...     async def dispatch(self, credential, phone, message, external_key):
        ...         return DispatchOutcome.success(
        ...             await self.send_message(credential, phone, message, external_key)
        ...         )
    """

    async def send_message(
        self,
        credential: GatewayCredential,
        phone: Union[str, int, None],
        message: OutboundMessage,
        external_key: Optional[str],
    ) -> Any:
        """Send a message, returning the provider payload or raising `DispatchError`."""
        ...

    async def dispatch(
        self,
        credential: GatewayCredential,
        phone: Union[str, int, None],
        message: OutboundMessage,
        external_key: Optional[str],
    ) -> DispatchOutcome:
        """Send a message and report success or failure as a value."""
        ...


class CredentialProvider(Protocol):
    """Source of gateway credentials (settings, database, secrets manager)."""

    def get_credential(self) -> GatewayCredential:
        ...


class ContactProbe(Protocol):
    """Answers whether a phone number can receive WhatsApp messages."""

    async def probe(self, phone: Union[str, int, None]) -> ContactCheckResult:
        ...


class ConnectionStatusProvider(Protocol):
    """Reports whether a gateway connection is ready to send."""

    async def get_status(
        self, credential: GatewayCredential, connection_id: Optional[str] = None
    ) -> ConnectionStatus:
        ...
