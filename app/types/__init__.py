"""Core types for the WhatsApp dispatch service.

This package centralizes all enums, message models, adapter protocols,
errors, and result schemas in one place to keep the codebase discoverable and
maintainable. Most modules should import types from here rather than directly
from submodules.

Usage:
    from app.types import OutboundMessage, MessagingAdapter, MediaKind
"""

from .enums import ConnectionStatus, MediaKind
from .errors import (
    ConfigurationMissing,
    DispatchError,
    DispatchTimeout,
    GatewayRejected,
    InvalidRequest,
    MediaUnreachable,
    TransportFailure,
)
from .credentials import GatewayCredential
from .messages import DispatchRequest, MediaRef, OutboundMessage
from .results import ContactCheckResult, DispatchOutcome
from .protocols import (
    ConnectionStatusProvider,
    ContactProbe,
    CredentialProvider,
    MessagingAdapter,
)
from .api import (
    ConnectionStatusResponse,
    ContactCheckRequest,
    SendMessageRequest,
    SendMessageResponse,
)

__all__ = [
    "MediaKind",
    "ConnectionStatus",
    "DispatchError",
    "ConfigurationMissing",
    "InvalidRequest",
    "MediaUnreachable",
    "GatewayRejected",
    "TransportFailure",
    "DispatchTimeout",
    "GatewayCredential",
    "MediaRef",
    "OutboundMessage",
    "DispatchRequest",
    "DispatchOutcome",
    "ContactCheckResult",
    "MessagingAdapter",
    "CredentialProvider",
    "ContactProbe",
    "ConnectionStatusProvider",
    "SendMessageRequest",
    "SendMessageResponse",
    "ContactCheckRequest",
    "ConnectionStatusResponse",
]
