from __future__ import annotations

from typing import Any, Dict, Optional


class DispatchError(Exception):
    """Base class for every failure an outbound dispatch can produce.

    Attributes:
        code: Stable machine-readable identifier used in API responses.
        http_status: Status code the HTTP layer answers with.

    Adapters never retry on these; they are surfaced to the immediate caller,
    either raised from `send_message` or wrapped in a `DispatchOutcome` by
    `dispatch`.
    """

    code = "dispatch_error"
    http_status = 502

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.code, "detail": str(self)}


class ConfigurationMissing(DispatchError):
    """Gateway host or token is absent."""

    code = "configuration_missing"
    http_status = 503


class InvalidRequest(DispatchError):
    """Missing tracking key or malformed message."""

    code = "invalid_request"
    http_status = 400


class MediaUnreachable(DispatchError):
    """The media source could not be downloaded."""

    code = "media_unreachable"
    http_status = 422

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to download media from {url}: {reason}")
        self.url = url
        self.reason = reason

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["url"] = self.url
        return data


class GatewayRejected(DispatchError):
    """The gateway answered the send request with a non-2xx status.

    `body` is kept verbatim so callers can log or display the gateway's own
    diagnostics.
    """

    code = "gateway_rejected"
    http_status = 502

    def __init__(self, status: int, body: str, reason: Optional[str] = None) -> None:
        message = f"Gateway error: {status}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(f"{message} - {body}")
        self.status = status
        self.body = body

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["status"] = self.status
        data["body"] = self.body
        return data


class TransportFailure(DispatchError):
    """No response was received (connection refused, DNS, protocol error)."""

    code = "transport_failure"
    http_status = 502


class DispatchTimeout(TransportFailure):
    """A round trip exceeded the configured timeout."""

    code = "timeout"
    http_status = 504
