from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import ConnectionStatus
from .messages import OutboundMessage


class SendMessageRequest(BaseModel):
    """Outbound send request accepted by the HTTP API.

    Attributes:
        phone: Destination number in any format; it is reduced to digits.
        message: Text or media message (see `OutboundMessage`).
        external_key: Caller-assigned tracking key forwarded as `externalKey`.
        connection_id: Optional connection UUID overriding the configured one.

    Examples:
        Text:
            {
              "phone": "+55 11 99999-8888",
              "externalKey": "order-1234",
              "message": {"text": "Your order has shipped"}
            }

        Document:
            {
              "phone": "5511999998888",
              "externalKey": "invoice-77",
              "message": {
                "document": {"url": "https://cdn.example.com/invoice.pdf"},
                "fileName": "invoice.pdf"
              }
            }
    """

    model_config = ConfigDict(populate_by_name=True)

    phone: Optional[Union[str, int]] = None
    message: OutboundMessage
    external_key: Optional[str] = Field(default=None, alias="externalKey")
    connection_id: Optional[str] = Field(default=None, alias="connectionId")


class SendMessageResponse(BaseModel):
    """Response for a successful send.

    Attributes:
        ok: Always true; failures are rendered by the error handlers.
        result: Gateway response payload, passed through as received.
    """

    ok: bool
    result: Any = None


class ContactCheckRequest(BaseModel):
    phone: Optional[Union[str, int]] = None


class ConnectionStatusResponse(BaseModel):
    connection_id: Optional[str] = None
    status: ConnectionStatus
