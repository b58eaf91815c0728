from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GatewayCredential(BaseModel):
    """Host and bearer token for one gateway connection.

    Attributes:
        host: Gateway base URL (e.g. ``https://api.digitalsac.io``). When
            `connection_id` is omitted this must already be the full
            connection URL.
        token: Bearer token sent on every gateway request.
        connection_id: Connection UUID appended under the external API path.

    The adapter borrows a credential for a single call and never stores it.
    """

    model_config = ConfigDict(frozen=True)

    host: str = ""
    token: str = Field(default="", repr=False)
    connection_id: Optional[str] = None

    def is_complete(self) -> bool:
        return bool(self.host and self.token)
