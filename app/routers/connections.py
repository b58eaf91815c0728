from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.routers.dependencies import get_credential_provider
from app.services import get_connection_status
from app.types import ConnectionStatusProvider, ConnectionStatusResponse, CredentialProvider

router = APIRouter(tags=["connections"])


@router.get("/connections/status")
async def connection_status(
    connection_id: Optional[str] = Query(default=None, alias="connectionId"),
    credentials: CredentialProvider = Depends(get_credential_provider),
    status_provider: ConnectionStatusProvider = Depends(get_connection_status),
) -> ConnectionStatusResponse:
    credential = credentials.get_credential()
    status = await status_provider.get_status(credential, connection_id)
    return ConnectionStatusResponse(
        connection_id=connection_id or credential.connection_id, status=status
    )
