from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.routers.dependencies import get_adapter, get_credential_provider
from app.services import get_contact_probe
from app.types import (
    ContactCheckRequest,
    ContactCheckResult,
    ContactProbe,
    CredentialProvider,
    MessagingAdapter,
    SendMessageRequest,
    SendMessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["messaging"])


@router.post("/messages/send")
async def send_message(
    payload: SendMessageRequest,
    adapter: MessagingAdapter = Depends(get_adapter),
    credentials: CredentialProvider = Depends(get_credential_provider),
) -> SendMessageResponse:
    """Send one text or media message through the configured gateway.

    Failures are raised as `DispatchError` by `unwrap()` and rendered by the
    app's exception handler with a status code matching the failure type.
    """
    credential = credentials.get_credential()
    if payload.connection_id:
        credential = credential.model_copy(update={"connection_id": payload.connection_id})

    outcome = await adapter.dispatch(
        credential, payload.phone, payload.message, payload.external_key
    )
    result = outcome.unwrap()
    logger.info("message sent", extra={"external_key": payload.external_key})
    return SendMessageResponse(ok=True, result=result)


@router.post("/contacts/check")
async def check_contact(
    payload: ContactCheckRequest,
    probe: ContactProbe = Depends(get_contact_probe),
) -> ContactCheckResult:
    """Report whether a number can be messaged (always true, see `AlwaysReachableProbe`)."""
    return await probe.probe(payload.phone)
