from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, Union

import httpx

from app.types import (
    ConfigurationMissing,
    DispatchError,
    DispatchOutcome,
    DispatchRequest,
    DispatchTimeout,
    GatewayCredential,
    GatewayRejected,
    InvalidRequest,
    MediaKind,
    MediaUnreachable,
    MessagingAdapter,
    OutboundMessage,
    TransportFailure,
)
from app.utils.phone import normalize_phone

logger = logging.getLogger(__name__)

EXTERNAL_API_PATH = "v1/api/external"
CAPTION_SUFFIX = "/send-media-caption"
DEFAULT_TIMEOUT = 15.0


def resolve_endpoint(credential: GatewayCredential) -> str:
    """Build the base send URL: ``<host>/v1/api/external/<connection_id>``.

    Without a connection id the host is taken to be the full connection URL.
    """
    host = credential.host.strip().rstrip("/")
    if not credential.connection_id:
        return host
    return f"{host}/{EXTERNAL_API_PATH}/{credential.connection_id}"


class DigitalSacAdapter(MessagingAdapter):
    """DigitalSac WhatsApp gateway adapter implementing the MessagingAdapter protocol.

    DigitalSac is a direct API: the WhatsApp session already lives on the
    gateway, so there is nothing to connect or poll. A send is one HTTP call
    for text and two for media (download, then upload).

    Wire format:
    - Text: JSON ``{body, number, externalKey}`` posted to the connection URL.
    - Media: multipart with ``media`` (file), ``number`` and ``externalKey``,
      plus ``caption`` posted to ``<connection URL>/send-media-caption`` when a
      caption exists, or an empty ``body`` posted to the connection URL when
      it does not. The two endpoints do not accept each other's field.

    Each call makes one attempt; failures are reported, never retried.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout = timeout
        # Optional shared client for connection pooling; one per call otherwise
        self._client = client

    def prepare(
        self,
        credential: GatewayCredential,
        phone: Union[str, int, None],
        message: OutboundMessage,
        external_key: Optional[str],
    ) -> DispatchRequest:
        """Validate the call and resolve it into a `DispatchRequest`.

        Runs before any network activity; every failure here is raised as a
        `DispatchError` subclass.
        """
        if not credential.token or not credential.token.strip():
            raise ConfigurationMissing("DigitalSac connection token not provided")
        if not credential.host or not credential.host.strip():
            raise ConfigurationMissing("DigitalSac connection URL not provided")
        if not external_key:
            raise InvalidRequest("externalKey is required")
        try:
            message.ensure_single_variant()
        except ValueError as e:
            raise InvalidRequest(str(e)) from e

        number = normalize_phone(phone)
        logger.debug("normalized phone", extra={"raw": phone, "number": number})

        return DispatchRequest(
            endpoint=resolve_endpoint(credential),
            token=credential.token,
            number=number,
            external_key=external_key,
            message=message,
        )

    async def dispatch(  # type: ignore[override]
        self,
        credential: GatewayCredential,
        phone: Union[str, int, None],
        message: OutboundMessage,
        external_key: Optional[str],
    ) -> DispatchOutcome:
        """Send a message and return the result as a `DispatchOutcome`."""
        try:
            data = await self.send_message(credential, phone, message, external_key)
        except DispatchError as e:
            logger.warning(
                "DigitalSac dispatch failed",
                extra={"error": e.code, "detail": str(e), "external_key": external_key},
            )
            return DispatchOutcome.failure(e)
        return DispatchOutcome.success(data)

    async def send_message(  # type: ignore[override]
        self,
        credential: GatewayCredential,
        phone: Union[str, int, None],
        message: OutboundMessage,
        external_key: Optional[str],
    ) -> Any:
        """Send a message, returning the gateway payload or raising `DispatchError`."""
        request = self.prepare(credential, phone, message, external_key)

        if self._client is not None:
            return await self._send(self._client, request)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._send(client, request)

    async def _send(self, client: httpx.AsyncClient, request: DispatchRequest) -> Any:
        if request.message.media_kind is None:
            return await self._send_text(client, request)
        return await self._send_media(client, request)

    async def _send_text(self, client: httpx.AsyncClient, request: DispatchRequest) -> Any:
        payload: Dict[str, Any] = {
            "body": request.message.text,
            "number": request.number,
            "externalKey": request.external_key,
        }
        logger.info(
            "Sending DigitalSac text",
            extra={"url": request.endpoint, "external_key": request.external_key},
        )
        headers = self._headers(request.token)
        headers["Content-Type"] = "application/json"
        return await self._post(client, request.endpoint, headers=headers, json=payload)

    async def _send_media(self, client: httpx.AsyncClient, request: DispatchRequest) -> Any:
        message = request.message
        kind = message.media_kind
        media = message.media
        if kind is None or media is None:
            raise InvalidRequest("Unsupported message type")

        content, content_type = await self._fetch_media(client, media.url, kind)
        file_name = message.resolved_file_name()
        caption = message.resolved_caption()

        if caption:
            url = request.endpoint + CAPTION_SUFFIX
            data = {"caption": caption}
        else:
            url = request.endpoint
            data = {"body": ""}
        data["number"] = request.number
        data["externalKey"] = request.external_key

        logger.info(
            "Sending DigitalSac media",
            extra={
                "url": url,
                "kind": kind.value,
                "content_type": content_type,
                "file_name": file_name,
                "has_caption": bool(caption),
                "external_key": request.external_key,
            },
        )
        # No Content-Type header here: httpx sets multipart/form-data with the boundary
        return await self._post(
            client,
            url,
            headers=self._headers(request.token),
            data=data,
            files={"media": (file_name, content, content_type)},
        )

    async def _fetch_media(
        self, client: httpx.AsyncClient, url: str, kind: MediaKind
    ) -> Tuple[bytes, str]:
        """Download the media body and resolve its content type."""
        try:
            response = await client.get(url, timeout=self.timeout, follow_redirects=True)
        except httpx.TimeoutException as e:
            raise DispatchTimeout(f"Timed out downloading media from {url}") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise MediaUnreachable(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise MediaUnreachable(url, f"HTTP {response.status_code} {response.reason_phrase}")

        # A declared content type always wins over the kind default
        content_type = response.headers.get("content-type") or kind.default_content_type
        logger.debug(
            "Downloaded media",
            extra={"url": url, "content_type": content_type, "size": len(response.content)},
        )
        return response.content, content_type

    async def _post(self, client: httpx.AsyncClient, url: str, **kwargs: Any) -> Any:
        try:
            response = await client.post(url, timeout=self.timeout, **kwargs)
        except httpx.TimeoutException as e:
            raise DispatchTimeout(f"Timed out sending to gateway at {url}") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportFailure(f"Could not reach gateway at {url}: {e}") from e

        logger.info(
            "DigitalSac response",
            extra={"status": response.status_code, "reason": response.reason_phrase},
        )
        if not response.is_success:
            raise GatewayRejected(response.status_code, response.text, response.reason_phrase)
        return _parse_body(response)

    @staticmethod
    def _headers(token: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token}"}


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
