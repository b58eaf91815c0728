from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import field_validator, model_validator

from .enums import MediaKind


class MediaRef(BaseModel):
    """Pointer to a remotely hosted media file.

    The adapter downloads `url` itself and uploads the bytes to the gateway,
    so the URL only needs to be reachable from this service.
    """

    url: str

    @field_validator("url")
    @classmethod
    def _validate_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("media url is required")
        return v


class OutboundMessage(BaseModel):
    """Channel-agnostic description of one outbound WhatsApp message.

    Exactly one of the content slots must be populated:

    - text: plain text message, sent as JSON
    - image / video / audio / document: media message, sent as multipart

    `caption` and `fileName` only apply to media. For documents the caption
    falls back to `fileName` when no caption is given.

    Examples:
        >>> from app.types import OutboundMessage
        >>> OutboundMessage(text="Hello")
        >>> OutboundMessage(image={"url": "https://cdn.example.com/a.png"}, caption="Look")
        >>> OutboundMessage(document={"url": "https://cdn.example.com/r.pdf"}, fileName="report.pdf")
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    text: Optional[str] = None
    image: Optional[MediaRef] = None
    video: Optional[MediaRef] = None
    audio: Optional[MediaRef] = None
    document: Optional[MediaRef] = None
    caption: Optional[str] = None
    file_name: Optional[str] = Field(default=None, alias="fileName")

    @model_validator(mode="after")
    def _enforce_single_variant(self) -> "OutboundMessage":
        self.ensure_single_variant()
        return self

    def populated_slots(self) -> List[str]:
        slots: List[str] = []
        if self.text:
            slots.append("text")
        for kind in MediaKind:
            if getattr(self, kind.value) is not None:
                slots.append(kind.value)
        return slots

    def ensure_single_variant(self) -> None:
        """Raise ValueError unless exactly one content slot is populated.

        Pydantic does not re-validate on attribute assignment, so adapters call
        this again before sending.
        """
        slots = self.populated_slots()
        if not slots:
            raise ValueError("Message must contain text or one media item")
        if len(slots) > 1:
            raise ValueError(
                f"Message must contain exactly one content type, got: {', '.join(slots)}"
            )

    @property
    def media_kind(self) -> Optional[MediaKind]:
        for kind in MediaKind:
            if getattr(self, kind.value) is not None:
                return kind
        return None

    @property
    def media(self) -> Optional[MediaRef]:
        kind = self.media_kind
        return getattr(self, kind.value) if kind is not None else None

    def resolved_caption(self) -> str:
        """Return the caption to send, or an empty string when there is none.

        Blank captions count as absent. Only documents fall back to the file
        name.
        """
        if self.caption and self.caption.strip():
            return self.caption
        if self.media_kind is MediaKind.DOCUMENT and self.file_name and self.file_name.strip():
            return self.file_name
        return ""

    def resolved_file_name(self) -> str:
        if self.file_name:
            return self.file_name
        kind = self.media_kind
        if kind is None:
            raise ValueError("Text messages have no file name")
        return kind.default_file_name


class DispatchRequest(BaseModel):
    """Fully resolved send request, built fresh for every dispatch call."""

    model_config = ConfigDict(frozen=True)

    endpoint: str
    token: str = Field(repr=False)
    number: str
    external_key: str
    message: OutboundMessage
