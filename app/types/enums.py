from __future__ import annotations

from enum import Enum


class MediaKind(str, Enum):
    """Media categories accepted by the gateway's media endpoints.

    Each kind carries the fallbacks used when the caller or the media host
    leaves something unspecified: the content type applied when the download
    response declares none, and the file name attached to the multipart part
    when the caller supplies no `fileName`.

    Example:
        >>> from app.types import MediaKind
        >>> MediaKind.AUDIO.default_content_type
        'audio/ogg'
    """

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"

    @property
    def default_content_type(self) -> str:
        return _DEFAULT_CONTENT_TYPES[self]

    @property
    def default_file_name(self) -> str:
        return _DEFAULT_FILE_NAMES[self]


_DEFAULT_CONTENT_TYPES = {
    MediaKind.IMAGE: "image/jpeg",
    MediaKind.VIDEO: "video/mp4",
    MediaKind.AUDIO: "audio/ogg",
    MediaKind.DOCUMENT: "application/octet-stream",
}

_DEFAULT_FILE_NAMES = {
    MediaKind.IMAGE: "image.jpg",
    MediaKind.VIDEO: "video.mp4",
    MediaKind.AUDIO: "audio.ogg",
    MediaKind.DOCUMENT: "document.pdf",
}


class ConnectionStatus(str, Enum):
    """State reported for a gateway connection.

    The gateway keeps its WhatsApp session alive on its own side, so there is
    no connecting/disconnected lifecycle to track here: a connection is
    WORKING whenever credentials are configured and STOPPED otherwise.
    """

    WORKING = "WORKING"
    STOPPED = "STOPPED"
