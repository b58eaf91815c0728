"""FastAPI dependencies shared by the routers.

Routes receive their collaborators through `Depends` so tests can swap any of
them via `app.dependency_overrides`.
"""

from __future__ import annotations

from fastapi import Depends

from app.adapters.registry import AdapterRegistry
from app.services import SettingsCredentialProvider
from app.types import CredentialProvider, MessagingAdapter
from server.config import Settings, get_settings


def get_credential_provider(settings: Settings = Depends(get_settings)) -> CredentialProvider:
    return SettingsCredentialProvider(settings)


def get_adapter(settings: Settings = Depends(get_settings)) -> MessagingAdapter:
    return AdapterRegistry.get(
        settings.messaging_provider, timeout=settings.dispatch_timeout_seconds
    )
