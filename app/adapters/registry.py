from __future__ import annotations

from typing import Any, Dict

from app.types import MessagingAdapter
from app.adapters.digitalsac import DigitalSacAdapter


class AdapterRegistry:
    """Registry for messaging adapters by name.

    Enables plugging in alternative WhatsApp gateways later without changing
    router logic.
    """

    _registry: Dict[str, type[MessagingAdapter]] = {
        "digitalsac": DigitalSacAdapter,
    }

    @classmethod
    def get(cls, name: str, **kwargs: Any) -> MessagingAdapter:
        provider_cls = cls._registry.get(name)
        if provider_cls is None:
            raise KeyError(f"Unknown messaging adapter: {name}")
        return provider_cls(**kwargs)

    @classmethod
    def register(cls, name: str, adapter_cls: type[MessagingAdapter]) -> None:
        cls._registry[name] = adapter_cls
