"""Utility functions for the WhatsApp dispatch service."""

from .phone import normalize_phone

__all__ = [
    "normalize_phone",
]
