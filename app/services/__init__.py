"""Services package for the WhatsApp dispatch service."""

from .connections import ConfiguredConnectionStatus, get_connection_status
from .contacts import AlwaysReachableProbe, get_contact_probe
from .credentials import SettingsCredentialProvider

__all__ = [
    "AlwaysReachableProbe",
    "ConfiguredConnectionStatus",
    "SettingsCredentialProvider",
    "get_contact_probe",
    "get_connection_status",
]
