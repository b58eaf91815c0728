"""Contact existence checks.

DigitalSac exposes no endpoint to look up whether a number has WhatsApp; it
validates the number when a message is sent. `AlwaysReachableProbe` therefore
reports every contact as reachable and only normalizes the number. Callers
that need to know whether a number is valid must look at the dispatch
outcome instead.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from app.types import ContactCheckResult, ContactProbe
from app.utils.phone import normalize_phone

logger = logging.getLogger(__name__)


class AlwaysReachableProbe(ContactProbe):
    """Contact probe that defers validation to send time."""

    async def probe(self, phone: Union[str, int, None]) -> ContactCheckResult:
        normalized = normalize_phone(phone)
        logger.debug(
            "No pre-send validation available; treating contact as reachable",
            extra={"number": normalized},
        )
        return ContactCheckResult(reachable=True, normalized_phone=normalized)


_contact_probe: Optional[AlwaysReachableProbe] = None


def get_contact_probe() -> ContactProbe:
    """Get or create the contact probe instance."""
    global _contact_probe
    if _contact_probe is None:
        _contact_probe = AlwaysReachableProbe()
    return _contact_probe
