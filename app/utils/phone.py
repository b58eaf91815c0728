"""Phone number canonicalization for the WhatsApp gateway."""

from __future__ import annotations

import re
from typing import Union

_NON_DIGITS = re.compile(r"\D", re.ASCII)


def normalize_phone(phone: Union[str, int, None]) -> str:
    """Reduce a phone value to digits only.

    The gateway expects country code + area code + number with no ``+``
    prefix or separators, e.g. ``"+55 (11) 99999-8888"`` -> ``"5511999998888"``.
    Empty or missing input yields ``""``; validating that a number is present
    is the caller's job.
    """
    if phone is None:
        return ""
    return _NON_DIGITS.sub("", str(phone))
