from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .errors import DispatchError


class DispatchOutcome(BaseModel):
    """Result of exactly one dispatch attempt: success or a typed failure.

    Attributes:
        ok: True when the gateway accepted the message.
        data: Gateway response payload on success, passed through uninterpreted.
        error: The `DispatchError` describing why the attempt failed.

    Example:
        >>> from app.types import DispatchOutcome
        >>> DispatchOutcome.success({"id": "abc"}).unwrap()
        {'id': 'abc'}
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    ok: bool
    data: Any = None
    error: Optional[DispatchError] = None

    @model_validator(mode="after")
    def _no_partial_state(self) -> "DispatchOutcome":
        if self.ok and self.error is not None:
            raise ValueError("A successful outcome cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("A failed outcome must carry an error")
        return self

    @classmethod
    def success(cls, data: Any) -> "DispatchOutcome":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: DispatchError) -> "DispatchOutcome":
        return cls(ok=False, error=error)

    def unwrap(self) -> Any:
        """Return the gateway payload, re-raising the failure if there was one."""
        if self.error is not None:
            raise self.error
        return self.data


class ContactCheckResult(BaseModel):
    """Answer of a contact-existence probe."""

    reachable: bool
    normalized_phone: str
