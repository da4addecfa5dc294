"""Shared dataclasses and lightweight types used across modules."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FailureReason(str, Enum):
    """Why an upstream call did not produce a usable value."""
    TRANSPORT = "transport"
    UPSTREAM_STATUS = "upstream_status"
    MALFORMED_PAYLOAD = "malformed_payload"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class UpstreamResult(Generic[T]):
    """Outcome of one adapter call: a mapped value or a classified failure."""
    value: Optional[T] = None
    failure: Optional[FailureReason] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "UpstreamResult[T]":
        return cls(value=value)

    @classmethod
    def failed(cls, reason: FailureReason, detail: str = "") -> "UpstreamResult[T]":
        return cls(failure=reason, detail=detail)
