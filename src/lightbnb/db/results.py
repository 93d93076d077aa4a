"""Tagged lookup result separating "no such row" from "the store failed"."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class LookupStatus(StrEnum):
    """Outcome of a single-row lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Result of a lookup-style store operation."""

    status: LookupStatus
    value: T | None = None
    error: str | None = None

    @classmethod
    def found(cls, value: T) -> Lookup[T]:
        return cls(LookupStatus.FOUND, value=value)

    @classmethod
    def not_found(cls) -> Lookup[T]:
        return cls(LookupStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: str) -> Lookup[T]:
        return cls(LookupStatus.ERROR, error=error)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def is_error(self) -> bool:
        return self.status is LookupStatus.ERROR

    def value_or_none(self) -> T | None:
        """Collapse to the value, or None for both not-found and error."""
        return self.value if self.is_found else None
