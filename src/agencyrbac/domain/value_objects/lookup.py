"""Tagged results for store lookups that may come back empty."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """Lookup succeeded and produced a value."""

    value: T


@dataclass(frozen=True)
class Missing:
    """Lookup produced nothing."""

    reason: str = "not found"


MISSING = Missing()
