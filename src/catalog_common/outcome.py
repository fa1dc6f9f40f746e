"""Discriminated result type for cache service operations.

An Outcome is either ``Ok(value)`` or one of the CatalogFailure kinds.
Both sides expose ``ok`` and ``unwrap()``, so callers can branch explicitly:

    outcome = await service.get(db, 1)
    match outcome:
        case Ok(value=author): ...
        case NotFoundError(): ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from src.catalog_common.errors import (
    NotFoundError,
    RetrievalFailureError,
    WriteFailureError,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok = True

    def unwrap(self) -> T:
        return self.value


Outcome = Ok[T] | NotFoundError | RetrievalFailureError | WriteFailureError
