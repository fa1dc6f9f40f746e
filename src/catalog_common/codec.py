"""Versioned cache payload codec.

Every cached value is wrapped in a self-describing JSON envelope:

    {"v": 1, "shape": "author_with_books", "data": {...}}

``shape`` names the domain type the payload holds; ``v`` is the envelope
format version. Bump CACHE_FORMAT_VERSION whenever a cached shape changes
incompatibly: older entries then fail to decode and are refetched.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

CACHE_FORMAT_VERSION = 1

T = TypeVar("T")


class CachePayloadError(Exception):
    """Cached payload has the wrong version or shape, or is malformed."""


class _Envelope(BaseModel):
    v: int
    shape: str
    data: Any


@dataclass(frozen=True)
class CacheShape(Generic[T]):
    name: str
    adapter: TypeAdapter[T]

    def encode(self, value: T) -> str:
        envelope = _Envelope(
            v=CACHE_FORMAT_VERSION,
            shape=self.name,
            data=self.adapter.dump_python(value, mode="json"),
        )
        return envelope.model_dump_json()

    def decode(self, raw: str | bytes) -> T:
        try:
            envelope = _Envelope.model_validate_json(raw)
        except ValidationError as exc:
            raise CachePayloadError(f"malformed {self.name} payload") from exc
        if envelope.v != CACHE_FORMAT_VERSION:
            raise CachePayloadError(
                f"{self.name} payload version {envelope.v}, expected {CACHE_FORMAT_VERSION}"
            )
        if envelope.shape != self.name:
            raise CachePayloadError(f"expected {self.name} payload, got {envelope.shape}")
        try:
            return self.adapter.validate_python(envelope.data)
        except ValidationError as exc:
            raise CachePayloadError(f"invalid {self.name} payload data") from exc


def shape(name: str, tp: Any) -> CacheShape[Any]:
    return CacheShape(name=name, adapter=TypeAdapter(tp))
