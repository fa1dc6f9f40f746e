"""Unified error codes and custom exceptions.

Error code ranges:
  4xxx: Lookup
  5xxx: Storage (cache or database)

The three catalog failure kinds are returned by the cache services inside an
Outcome rather than raised. The HTTP layer calls ``unwrap()``, which raises
them, and the app-level handler renders the error response.
"""

from typing import NoReturn


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


class CatalogFailure(AppError):
    """Failure outcome of a cache service operation."""

    ok = False

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int,
        entity: str,
        entity_id: int | None,
        cause: BaseException | None = None,
    ) -> None:
        self.entity = entity
        self.entity_id = entity_id
        self.cause = cause
        super().__init__(code, message, http_status)

    def unwrap(self) -> NoReturn:
        raise self from self.cause


def _target(entity: str, entity_id: int | None) -> str:
    return entity if entity_id is None else f"{entity} {entity_id}"


def _describe(cause: BaseException) -> str:
    """Driver-level reason only; SQLAlchemy's str() appends the statement and parameters."""
    orig = getattr(cause, "orig", None)
    text = str(orig if orig is not None else cause)
    return text.splitlines()[0] if text else type(cause).__name__


# --- 4xxx: Lookup ---

class NotFoundError(CatalogFailure):
    def __init__(self, entity: str, entity_id: int | None) -> None:
        super().__init__(
            4040,
            f"{entity.capitalize()} with id {entity_id} not found",
            404,
            entity,
            entity_id,
        )


# --- 5xxx: Storage ---

class RetrievalFailureError(CatalogFailure):
    def __init__(
        self, entity: str, entity_id: int | None, cause: BaseException
    ) -> None:
        super().__init__(
            5001,
            f"Failed to get {_target(entity, entity_id)}: {_describe(cause)}",
            500,
            entity,
            entity_id,
            cause,
        )


class WriteFailureError(CatalogFailure):
    def __init__(
        self,
        entity: str,
        entity_id: int | None,
        cause: BaseException,
        action: str = "write",
    ) -> None:
        self.action = action
        super().__init__(
            5002,
            f"Failed to {action} {_target(entity, entity_id)}: {_describe(cause)}",
            500,
            entity,
            entity_id,
            cause,
        )
