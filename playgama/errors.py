"""Failure kinds reported by catalog load operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class CatalogErrorKind(str, Enum):
    RESOURCE_NOT_FOUND = "resource_not_found"
    DECODE_ERROR = "decode_error"
    NETWORK_ERROR = "network_error"


@dataclass(frozen=True, slots=True)
class CatalogError:
    """A load failure: its kind, a readable message and the underlying cause."""

    kind: CatalogErrorKind
    message: str
    status_code: int | None = None
    cause: BaseException | None = None

    @classmethod
    def resource_not_found(
        cls, message: str, *, cause: BaseException | None = None
    ) -> "CatalogError":
        return cls(CatalogErrorKind.RESOURCE_NOT_FOUND, message, cause=cause)

    @classmethod
    def decode_error(
        cls, message: str, *, cause: BaseException | None = None
    ) -> "CatalogError":
        return cls(CatalogErrorKind.DECODE_ERROR, message, cause=cause)

    @classmethod
    def network_error(
        cls,
        message: str,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> "CatalogError":
        return cls(
            CatalogErrorKind.NETWORK_ERROR,
            message,
            status_code=status_code,
            cause=cause,
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "statusCode": self.status_code,
        }


class CatalogLoadError(Exception):
    """Raised by :meth:`LoadResult.unwrap` when the load failed."""

    def __init__(self, error: CatalogError):
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> CatalogErrorKind:
        return self.error.kind


@dataclass(frozen=True, slots=True)
class LoadResult(Generic[T]):
    """Outcome of a load: exactly one of ``value`` or ``error`` is set."""

    value: T | None = None
    error: CatalogError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("LoadResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "LoadResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: CatalogError) -> "LoadResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise CatalogLoadError(self.error)
        return self.value  # type: ignore[return-value]
