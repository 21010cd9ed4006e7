from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    DUPLICATE = "duplicate"
    AUTH = "auth"
    RATE_LIMITED = "rate_limited"


@dataclass(frozen=True)
class ServiceError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "ServiceResult[T]":
        return cls(error=ServiceError(kind=kind, message=message))


def validation_error(message: str) -> ServiceResult:
    return ServiceResult.failure(ErrorKind.VALIDATION, message)


def not_found(message: str) -> ServiceResult:
    return ServiceResult.failure(ErrorKind.NOT_FOUND, message)


def conflict(message: str) -> ServiceResult:
    return ServiceResult.failure(ErrorKind.CONFLICT, message)


def duplicate(message: str) -> ServiceResult:
    return ServiceResult.failure(ErrorKind.DUPLICATE, message)
