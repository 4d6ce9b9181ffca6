"""Success/failure values returned by the public operations.

English:
    Validation problems are returned, not raised. A `Result` carries either
    a value or a `ValidationError(field, message, code)`.

日本語:
    検証エラーは例外ではなく値として返します。
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorCode(str, Enum):
    INSUFFICIENT_OPTIONS = "INSUFFICIENT_OPTIONS"
    NO_CONSTRAINTS = "NO_CONSTRAINTS"
    MISSING_SCORE = "MISSING_SCORE"
    INVALID_SCORE = "INVALID_SCORE"
    INVALID_WEIGHT = "INVALID_WEIGHT"
    INVALID_METHODOLOGY = "INVALID_METHODOLOGY"
    INVALID_SCORING_RESULT = "INVALID_SCORING_RESULT"
    MISSING_SCORING_DATA = "MISSING_SCORING_DATA"
    CALCULATION_ERROR = "CALCULATION_ERROR"


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str
    code: ErrorCode


class RefereeError(Exception):
    """Raised by `Result.unwrap()` on a failed result."""

    def __init__(self, error: ValidationError):
        super().__init__(f"{error.code.value} ({error.field}): {error.message}")
        self.error = error


@dataclass(frozen=True)
class Result(Generic[T]):
    ok: bool
    value: Optional[T] = None
    error: Optional[ValidationError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ValidationError) -> "Result[Any]":
        return cls(ok=False, error=error)

    def unwrap(self) -> T:
        if not self.ok:
            raise RefereeError(self.error)
        return self.value


def fail(field: str, message: str, code: ErrorCode) -> Result[Any]:
    """Shorthand for `Result.failure(ValidationError(...))`."""
    return Result.failure(ValidationError(field=field, message=message, code=code))
