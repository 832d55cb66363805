"""Uniform result envelope returned by every service operation.

Callers always receive ``data`` plus an optional ``error`` instead of a
raised exception.  ``error_kind`` classifies the failure for the HTTP layer
and is excluded from serialization.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from ats.models.enums import ErrorKind

T = TypeVar("T")


class ApiResult(BaseModel, Generic[T]):
    """``{data, error}`` envelope."""
    data: T | None = None
    error: str | None = None
    error_kind: ErrorKind | None = Field(default=None, exclude=True)

    @property
    def ok(self) -> bool:
        return self.error is None
