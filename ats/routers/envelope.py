"""Map ``ApiResult`` error kinds onto HTTP status codes."""

from __future__ import annotations

from typing import TypeVar

from fastapi import Response

from ats.models.enums import ErrorKind
from ats.models.result import ApiResult

R = TypeVar("R", bound=ApiResult)

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.not_found: 404,
    ErrorKind.conflict: 409,
    ErrorKind.invalid: 422,
    ErrorKind.upstream: 502,
    ErrorKind.internal: 500,
}


def respond(result: R, response: Response) -> R:
    """Set the response status from *result* and return it unchanged."""
    if result.error_kind is not None:
        response.status_code = _STATUS_BY_KIND[result.error_kind]
    return result
