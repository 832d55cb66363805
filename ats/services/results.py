"""Helpers for turning exceptions into ``ApiResult`` envelopes."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from ats.core.exceptions import (
    ApplicationConflictError,
    CandidateNotFoundError,
    JobNotFoundError,
    TemplateNotFoundError,
    UpstreamError,
)
from ats.models.enums import ErrorKind
from ats.models.result import ApiResult

logger = logging.getLogger(__name__)

# Kinds whose exception text stays in the logs; callers get the fallback message
_OPAQUE_KINDS = frozenset({ErrorKind.upstream, ErrorKind.internal})


def classify(exc: Exception) -> ErrorKind:
    """Map an exception to the ``ErrorKind`` reported to callers."""
    if isinstance(exc, (CandidateNotFoundError, TemplateNotFoundError, JobNotFoundError)):
        return ErrorKind.not_found
    if isinstance(exc, ApplicationConflictError):
        return ErrorKind.conflict
    if isinstance(exc, UpstreamError):
        return ErrorKind.upstream
    # A stored row that fails model validation is a data fault, not bad input
    if isinstance(exc, ValidationError):
        return ErrorKind.upstream
    if isinstance(exc, ValueError):
        return ErrorKind.invalid
    return ErrorKind.internal


def failure(
    event: str,
    exc: Exception,
    fallback_message: str,
    data: Any = None,
) -> ApiResult[Any]:
    """Log *exc* under *event* and wrap it in an error envelope.

    *data* is the operation's empty default (``None`` or ``[]``).
    """
    kind = classify(exc)
    logger.error(
        event,
        extra={
            "event": event,
            "error_kind": kind.value,
            "error_type": type(exc).__name__,
            "error_message": str(exc),
        },
    )
    message = fallback_message if kind in _OPAQUE_KINDS else (str(exc) or fallback_message)
    return ApiResult(data=data, error=message, error_kind=kind)
