"""Candidate operations and the application submission workflow.

``CandidatesService`` wraps the Candidate Store and the n8n notifier.  Every
public method returns an ``ApiResult`` envelope; store failures are logged
and converted, never raised.

``submit_application`` sequence:
1. Resolve the candidate by token (unknown token -> error, no write)
2. Apply: merge application fields, ``status=applied``, ``applied_at=now``
   via a token-scoped write conditional on ``status=invited``
3. Notify n8n (best effort: failure is logged, candidate stays ``applied``)
4. On successful notification, ``status=ai_analyzed`` via an id-scoped write
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from ats.core.constants import (
    ALREADY_APPLIED_MESSAGE,
    CANDIDATE_NOT_FOUND_MESSAGE,
    INVALID_TOKEN_MESSAGE,
)
from ats.db.candidates import CandidateStore
from ats.models.candidate import (
    ApplicationData,
    BulkCandidateImport,
    Candidate,
    CandidateCreate,
    CandidateUpdate,
)
from ats.models.enums import CandidateStatus, ErrorKind
from ats.models.result import ApiResult
from ats.models.stats import RecruitmentStats
from ats.services.imports import parse_candidates_csv
from ats.services.n8n import N8NNotifier
from ats.services.results import failure

logger = logging.getLogger(__name__)


def _not_found(message: str = CANDIDATE_NOT_FOUND_MESSAGE) -> ApiResult[Candidate]:
    return ApiResult(data=None, error=message, error_kind=ErrorKind.not_found)


class CandidatesService:
    """Application Workflow Coordinator plus candidate CRUD."""

    def __init__(self, store: CandidateStore, notifier: N8NNotifier) -> None:
        self._store = store
        self._notifier = notifier

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_all(self) -> ApiResult[list[Candidate]]:
        try:
            candidates = self._store.get_candidates()
        except Exception as exc:
            return failure("candidates_fetch_failed", exc, "Failed to fetch candidates", data=[])
        return ApiResult(data=candidates)

    async def get_by_id(self, candidate_id: str) -> ApiResult[Candidate]:
        try:
            candidate = self._store.get_candidate(candidate_id)
        except Exception as exc:
            return failure("candidate_fetch_failed", exc, "Failed to fetch candidate")
        if candidate is None:
            return _not_found()
        return ApiResult(data=candidate)

    async def get_by_token(self, token: str) -> ApiResult[Candidate]:
        try:
            candidate = self._store.get_candidate_by_token(token)
        except Exception as exc:
            return failure("candidate_fetch_failed", exc, "Failed to fetch candidate")
        if candidate is None:
            return _not_found()
        return ApiResult(data=candidate)

    async def get_stats(self) -> ApiResult[RecruitmentStats]:
        try:
            stats = self._store.get_recruitment_stats()
        except Exception as exc:
            return failure("stats_fetch_failed", exc, "Failed to fetch stats")
        return ApiResult(data=stats)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create(self, payload: CandidateCreate) -> ApiResult[Candidate]:
        try:
            candidate = self._store.create_candidate(payload)
        except Exception as exc:
            return failure("candidate_create_failed", exc, "Failed to create candidate")
        logger.info("candidate_invited", extra={"candidate_id": candidate.id})
        return ApiResult(data=candidate)

    async def bulk_create(
        self,
        candidates: list[BulkCandidateImport],
        invited_by: str,
    ) -> ApiResult[list[Candidate]]:
        try:
            created = self._store.bulk_create_candidates(candidates, invited_by)
        except Exception as exc:
            return failure(
                "candidates_bulk_create_failed", exc, "Failed to create candidates", data=[]
            )
        return ApiResult(data=created)

    async def import_csv(self, text: str, invited_by: str) -> ApiResult[list[Candidate]]:
        """Parse a CSV export and bulk-create its rows."""
        try:
            rows = parse_candidates_csv(text)
        except ValueError as exc:
            return failure("candidates_csv_invalid", exc, "Failed to parse CSV file", data=[])
        return await self.bulk_create(rows, invited_by)

    async def update(self, candidate_id: str, updates: CandidateUpdate) -> ApiResult[Candidate]:
        try:
            candidate = self._store.update_candidate(
                candidate_id, updates.model_dump(mode="json", exclude_unset=True)
            )
        except Exception as exc:
            return failure("candidate_update_failed", exc, "Failed to update candidate")
        return ApiResult(data=candidate)

    async def update_by_token(self, token: str, updates: ApplicationData) -> ApiResult[Candidate]:
        try:
            candidate = self._store.update_candidate_by_token(
                token, updates.model_dump(mode="json", exclude_unset=True)
            )
        except Exception as exc:
            return failure("candidate_update_failed", exc, "Failed to update candidate")
        return ApiResult(data=candidate)

    async def delete(self, candidate_id: str) -> ApiResult[Candidate]:
        try:
            candidate = self._store.delete_candidate(candidate_id)
        except Exception as exc:
            return failure("candidate_delete_failed", exc, "Failed to delete candidate")
        return ApiResult(data=candidate)

    # ------------------------------------------------------------------
    # Application workflow
    # ------------------------------------------------------------------

    async def submit_application(
        self,
        token: str,
        application: ApplicationData,
    ) -> ApiResult[Candidate]:
        """Advance the candidate owning *token* to ``applied`` and beyond.

        Returns the candidate in ``applied`` (notification failed) or
        ``ai_analyzed`` state.  Once the apply write has committed this
        method reports success whatever happens afterwards.
        """
        try:
            candidate = self._store.get_candidate_by_token(token)
        except Exception as exc:
            return failure("application_lookup_failed", exc, "Failed to submit application")

        if candidate is None:
            logger.warning("application_invalid_token")
            return _not_found(INVALID_TOKEN_MESSAGE)

        if candidate.status != CandidateStatus.invited:
            logger.warning(
                "application_already_submitted",
                extra={"candidate_id": candidate.id, "status": candidate.status.value},
            )
            return ApiResult(
                data=None, error=ALREADY_APPLIED_MESSAGE, error_kind=ErrorKind.conflict
            )

        updates = application.model_dump(mode="json", exclude_none=True)
        updates["status"] = CandidateStatus.applied.value
        updates["applied_at"] = datetime.now(timezone.utc).isoformat()

        try:
            applied = self._store.update_candidate_by_token(
                token, updates, expected_status=CandidateStatus.invited
            )
        except Exception as exc:
            result = failure("application_apply_failed", exc, "Failed to submit application")
            if result.error_kind is ErrorKind.conflict:
                result.error = ALREADY_APPLIED_MESSAGE
            elif result.error_kind is ErrorKind.not_found:
                result.error = INVALID_TOKEN_MESSAGE
            return result

        logger.info("application_submitted", extra={"candidate_id": applied.id})

        try:
            await self._notifier.submit_candidate(applied)
        except Exception as exc:
            # Candidate stays in ``applied``
            logger.error(
                "workflow_notification_failed",
                extra={
                    "candidate_id": applied.id,
                    "error_type": type(exc).__name__,
                    "error_message": str(exc),
                },
            )
            return ApiResult(data=applied)

        try:
            analyzed = self._store.update_candidate(
                applied.id, {"status": CandidateStatus.ai_analyzed.value}
            )
        except Exception as exc:
            logger.error(
                "post_notification_update_failed",
                extra={
                    "candidate_id": applied.id,
                    "error_type": type(exc).__name__,
                    "error_message": str(exc),
                },
            )
            return ApiResult(data=applied)

        logger.info("application_forwarded", extra={"candidate_id": analyzed.id})
        return ApiResult(data=analyzed)
