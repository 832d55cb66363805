"""Candidate Store backed by the ``recruitment_candidates`` table.

Every write stamps ``updated_at``.  New candidates always start in
``invited`` with a freshly minted application token.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import uuid4

from supabase import Client

from ats.core.constants import CANDIDATES_TABLE
from ats.core.exceptions import (
    ApplicationConflictError,
    CandidateNotFoundError,
    UpstreamError,
)
from ats.db.supabase import execute, utc_now_iso
from ats.models.candidate import BulkCandidateImport, Candidate, CandidateCreate
from ats.models.enums import CandidateStatus
from ats.models.stats import RecruitmentStats
from ats.services.stats import compute_recruitment_stats

logger = logging.getLogger(__name__)


def generate_token() -> str:
    """Return a new opaque application token."""
    return uuid4().hex


class CandidateStore:
    """CRUD access to candidate records."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def _table(self) -> Any:
        return self._client.table(CANDIDATES_TABLE)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_candidates(self) -> list[Candidate]:
        """Return all candidates, newest first."""
        rows = execute(self._table().select("*").order("created_at", desc=True))
        return [Candidate(**row) for row in rows]

    def get_candidates_by_ids(self, candidate_ids: list[str]) -> list[Candidate]:
        if not candidate_ids:
            return []
        rows = execute(self._table().select("*").in_("id", candidate_ids))
        return [Candidate(**row) for row in rows]

    def get_candidates_by_position(self, position: str) -> list[Candidate]:
        """Return candidates invited for *position*, newest first."""
        rows = execute(
            self._table()
            .select("*")
            .eq("position", position)
            .order("created_at", desc=True)
        )
        return [Candidate(**row) for row in rows]

    def get_candidate(self, candidate_id: str) -> Candidate | None:
        rows = execute(self._table().select("*").eq("id", candidate_id).limit(1))
        return Candidate(**rows[0]) if rows else None

    def get_candidate_by_token(self, token: str) -> Candidate | None:
        """Resolve a candidate by application token, or ``None``."""
        rows = execute(self._table().select("*").eq("token", token).limit(1))
        return Candidate(**rows[0]) if rows else None

    def get_recruitment_stats(self) -> RecruitmentStats:
        rows = execute(self._table().select("status, created_at, match_score"))
        return compute_recruitment_stats(rows)

    def ping(self) -> None:
        """Issue a trivial query; raises ``UpstreamError`` if unreachable."""
        execute(self._table().select("id").limit(1))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def _new_row(self, fields: dict[str, Any]) -> dict[str, Any]:
        row = dict(fields)
        row.update(
            token=generate_token(),
            status=CandidateStatus.invited.value,
            invited_at=utc_now_iso(),
        )
        return row

    def create_candidate(self, payload: CandidateCreate) -> Candidate:
        row = self._new_row(payload.model_dump(mode="json", exclude_none=True))
        rows = execute(self._table().insert(row))
        if not rows:
            raise UpstreamError("Candidate insert returned no rows")
        return Candidate(**rows[0])

    def bulk_create_candidates(
        self,
        candidates: list[BulkCandidateImport],
        invited_by: str,
    ) -> list[Candidate]:
        """Insert one ``invited`` candidate per import row."""
        if not candidates:
            return []
        rows = [
            self._new_row({**c.model_dump(mode="json"), "invited_by": invited_by})
            for c in candidates
        ]
        created = execute(self._table().insert(rows))
        logger.info(
            "candidates_bulk_created",
            extra={"requested": len(rows), "created": len(created)},
        )
        return [Candidate(**row) for row in created]

    def update_candidate(self, candidate_id: str, updates: dict[str, Any]) -> Candidate:
        rows = execute(
            self._table()
            .update({**updates, "updated_at": utc_now_iso()})
            .eq("id", candidate_id)
        )
        if not rows:
            raise CandidateNotFoundError(f"Candidate not found: {candidate_id}")
        return Candidate(**rows[0])

    def update_candidate_by_token(
        self,
        token: str,
        updates: dict[str, Any],
        expected_status: CandidateStatus | None = None,
    ) -> Candidate:
        """Update the candidate owning *token*.

        With *expected_status* the write only matches while the stored
        status still equals it.  A miss is re-read: ``ApplicationConflictError``
        if the token still exists, ``CandidateNotFoundError`` if it is gone.
        """
        query = (
            self._table()
            .update({**updates, "updated_at": utc_now_iso()})
            .eq("token", token)
        )
        if expected_status is not None:
            query = query.eq("status", expected_status.value)
        rows = execute(query)
        if not rows:
            if expected_status is not None and self.get_candidate_by_token(token) is not None:
                raise ApplicationConflictError(
                    f"Candidate is no longer {expected_status.value}"
                )
            raise CandidateNotFoundError("Candidate not found for token")
        return Candidate(**rows[0])

    def delete_candidate(self, candidate_id: str) -> Candidate:
        """Delete a candidate and return the removed record."""
        rows = execute(self._table().delete().eq("id", candidate_id))
        if not rows:
            raise CandidateNotFoundError(f"Candidate not found: {candidate_id}")
        logger.info("candidate_deleted", extra={"candidate_id": candidate_id})
        return Candidate(**rows[0])
