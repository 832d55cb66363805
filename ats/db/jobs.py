"""Job posting persistence."""

from __future__ import annotations

import logging
from typing import Any

from supabase import Client

from ats.core.constants import JOBS_TABLE
from ats.core.exceptions import JobNotFoundError, UpstreamError
from ats.db.supabase import execute
from ats.models.job import Job, JobCreate

logger = logging.getLogger(__name__)


class JobStore:
    """CRUD access to the ``jobs`` table."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def _table(self) -> Any:
        return self._client.table(JOBS_TABLE)

    def get_jobs(self) -> list[Job]:
        """Return all job postings, newest first."""
        rows = execute(self._table().select("*").order("created_at", desc=True))
        return [Job(**row) for row in rows]

    def get_job(self, job_id: str) -> Job | None:
        rows = execute(self._table().select("*").eq("id", job_id).limit(1))
        return Job(**rows[0]) if rows else None

    def create_job(self, payload: JobCreate) -> Job:
        rows = execute(
            self._table().insert(payload.model_dump(mode="json", exclude_none=True))
        )
        if not rows:
            raise UpstreamError("Job insert returned no rows")
        logger.info("job_created", extra={"job_id": rows[0].get("id")})
        return Job(**rows[0])

    def update_job(self, job_id: str, updates: dict[str, Any]) -> Job:
        rows = execute(self._table().update(updates).eq("id", job_id))
        if not rows:
            raise JobNotFoundError(f"Job not found: {job_id}")
        return Job(**rows[0])

    def delete_job(self, job_id: str) -> Job:
        """Delete a job posting and return the removed record."""
        rows = execute(self._table().delete().eq("id", job_id))
        if not rows:
            raise JobNotFoundError(f"Job not found: {job_id}")
        logger.info("job_deleted", extra={"job_id": job_id})
        return Job(**rows[0])
