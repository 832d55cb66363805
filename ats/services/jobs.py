"""Job posting operations.

Candidates are linked to a job by position: a job's applicants are the
candidates whose ``position`` equals the job title.
"""

from __future__ import annotations

from ats.core.constants import JOB_NOT_FOUND_MESSAGE
from ats.db.candidates import CandidateStore
from ats.db.jobs import JobStore
from ats.models.candidate import Candidate
from ats.models.enums import ErrorKind
from ats.models.job import Job, JobCreate, JobUpdate
from ats.models.result import ApiResult
from ats.services.results import failure


class JobsService:
    """Envelope-returning CRUD over job postings."""

    def __init__(self, jobs: JobStore, candidates: CandidateStore) -> None:
        self._jobs = jobs
        self._candidates = candidates

    async def get_all(self) -> ApiResult[list[Job]]:
        try:
            jobs = self._jobs.get_jobs()
        except Exception as exc:
            return failure("jobs_fetch_failed", exc, "Failed to fetch jobs", data=[])
        return ApiResult(data=jobs)

    async def get_by_id(self, job_id: str) -> ApiResult[Job]:
        try:
            job = self._jobs.get_job(job_id)
        except Exception as exc:
            return failure("job_fetch_failed", exc, "Failed to fetch job")
        if job is None:
            return ApiResult(data=None, error=JOB_NOT_FOUND_MESSAGE, error_kind=ErrorKind.not_found)
        return ApiResult(data=job)

    async def create(self, payload: JobCreate) -> ApiResult[Job]:
        try:
            job = self._jobs.create_job(payload)
        except Exception as exc:
            return failure("job_create_failed", exc, "Failed to create job")
        return ApiResult(data=job)

    async def update(self, job_id: str, updates: JobUpdate) -> ApiResult[Job]:
        try:
            job = self._jobs.update_job(
                job_id, updates.model_dump(mode="json", exclude_unset=True)
            )
        except Exception as exc:
            return failure("job_update_failed", exc, "Failed to update job")
        return ApiResult(data=job)

    async def delete(self, job_id: str) -> ApiResult[Job]:
        try:
            job = self._jobs.delete_job(job_id)
        except Exception as exc:
            return failure("job_delete_failed", exc, "Failed to delete job")
        return ApiResult(data=job)

    async def get_candidates(self, job_id: str) -> ApiResult[list[Candidate]]:
        """Return the candidates whose position matches the job title."""
        try:
            job = self._jobs.get_job(job_id)
            if job is None:
                return ApiResult(
                    data=[], error=JOB_NOT_FOUND_MESSAGE, error_kind=ErrorKind.not_found
                )
            candidates = self._candidates.get_candidates_by_position(job.title)
        except Exception as exc:
            return failure(
                "job_candidates_fetch_failed", exc, "Failed to fetch candidates", data=[]
            )
        return ApiResult(data=candidates)
