"""Job posting endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from ats.dependencies import get_jobs_service
from ats.models.candidate import Candidate
from ats.models.job import Job, JobCreate, JobUpdate
from ats.models.result import ApiResult
from ats.routers.envelope import respond
from ats.services.jobs import JobsService

router = APIRouter()


@router.get("", response_model=ApiResult[list[Job]])
async def list_jobs(
    response: Response,
    service: JobsService = Depends(get_jobs_service),
) -> ApiResult[list[Job]]:
    """Return all job postings, newest first."""
    return respond(await service.get_all(), response)


@router.get("/{job_id}", response_model=ApiResult[Job])
async def get_job(
    job_id: str,
    response: Response,
    service: JobsService = Depends(get_jobs_service),
) -> ApiResult[Job]:
    return respond(await service.get_by_id(job_id), response)


@router.get("/{job_id}/candidates", response_model=ApiResult[list[Candidate]])
async def list_job_candidates(
    job_id: str,
    response: Response,
    service: JobsService = Depends(get_jobs_service),
) -> ApiResult[list[Candidate]]:
    """Candidates whose position matches the job title."""
    return respond(await service.get_candidates(job_id), response)


@router.post("", status_code=201, response_model=ApiResult[Job])
async def create_job(
    payload: JobCreate,
    response: Response,
    service: JobsService = Depends(get_jobs_service),
) -> ApiResult[Job]:
    return respond(await service.create(payload), response)


@router.put("/{job_id}", response_model=ApiResult[Job])
async def update_job(
    job_id: str,
    payload: JobUpdate,
    response: Response,
    service: JobsService = Depends(get_jobs_service),
) -> ApiResult[Job]:
    return respond(await service.update(job_id, payload), response)


@router.delete("/{job_id}", response_model=ApiResult[Job])
async def delete_job(
    job_id: str,
    response: Response,
    service: JobsService = Depends(get_jobs_service),
) -> ApiResult[Job]:
    return respond(await service.delete(job_id), response)
