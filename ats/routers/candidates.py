"""Candidate endpoints.

Staff endpoints address candidates by id; applicant self-service endpoints
address them by application token.  All responses use the ``ApiResult``
envelope; the HTTP status reflects its error kind.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, Response

from ats.dependencies import get_candidates_service
from ats.models.candidate import (
    ApplicationData,
    BulkCreateRequest,
    Candidate,
    CandidateCreate,
    CandidateUpdate,
)
from ats.models.result import ApiResult
from ats.models.stats import RecruitmentStats
from ats.routers.envelope import respond
from ats.services.candidates import CandidatesService

router = APIRouter()


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

@router.get("", response_model=ApiResult[list[Candidate]])
async def list_candidates(
    response: Response,
    service: CandidatesService = Depends(get_candidates_service),
) -> ApiResult[list[Candidate]]:
    """Return all candidates, newest first."""
    return respond(await service.get_all(), response)


@router.get("/stats", response_model=ApiResult[RecruitmentStats])
async def candidate_stats(
    response: Response,
    service: CandidatesService = Depends(get_candidates_service),
) -> ApiResult[RecruitmentStats]:
    """Return pipeline-stage and match-score counts."""
    return respond(await service.get_stats(), response)


@router.get("/id/{candidate_id}", response_model=ApiResult[Candidate])
async def get_candidate(
    candidate_id: str,
    response: Response,
    service: CandidatesService = Depends(get_candidates_service),
) -> ApiResult[Candidate]:
    return respond(await service.get_by_id(candidate_id), response)


@router.get("/{token}", response_model=ApiResult[Candidate])
async def get_candidate_by_token(
    token: str,
    response: Response,
    service: CandidatesService = Depends(get_candidates_service),
) -> ApiResult[Candidate]:
    """Applicant-facing lookup used to prefill the application form."""
    return respond(await service.get_by_token(token), response)


# ---------------------------------------------------------------------------
# Invitations
# ---------------------------------------------------------------------------

@router.post("", status_code=201, response_model=ApiResult[Candidate])
async def create_candidate(
    payload: CandidateCreate,
    response: Response,
    service: CandidatesService = Depends(get_candidates_service),
) -> ApiResult[Candidate]:
    return respond(await service.create(payload), response)


@router.post("/bulk", status_code=201, response_model=ApiResult[list[Candidate]])
async def bulk_create_candidates(
    payload: BulkCreateRequest,
    response: Response,
    service: CandidatesService = Depends(get_candidates_service),
) -> ApiResult[list[Candidate]]:
    return respond(
        await service.bulk_create(payload.candidates, payload.invited_by), response
    )


@router.post("/import", status_code=201, response_model=ApiResult[list[Candidate]])
async def import_candidates_csv(
    request: Request,
    response: Response,
    invited_by: str = Query(..., description="Recruiter sending the invitations"),
    service: CandidatesService = Depends(get_candidates_service),
) -> ApiResult[list[Candidate]]:
    """Bulk-invite candidates from a ``text/csv`` request body."""
    raw = await request.body()
    return respond(
        await service.import_csv(raw.decode("utf-8-sig", errors="replace"), invited_by),
        response,
    )


# ---------------------------------------------------------------------------
# Updates
# ---------------------------------------------------------------------------

@router.put("/token/{token}", response_model=ApiResult[Candidate])
async def update_candidate_by_token(
    token: str,
    payload: ApplicationData,
    response: Response,
    service: CandidatesService = Depends(get_candidates_service),
) -> ApiResult[Candidate]:
    """Save application fields before submitting."""
    return respond(await service.update_by_token(token, payload), response)


@router.put("/{candidate_id}", response_model=ApiResult[Candidate])
async def update_candidate(
    candidate_id: str,
    payload: CandidateUpdate,
    response: Response,
    service: CandidatesService = Depends(get_candidates_service),
) -> ApiResult[Candidate]:
    """Staff pipeline update (status, score, analysis, ...)."""
    return respond(await service.update(candidate_id, payload), response)


@router.delete("/{candidate_id}", response_model=ApiResult[Candidate])
async def delete_candidate(
    candidate_id: str,
    response: Response,
    service: CandidatesService = Depends(get_candidates_service),
) -> ApiResult[Candidate]:
    """Remove a candidate; returns the deleted record."""
    return respond(await service.delete(candidate_id), response)


# ---------------------------------------------------------------------------
# Application submission
# ---------------------------------------------------------------------------

@router.post("/{token}/apply", response_model=ApiResult[Candidate])
async def submit_application(
    token: str,
    payload: ApplicationData,
    response: Response,
    service: CandidatesService = Depends(get_candidates_service),
) -> ApiResult[Candidate]:
    """Submit an application.

    Returns 200 with the candidate in ``applied`` or ``ai_analyzed`` state,
    404 for an unknown token and 409 if the candidate already applied.
    """
    return respond(await service.submit_application(token, payload), response)
