"""Pydantic models for the ``recruitment_candidates`` table.

``id``, ``token``, ``created_at`` and ``updated_at`` are assigned by the
store and are therefore absent from the create models.  ``id`` and
``token`` are opaque strings.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ats.models.enums import CandidateStatus, ScreeningCategory


class ScreeningQuestion(BaseModel):
    """A single screening question attached to a candidate."""
    id: str | None = None
    question: str
    answer: str | None = None
    score: float | None = None
    category: ScreeningCategory


class CandidateCreate(BaseModel):
    """Payload for inviting a single candidate (insert)."""
    first_name: str
    last_name: str
    email: str
    position: str
    phone: str | None = None
    experience: str | None = None
    skills: list[str] | None = None
    resume_url: str | None = None
    invited_by: str | None = None


class BulkCandidateImport(BaseModel):
    """One row of a bulk import."""
    first_name: str
    last_name: str
    email: str
    position: str = ""


class BulkCreateRequest(BaseModel):
    """Body for POST /api/candidates/bulk."""
    candidates: list[BulkCandidateImport] = []
    invited_by: str


class ApplicationData(BaseModel):
    """Fields an applicant supplies through their token.

    Every field is optional; an empty object is a valid submission.
    """
    phone: str | None = None
    experience: str | None = None
    skills: list[str] | None = None
    resume_url: str | None = None


class CandidateUpdate(BaseModel):
    """Partial update issued by staff (by id)."""
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    position: str | None = None
    experience: str | None = None
    skills: list[str] | None = None
    resume_url: str | None = None
    status: CandidateStatus | None = None
    match_score: int | None = Field(default=None, ge=0, le=100)
    ai_analysis: dict[str, Any] | None = None
    screening_questions: list[ScreeningQuestion] | None = None
    interview_scheduled_at: datetime | None = None


class Candidate(BaseModel):
    """Full candidate record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    token: str
    first_name: str
    last_name: str
    email: str
    position: str
    phone: str | None = None
    experience: str | None = None
    skills: list[str] | None = None
    resume_url: str | None = None
    status: CandidateStatus = CandidateStatus.invited
    match_score: int | None = None
    ai_analysis: dict[str, Any] | None = None
    screening_questions: list[ScreeningQuestion] | None = None
    interview_scheduled_at: datetime | None = None
    invited_by: str | None = None
    invited_at: datetime | None = None
    applied_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
