"""Pydantic models for the ``jobs`` table."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from ats.models.enums import JobStatus, JobType


class JobCreate(BaseModel):
    """Payload for inserting a job posting."""
    title: str
    company: str
    location: str = ""
    type: JobType = JobType.full_time
    salary: str = ""
    description: str = ""
    requirements: list[str] = []
    status: JobStatus = JobStatus.draft
    deadline: date | None = None


class JobUpdate(BaseModel):
    """Partial update of a job posting."""
    title: str | None = None
    company: str | None = None
    location: str | None = None
    type: JobType | None = None
    salary: str | None = None
    description: str | None = None
    requirements: list[str] | None = None
    status: JobStatus | None = None
    deadline: date | None = None


class Job(BaseModel):
    """Full job posting record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    company: str
    location: str = ""
    type: JobType = JobType.full_time
    salary: str = ""
    description: str = ""
    requirements: list[str] = []
    status: JobStatus = JobStatus.draft
    applicants_count: int = Field(default=0, ge=0)
    posted_date: datetime | None = None
    deadline: date | None = None
    created_at: datetime | None = None
