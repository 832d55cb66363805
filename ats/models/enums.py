"""Enum types mirroring the text-valued status columns."""

from enum import Enum


class CandidateStatus(str, Enum):
    """Recruitment pipeline stage of a candidate."""
    invited = "invited"
    applied = "applied"
    ai_analyzed = "ai_analyzed"
    screening = "screening"
    interview_scheduled = "interview_scheduled"
    hired = "hired"
    rejected = "rejected"


class ScreeningCategory(str, Enum):
    """Category of a screening question."""
    technical = "technical"
    behavioral = "behavioral"
    experience = "experience"


class EmailTemplateType(str, Enum):
    """Purpose of an email template."""
    invitation = "invitation"
    reminder = "reminder"
    rejection = "rejection"
    interview_scheduled = "interview_scheduled"


class EmailBatchStatus(str, Enum):
    """Lifecycle status of an invitation batch."""
    pending = "pending"
    sending = "sending"
    completed = "completed"
    failed = "failed"


class ErrorKind(str, Enum):
    """Failure classification carried by ``ApiResult`` (not serialized)."""
    not_found = "not_found"
    conflict = "conflict"
    invalid = "invalid"
    upstream = "upstream"
    internal = "internal"


class JobType(str, Enum):
    """Employment type of a job posting."""
    full_time = "full-time"
    part_time = "part-time"
    contract = "contract"
    remote = "remote"


class JobStatus(str, Enum):
    """Publication status of a job posting."""
    draft = "draft"
    active = "active"
    paused = "paused"
    closed = "closed"
