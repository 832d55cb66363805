"""Pydantic models for the ``email_templates`` and ``email_batches`` tables."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from ats.models.enums import EmailBatchStatus, EmailTemplateType


class EmailTemplateCreate(BaseModel):
    """Payload for inserting an email template."""
    name: str
    subject: str
    body: str
    type: EmailTemplateType = EmailTemplateType.invitation
    is_default: bool = False


class EmailTemplateUpdate(BaseModel):
    """Partial update of an email template."""
    name: str | None = None
    subject: str | None = None
    body: str | None = None
    type: EmailTemplateType | None = None
    is_default: bool | None = None


class EmailTemplate(BaseModel):
    """Full email template record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    subject: str
    body: str
    type: EmailTemplateType = EmailTemplateType.invitation
    is_default: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class EmailBatch(BaseModel):
    """Full email batch record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    template_id: str
    candidate_ids: list[str] = []
    sent_count: int = 0
    failed_count: int = 0
    status: EmailBatchStatus = EmailBatchStatus.pending
    created_by: str | None = None
    created_at: datetime | None = None
    completed_at: datetime | None = None


class RenderedEmail(BaseModel):
    """A personalized invitation ready to hand to the notifier."""
    to: str
    subject: str
    body: str
    link: str


class InvitationRequest(BaseModel):
    """Body for POST /api/email/invitations."""
    candidate_ids: list[str]
    template_id: str
    created_by: str
