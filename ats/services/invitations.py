"""Email templates and invitation batches.

Invitations are rendered from a template per candidate and handed to the
n8n email workflow one by one.  A failed send is counted and logged; the
batch carries on with the next candidate.
"""

from __future__ import annotations

import logging

from ats.core.constants import (
    APPLICATION_LINK_PATH,
    NO_VALID_CANDIDATES_MESSAGE,
    TEMPLATE_NOT_FOUND_MESSAGE,
)
from ats.db.candidates import CandidateStore
from ats.db.supabase import utc_now_iso
from ats.db.templates import TemplateStore
from ats.models.candidate import Candidate
from ats.models.email import (
    EmailBatch,
    EmailTemplate,
    EmailTemplateCreate,
    EmailTemplateUpdate,
    RenderedEmail,
)
from ats.models.enums import EmailBatchStatus, ErrorKind
from ats.models.result import ApiResult
from ats.services.n8n import N8NNotifier
from ats.services.results import failure

logger = logging.getLogger(__name__)


def application_link(base_url: str, token: str) -> str:
    return base_url.rstrip("/") + APPLICATION_LINK_PATH.format(token=token)


def render_invitation(
    template: EmailTemplate,
    candidate: Candidate,
    base_url: str,
) -> RenderedEmail:
    """Fill ``{{first_name}}``, ``{{last_name}}``, ``{{position}}`` and
    ``{{application_link}}`` placeholders in *template* for *candidate*."""
    link = application_link(base_url, candidate.token)
    values = {
        "{{first_name}}": candidate.first_name,
        "{{last_name}}": candidate.last_name,
        "{{position}}": candidate.position,
        "{{application_link}}": link,
    }

    subject, body = template.subject, template.body
    for placeholder, value in values.items():
        subject = subject.replace(placeholder, value)
        body = body.replace(placeholder, value)

    return RenderedEmail(to=candidate.email, subject=subject, body=body, link=link)


class EmailService:
    """Template CRUD and invitation sending."""

    def __init__(
        self,
        templates: TemplateStore,
        candidates: CandidateStore,
        notifier: N8NNotifier,
        application_base_url: str,
        sender_name: str,
    ) -> None:
        self._templates = templates
        self._candidates = candidates
        self._notifier = notifier
        self._application_base_url = application_base_url
        self._sender_name = sender_name

    async def get_templates(self) -> ApiResult[list[EmailTemplate]]:
        try:
            templates = self._templates.get_templates()
        except Exception as exc:
            return failure("templates_fetch_failed", exc, "Failed to fetch email templates", data=[])
        return ApiResult(data=templates)

    async def create_template(self, payload: EmailTemplateCreate) -> ApiResult[EmailTemplate]:
        try:
            template = self._templates.create_template(payload)
        except Exception as exc:
            return failure("template_create_failed", exc, "Failed to create email template")
        return ApiResult(data=template)

    async def update_template(
        self,
        template_id: str,
        updates: EmailTemplateUpdate,
    ) -> ApiResult[EmailTemplate]:
        try:
            template = self._templates.update_template(
                template_id, updates.model_dump(mode="json", exclude_unset=True)
            )
        except Exception as exc:
            return failure("template_update_failed", exc, "Failed to update email template")
        return ApiResult(data=template)

    async def get_batches(self) -> ApiResult[list[EmailBatch]]:
        try:
            batches = self._templates.get_batches()
        except Exception as exc:
            return failure("batches_fetch_failed", exc, "Failed to fetch email batches", data=[])
        return ApiResult(data=batches)

    async def send_invitations(
        self,
        candidate_ids: list[str],
        template_id: str,
        created_by: str,
    ) -> ApiResult[EmailBatch]:
        """Send *template* to every candidate in *candidate_ids*.

        Unknown ids are skipped; if none resolve, no batch is created.
        Otherwise a ``pending`` batch record is created, each rendered email
        is sent and the batch is closed with sent / failed counters.  The
        batch is ``failed`` only if every send failed.
        """
        try:
            template = self._templates.get_template(template_id)
            if template is None:
                return ApiResult(
                    data=None,
                    error=TEMPLATE_NOT_FOUND_MESSAGE,
                    error_kind=ErrorKind.not_found,
                )
            candidates = self._candidates.get_candidates_by_ids(candidate_ids)
            if not candidates:
                return ApiResult(
                    data=None,
                    error=NO_VALID_CANDIDATES_MESSAGE,
                    error_kind=ErrorKind.not_found,
                )
            batch = self._templates.create_batch(template_id, candidate_ids, created_by)
        except Exception as exc:
            return failure("invitations_prepare_failed", exc, "Failed to send invitations")

        sent_count = 0
        failed_count = 0
        for candidate in candidates:
            email = render_invitation(template, candidate, self._application_base_url)
            try:
                await self._notifier.send_email(
                    [email.to], email.subject, email.body, email.link, self._sender_name
                )
                sent_count += 1
            except Exception as exc:
                failed_count += 1
                logger.error(
                    "invitation_send_failed",
                    extra={
                        "batch_id": batch.id,
                        "candidate_id": candidate.id,
                        "error_type": type(exc).__name__,
                        "error_message": str(exc),
                    },
                )

        status = EmailBatchStatus.completed
        if failed_count and not sent_count:
            status = EmailBatchStatus.failed

        try:
            batch = self._templates.update_batch(batch.id, {
                "sent_count": sent_count,
                "failed_count": failed_count,
                "status": status.value,
                "completed_at": utc_now_iso(),
            })
        except Exception as exc:
            return failure("invitations_finalize_failed", exc, "Failed to send invitations")

        logger.info(
            "invitations_sent",
            extra={
                "batch_id": batch.id,
                "sent": sent_count,
                "failed": failed_count,
            },
        )
        return ApiResult(data=batch)
