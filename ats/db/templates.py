"""Email template and email batch persistence."""

from __future__ import annotations

from typing import Any

from supabase import Client

from ats.core.constants import EMAIL_BATCHES_TABLE, EMAIL_TEMPLATES_TABLE
from ats.core.exceptions import TemplateNotFoundError, UpstreamError
from ats.db.supabase import execute, utc_now_iso
from ats.models.email import EmailBatch, EmailTemplate, EmailTemplateCreate
from ats.models.enums import EmailBatchStatus


class TemplateStore:
    """CRUD access to ``email_templates`` and ``email_batches``."""

    def __init__(self, client: Client) -> None:
        self._client = client

    # --- Templates ---

    def get_templates(self) -> list[EmailTemplate]:
        rows = execute(
            self._client.table(EMAIL_TEMPLATES_TABLE)
            .select("*")
            .order("created_at", desc=True)
        )
        return [EmailTemplate(**row) for row in rows]

    def get_template(self, template_id: str) -> EmailTemplate | None:
        rows = execute(
            self._client.table(EMAIL_TEMPLATES_TABLE)
            .select("*")
            .eq("id", template_id)
            .limit(1)
        )
        return EmailTemplate(**rows[0]) if rows else None

    def create_template(self, payload: EmailTemplateCreate) -> EmailTemplate:
        rows = execute(
            self._client.table(EMAIL_TEMPLATES_TABLE).insert(
                payload.model_dump(mode="json")
            )
        )
        if not rows:
            raise UpstreamError("Email template insert returned no rows")
        return EmailTemplate(**rows[0])

    def update_template(self, template_id: str, updates: dict[str, Any]) -> EmailTemplate:
        rows = execute(
            self._client.table(EMAIL_TEMPLATES_TABLE)
            .update({**updates, "updated_at": utc_now_iso()})
            .eq("id", template_id)
        )
        if not rows:
            raise TemplateNotFoundError(f"Email template not found: {template_id}")
        return EmailTemplate(**rows[0])

    # --- Batches ---

    def get_batches(self) -> list[EmailBatch]:
        rows = execute(
            self._client.table(EMAIL_BATCHES_TABLE)
            .select("*")
            .order("created_at", desc=True)
        )
        return [EmailBatch(**row) for row in rows]

    def create_batch(
        self,
        template_id: str,
        candidate_ids: list[str],
        created_by: str,
    ) -> EmailBatch:
        """Insert a ``pending`` batch with zeroed counters."""
        rows = execute(
            self._client.table(EMAIL_BATCHES_TABLE).insert({
                "template_id": template_id,
                "candidate_ids": candidate_ids,
                "sent_count": 0,
                "failed_count": 0,
                "status": EmailBatchStatus.pending.value,
                "created_by": created_by,
            })
        )
        if not rows:
            raise UpstreamError("Email batch insert returned no rows")
        return EmailBatch(**rows[0])

    def update_batch(self, batch_id: str, updates: dict[str, Any]) -> EmailBatch:
        rows = execute(
            self._client.table(EMAIL_BATCHES_TABLE)
            .update(updates)
            .eq("id", batch_id)
        )
        if not rows:
            raise UpstreamError(f"Email batch update matched no rows: {batch_id}")
        return EmailBatch(**rows[0])
