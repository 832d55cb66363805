"""n8n workflow-automation webhooks.

``N8NNotifier.submit_candidate`` hands a freshly applied candidate to the
resume-screening workflow; ``send_email`` triggers the email-blast
workflow used for invitations.  Calls are single-shot: no retries.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ats.core.config import Settings
from ats.core.exceptions import NotifierError
from ats.models.candidate import Candidate

logger = logging.getLogger(__name__)


def build_candidate_payload(candidate: Candidate) -> dict[str, Any]:
    """Map a candidate to the JSON body the screening workflow expects."""
    skills = ", ".join(candidate.skills) if candidate.skills else ""
    return {
        "name": candidate.full_name,
        "email": candidate.email,
        "phone": candidate.phone or "",
        "position": candidate.position,
        "experience": candidate.experience or "",
        "skills": skills,
        "resume_url": candidate.resume_url or "",
        "candidate_id": candidate.id,
        "token": candidate.token,
    }


class N8NNotifier:
    """Async client for the n8n webhooks."""

    def __init__(
        self,
        base_url: str,
        application_path: str,
        email_path: str,
        timeout: float = 30.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._application_path = application_path
        self._email_path = email_path
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> N8NNotifier:
        return cls(
            base_url=settings.N8N_BASE_URL,
            application_path=settings.N8N_APPLICATION_PATH,
            email_path=settings.N8N_EMAIL_PATH,
            timeout=settings.N8N_TIMEOUT_SECONDS,
        )

    @property
    def configured(self) -> bool:
        return bool(self._base_url)

    def _url(self, path: str) -> str:
        if not self.configured:
            raise NotifierError("n8n webhook is not configured")
        return f"{self._base_url}/{path.lstrip('/')}"

    async def submit_candidate(self, candidate: Candidate) -> dict[str, Any]:
        """Submit an applied candidate to the screening workflow.

        Returns the workflow acknowledgement; raises ``NotifierError``.
        """
        return await self._post(
            self._url(self._application_path),
            build_candidate_payload(candidate),
        )

    async def send_email(
        self,
        to: list[str],
        subject: str,
        body: str,
        link: str,
        sender_name: str,
    ) -> dict[str, Any]:
        """Trigger the email-blast workflow for *to*."""
        return await self._post(
            self._url(self._email_path),
            {
                "emails": ", ".join(to),
                "subject": subject,
                "message": body,
                "link": link,
                "sender_name": sender_name,
            },
        )

    async def _post(self, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(url, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NotifierError(
                f"n8n request failed with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise NotifierError(f"n8n request failed: {exc}") from exc

        text = response.text.strip()
        if not text:
            return {"success": True, "message": "Request processed successfully"}

        try:
            body = response.json()
        except ValueError:
            # Some workflows answer with plain text
            return {"success": True, "message": text}

        if not isinstance(body, dict):
            return {"success": True, "data": body}
        if body.get("success") is False:
            raise NotifierError(body.get("error") or "n8n workflow reported failure")

        logger.debug("n8n_request_ok", extra={"url": url})
        return body
