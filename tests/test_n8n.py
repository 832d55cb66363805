"""Unit tests for the n8n workflow notifier.

``httpx.AsyncClient`` is patched; no network calls are made.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from ats.core.exceptions import NotifierError
from ats.models.candidate import Candidate
from ats.services.n8n import N8NNotifier, build_candidate_payload

BASE_URL = "https://n8n.example.com/"


def _notifier() -> N8NNotifier:
    return N8NNotifier(
        base_url=BASE_URL,
        application_path="/form-test/automation-specialist-supabase",
        email_path="/webhook/send-emails",
        timeout=5.0,
    )


def _mock_response(text: str = "", json_body: Any = None) -> MagicMock:
    response = MagicMock()
    response.status_code = 200
    response.raise_for_status = MagicMock()
    response.text = text
    if json_body is None:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = json_body
    return response


def _patched_client(mock_client_class: MagicMock, response: MagicMock) -> AsyncMock:
    mock_client = AsyncMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    mock_client.post = AsyncMock(return_value=response)
    mock_client_class.return_value = mock_client
    return mock_client


class TestCandidatePayload:
    """Mapping a candidate to the screening workflow body."""

    def test_payload_fields(self, make_candidate_row) -> None:
        candidate = Candidate(
            **make_candidate_row(
                phone="555-0100",
                skills=["python", "fastapi"],
                resume_url="https://cdn.example.com/cv.pdf",
            )
        )

        payload = build_candidate_payload(candidate)

        assert payload == {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "phone": "555-0100",
            "position": "Backend Engineer",
            "experience": "",
            "skills": "python, fastapi",
            "resume_url": "https://cdn.example.com/cv.pdf",
            "candidate_id": "c1",
            "token": "tok-123",
        }

    def test_missing_optional_fields_become_empty(self, make_candidate_row) -> None:
        payload = build_candidate_payload(Candidate(**make_candidate_row()))

        assert payload["phone"] == ""
        assert payload["skills"] == ""
        assert payload["resume_url"] == ""


class TestSubmitCandidate:
    """POST to the screening webhook and acknowledgement parsing."""

    @pytest.mark.asyncio
    async def test_posts_json_to_application_webhook(self, make_candidate_row) -> None:
        response = _mock_response('{"success": true}', {"success": True, "candidate_id": "c1"})

        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = _patched_client(mock_client_class, response)
            result = await _notifier().submit_candidate(Candidate(**make_candidate_row()))

        assert result == {"success": True, "candidate_id": "c1"}
        call = mock_client.post.call_args
        assert call.args[0] == "https://n8n.example.com/form-test/automation-specialist-supabase"
        assert call.kwargs["json"]["candidate_id"] == "c1"
        mock_client_class.assert_called_once_with(timeout=5.0)

    @pytest.mark.asyncio
    async def test_empty_body_is_acknowledgement(self, make_candidate_row) -> None:
        with patch("httpx.AsyncClient") as mock_client_class:
            _patched_client(mock_client_class, _mock_response("  "))
            result = await _notifier().submit_candidate(Candidate(**make_candidate_row()))

        assert result["success"] is True

    @pytest.mark.asyncio
    async def test_plain_text_body_is_acknowledgement(self, make_candidate_row) -> None:
        with patch("httpx.AsyncClient") as mock_client_class:
            _patched_client(mock_client_class, _mock_response("Workflow was started"))
            result = await _notifier().submit_candidate(Candidate(**make_candidate_row()))

        assert result == {"success": True, "message": "Workflow was started"}

    @pytest.mark.asyncio
    async def test_success_false_raises(self, make_candidate_row) -> None:
        response = _mock_response(
            '{"success": false}', {"success": False, "error": "screening failed"}
        )

        with patch("httpx.AsyncClient") as mock_client_class:
            _patched_client(mock_client_class, response)
            with pytest.raises(NotifierError, match="screening failed"):
                await _notifier().submit_candidate(Candidate(**make_candidate_row()))

    @pytest.mark.asyncio
    async def test_http_status_error_raises(self, make_candidate_row) -> None:
        url = "https://n8n.example.com/form-test/automation-specialist-supabase"
        response = _mock_response()
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "Server error",
            request=httpx.Request("POST", url),
            response=httpx.Response(500),
        )

        with patch("httpx.AsyncClient") as mock_client_class:
            _patched_client(mock_client_class, response)
            with pytest.raises(NotifierError, match="500"):
                await _notifier().submit_candidate(Candidate(**make_candidate_row()))

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, make_candidate_row) -> None:
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = _patched_client(mock_client_class, _mock_response())
            mock_client.post = AsyncMock(side_effect=httpx.ConnectError("refused"))
            with pytest.raises(NotifierError):
                await _notifier().submit_candidate(Candidate(**make_candidate_row()))

    @pytest.mark.asyncio
    async def test_unconfigured_base_url_raises_without_request(
        self, make_candidate_row
    ) -> None:
        notifier = N8NNotifier(base_url="", application_path="/x", email_path="/y")

        with patch("httpx.AsyncClient") as mock_client_class:
            with pytest.raises(NotifierError, match="not configured"):
                await notifier.submit_candidate(Candidate(**make_candidate_row()))

        mock_client_class.assert_not_called()
        assert notifier.configured is False


class TestSendEmail:
    """POST to the email-blast webhook."""

    @pytest.mark.asyncio
    async def test_send_email_payload(self) -> None:
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = _patched_client(mock_client_class, _mock_response(""))
            await _notifier().send_email(
                ["ada@example.com", "bob@example.com"],
                "Invitation",
                "Hi there",
                "https://jobs.example.com/apply/tok-123",
                "HR Team",
            )

        call = mock_client.post.call_args
        assert call.args[0] == "https://n8n.example.com/webhook/send-emails"
        assert call.kwargs["json"] == {
            "emails": "ada@example.com, bob@example.com",
            "subject": "Invitation",
            "message": "Hi there",
            "link": "https://jobs.example.com/apply/tok-123",
            "sender_name": "HR Team",
        }
