"""Shared test fixtures.

Provides environment defaults for ``Settings``, a candidate row factory,
mock services, and a FastAPI ``test_client`` wired to those mocks.
"""

import os
from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")


@pytest.fixture()
def make_candidate_row() -> Callable[..., dict[str, Any]]:
    """Return a factory for ``recruitment_candidates`` rows."""

    def _make(**overrides: Any) -> dict[str, Any]:
        row: dict[str, Any] = {
            "id": "c1",
            "token": "tok-123",
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "position": "Backend Engineer",
            "status": "invited",
            "invited_by": "recruiter-1",
            "invited_at": "2026-10-01T09:00:00+00:00",
            "created_at": "2026-10-01T09:00:00+00:00",
            "updated_at": "2026-10-01T09:00:00+00:00",
        }
        row.update(overrides)
        return row

    return _make


@pytest.fixture()
def candidates_service() -> MagicMock:
    """A ``CandidatesService`` stand-in with awaitable operations."""
    service = MagicMock()
    for name in (
        "get_all", "get_by_id", "get_by_token", "get_stats", "create",
        "bulk_create", "import_csv", "update", "update_by_token",
        "delete", "submit_application",
    ):
        setattr(service, name, AsyncMock())
    return service


@pytest.fixture()
def email_service() -> MagicMock:
    """An ``EmailService`` stand-in with awaitable operations."""
    service = MagicMock()
    for name in (
        "get_templates", "create_template", "update_template",
        "get_batches", "send_invitations",
    ):
        setattr(service, name, AsyncMock())
    return service


@pytest.fixture()
def jobs_service() -> MagicMock:
    """A ``JobsService`` stand-in with awaitable operations."""
    service = MagicMock()
    for name in ("get_all", "get_by_id", "create", "update", "delete", "get_candidates"):
        setattr(service, name, AsyncMock())
    return service


@pytest.fixture()
def mock_supabase() -> Generator[MagicMock, None, None]:
    """Patch ``create_client`` so the lifespan builds on a mock Supabase client."""
    mock_client = MagicMock()
    with patch("ats.db.supabase.create_client", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def test_client(
    mock_supabase: MagicMock,
    candidates_service: MagicMock,
    email_service: MagicMock,
    jobs_service: MagicMock,
) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient with the services replaced by mocks."""
    from ats.dependencies import (
        get_candidates_service,
        get_email_service,
        get_jobs_service,
    )
    from ats.main import app

    app.dependency_overrides[get_candidates_service] = lambda: candidates_service
    app.dependency_overrides[get_email_service] = lambda: email_service
    app.dependency_overrides[get_jobs_service] = lambda: jobs_service
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
