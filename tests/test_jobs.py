"""Unit tests for job postings: store, service and endpoints."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from ats.core.exceptions import JobNotFoundError, UpstreamError
from ats.models.candidate import Candidate
from ats.models.enums import ErrorKind, JobStatus, JobType
from ats.models.job import Job, JobCreate, JobUpdate
from ats.models.result import ApiResult
from ats.services.jobs import JobsService


def _job_row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "id": "j1",
        "title": "Backend Engineer",
        "company": "Analytical Engines Ltd",
        "location": "London",
        "type": "full-time",
        "salary": "70k",
        "description": "Build the pipeline",
        "requirements": ["python", "sql"],
        "status": "active",
        "applicants_count": 2,
        "created_at": "2026-10-01T09:00:00+00:00",
    }
    row.update(overrides)
    return row


def _chainable_table_mock(data: list[dict[str, Any]] | None = None) -> MagicMock:
    m = MagicMock()
    for method in ("select", "insert", "update", "delete", "eq", "limit", "order"):
        getattr(m, method).return_value = m
    m.execute.return_value = MagicMock(data=data if data is not None else [])
    return m


def _store(table: MagicMock):
    from ats.db.jobs import JobStore

    client = MagicMock()
    client.table.return_value = table
    return JobStore(client), client


class TestJobStore:
    """CRUD against the ``jobs`` table."""

    def test_get_jobs_newest_first(self) -> None:
        table = _chainable_table_mock([_job_row(), _job_row(id="j2")])
        store, client = _store(table)

        jobs = store.get_jobs()

        assert [j.id for j in jobs] == ["j1", "j2"]
        assert jobs[0].type is JobType.full_time
        client.table.assert_called_with("jobs")
        table.order.assert_called_once_with("created_at", desc=True)

    def test_get_job_missing_returns_none(self) -> None:
        store, _ = _store(_chainable_table_mock([]))

        assert store.get_job("nope") is None

    def test_create_job_drops_unset_optionals(self) -> None:
        table = _chainable_table_mock([_job_row(status="draft")])
        store, _ = _store(table)

        job = store.create_job(JobCreate(title="Backend Engineer", company="AE Ltd"))

        row = table.insert.call_args.args[0]
        assert row["title"] == "Backend Engineer"
        assert row["type"] == "full-time"
        assert "deadline" not in row
        assert job.status is JobStatus.draft

    def test_update_missing_job_raises(self) -> None:
        store, _ = _store(_chainable_table_mock([]))

        with pytest.raises(JobNotFoundError):
            store.update_job("nope", {"status": "closed"})

    def test_delete_returns_removed_row(self) -> None:
        table = _chainable_table_mock([_job_row()])
        store, _ = _store(table)

        job = store.delete_job("j1")

        assert job.id == "j1"
        table.eq.assert_called_with("id", "j1")

    def test_delete_missing_job_raises(self) -> None:
        store, _ = _store(_chainable_table_mock([]))

        with pytest.raises(JobNotFoundError):
            store.delete_job("nope")


class TestJobsService:
    """Envelope wrapping and the job to candidates link."""

    @pytest.mark.asyncio
    async def test_get_by_id_unknown(self) -> None:
        jobs = MagicMock()
        jobs.get_job.return_value = None

        result = await JobsService(jobs, MagicMock()).get_by_id("nope")

        assert result.data is None
        assert result.error == "Job not found"
        assert result.error_kind is ErrorKind.not_found

    @pytest.mark.asyncio
    async def test_get_all_failure_defaults_to_empty_list(self) -> None:
        jobs = MagicMock()
        jobs.get_jobs.side_effect = UpstreamError("relation \"jobs\" does not exist")

        result = await JobsService(jobs, MagicMock()).get_all()

        assert result.data == []
        assert result.error == "Failed to fetch jobs"
        assert result.error_kind is ErrorKind.upstream

    @pytest.mark.asyncio
    async def test_update_sends_only_set_fields(self) -> None:
        jobs = MagicMock()
        jobs.update_job.return_value = Job(**_job_row(status="closed"))

        result = await JobsService(jobs, MagicMock()).update(
            "j1", JobUpdate(status=JobStatus.closed)
        )

        jobs.update_job.assert_called_once_with("j1", {"status": "closed"})
        assert result.data is not None
        assert result.data.status is JobStatus.closed

    @pytest.mark.asyncio
    async def test_delete_unknown_is_not_found(self) -> None:
        jobs = MagicMock()
        jobs.delete_job.side_effect = JobNotFoundError("Job not found: nope")

        result = await JobsService(jobs, MagicMock()).delete("nope")

        assert result.data is None
        assert result.error_kind is ErrorKind.not_found

    @pytest.mark.asyncio
    async def test_candidates_matched_by_job_title(self, make_candidate_row) -> None:
        jobs = MagicMock()
        jobs.get_job.return_value = Job(**_job_row())
        candidates = MagicMock()
        candidates.get_candidates_by_position.return_value = [
            Candidate(**make_candidate_row())
        ]

        result = await JobsService(jobs, candidates).get_candidates("j1")

        candidates.get_candidates_by_position.assert_called_once_with("Backend Engineer")
        assert result.data is not None
        assert [c.id for c in result.data] == ["c1"]

    @pytest.mark.asyncio
    async def test_candidates_for_unknown_job(self) -> None:
        jobs = MagicMock()
        jobs.get_job.return_value = None
        candidates = MagicMock()

        result = await JobsService(jobs, candidates).get_candidates("nope")

        assert result.data == []
        assert result.error_kind is ErrorKind.not_found
        candidates.get_candidates_by_position.assert_not_called()


class TestJobEndpoints:
    """/api/jobs routes."""

    def test_create_job_is_201(self, test_client: TestClient, jobs_service: MagicMock) -> None:
        jobs_service.create.return_value = ApiResult(data=Job(**_job_row(status="draft")))

        response = test_client.post(
            "/api/jobs",
            json={"title": "Backend Engineer", "company": "AE Ltd", "type": "remote"},
        )

        assert response.status_code == 201
        payload = jobs_service.create.await_args.args[0]
        assert payload.type is JobType.remote

    def test_invalid_job_type_is_422(self, test_client: TestClient) -> None:
        response = test_client.post(
            "/api/jobs", json={"title": "X", "company": "Y", "type": "freelance"}
        )

        assert response.status_code == 422

    def test_delete_unknown_job_is_404(
        self, test_client: TestClient, jobs_service: MagicMock
    ) -> None:
        jobs_service.delete.return_value = ApiResult(
            data=None, error="Job not found", error_kind=ErrorKind.not_found
        )

        response = test_client.delete("/api/jobs/nope")

        assert response.status_code == 404
        assert response.json() == {"data": None, "error": "Job not found"}

    def test_job_candidates(
        self,
        test_client: TestClient,
        jobs_service: MagicMock,
        make_candidate_row,
    ) -> None:
        jobs_service.get_candidates.return_value = ApiResult(
            data=[Candidate(**make_candidate_row())]
        )

        response = test_client.get("/api/jobs/j1/candidates")

        assert response.status_code == 200
        assert [c["id"] for c in response.json()["data"]] == ["c1"]
        jobs_service.get_candidates.assert_awaited_once_with("j1")
