"""Service wiring and FastAPI dependency helpers.

``build_services`` constructs the Supabase client, stores, notifier and
services once; the lifespan stores the result on ``app.state.services``.
Request handlers receive them through the ``get_*`` dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from ats.core.config import Settings
from ats.db.candidates import CandidateStore
from ats.db.jobs import JobStore
from ats.db.supabase import build_supabase_client
from ats.db.templates import TemplateStore
from ats.services.candidates import CandidatesService
from ats.services.invitations import EmailService
from ats.services.jobs import JobsService
from ats.services.n8n import N8NNotifier


@dataclass
class Services:
    """Process-wide collaborators built at startup."""
    candidate_store: CandidateStore
    notifier: N8NNotifier
    candidates: CandidatesService
    email: EmailService
    jobs: JobsService


def build_services(settings: Settings) -> Services:
    client = build_supabase_client(settings)
    candidate_store = CandidateStore(client)
    notifier = N8NNotifier.from_settings(settings)
    return Services(
        candidate_store=candidate_store,
        notifier=notifier,
        candidates=CandidatesService(candidate_store, notifier),
        email=EmailService(
            TemplateStore(client),
            candidate_store,
            notifier,
            application_base_url=settings.APPLICATION_BASE_URL,
            sender_name=settings.INVITATION_SENDER_NAME,
        ),
        jobs=JobsService(JobStore(client), candidate_store),
    )


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_candidates_service(request: Request) -> CandidatesService:
    return get_services(request).candidates


def get_email_service(request: Request) -> EmailService:
    return get_services(request).email


def get_jobs_service(request: Request) -> JobsService:
    return get_services(request).jobs
