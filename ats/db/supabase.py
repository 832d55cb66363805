"""Supabase client construction.

The client is built once by the FastAPI lifespan (see
``ats.dependencies.build_services``) and passed to the stores that need it.
``execute`` runs a PostgREST query and normalizes transport / API failures
into ``UpstreamError``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from ats.core.config import Settings
from ats.core.exceptions import UpstreamError


def build_supabase_client(settings: Settings) -> Client:
    """Create a Supabase client from *settings*."""
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


def execute(query: Any) -> list[dict[str, Any]]:
    """Execute a PostgREST request builder and return its rows.

    Raises ``UpstreamError`` if Supabase rejects the call.
    """
    try:
        result = query.execute()
    except APIError as exc:
        raise UpstreamError(exc.message or str(exc)) from exc
    except httpx.HTTPError as exc:
        raise UpstreamError(f"Supabase request failed: {exc}") from exc
    return result.data or []


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string (timestamptz columns)."""
    return datetime.now(timezone.utc).isoformat()
