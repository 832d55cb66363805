"""FastAPI application entry point.

Configures CORS, structured logging, lifespan events (service wiring),
and router registration.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ats.core.config import settings
from ats.core.logging import setup_logging
from ats.dependencies import build_services
from ats.routers import candidates, email, health, jobs

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: build services once, drop them on exit."""
    setup_logging()
    logger.info("Application starting up")
    application.state.services = build_services(settings)
    yield
    application.state.services = None
    logger.info("Application shutting down")


app = FastAPI(
    title="ATS Recruitment API",
    description="Candidate invitations, token-based applications and n8n screening handoff",
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
app.include_router(candidates.router, prefix="/api/candidates", tags=["Candidates"])
app.include_router(email.router, prefix="/api/email", tags=["Email"])
app.include_router(jobs.router, prefix="/api/jobs", tags=["Jobs"])
