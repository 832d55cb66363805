"""Error taxonomy for the recruitment service.

Store and notifier code raise these; ``CandidatesService`` and
``EmailService`` convert them into ``ApiResult`` envelopes.
"""

from __future__ import annotations


class RecruitmentError(Exception):
    """Base class for all recruitment service errors."""


class CandidateNotFoundError(RecruitmentError, LookupError):
    """A candidate id or token did not resolve to a record."""


class TemplateNotFoundError(RecruitmentError, LookupError):
    """An email template id did not resolve to a record."""


class ApplicationConflictError(RecruitmentError):
    """The candidate is no longer in a state that accepts an application."""


class UpstreamError(RecruitmentError):
    """Supabase rejected a read or write."""


class NotifierError(RecruitmentError):
    """The n8n workflow webhook could not be reached or reported failure."""


class JobNotFoundError(RecruitmentError, LookupError):
    """A job posting id did not resolve to a record."""
