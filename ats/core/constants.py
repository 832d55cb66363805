"""Application constants.

Contains table names, match-score bands, and user-facing error messages.
"""

# ---------------------------------------------------------------------------
# Supabase tables
# ---------------------------------------------------------------------------
CANDIDATES_TABLE: str = "recruitment_candidates"
EMAIL_TEMPLATES_TABLE: str = "email_templates"
EMAIL_BATCHES_TABLE: str = "email_batches"
JOBS_TABLE: str = "jobs"

# ---------------------------------------------------------------------------
# Match score bands (inclusive lower bounds)
# ---------------------------------------------------------------------------
HIGH_MATCH_THRESHOLD: int = 80
MEDIUM_MATCH_THRESHOLD: int = 60

# ---------------------------------------------------------------------------
# Envelope error messages
# ---------------------------------------------------------------------------
INVALID_TOKEN_MESSAGE: str = "Invalid application token"
ALREADY_APPLIED_MESSAGE: str = "Application already submitted"
CANDIDATE_NOT_FOUND_MESSAGE: str = "Candidate not found"
TEMPLATE_NOT_FOUND_MESSAGE: str = "Email template not found"
NO_VALID_CANDIDATES_MESSAGE: str = "No valid candidates found"
JOB_NOT_FOUND_MESSAGE: str = "Job not found"

# ---------------------------------------------------------------------------
# Applicant self-service links
# ---------------------------------------------------------------------------
APPLICATION_LINK_PATH: str = "/apply/{token}"
