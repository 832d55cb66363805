"""Response model for the recruitment dashboard statistics."""

from pydantic import BaseModel


class RecruitmentStats(BaseModel):
    """Candidate counts per pipeline stage and per match-score band.

    Candidates without a ``match_score`` fall into ``low_match``.
    """
    total_candidates: int = 0
    invited: int = 0
    applied: int = 0
    ai_analyzed: int = 0
    screening: int = 0
    interview_scheduled: int = 0
    hired: int = 0
    rejected: int = 0
    high_match: int = 0
    medium_match: int = 0
    low_match: int = 0
