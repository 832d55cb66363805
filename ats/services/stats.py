"""Recruitment statistics aggregation.

Counts candidates per pipeline stage and buckets them by ``match_score``.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from ats.core.constants import HIGH_MATCH_THRESHOLD, MEDIUM_MATCH_THRESHOLD
from ats.models.enums import CandidateStatus
from ats.models.stats import RecruitmentStats


def compute_recruitment_stats(rows: list[dict[str, Any]]) -> RecruitmentStats:
    """Aggregate ``status`` / ``match_score`` rows into ``RecruitmentStats``.

    Rows with an unknown status still count toward ``total_candidates``.
    """
    by_status: Counter[str] = Counter(row.get("status") for row in rows)

    high = medium = low = 0
    for row in rows:
        score = row.get("match_score") or 0
        if score >= HIGH_MATCH_THRESHOLD:
            high += 1
        elif score >= MEDIUM_MATCH_THRESHOLD:
            medium += 1
        else:
            low += 1

    return RecruitmentStats(
        total_candidates=len(rows),
        high_match=high,
        medium_match=medium,
        low_match=low,
        **{status.value: by_status.get(status.value, 0) for status in CandidateStatus},
    )
