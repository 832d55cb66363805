"""CSV parsing for bulk candidate imports."""

from __future__ import annotations

import csv
import io

from ats.models.candidate import BulkCandidateImport

# Accepted header spellings per field, first match wins
_HEADER_ALIASES: dict[str, tuple[str, ...]] = {
    "first_name": ("first_name", "firstname"),
    "last_name": ("last_name", "lastname"),
    "email": ("email",),
    "position": ("position", "role"),
}


def parse_candidates_csv(text: str) -> list[BulkCandidateImport]:
    """Parse CSV *text* into import rows.

    The first line is the header row.  Rows without a first name, last name
    or email are skipped.  Raises ``ValueError`` on malformed input.
    """
    try:
        rows = list(csv.reader(io.StringIO(text.strip())))
    except csv.Error as exc:
        raise ValueError("Failed to parse CSV file") from exc

    if not rows:
        return []

    headers = [h.strip().lower() for h in rows[0]]
    columns: dict[str, int | None] = {}
    for field, aliases in _HEADER_ALIASES.items():
        columns[field] = next(
            (headers.index(alias) for alias in aliases if alias in headers),
            None,
        )

    if columns["email"] is None:
        raise ValueError("Failed to parse CSV file: missing email column")

    candidates: list[BulkCandidateImport] = []
    for raw in rows[1:]:
        values = [v.strip() for v in raw]

        def cell(field: str) -> str:
            idx = columns[field]
            if idx is None or idx >= len(values):
                return ""
            return values[idx]

        first_name, last_name, email = cell("first_name"), cell("last_name"), cell("email")
        if not (first_name and last_name and email):
            continue
        candidates.append(
            BulkCandidateImport(
                first_name=first_name,
                last_name=last_name,
                email=email,
                position=cell("position"),
            )
        )
    return candidates
