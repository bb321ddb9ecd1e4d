"""CSV adapter for study-session exports."""

from __future__ import annotations

import csv
import logging

from campus_dashboard.adapters.records import session_from_row
from campus_dashboard.schema import StudySession

logger = logging.getLogger(__name__)


def parse(file_path: str) -> list[StudySession]:
    """Parse a CSV export into study sessions."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        sessions: list[StudySession] = []
        for row_number, row in enumerate(reader, start=2):
            sessions.append(session_from_row(row, f"Row {row_number}"))

    logger.debug("Parsed %d sessions from %s", len(sessions), file_path)
    return sessions


def write(file_path: str, sessions: list[StudySession]) -> None:
    """Write sessions in the same layout ``parse`` reads."""

    fields = ["id", "date", "duration_minutes", "notes", "created_at"]
    with open(file_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fields)
        writer.writeheader()
        for session in sessions:
            writer.writerow(
                {
                    "id": session.id or "",
                    "date": session.date.isoformat(),
                    "duration_minutes": session.duration_minutes,
                    "notes": session.notes or "",
                    "created_at": session.created_at.isoformat() if session.created_at else "",
                }
            )
