"""JSON adapter for study-session exports."""

from __future__ import annotations

import json
import logging

from campus_dashboard.adapters.records import session_from_row
from campus_dashboard.schema import StudySession

logger = logging.getLogger(__name__)


def parse(file_path: str) -> list[StudySession]:
    """Parse a JSON list of session objects."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    for index, item in enumerate(payload, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"Item {index}: expected an object")

    sessions = [session_from_row(item, f"Item {i}") for i, item in enumerate(payload, start=1)]
    logger.debug("Parsed %d sessions from %s", len(sessions), file_path)
    return sessions
