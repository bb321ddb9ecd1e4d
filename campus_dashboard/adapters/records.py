"""Row parsing shared by the file adapters and the backend repositories."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from campus_dashboard.schema import (
    Budget,
    BudgetCategory,
    CommunityMessage,
    Course,
    Expense,
    Profile,
    StudySession,
    Task,
)

_SESSION_FIELDS = {"date", "duration_minutes"}
_TASK_FIELDS = {"title", "due_date"}
_COURSE_FIELDS = {"name", "code", "instructor", "schedule"}
_CATEGORY_FIELDS = {"name"}
_BUDGET_FIELDS = {"category_id", "amount", "period", "start_date", "end_date"}
_EXPENSE_FIELDS = {"category_id", "amount", "description", "date"}
_MESSAGE_FIELDS = {"user_id", "user_name", "message", "created_at"}

_SERVER_DEFAULTS = {"id", "created_at", "updated_at"}

VALID_PRIORITIES = {"Low", "Medium", "High"}
VALID_STATUSES = {"active", "completed"}


def _missing(item: dict, required: set[str]) -> list[str]:
    return sorted(field for field in required if item.get(field) in (None, ""))


def _require(item: dict, required: set[str], label: str) -> None:
    missing = _missing(item, required)
    if missing:
        raise ValueError(f"{label}: missing required fields {missing}")


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_date(value: Any, label: str, field: str = "date") -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"{label}: malformed {field}") from exc


def parse_timestamp(value: Any, label: str, field: str = "created_at") -> Optional[datetime]:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value
    raw = str(value).strip()
    # postgres timestamps use a trailing Z
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw)
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"{label}: malformed {field}") from exc


def _int(value: Any, label: str, field: str) -> int:
    try:
        return int(str(value).strip())
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"{label}: invalid {field}") from exc


def _float(value: Any, label: str, field: str = "amount") -> float:
    try:
        return float(value)
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"{label}: invalid {field}") from exc


def session_from_row(item: dict, label: str = "Row") -> StudySession:
    _require(item, _SESSION_FIELDS, label)

    duration = _int(item["duration_minutes"], label, "duration_minutes")
    if duration < 0:
        raise ValueError(f"{label}: duration_minutes must not be negative")

    return StudySession(
        id=_text(item.get("id")),
        user_id=_text(item.get("user_id")),
        date=parse_date(item["date"], label),
        duration_minutes=duration,
        notes=_text(item.get("notes")),
        created_at=parse_timestamp(item.get("created_at"), label),
    )


def task_from_row(item: dict, label: str = "Row") -> Task:
    _require(item, _TASK_FIELDS, label)

    priority = _text(item.get("priority")) or "Medium"
    if priority not in VALID_PRIORITIES:
        raise ValueError(f"{label}: invalid priority '{priority}'")
    status = _text(item.get("status")) or "active"
    if status not in VALID_STATUSES:
        raise ValueError(f"{label}: invalid status '{status}'")

    return Task(
        id=_text(item.get("id")),
        user_id=_text(item.get("user_id")),
        title=str(item["title"]).strip(),
        description=_text(item.get("description")) or "",
        due_date=parse_date(item["due_date"], label, "due_date"),
        priority=priority,
        status=status,
        created_at=parse_timestamp(item.get("created_at"), label),
    )


def course_from_row(item: dict, label: str = "Row") -> Course:
    _require(item, _COURSE_FIELDS, label)
    credits = item.get("credits")
    return Course(
        id=_text(item.get("id")),
        user_id=_text(item.get("user_id")),
        name=str(item["name"]).strip(),
        code=str(item["code"]).strip(),
        instructor=str(item["instructor"]).strip(),
        schedule=str(item["schedule"]).strip(),
        credits=3 if credits in (None, "") else _int(credits, label, "credits"),
        location=_text(item.get("location")),
        description=_text(item.get("description")),
    )


def category_from_row(item: dict, label: str = "Row") -> BudgetCategory:
    _require(item, _CATEGORY_FIELDS, label)
    return BudgetCategory(
        id=_text(item.get("id")),
        user_id=_text(item.get("user_id")),
        name=str(item["name"]).strip(),
        color=_text(item.get("color")) or "#3B82F6",
        icon=_text(item.get("icon")) or "DollarSign",
    )


def budget_from_row(item: dict, label: str = "Row") -> Budget:
    _require(item, _BUDGET_FIELDS, label)
    return Budget(
        id=_text(item.get("id")),
        user_id=_text(item.get("user_id")),
        category_id=str(item["category_id"]).strip(),
        amount=_float(item["amount"], label),
        period=str(item["period"]).strip(),
        start_date=parse_date(item["start_date"], label, "start_date"),
        end_date=parse_date(item["end_date"], label, "end_date"),
    )


def expense_from_row(item: dict, label: str = "Row") -> Expense:
    _require(item, _EXPENSE_FIELDS, label)
    return Expense(
        id=_text(item.get("id")),
        user_id=_text(item.get("user_id")),
        category_id=str(item["category_id"]).strip(),
        amount=_float(item["amount"], label),
        description=str(item["description"]).strip(),
        date=parse_date(item["date"], label),
        receipt_url=_text(item.get("receipt_url")),
    )


def message_from_row(item: dict, label: str = "Row") -> CommunityMessage:
    _require(item, _MESSAGE_FIELDS, label)
    return CommunityMessage(
        id=_text(item.get("id")),
        user_id=str(item["user_id"]),
        user_name=str(item["user_name"]),
        message=str(item["message"]),
        created_at=parse_timestamp(item["created_at"], label),
    )


def profile_from_row(item: dict, label: str = "Row") -> Profile:
    _require(item, {"id"}, label)
    gpa = item.get("gpa")
    return Profile(
        id=str(item["id"]),
        full_name=_text(item.get("full_name")),
        student_id=_text(item.get("student_id")),
        major=_text(item.get("major")),
        year=_text(item.get("year")),
        gpa=None if gpa in (None, "") else _float(gpa, label, "gpa"),
        phone=_text(item.get("phone")),
        address=_text(item.get("address")),
        bio=_text(item.get("bio")),
        avatar_url=_text(item.get("avatar_url")),
        created_at=parse_timestamp(item.get("created_at"), label),
        updated_at=parse_timestamp(item.get("updated_at"), label, "updated_at"),
    )

def to_row(record: Any) -> dict:
    """Serialize a schema record into a row payload with ISO dates.

    Unset ids and timestamps are left out so the table defaults fill them.
    """

    row = {}
    for name, value in vars(record).items():
        if name in _SERVER_DEFAULTS and value is None:
            continue
        if isinstance(value, (date, datetime)):
            value = value.isoformat()
        row[name] = value
    return row
