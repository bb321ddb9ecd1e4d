"""Per-entity data access: in-memory stores and Supabase-backed tables.

Every query is scoped to one user id. The Supabase repositories only need a
client exposing ``client.table(name)`` with the postgrest query builder
(``select``/``insert``/``update``/``delete``, ``eq``/``gte``/``order``/``limit``
and ``execute()``), so tests can hand in a fake.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Optional, Protocol

from campus_dashboard.adapters.records import (
    budget_from_row,
    category_from_row,
    course_from_row,
    expense_from_row,
    message_from_row,
    profile_from_row,
    session_from_row,
    task_from_row,
    to_row,
)
from campus_dashboard.errors import BackendError
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
from campus_dashboard.tracker import HEATMAP_DAYS

logger = logging.getLogger(__name__)

ChangeListener = Callable[[dict], None]


class SessionRepository(Protocol):
    def list_since(self, user_id: str, since: date) -> list[StudySession]: ...
    def add(self, session: StudySession) -> StudySession: ...


class TaskRepository(Protocol):
    def for_user(self, user_id: str) -> list[Task]: ...
    def add(self, task: Task) -> Task: ...
    def update(self, task: Task) -> Task: ...
    def delete(self, user_id: str, task_id: str) -> None: ...


class CourseRepository(Protocol):
    def for_user(self, user_id: str) -> list[Course]: ...
    def add(self, course: Course) -> Course: ...
    def update(self, course: Course) -> Course: ...
    def delete(self, user_id: str, course_id: str) -> None: ...


class BudgetRepository(Protocol):
    def list_categories(self, user_id: str) -> list[BudgetCategory]: ...
    def add_category(self, category: BudgetCategory) -> BudgetCategory: ...
    def list_budgets(self, user_id: str) -> list[Budget]: ...
    def add_budget(self, budget: Budget) -> Budget: ...
    def update_budget(self, budget: Budget) -> Budget: ...
    def delete_budget(self, user_id: str, budget_id: str) -> None: ...
    def list_expenses(self, user_id: str) -> list[Expense]: ...
    def add_expense(self, expense: Expense) -> Expense: ...
    def delete_expense(self, user_id: str, expense_id: str) -> None: ...


class MessageRepository(Protocol):
    def recent(self, limit: int = 100) -> list[CommunityMessage]: ...
    def send(self, message: CommunityMessage) -> CommunityMessage: ...
    def delete(self, user_id: str, message_id: str) -> None: ...


class ProfileRepository(Protocol):
    def get(self, user_id: str) -> Optional[Profile]: ...
    def save(self, profile: Profile) -> Profile: ...


def _new_id() -> str:
    return str(uuid.uuid4())


def _require_user(record: Any) -> str:
    if not record.user_id:
        raise ValueError(f"{type(record).__name__} has no user_id")
    return record.user_id


# ---------------------------------------------------------------------------
# In-memory stores
# ---------------------------------------------------------------------------


class _MemoryTable:
    """Rows keyed by id, kept in insertion order."""

    def __init__(self) -> None:
        self.rows: dict[str, Any] = {}

    def insert(self, record: Any) -> Any:
        _require_user(record)
        if record.id is None:
            record.id = _new_id()
        self.rows[record.id] = record
        return record

    def for_user(self, user_id: str) -> list[Any]:
        return [row for row in self.rows.values() if row.user_id == user_id]

    def replace(self, record: Any) -> Any:
        existing = self.rows.get(record.id)
        if existing is None or existing.user_id != record.user_id:
            raise KeyError(f"No {type(record).__name__} {record.id} for this user")
        self.rows[record.id] = record
        return record

    def remove(self, user_id: str, record_id: str) -> None:
        existing = self.rows.get(record_id)
        if existing is None or existing.user_id != user_id:
            raise KeyError(f"No row {record_id} for this user")
        del self.rows[record_id]


class InMemorySessionRepository:
    def __init__(self) -> None:
        self._table = _MemoryTable()

    def list_since(self, user_id: str, since: date) -> list[StudySession]:
        sessions = [s for s in self._table.for_user(user_id) if s.date >= since]
        return sorted(sessions, key=lambda s: s.date, reverse=True)

    def add(self, session: StudySession) -> StudySession:
        if session.created_at is None:
            session.created_at = datetime.now(timezone.utc)
        return self._table.insert(session)


class InMemoryTaskRepository:
    def __init__(self) -> None:
        self._table = _MemoryTable()

    def for_user(self, user_id: str) -> list[Task]:
        return sorted(self._table.for_user(user_id), key=lambda t: t.due_date)

    def add(self, task: Task) -> Task:
        return self._table.insert(task)

    def update(self, task: Task) -> Task:
        return self._table.replace(task)

    def delete(self, user_id: str, task_id: str) -> None:
        self._table.remove(user_id, task_id)


class InMemoryCourseRepository:
    def __init__(self) -> None:
        self._table = _MemoryTable()

    def for_user(self, user_id: str) -> list[Course]:
        return self._table.for_user(user_id)

    def add(self, course: Course) -> Course:
        return self._table.insert(course)

    def update(self, course: Course) -> Course:
        return self._table.replace(course)

    def delete(self, user_id: str, course_id: str) -> None:
        self._table.remove(user_id, course_id)


class InMemoryBudgetRepository:
    def __init__(self) -> None:
        self._categories = _MemoryTable()
        self._budgets = _MemoryTable()
        self._expenses = _MemoryTable()

    def list_categories(self, user_id: str) -> list[BudgetCategory]:
        return self._categories.for_user(user_id)

    def add_category(self, category: BudgetCategory) -> BudgetCategory:
        return self._categories.insert(category)

    def list_budgets(self, user_id: str) -> list[Budget]:
        return self._budgets.for_user(user_id)

    def add_budget(self, budget: Budget) -> Budget:
        return self._budgets.insert(budget)

    def update_budget(self, budget: Budget) -> Budget:
        return self._budgets.replace(budget)

    def delete_budget(self, user_id: str, budget_id: str) -> None:
        self._budgets.remove(user_id, budget_id)

    def list_expenses(self, user_id: str) -> list[Expense]:
        return sorted(self._expenses.for_user(user_id), key=lambda e: e.date, reverse=True)

    def add_expense(self, expense: Expense) -> Expense:
        return self._expenses.insert(expense)

    def delete_expense(self, user_id: str, expense_id: str) -> None:
        self._expenses.remove(user_id, expense_id)


class InMemoryMessageRepository:
    """Shared chat store that pushes INSERT/DELETE changes to subscribers."""

    def __init__(self) -> None:
        self._table = _MemoryTable()
        self._listeners: list[ChangeListener] = []

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _publish(self, payload: dict) -> None:
        for listener in list(self._listeners):
            listener(payload)

    def recent(self, limit: int = 100) -> list[CommunityMessage]:
        messages = sorted(self._table.rows.values(), key=lambda m: m.created_at)
        return messages[:limit]

    def send(self, message: CommunityMessage) -> CommunityMessage:
        stored = self._table.insert(message)
        self._publish({"eventType": "INSERT", "new": to_row(stored), "old": {}})
        return stored

    def delete(self, user_id: str, message_id: str) -> None:
        self._table.remove(user_id, message_id)
        self._publish({"eventType": "DELETE", "new": {}, "old": {"id": message_id}})


class InMemoryProfileRepository:
    """One profile per user, created on first save."""

    def __init__(self) -> None:
        self.rows: dict[str, Profile] = {}

    def get(self, user_id: str) -> Optional[Profile]:
        return self.rows.get(user_id)

    def save(self, profile: Profile) -> Profile:
        if not profile.id:
            raise ValueError("Profile has no user id")
        now = datetime.now(timezone.utc)
        existing = self.rows.get(profile.id)
        profile.created_at = existing.created_at if existing is not None else now
        profile.updated_at = now
        self.rows[profile.id] = profile
        return profile


# ---------------------------------------------------------------------------
# Supabase tables
# ---------------------------------------------------------------------------


def create_supabase_client(url: str, anon_key: str) -> Any:
    from supabase import create_client

    return create_client(url, anon_key)


class _SupabaseTable:
    def __init__(self, client: Any, table: str) -> None:
        self.client = client
        self.table = table

    def run(self, build: Callable[[Any], Any], action: str) -> list[dict]:
        try:
            response = build(self.client.table(self.table)).execute()
        except Exception as exc:  # noqa: BLE001
            logger.warning("Supabase %s on %s failed: %s", action, self.table, exc)
            raise BackendError(f"Could not {action} {self.table}") from exc
        rows = getattr(response, "data", None)
        return rows if isinstance(rows, list) else []

    def insert(self, record: Any, action: str = "insert into") -> dict:
        _require_user(record)
        rows = self.run(lambda q: q.insert(to_row(record)), action)
        if not rows:
            raise BackendError(f"Insert into {self.table} returned no row")
        return rows[0]

    def update(self, record: Any) -> dict:
        row = to_row(record)
        row.pop("id", None)
        rows = self.run(lambda q: q.update(row).eq("id", record.id).eq("user_id", record.user_id), "update")
        if not rows:
            raise BackendError(f"Update of {self.table} {record.id} matched no row")
        return rows[0]

    def delete(self, user_id: str, record_id: str) -> None:
        self.run(lambda q: q.delete().eq("id", record_id).eq("user_id", user_id), "delete from")


class SupabaseSessionRepository:
    def __init__(self, client: Any, table: str = "study_sessions") -> None:
        self._table = _SupabaseTable(client, table)

    def list_since(self, user_id: str, since: date) -> list[StudySession]:
        rows = self._table.run(
            lambda q: q.select("*").eq("user_id", user_id).gte("date", since.isoformat()).order("date", desc=True),
            "load",
        )
        return [session_from_row(row, f"{self._table.table} row {i}") for i, row in enumerate(rows, start=1)]

    def add(self, session: StudySession) -> StudySession:
        row = self._table.insert(session)
        logger.info("Saved %d-minute study session for %s", session.duration_minutes, session.user_id)
        return session_from_row(row)


class SupabaseTaskRepository:
    def __init__(self, client: Any, table: str = "tasks") -> None:
        self._table = _SupabaseTable(client, table)

    def for_user(self, user_id: str) -> list[Task]:
        rows = self._table.run(lambda q: q.select("*").eq("user_id", user_id).order("due_date"), "load")
        return [task_from_row(row) for row in rows]

    def add(self, task: Task) -> Task:
        return task_from_row(self._table.insert(task))

    def update(self, task: Task) -> Task:
        return task_from_row(self._table.update(task))

    def delete(self, user_id: str, task_id: str) -> None:
        self._table.delete(user_id, task_id)


class SupabaseCourseRepository:
    def __init__(self, client: Any, table: str = "courses") -> None:
        self._table = _SupabaseTable(client, table)

    def for_user(self, user_id: str) -> list[Course]:
        rows = self._table.run(lambda q: q.select("*").eq("user_id", user_id).order("created_at", desc=True), "load")
        return [course_from_row(row) for row in rows]

    def add(self, course: Course) -> Course:
        return course_from_row(self._table.insert(course))

    def update(self, course: Course) -> Course:
        return course_from_row(self._table.update(course))

    def delete(self, user_id: str, course_id: str) -> None:
        self._table.delete(user_id, course_id)


class SupabaseBudgetRepository:
    def __init__(self, client: Any) -> None:
        self._categories = _SupabaseTable(client, "budget_categories")
        self._budgets = _SupabaseTable(client, "budgets")
        self._expenses = _SupabaseTable(client, "expenses")

    def list_categories(self, user_id: str) -> list[BudgetCategory]:
        rows = self._categories.run(
            lambda q: q.select("*").eq("user_id", user_id).order("created_at", desc=True), "load"
        )
        return [category_from_row(row) for row in rows]

    def add_category(self, category: BudgetCategory) -> BudgetCategory:
        return category_from_row(self._categories.insert(category))

    def list_budgets(self, user_id: str) -> list[Budget]:
        rows = self._budgets.run(lambda q: q.select("*").eq("user_id", user_id).order("created_at", desc=True), "load")
        return [budget_from_row(row) for row in rows]

    def add_budget(self, budget: Budget) -> Budget:
        return budget_from_row(self._budgets.insert(budget))

    def update_budget(self, budget: Budget) -> Budget:
        return budget_from_row(self._budgets.update(budget))

    def delete_budget(self, user_id: str, budget_id: str) -> None:
        self._budgets.delete(user_id, budget_id)

    def list_expenses(self, user_id: str) -> list[Expense]:
        rows = self._expenses.run(lambda q: q.select("*").eq("user_id", user_id).order("date", desc=True), "load")
        return [expense_from_row(row) for row in rows]

    def add_expense(self, expense: Expense) -> Expense:
        return expense_from_row(self._expenses.insert(expense))

    def delete_expense(self, user_id: str, expense_id: str) -> None:
        self._expenses.delete(user_id, expense_id)


class SupabaseMessageRepository:
    """Community chat table; visible to every signed-in user."""

    def __init__(self, client: Any, table: str = "community_messages") -> None:
        self._table = _SupabaseTable(client, table)

    def recent(self, limit: int = 100) -> list[CommunityMessage]:
        rows = self._table.run(lambda q: q.select("*").order("created_at").limit(limit), "load")
        return [message_from_row(row) for row in rows]

    def send(self, message: CommunityMessage) -> CommunityMessage:
        return message_from_row(self._table.insert(message, action="send to"))

    def delete(self, user_id: str, message_id: str) -> None:
        self._table.delete(user_id, message_id)


class SupabaseProfileRepository:
    """``profiles`` rows keyed by the auth user id."""

    def __init__(self, client: Any, table: str = "profiles") -> None:
        self._table = _SupabaseTable(client, table)

    def get(self, user_id: str) -> Optional[Profile]:
        rows = self._table.run(lambda q: q.select("*").eq("id", user_id).limit(1), "load")
        return profile_from_row(rows[0]) if rows else None

    def save(self, profile: Profile) -> Profile:
        if not profile.id:
            raise ValueError("Profile has no user id")
        row = to_row(profile)
        row["updated_at"] = datetime.now(timezone.utc).isoformat()
        rows = self._table.run(lambda q: q.upsert(row, on_conflict="id"), "save")
        if not rows:
            raise BackendError(f"Upsert into {self._table.table} returned no row")
        logger.info("Saved profile for %s", profile.id)
        return profile_from_row(rows[0])


def sessions_for_tracker(repo: SessionRepository, user_id: str, today: Optional[date] = None) -> list[StudySession]:
    """Sessions covering the yearly heatmap window."""

    today = today or date.today()
    return repo.list_since(user_id, today - timedelta(days=HEATMAP_DAYS))
