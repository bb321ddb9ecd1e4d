from datetime import date
from types import SimpleNamespace

import pytest

from campus_dashboard.errors import BackendError
from campus_dashboard.repositories import (
    InMemoryBudgetRepository,
    InMemoryCourseRepository,
    InMemoryProfileRepository,
    InMemorySessionRepository,
    InMemoryTaskRepository,
    SupabaseMessageRepository,
    SupabaseProfileRepository,
    SupabaseSessionRepository,
    SupabaseTaskRepository,
    sessions_for_tracker,
)
from campus_dashboard.schema import Budget, Course, Profile, StudySession, Task
from campus_dashboard.stopwatch import StudyStopwatch

TODAY = date(2025, 3, 14)


class FakeQuery:
    """Records postgrest-style builder calls and returns canned rows."""

    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.calls = []
        client.queries.append(self)

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        return self

    def select(self, *args, **kwargs):
        return self._record("select", *args, **kwargs)

    def eq(self, *args, **kwargs):
        return self._record("eq", *args, **kwargs)

    def gte(self, *args, **kwargs):
        return self._record("gte", *args, **kwargs)

    def order(self, *args, **kwargs):
        return self._record("order", *args, **kwargs)

    def limit(self, *args, **kwargs):
        return self._record("limit", *args, **kwargs)

    def insert(self, payload):
        self.payload = payload
        return self._record("insert", payload)

    def update(self, payload):
        self.payload = payload
        return self._record("update", payload)

    def upsert(self, payload, **kwargs):
        self.payload = payload
        return self._record("upsert", payload, **kwargs)

    def delete(self):
        return self._record("delete")

    def execute(self):
        if self.client.error is not None:
            raise self.client.error
        if getattr(self, "payload", None) is not None:
            return SimpleNamespace(data=[{"id": "generated", **self.payload}])
        return SimpleNamespace(data=self.client.rows.get(self.table, []))


class FakeClient:
    def __init__(self, rows=None, error=None):
        self.rows = rows or {}
        self.error = error
        self.queries = []

    def table(self, name):
        return FakeQuery(self, name)


def test_in_memory_sessions_are_scoped_by_user_and_date():
    repo = InMemorySessionRepository()
    repo.add(StudySession(None, "u1", date(2025, 3, 1), 30))
    repo.add(StudySession(None, "u1", date(2025, 3, 10), 45))
    repo.add(StudySession(None, "u2", date(2025, 3, 10), 60))

    sessions = repo.list_since("u1", date(2025, 3, 5))
    assert [s.duration_minutes for s in sessions] == [45]
    assert sessions[0].id is not None
    assert sessions[0].created_at is not None


def test_in_memory_rejects_rows_without_user():
    with pytest.raises(ValueError):
        InMemorySessionRepository().add(StudySession(None, None, TODAY, 30))


def test_in_memory_tasks_update_only_own_rows():
    repo = InMemoryTaskRepository()
    task = repo.add(Task(None, "u1", "Essay", TODAY))
    repo.update(Task(task.id, "u1", "Essay v2", TODAY))
    assert [t.title for t in repo.for_user("u1")] == ["Essay v2"]

    with pytest.raises(KeyError):
        repo.update(Task(task.id, "u2", "Hijack", TODAY))
    with pytest.raises(KeyError):
        repo.delete("u2", task.id)


def test_in_memory_budget_store():
    repo = InMemoryBudgetRepository()
    budget = repo.add_budget(Budget(None, "u1", "food", 100.0, "monthly", TODAY, TODAY))
    assert repo.list_budgets("u1") == [budget]
    repo.delete_budget("u1", budget.id)
    assert repo.list_budgets("u1") == []


def test_sessions_for_tracker_covers_heatmap_window():
    repo = InMemorySessionRepository()
    repo.add(StudySession(None, "u1", date(2024, 3, 14), 30))
    repo.add(StudySession(None, "u1", date(2024, 3, 13), 30))
    assert [s.date for s in sessions_for_tracker(repo, "u1", TODAY)] == [date(2024, 3, 14)]


def test_supabase_sessions_query_and_parse():
    rows = {
        "study_sessions": [
            {
                "id": "s1",
                "user_id": "u1",
                "date": "2025-03-14",
                "duration_minutes": 45,
                "notes": None,
                "created_at": "2025-03-14T10:00:00Z",
            }
        ]
    }
    client = FakeClient(rows)
    sessions = SupabaseSessionRepository(client).list_since("u1", date(2024, 3, 14))

    assert sessions == [
        StudySession("s1", "u1", date(2025, 3, 14), 45, None, sessions[0].created_at),
    ]
    calls = client.queries[0].calls
    assert ("eq", ("user_id", "u1"), {}) in calls
    assert ("gte", ("date", "2024-03-14"), {}) in calls
    assert ("order", ("date",), {"desc": True}) in calls


def test_supabase_insert_serializes_dates():
    client = FakeClient()
    saved = SupabaseSessionRepository(client).add(StudySession(None, "u1", TODAY, 50, "notes"))
    assert client.queries[0].payload == {
        "user_id": "u1",
        "date": "2025-03-14",
        "duration_minutes": 50,
        "notes": "notes",
    }
    assert saved.id == "generated"


def test_supabase_update_is_scoped_to_owner():
    client = FakeClient()
    SupabaseTaskRepository(client).update(Task("t1", "u1", "Essay", TODAY))
    calls = client.queries[0].calls
    assert ("eq", ("id", "t1"), {}) in calls
    assert ("eq", ("user_id", "u1"), {}) in calls
    assert "id" not in client.queries[0].payload


def test_supabase_failures_become_backend_errors():
    client = FakeClient(error=RuntimeError("permission denied"))
    with pytest.raises(BackendError):
        SupabaseMessageRepository(client).recent()


def test_stopwatch_save_leaves_created_at_to_the_table_default():
    client = FakeClient()
    now = [0.0]
    watch = StudyStopwatch(SupabaseSessionRepository(client), "u1", clock=lambda: now[0], today=lambda: TODAY)
    watch.start()
    now[0] = 120.0
    watch.stop()
    saved = watch.save("x")

    payload = client.queries[0].payload
    assert "created_at" not in payload
    assert "id" not in payload
    assert payload == {"user_id": "u1", "date": "2025-03-14", "duration_minutes": 2, "notes": "x"}
    assert saved.duration_minutes == 2


def test_supabase_update_keeps_server_timestamps():
    client = FakeClient()
    SupabaseTaskRepository(client).update(Task("t1", "u1", "Essay", TODAY))
    assert "created_at" not in client.queries[0].payload


def test_in_memory_courses_edit_and_delete():
    repo = InMemoryCourseRepository()
    course = repo.add(Course(None, "u1", "Algorithms", "CS201", "Dr. Knuth", "Mon 10:00"))
    repo.update(Course(course.id, "u1", "Algorithms II", "CS202", "Dr. Knuth", "Tue 10:00", credits=4))
    assert [(c.code, c.credits) for c in repo.for_user("u1")] == [("CS202", 4)]

    repo.delete("u1", course.id)
    assert repo.for_user("u1") == []


def test_in_memory_profile_insert_then_update():
    repo = InMemoryProfileRepository()
    assert repo.get("u1") is None

    first = repo.save(Profile("u1", full_name="Ada Lovelace"))
    created = first.created_at
    repo.save(Profile("u1", full_name="Ada King", major="Mathematics"))

    profile = repo.get("u1")
    assert profile.full_name == "Ada King"
    assert profile.created_at == created
    assert profile.updated_at >= created
    assert repo.get("u2") is None


def test_in_memory_profile_requires_user_id():
    with pytest.raises(ValueError):
        InMemoryProfileRepository().save(Profile(""))


def test_supabase_profile_upserts_on_user_id():
    client = FakeClient()
    saved = SupabaseProfileRepository(client).save(Profile("u1", full_name="Ada Lovelace", gpa=3.8))

    query = client.queries[0]
    assert query.table == "profiles"
    name, args, kwargs = query.calls[0]
    assert name == "upsert"
    assert kwargs == {"on_conflict": "id"}
    assert args[0]["id"] == "u1"
    assert args[0]["gpa"] == 3.8
    assert "created_at" not in args[0]
    assert args[0]["updated_at"]
    assert saved.id == "u1"
    assert saved.full_name == "Ada Lovelace"


def test_supabase_profile_lookup_by_user_id():
    rows = {"profiles": [{"id": "u1", "full_name": "Ada Lovelace", "gpa": "3.5", "created_at": "2025-03-01T08:00:00Z"}]}
    client = FakeClient(rows)
    profile = SupabaseProfileRepository(client).get("u1")

    assert ("eq", ("id", "u1"), {}) in client.queries[0].calls
    assert profile.full_name == "Ada Lovelace"
    assert profile.gpa == 3.5
    assert SupabaseProfileRepository(FakeClient()).get("u2") is None
