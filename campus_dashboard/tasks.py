"""Task list filtering and deadline checks."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta

from campus_dashboard.schema import Task

UPCOMING_WINDOW_DAYS = 7


def filter_tasks(tasks: list[Task], search: str = "", status: str = "all", priority: str = "all") -> list[Task]:
    """Apply the search box and the status/priority dropdowns; ``all`` disables a filter."""

    needle = search.strip().lower()
    result = []
    for task in tasks:
        if needle and needle not in task.title.lower() and needle not in task.description.lower():
            continue
        if status != "all" and task.status != status:
            continue
        if priority != "all" and task.priority != priority:
            continue
        result.append(task)
    return result


def toggle_status(task: Task) -> Task:
    return replace(task, status="completed" if task.status == "active" else "active")


def is_overdue(task: Task, today: date | None = None) -> bool:
    today = today or date.today()
    return task.due_date < today


def upcoming(tasks: list[Task], today: date | None = None, days: int = UPCOMING_WINDOW_DAYS) -> list[Task]:
    """Tasks due from today through ``days`` days ahead, inclusive."""

    today = today or date.today()
    horizon = today + timedelta(days=days)
    return [t for t in tasks if today <= t.due_date <= horizon]
