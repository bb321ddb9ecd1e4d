from datetime import date

from campus_dashboard.schema import Task
from campus_dashboard.tasks import filter_tasks, is_overdue, toggle_status, upcoming

TODAY = date(2025, 3, 14)


def sample_tasks():
    return [
        Task("t1", "u1", "Essay draft", date(2025, 3, 13), "History module", "High", "active"),
        Task("t2", "u1", "Lab report", date(2025, 3, 14), "chemistry ESSAY appendix", "Medium", "completed"),
        Task("t3", "u1", "Read chapter 5", date(2025, 3, 21), "", "Low", "active"),
        Task("t4", "u1", "Register for exams", date(2025, 3, 22), "", "High", "active"),
    ]


def test_filter_by_search_is_case_insensitive_over_title_and_description():
    result = filter_tasks(sample_tasks(), search="essay")
    assert [t.id for t in result] == ["t1", "t2"]


def test_filter_by_status_and_priority():
    assert [t.id for t in filter_tasks(sample_tasks(), status="active", priority="High")] == ["t1", "t4"]
    assert len(filter_tasks(sample_tasks())) == 4


def test_toggle_status():
    task = sample_tasks()[0]
    done = toggle_status(task)
    assert done.status == "completed"
    assert task.status == "active"
    assert toggle_status(done).status == "active"


def test_is_overdue():
    tasks = sample_tasks()
    assert is_overdue(tasks[0], TODAY)
    assert not is_overdue(tasks[1], TODAY)


def test_upcoming_includes_today_through_seven_days():
    assert [t.id for t in upcoming(sample_tasks(), TODAY)] == ["t2", "t3"]
