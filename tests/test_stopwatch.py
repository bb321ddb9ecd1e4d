from datetime import date

import pytest

from campus_dashboard.errors import SessionTooShortError
from campus_dashboard.repositories import InMemorySessionRepository
from campus_dashboard.stopwatch import StudyStopwatch, format_clock

TODAY = date(2025, 3, 14)


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def make_stopwatch():
    clock = FakeClock()
    repo = InMemorySessionRepository()
    watch = StudyStopwatch(repo, "u1", clock=clock, today=lambda: TODAY)
    return watch, clock, repo


def test_run_under_a_minute_is_never_persisted():
    watch, clock, repo = make_stopwatch()
    watch.start()
    clock.now += 59
    with pytest.raises(SessionTooShortError):
        watch.stop()
    assert repo.list_since("u1", date(2000, 1, 1)) == []
    assert watch.elapsed_seconds == 0
    assert watch.pending is None


def test_pause_keeps_elapsed_time_and_save_records_minutes():
    watch, clock, repo = make_stopwatch()
    watch.start()
    clock.now += 30
    watch.pause()
    clock.now += 100
    assert watch.elapsed_seconds == 30
    watch.start()
    clock.now += 95

    pending = watch.stop()
    assert pending.elapsed_seconds == 125
    assert pending.duration_minutes == 2

    saved = watch.save("  chapter 4 ")
    assert saved.duration_minutes == 2
    assert saved.date == TODAY
    assert saved.notes == "chapter 4"
    assert saved.user_id == "u1"
    assert repo.list_since("u1", TODAY) == [saved]
    assert watch.elapsed_seconds == 0
    assert not watch.is_running


def test_blank_notes_are_stored_as_none():
    watch, clock, _ = make_stopwatch()
    watch.start()
    clock.now += 60
    watch.stop()
    assert watch.save("   ").notes is None


def test_start_while_running_is_a_no_op():
    watch, clock, _ = make_stopwatch()
    watch.start()
    clock.now += 10
    watch.start()
    clock.now += 10
    assert watch.tick() == 20


def test_discard_drops_pending_session():
    watch, clock, repo = make_stopwatch()
    watch.start()
    clock.now += 300
    watch.stop()
    watch.discard()
    assert watch.pending is None
    assert repo.list_since("u1", TODAY) == []


def test_save_without_stop_is_rejected():
    watch, _, _ = make_stopwatch()
    with pytest.raises(ValueError):
        watch.save()


def test_display_format():
    assert format_clock(3725) == "01:02:05"
    watch, clock, _ = make_stopwatch()
    watch.start()
    clock.now += 61
    assert watch.display() == "00:01:01"
