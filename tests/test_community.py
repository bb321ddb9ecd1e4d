from datetime import date, datetime, timedelta, timezone

import pytest

from campus_dashboard.community import MessageFeed, compose, day_label, group_by_day, initials
from campus_dashboard.repositories import InMemoryMessageRepository
from campus_dashboard.schema import CommunityMessage


def message(message_id, text, created_at):
    return CommunityMessage(message_id, "u1", "Ada Lovelace", text, created_at)


def test_feed_applies_insert_and_delete():
    feed = MessageFeed([message("m1", "hi", datetime(2025, 3, 14, 9, 0))])
    row = {"id": "m2", "user_id": "u2", "user_name": "Alan", "message": "hello", "created_at": "2025-03-14T09:05:00Z"}
    feed.apply_change({"eventType": "INSERT", "new": row, "old": {}})
    feed.apply_change({"eventType": "INSERT", "new": row, "old": {}})
    assert [m.id for m in feed.messages] == ["m1", "m2"]

    feed.apply_change({"eventType": "DELETE", "new": {}, "old": {"id": "m1"}})
    assert [m.id for m in feed.messages] == ["m2"]


def test_feed_follows_repository_changes():
    repo = InMemoryMessageRepository()
    feed = MessageFeed(repo.recent())
    unsubscribe = repo.subscribe(feed.apply_change)

    sent = repo.send(compose("u1", "Ada", "  study group at 5?  "))
    assert [m.message for m in feed.messages] == ["study group at 5?"]

    repo.delete("u1", sent.id)
    assert feed.messages == []

    unsubscribe()
    repo.send(compose("u1", "Ada", "anyone?"))
    assert feed.messages == []


def test_compose_requires_user_and_text():
    with pytest.raises(PermissionError):
        compose(None, "Ada", "hello")
    assert compose("u1", "Ada", "   ") is None


def test_group_by_day_labels():
    today = date(2025, 3, 14)
    groups = group_by_day(
        [
            message("m1", "a", datetime(2025, 3, 10, 8, 0)),
            message("m2", "b", datetime(2025, 3, 13, 8, 0)),
            message("m3", "c", datetime(2025, 3, 14, 8, 0)),
            message("m4", "d", datetime(2025, 3, 14, 9, 0)),
        ],
        today,
    )
    assert list(groups) == ["2025-03-10", "Yesterday", "Today"]
    assert [m.id for m in groups["Today"]] == ["m3", "m4"]


def test_initials():
    assert initials("ada lovelace byron") == "AL"
    assert initials("Alan") == "A"


def test_day_label_uses_local_time_for_utc_timestamps():
    eastern = timezone(timedelta(hours=-5))
    late_evening = datetime(2025, 3, 15, 4, 30, tzinfo=timezone.utc)  # 23:30 on the 14th at UTC-5

    assert day_label(late_evening, date(2025, 3, 14), eastern) == "Today"
    assert day_label(late_evening, date(2025, 3, 15), eastern) == "Yesterday"
    assert day_label(late_evening, date(2025, 3, 15), timezone.utc) == "Today"


def test_group_by_day_converts_each_message():
    eastern = timezone(timedelta(hours=-5))
    groups = group_by_day(
        [
            message("m1", "a", datetime(2025, 3, 14, 3, 0, tzinfo=timezone.utc)),
            message("m2", "b", datetime(2025, 3, 15, 4, 30, tzinfo=timezone.utc)),
        ],
        date(2025, 3, 14),
        eastern,
    )
    assert list(groups) == ["Yesterday", "Today"]


def test_sync_turns_a_fresh_fetch_into_changes():
    utc = timezone.utc
    feed = MessageFeed(
        [
            message("m1", "hi", datetime(2025, 3, 14, 9, 0, tzinfo=utc)),
            message("m2", "there", datetime(2025, 3, 14, 9, 1, tzinfo=utc)),
        ]
    )
    latest = [
        message("m2", "there", datetime(2025, 3, 14, 9, 1, tzinfo=utc)),
        message("m3", "new", datetime(2025, 3, 14, 9, 2, tzinfo=utc)),
    ]

    changes = feed.sync(latest)
    assert [c["eventType"] for c in changes] == ["DELETE", "INSERT"]
    assert [m.id for m in feed.messages] == ["m2", "m3"]
    assert feed.messages[-1].created_at == datetime(2025, 3, 14, 9, 2, tzinfo=utc)
    assert feed.sync(latest) == []
