"""Community chat feed kept in sync with realtime row changes."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo

from campus_dashboard.adapters.records import message_from_row, to_row
from campus_dashboard.schema import CommunityMessage

FETCH_LIMIT = 100


class MessageFeed:
    """Messages oldest first, as rendered in the chat pane."""

    def __init__(self, messages: list[CommunityMessage] | None = None) -> None:
        self.messages: list[CommunityMessage] = sorted(messages or [], key=lambda m: m.created_at)[:FETCH_LIMIT]

    def apply_change(self, payload: dict) -> None:
        """Apply a ``postgres_changes`` payload (INSERT or DELETE)."""

        event = payload.get("eventType")
        if event == "INSERT":
            message = message_from_row(payload["new"], "Realtime row")
            if message.id is None or all(m.id != message.id for m in self.messages):
                self.messages.append(message)
        elif event == "DELETE":
            gone = (payload.get("old") or {}).get("id")
            self.messages = [m for m in self.messages if m.id != gone]

    def sync(self, latest: list[CommunityMessage]) -> list[dict]:
        """Diff a fresh fetch into change payloads and apply them."""

        fresh = {m.id for m in latest}
        known = {m.id for m in self.messages}
        changes = [{"eventType": "DELETE", "new": {}, "old": {"id": m.id}} for m in self.messages if m.id not in fresh]
        changes += [{"eventType": "INSERT", "new": to_row(m), "old": {}} for m in latest if m.id not in known]
        for change in changes:
            self.apply_change(change)
        return changes

    def grouped(self, today: date | None = None, tz: tzinfo | None = None) -> dict[str, list[CommunityMessage]]:
        return group_by_day(self.messages, today, tz)


def compose(user_id: str | None, user_name: str, text: str) -> CommunityMessage | None:
    """Build an outgoing message; blank text sends nothing."""

    if not user_id:
        raise PermissionError("Please sign in to send messages")
    body = text.strip()
    if not body:
        return None
    return CommunityMessage(
        id=None,
        user_id=user_id,
        user_name=user_name,
        message=body,
        created_at=datetime.now(timezone.utc),
    )


def day_label(moment: datetime, today: date | None = None, tz: tzinfo | None = None) -> str:
    """Label a message day in local time (or ``tz``); naive timestamps are taken as-is."""

    today = today or date.today()
    if moment.tzinfo is not None:
        moment = moment.astimezone(tz)
    day = moment.date()
    if day == today:
        return "Today"
    if day == today - timedelta(days=1):
        return "Yesterday"
    return day.isoformat()


def group_by_day(
    messages: list[CommunityMessage], today: date | None = None, tz: tzinfo | None = None
) -> dict[str, list[CommunityMessage]]:
    groups: dict[str, list[CommunityMessage]] = {}
    for message in messages:
        groups.setdefault(day_label(message.created_at, today, tz), []).append(message)
    return groups


def initials(name: str) -> str:
    return "".join(part[0] for part in name.split()).upper()[:2]
