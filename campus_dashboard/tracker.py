"""Study-time aggregation: yearly heatmap, streak and weekly trend."""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta

import numpy as np

from campus_dashboard.schema import DayBucket, StudySession, WeekBucket

HEATMAP_DAYS = 365
MAX_LEVEL = 4
STREAK_SCAN_LIMIT = 366
TREND_WEEKS = 4

_WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass
class Heatmap:
    """Trailing-year day buckets, oldest first."""

    days: list[DayBucket]
    max_minutes: int


@dataclass
class WeeklyTrend:
    weeks: list[WeekBucket]
    trend: int


def _today(as_of: date | None) -> date:
    return as_of if as_of is not None else date.today()


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def minutes_by_date(sessions: list[StudySession]) -> dict[date, int]:
    """Sum session durations per calendar date."""

    totals: dict[date, int] = defaultdict(int)
    for session in sessions:
        totals[session.date] += session.duration_minutes
    return dict(totals)


def build_heatmap(sessions: list[StudySession], as_of: date | None = None) -> Heatmap:
    """Build the 365-day contribution heatmap ending at ``as_of``."""

    end = _today(as_of)
    start = end - timedelta(days=HEATMAP_DAYS - 1)
    totals = minutes_by_date(sessions)

    days = [start + timedelta(days=offset) for offset in range(HEATMAP_DAYS)]
    minutes = np.array([totals.get(day, 0) for day in days], dtype=float)

    # an empty window divides by 1
    peak = max(int(minutes.max()), 1)
    levels = np.where(minutes == 0, 0, np.minimum(MAX_LEVEL, np.ceil(minutes / peak * MAX_LEVEL))).astype(int)

    buckets = [
        DayBucket(date=day, minutes=totals.get(day, 0), level=int(level)) for day, level in zip(days, levels)
    ]
    return Heatmap(days=buckets, max_minutes=peak)


def compute_streak(sessions: list[StudySession], as_of: date | None = None) -> int:
    """Count consecutive study days walking backwards from ``as_of``.

    An unstudied ``as_of`` does not end a streak that ran up to yesterday;
    any other empty day does.
    """

    studied = {session.date for session in sessions}
    today = _today(as_of)

    streak = 0
    for offset in range(STREAK_SCAN_LIMIT):
        if today - timedelta(days=offset) in studied:
            streak += 1
        elif offset > 0:
            break
    return streak


def compute_weekly_trend(sessions: list[StudySession], as_of: date | None = None) -> WeeklyTrend:
    """Sum the last four Monday-start weeks and report last-minus-first.

    Weeks are whole Monday..Sunday calendar weeks and the last one is the
    week containing ``as_of``, so the window runs from the Monday three weeks
    before that week through the following Sunday. It is not the trailing 28
    days: days before that first Monday are left out even when they fall
    within 28 days of ``as_of``, and days after ``as_of`` in its own week
    are counted.
    """

    today = _today(as_of)
    current_start = today - timedelta(days=today.weekday())
    starts = [current_start - timedelta(weeks=back) for back in range(TREND_WEEKS - 1, -1, -1)]

    weeks = []
    for start in starts:
        end = start + timedelta(days=6)
        total = sum(s.duration_minutes for s in sessions if start <= s.date <= end)
        weeks.append(WeekBucket(start=start, end=end, minutes=total))

    return WeeklyTrend(weeks=weeks, trend=weeks[-1].minutes - weeks[0].minutes)


def summarize(sessions: list[StudySession], as_of: date | None = None) -> dict:
    """Headline totals shown above the heatmap."""

    total = sum(s.duration_minutes for s in sessions)
    count = len(sessions)
    return {
        "total_minutes": total,
        "total_hours": total // 60,
        "sessions": count,
        "avg_minutes_per_session": _round_half_up(total / count) if count else 0,
        "current_streak": compute_streak(sessions, as_of),
        "active_days": len({s.date for s in sessions}),
    }


def last_seven_days(sessions: list[StudySession], as_of: date | None = None) -> list[DayBucket]:
    """Day buckets for the trailing week, levels relative to the week's best day."""

    today = _today(as_of)
    totals = minutes_by_date(sessions)
    days = [today - timedelta(days=offset) for offset in range(6, -1, -1)]
    peak = max([totals.get(day, 0) for day in days] + [1])
    return [
        DayBucket(
            date=day,
            minutes=totals.get(day, 0),
            level=0 if not totals.get(day, 0) else min(MAX_LEVEL, math.ceil(totals[day] / peak * MAX_LEVEL)),
        )
        for day in days
    ]


def weekly_stats(sessions: list[StudySession], as_of: date | None = None) -> dict:
    days = last_seven_days(sessions, as_of)
    total = sum(day.minutes for day in days)
    best = days[0]
    for day in days[1:]:
        if day.minutes > best.minutes:
            best = day
    return {
        "total_minutes": total,
        "avg_per_day": _round_half_up(total / 7),
        "best_day": best.date,
        "study_days": sum(1 for day in days if day.minutes > 0),
    }


def monthly_stats(sessions: list[StudySession], as_of: date | None = None) -> dict:
    weekly = compute_weekly_trend(sessions, as_of)
    total = sum(week.minutes for week in weekly.weeks)
    best_index = 0
    for index, week in enumerate(weekly.weeks):
        if week.minutes > weekly.weeks[best_index].minutes:
            best_index = index
    return {
        "total_minutes": total,
        "avg_per_week": _round_half_up(total / len(weekly.weeks)),
        "best_week": f"Week {best_index + 1}",
        "trend": weekly.trend,
    }


def day_of_week_distribution(sessions: list[StudySession]) -> dict[str, int]:
    """Minutes studied per weekday, Sunday first."""

    distribution = dict.fromkeys(_WEEKDAY_NAMES, 0)
    for session in sessions:
        # date.weekday() is Monday=0
        name = _WEEKDAY_NAMES[(session.date.weekday() + 1) % 7]
        distribution[name] += session.duration_minutes
    return distribution


def heatmap_weeks(heatmap: Heatmap) -> list[list[DayBucket]]:
    return [heatmap.days[i : i + 7] for i in range(0, len(heatmap.days), 7)]


def level_matrix(heatmap: Heatmap) -> np.ndarray:
    """Levels as a 7-row grid, one column per chunk of seven days; padding is -1."""

    columns = math.ceil(len(heatmap.days) / 7)
    grid = np.full((7, columns), -1, dtype=int)
    for index, bucket in enumerate(heatmap.days):
        grid[index % 7, index // 7] = bucket.level
    return grid


def sessions_on(sessions: list[StudySession], day: date) -> list[StudySession]:
    return [s for s in sessions if s.date == day]


def format_minutes(minutes: int) -> str:
    hours, rest = divmod(int(minutes), 60)
    return f"{hours}h {rest}m" if hours > 0 else f"{rest}m"
