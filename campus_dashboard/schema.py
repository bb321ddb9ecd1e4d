"""Core data schema for the student dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass
class StudySession:
    """One finished study-timer run."""

    id: Optional[str]
    user_id: Optional[str]
    date: date
    duration_minutes: int
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass
class DayBucket:
    """Total study minutes for one calendar day plus its heatmap level."""

    date: date
    minutes: int
    level: int


@dataclass
class WeekBucket:
    start: date
    end: date
    minutes: int


@dataclass
class Task:
    id: Optional[str]
    user_id: Optional[str]
    title: str
    due_date: date
    description: str = ""
    priority: str = "Medium"
    status: str = "active"
    created_at: Optional[datetime] = None


@dataclass
class Course:
    id: Optional[str]
    user_id: Optional[str]
    name: str
    code: str
    instructor: str
    schedule: str
    credits: int = 3
    location: Optional[str] = None
    description: Optional[str] = None


@dataclass
class BudgetCategory:
    id: Optional[str]
    user_id: Optional[str]
    name: str
    color: str = "#3B82F6"
    icon: str = "DollarSign"


@dataclass
class Budget:
    id: Optional[str]
    user_id: Optional[str]
    category_id: str
    amount: float
    period: str
    start_date: date
    end_date: date


@dataclass
class Expense:
    id: Optional[str]
    user_id: Optional[str]
    category_id: str
    amount: float
    description: str
    date: date
    receipt_url: Optional[str] = None


@dataclass
class CommunityMessage:
    id: Optional[str]
    user_id: str
    user_name: str
    message: str
    created_at: datetime


@dataclass
class Profile:
    """Student profile; ``id`` is the auth user id."""

    id: str
    full_name: Optional[str] = None
    student_id: Optional[str] = None
    major: Optional[str] = None
    year: Optional[str] = None
    gpa: Optional[float] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
