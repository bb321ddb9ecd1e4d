"""Student profile form rules and display helpers."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from campus_dashboard.community import initials
from campus_dashboard.schema import Profile

ACADEMIC_YEARS = ("Freshman", "Sophomore", "Junior", "Senior", "Graduate")
MAX_GPA = 4.0


def parse_gpa(text: str) -> Optional[float]:
    """Blank means no GPA; anything else must lie in [0, 4]."""

    raw = (text or "").strip()
    if not raw:
        return None
    try:
        gpa = float(raw)
    except ValueError as exc:
        raise ValueError("GPA must be a number") from exc
    if not 0 <= gpa <= MAX_GPA:
        raise ValueError(f"GPA must be between 0 and {MAX_GPA:.1f}")
    return round(gpa, 2)


def edit_profile(profile: Profile, **fields) -> Profile:
    """Apply form values; blank text clears a field."""

    if "year" in fields and fields["year"] and fields["year"] not in ACADEMIC_YEARS:
        raise ValueError(f"Unknown academic year '{fields['year']}'")
    cleaned = {
        name: (value.strip() or None) if isinstance(value, str) else value for name, value in fields.items()
    }
    return replace(profile, **cleaned)


def display_name(profile: Optional[Profile], email: str = "") -> str:
    if profile is not None and profile.full_name:
        return profile.full_name
    return email.split("@")[0] or "Student"


def avatar_initials(profile: Optional[Profile], email: str = "") -> str:
    if profile is not None and profile.full_name:
        return initials(profile.full_name)
    return initials(email or "U")


def headline(profile: Optional[Profile]) -> str:
    if profile is not None and profile.major and profile.year:
        return f"{profile.major} - {profile.year}"
    return "Student"
