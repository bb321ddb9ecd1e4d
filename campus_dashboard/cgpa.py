"""Credit-weighted CGPA prediction from subject marks."""

from __future__ import annotations

from dataclasses import dataclass

# (minimum percentage, grade point, label)
_GRADE_TABLE = (
    (90, 10, "O (Outstanding)"),
    (80, 9, "A+ (Excellent)"),
    (70, 8, "A (Very Good)"),
    (60, 7, "B+ (Good)"),
    (50, 6, "B (Above Average)"),
    (40, 5, "C (Average)"),
)
_FAIL = (0, 0, "F (Fail)")


@dataclass
class Subject:
    name: str
    total_marks: float
    obtained_marks: float
    credits: float

    @property
    def percentage(self) -> float:
        return self.obtained_marks / self.total_marks * 100.0


@dataclass
class CGPAResult:
    cgpa: float
    percentage: float
    grade: str


def _band(percentage: float) -> tuple:
    for band in _GRADE_TABLE:
        if percentage >= band[0]:
            return band
    return _FAIL


def grade_point(percentage: float) -> int:
    return _band(percentage)[1]


def grade_label(percentage: float) -> str:
    return _band(percentage)[2]


def parse_subject(name: str, total_marks: str, obtained_marks: str, credits: str) -> Subject:
    """Build a subject from raw form text."""

    try:
        total = float(total_marks)
        obtained = float(obtained_marks)
        weight = float(credits)
    except (TypeError, ValueError) as exc:
        raise ValueError("Please fill all fields with valid numbers") from exc

    if obtained > total:
        raise ValueError("Obtained marks cannot exceed total marks")
    if obtained < 0 or total <= 0 or weight <= 0:
        raise ValueError("Please enter valid positive numbers")

    return Subject(name=(name or "").strip(), total_marks=total, obtained_marks=obtained, credits=weight)


def calculate_cgpa(subjects: list[Subject]) -> CGPAResult:
    if not subjects:
        raise ValueError("At least one subject is required")

    total_credits = sum(s.credits for s in subjects)
    weighted_points = sum(grade_point(s.percentage) * s.credits for s in subjects)
    obtained = sum(s.obtained_marks for s in subjects)
    maximum = sum(s.total_marks for s in subjects)

    percentage = round(obtained / maximum * 100.0, 2)
    return CGPAResult(
        cgpa=round(weighted_points / total_credits, 2),
        percentage=percentage,
        grade=grade_label(percentage),
    )
