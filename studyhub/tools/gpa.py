"""Credit-weighted GPA on the 4.0 scale."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidInputError

GRADE_POINTS: dict[str, float] = {
    "A+": 4.0, "A": 4.0, "A-": 3.7,
    "B+": 3.3, "B": 3.0, "B-": 2.7,
    "C+": 2.3, "C": 2.0, "C-": 1.7,
    "D+": 1.3, "D": 1.0, "D-": 0.7,
    "F": 0.0,
}

EXCELLENT_THRESHOLD = 3.5
GOOD_THRESHOLD = 2.5


@dataclass
class Course:
    name: str = ""
    grade: str = ""      # "" = not graded yet
    credits: int = 3

    @property
    def counts(self) -> bool:
        """Whether this course takes part in the average."""
        return bool(self.grade) and self.credits > 0


def grade_points(grade: str) -> float:
    try:
        return GRADE_POINTS[grade]
    except KeyError:
        raise InvalidInputError(f"Unknown grade: {grade!r}") from None


def calculate_gpa(courses: list[Course]) -> float:
    """Average grade points weighted by credits.

    Courses without a grade or with no credits are skipped.  Raises
    :class:`InvalidInputError` when nothing is left to average.
    """
    counted = [c for c in courses if c.counts]
    if not counted:
        raise InvalidInputError("Please add at least one course with a grade and credits")
    total_points = sum(grade_points(c.grade) * c.credits for c in counted)
    total = sum(c.credits for c in counted)
    return total_points / total


def total_credits(courses: list[Course]) -> int:
    return sum(c.credits for c in courses if c.counts)


def graded_course_count(courses: list[Course]) -> int:
    return sum(1 for c in courses if c.grade)


def gpa_band(gpa: float) -> str:
    if gpa >= EXCELLENT_THRESHOLD:
        return "excellent"
    if gpa >= GOOD_THRESHOLD:
        return "good"
    return "needs improvement"
