"""Study plan from a list of exams and assignments.

Items are ordered by due date, ties broken by priority, and each gets a
suggested number of days to start studying ahead of time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from ..errors import InvalidInputError


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


PRIORITY_RANK: dict[Priority, int] = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}

# upper bound on the lead time suggested for each priority
MAX_STUDY_DAYS: dict[Priority, int] = {
    Priority.HIGH: 10,
    Priority.MEDIUM: 7,
    Priority.LOW: 5,
}


@dataclass
class PlanItem:
    name: str = ""
    due: date | None = None
    priority: Priority = Priority.MEDIUM

    @property
    def complete(self) -> bool:
        return bool(self.name) and self.due is not None


@dataclass(frozen=True)
class PlanEntry:
    name: str
    priority: Priority
    days_until: int
    study_days: int

    def describe(self) -> str:
        return (
            f"{self.name} ({self.priority.value} priority) - Start studying "
            f"{self.study_days} days before ({self.days_until} days remaining)"
        )


def parse_priority(value: Priority | str) -> Priority:
    try:
        return Priority(value)
    except ValueError:
        raise InvalidInputError(f"Unknown priority: {value!r}") from None


def study_days_for(priority: Priority, days_until: int) -> int:
    return max(1, min(days_until - 1, MAX_STUDY_DAYS[priority]))


def generate_plan(items: list[PlanItem], today: date | None = None) -> list[PlanEntry]:
    """Plan entries for every complete item still in the future."""
    if not items:
        raise InvalidInputError("Please add at least one exam or assignment")
    complete = [item for item in items if item.complete]
    if not complete:
        raise InvalidInputError("Please complete all fields for your items")

    today = today or date.today()
    ordered = sorted(
        complete,
        key=lambda item: (item.due, -PRIORITY_RANK[parse_priority(item.priority)]),
    )

    plan = []
    for item in ordered:
        days_until = (item.due - today).days
        if days_until <= 0:
            continue
        priority = parse_priority(item.priority)
        plan.append(PlanEntry(
            name=item.name,
            priority=priority,
            days_until=days_until,
            study_days=study_days_for(priority, days_until),
        ))
    return plan
