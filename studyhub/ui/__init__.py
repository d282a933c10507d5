"""UI package."""

from .timer_widget import TimerWidget
from .notes_widget import NotesWidget
from .flashcards_widget import FlashcardsWidget
from .gpa_widget import GpaWidget
from .citation_widget import CitationWidget
from .planner_widget import PlannerWidget
from .exams_widget import ExamsWidget
from .groups_widget import GroupsWidget

__all__ = [
    "TimerWidget",
    "NotesWidget",
    "FlashcardsWidget",
    "GpaWidget",
    "CitationWidget",
    "PlannerWidget",
    "ExamsWidget",
    "GroupsWidget",
]
