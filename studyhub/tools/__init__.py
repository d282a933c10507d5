"""Student tools: one module per tool, plain functions and small classes."""

from .gpa import Course, calculate_gpa, total_credits, graded_course_count, gpa_band, GRADE_POINTS
from .flashcards import Flashcard, FlashcardDeck, generate_flashcards
from .summarizer import Summary, summarize
from .rewriter import rewrite
from .citations import CitationData, CitationStyle, SourceType, format_citation
from .planner import PlanItem, PlanEntry, Priority, generate_plan
from .exams import ExamTracker, Exam, StudyTopic, Difficulty
from .groups import GroupPicker

__all__ = [
    "Course",
    "calculate_gpa",
    "total_credits",
    "graded_course_count",
    "gpa_band",
    "GRADE_POINTS",
    "Flashcard",
    "FlashcardDeck",
    "generate_flashcards",
    "Summary",
    "summarize",
    "rewrite",
    "CitationData",
    "CitationStyle",
    "SourceType",
    "format_citation",
    "PlanItem",
    "PlanEntry",
    "Priority",
    "generate_plan",
    "ExamTracker",
    "Exam",
    "StudyTopic",
    "Difficulty",
    "GroupPicker",
]
