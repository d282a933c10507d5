"""Exam tracker: exams, their topics, and how far along revision is."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from loguru import logger

from ..errors import InvalidInputError


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass
class StudyTopic:
    id: int
    name: str
    completed: bool = False
    difficulty: Difficulty = Difficulty.MEDIUM
    minutes_spent: int = 0


@dataclass
class Exam:
    id: int
    name: str
    date: date
    topics: list[StudyTopic] = field(default_factory=list)


class ExamTracker:
    """In-memory list of exams with per-topic progress."""

    def __init__(self) -> None:
        self._exams: dict[int, Exam] = {}
        self._ids = itertools.count(1)

    @property
    def exams(self) -> list[Exam]:
        return list(self._exams.values())

    def get(self, exam_id: int) -> Exam:
        try:
            return self._exams[exam_id]
        except KeyError:
            raise InvalidInputError(f"No exam with id {exam_id}") from None

    # ── exams ─────────────────────────────────────────────────────────

    def add_exam(self, name: str, exam_date: date | None) -> Exam:
        name = name.strip()
        if not name or exam_date is None:
            raise InvalidInputError("Please enter exam name and date")
        exam = Exam(next(self._ids), name, exam_date)
        self._exams[exam.id] = exam
        logger.debug("Added exam {!r} on {}", name, exam_date)
        return exam

    def remove_exam(self, exam_id: int) -> None:
        self.get(exam_id)
        del self._exams[exam_id]

    # ── topics ────────────────────────────────────────────────────────

    def _topic(self, exam_id: int, topic_id: int) -> StudyTopic:
        for topic in self.get(exam_id).topics:
            if topic.id == topic_id:
                return topic
        raise InvalidInputError(f"No topic with id {topic_id}")

    def add_topic(self, exam_id: int, name: str) -> StudyTopic:
        exam = self.get(exam_id)
        name = name.strip()
        if not name:
            raise InvalidInputError("Please enter a topic name")
        topic = StudyTopic(next(self._ids), name)
        exam.topics.append(topic)
        return topic

    def toggle_topic(self, exam_id: int, topic_id: int) -> bool:
        topic = self._topic(exam_id, topic_id)
        topic.completed = not topic.completed
        return topic.completed

    def remove_topic(self, exam_id: int, topic_id: int) -> None:
        exam = self.get(exam_id)
        topic = self._topic(exam_id, topic_id)
        exam.topics.remove(topic)

    def set_difficulty(self, exam_id: int, topic_id: int, difficulty: Difficulty | str) -> None:
        topic = self._topic(exam_id, topic_id)
        try:
            topic.difficulty = Difficulty(difficulty)
        except ValueError:
            raise InvalidInputError(f"Unknown difficulty: {difficulty!r}") from None

    def add_study_time(self, exam_id: int, topic_id: int, minutes: int) -> int:
        """Log revision time; non-positive amounts are ignored."""
        topic = self._topic(exam_id, topic_id)
        if minutes > 0:
            topic.minutes_spent += minutes
        return topic.minutes_spent

    # ── derived ───────────────────────────────────────────────────────

    @staticmethod
    def progress(exam: Exam) -> int:
        """Percentage of topics ticked off, rounded."""
        if not exam.topics:
            return 0
        done = sum(1 for t in exam.topics if t.completed)
        return round(done / len(exam.topics) * 100)

    @staticmethod
    def total_study_time(exam: Exam) -> int:
        return sum(t.minutes_spent for t in exam.topics)

    @staticmethod
    def days_until(exam: Exam, today: date | None = None) -> int:
        return (exam.date - (today or date.today())).days
