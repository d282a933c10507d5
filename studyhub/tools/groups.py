"""Class roster with a random picker and random group builder."""

from __future__ import annotations

import random

from ..errors import InvalidInputError


class GroupPicker:

    def __init__(self) -> None:
        self._students: list[str] = []
        self.selected: str = ""
        self.groups: list[list[str]] = []

    @property
    def students(self) -> list[str]:
        return list(self._students)

    def add_student(self, name: str) -> str:
        name = name.strip()
        if not name:
            raise InvalidInputError("Please enter a student name")
        if name in self._students:
            raise InvalidInputError("Student already exists")
        self._students.append(name)
        return name

    def add_bulk(self, text: str) -> list[str]:
        """Add one name per line, skipping blanks and names already listed."""
        added: list[str] = []
        for line in text.split("\n"):
            name = line.strip()
            if name and name not in self._students and name not in added:
                added.append(name)
        if not added:
            raise InvalidInputError("No new valid students to add")
        self._students.extend(added)
        return added

    def remove_student(self, name: str) -> None:
        self._students = [s for s in self._students if s != name]

    def pick_random(self, rng: random.Random | None = None) -> str:
        if not self._students:
            raise InvalidInputError("No students available")
        self.selected = (rng or random).choice(self._students)
        return self.selected

    def make_groups(self, size: int, rng: random.Random | None = None) -> list[list[str]]:
        """Shuffle the roster and cut it into groups of *size* (last may be short)."""
        if not self._students:
            raise InvalidInputError("No students available")
        if size < 1 or size > len(self._students):
            raise InvalidInputError("Invalid group size")
        shuffled = list(self._students)
        (rng or random).shuffle(shuffled)
        self.groups = [shuffled[i:i + size] for i in range(0, len(shuffled), size)]
        return self.groups

    def clear(self) -> None:
        self._students.clear()
        self.groups = []
        self.selected = ""
