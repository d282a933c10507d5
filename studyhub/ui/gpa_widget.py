"""GPA tab: one row per course, credit-weighted average on demand."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit,
    QComboBox, QSpinBox, QPushButton,
)

from ..errors import InvalidInputError
from ..tools.gpa import (
    GRADE_POINTS, Course, calculate_gpa, gpa_band, graded_course_count, total_credits,
)

MAX_CREDITS = 6


class GpaWidget(QWidget):

    message = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._rows: list[tuple[QLineEdit, QComboBox, QSpinBox]] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)

        self._grid = QGridLayout()
        for col, title in enumerate(("Course", "Grade", "Credits")):
            self._grid.addWidget(QLabel(title, self), 0, col)
        layout.addLayout(self._grid)

        row = QHBoxLayout()
        self._add_btn = QPushButton("Add Course", self)
        self._calc_btn = QPushButton("Calculate GPA", self)
        self._calc_btn.setObjectName("primaryButton")
        row.addWidget(self._add_btn)
        row.addWidget(self._calc_btn)
        layout.addLayout(row)

        self._result_label = QLabel(self)
        self._result_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._result_label)
        layout.addStretch(1)

        self._add_btn.clicked.connect(self.add_course_row)
        self._calc_btn.clicked.connect(self._on_calculate)

        self.add_course_row()

    def add_course_row(self) -> None:
        name = QLineEdit(self)
        name.setPlaceholderText(f"Course {len(self._rows) + 1}")
        grade = QComboBox(self)
        grade.addItem("Not graded", "")
        for letter in GRADE_POINTS:
            grade.addItem(letter, letter)
        credits = QSpinBox(self)
        credits.setRange(0, MAX_CREDITS)
        credits.setValue(Course().credits)

        line = len(self._rows) + 1
        self._grid.addWidget(name, line, 0)
        self._grid.addWidget(grade, line, 1)
        self._grid.addWidget(credits, line, 2)
        self._rows.append((name, grade, credits))

    def set_course(self, index: int, name: str, grade: str, credits: int) -> None:
        name_edit, grade_box, credits_spin = self._rows[index]
        name_edit.setText(name)
        grade_box.setCurrentIndex(grade_box.findData(grade))
        credits_spin.setValue(credits)

    def courses(self) -> list[Course]:
        return [
            Course(name.text().strip(), grade.currentData(), credits.value())
            for name, grade, credits in self._rows
        ]

    def _on_calculate(self) -> None:
        courses = self.courses()
        try:
            gpa = calculate_gpa(courses)
        except InvalidInputError as exc:
            self._result_label.clear()
            self.message.emit(str(exc))
            return
        self._result_label.setText(
            f"GPA: {gpa:.2f} ({gpa_band(gpa)})\n"
            f"{total_credits(courses)} credits, "
            f"{graded_course_count(courses)} graded courses"
        )
        self.message.emit(f"Your GPA is {gpa:.2f}")

    @property
    def result_text(self) -> str:
        return self._result_label.text()

    @property
    def row_count(self) -> int:
        return len(self._rows)
