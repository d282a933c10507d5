"""Study planner tab: list exams and assignments, get a start-studying plan."""

from __future__ import annotations

from datetime import date

from PyQt6.QtCore import QDate, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit,
    QComboBox, QDateEdit, QPushButton, QPlainTextEdit,
)

from ..errors import InvalidInputError
from ..tools.planner import PlanItem, Priority, generate_plan


class PlannerWidget(QWidget):

    message = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._rows: list[tuple[QLineEdit, QDateEdit, QComboBox]] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)

        self._grid = QGridLayout()
        for col, title in enumerate(("Exam / assignment", "Due", "Priority")):
            self._grid.addWidget(QLabel(title, self), 0, col)
        layout.addLayout(self._grid)

        row = QHBoxLayout()
        self._add_btn = QPushButton("Add Item", self)
        self._plan_btn = QPushButton("Generate Plan", self)
        self._plan_btn.setObjectName("primaryButton")
        row.addWidget(self._add_btn)
        row.addWidget(self._plan_btn)
        layout.addLayout(row)

        self._output = QPlainTextEdit(self)
        self._output.setReadOnly(True)
        layout.addWidget(self._output)

        self._add_btn.clicked.connect(self.add_item_row)
        self._plan_btn.clicked.connect(self._on_generate)

    def add_item_row(self) -> None:
        name = QLineEdit(self)
        name.setPlaceholderText("e.g. Chemistry final")
        due = QDateEdit(self)
        due.setCalendarPopup(True)
        due.setDate(QDate.currentDate().addDays(7))
        priority = QComboBox(self)
        for level in Priority:
            priority.addItem(level.value.capitalize(), level.value)
        priority.setCurrentIndex(priority.findData(Priority.MEDIUM.value))

        line = len(self._rows) + 1
        self._grid.addWidget(name, line, 0)
        self._grid.addWidget(due, line, 1)
        self._grid.addWidget(priority, line, 2)
        self._rows.append((name, due, priority))

    def set_item(self, index: int, name: str, due: date, priority: Priority | str) -> None:
        name_edit, due_edit, priority_box = self._rows[index]
        name_edit.setText(name)
        due_edit.setDate(QDate(due.year, due.month, due.day))
        priority_box.setCurrentIndex(priority_box.findData(Priority(priority).value))

    def items(self) -> list[PlanItem]:
        return [
            PlanItem(name.text().strip(), due.date().toPyDate(), priority.currentData())
            for name, due, priority in self._rows
        ]

    def _on_generate(self) -> None:
        try:
            plan = generate_plan(self.items())
        except InvalidInputError as exc:
            self.message.emit(str(exc))
            return
        self._output.setPlainText("\n".join(entry.describe() for entry in plan))
        self.message.emit("Study plan generated!")

    @property
    def output_text(self) -> str:
        return self._output.toPlainText()
