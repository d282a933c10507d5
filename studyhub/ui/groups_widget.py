"""Group picker tab: class roster, random student, random groups."""

from __future__ import annotations

import random

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPlainTextEdit,
    QPushButton, QListWidget, QSpinBox,
)

from ..errors import InvalidInputError
from ..tools.groups import GroupPicker


class GroupsWidget(QWidget):

    message = pyqtSignal(str)

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(parent)
        self._picker = GroupPicker()
        self._rng = rng
        self._build_ui()
        self._connect_signals()
        self._refresh_roster()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)

        add_row = QHBoxLayout()
        self._name_edit = QLineEdit(self)
        self._name_edit.setPlaceholderText("Student name")
        self._add_btn = QPushButton("Add", self)
        add_row.addWidget(self._name_edit, stretch=1)
        add_row.addWidget(self._add_btn)
        layout.addLayout(add_row)

        self._bulk_edit = QPlainTextEdit(self)
        self._bulk_edit.setPlaceholderText("Or paste one name per line")
        self._bulk_edit.setMaximumHeight(90)
        layout.addWidget(self._bulk_edit)
        self._bulk_btn = QPushButton("Add All", self)
        layout.addWidget(self._bulk_btn)

        self._count_label = QLabel(self)
        self._count_label.setObjectName("mutedLabel")
        layout.addWidget(self._count_label)
        self._roster = QListWidget(self)
        layout.addWidget(self._roster)

        roster_row = QHBoxLayout()
        self._remove_btn = QPushButton("Remove Selected", self)
        self._clear_btn = QPushButton("Clear All", self)
        self._clear_btn.setObjectName("dangerButton")
        roster_row.addWidget(self._remove_btn)
        roster_row.addWidget(self._clear_btn)
        layout.addLayout(roster_row)

        pick_row = QHBoxLayout()
        self._pick_btn = QPushButton("Pick Random Student", self)
        self._size_spin = QSpinBox(self)
        self._size_spin.setRange(1, 50)
        self._size_spin.setValue(3)
        self._size_spin.setPrefix("Group size: ")
        self._groups_btn = QPushButton("Make Groups", self)
        pick_row.addWidget(self._pick_btn)
        pick_row.addWidget(self._size_spin)
        pick_row.addWidget(self._groups_btn)
        layout.addLayout(pick_row)

        self._result = QPlainTextEdit(self)
        self._result.setReadOnly(True)
        layout.addWidget(self._result)

    def _connect_signals(self) -> None:
        self._add_btn.clicked.connect(self._on_add)
        self._name_edit.returnPressed.connect(self._on_add)
        self._bulk_btn.clicked.connect(self._on_add_bulk)
        self._remove_btn.clicked.connect(self._on_remove)
        self._clear_btn.clicked.connect(self._on_clear)
        self._pick_btn.clicked.connect(self._on_pick)
        self._groups_btn.clicked.connect(self._on_make_groups)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_add(self) -> None:
        try:
            self._picker.add_student(self._name_edit.text())
        except InvalidInputError as exc:
            self.message.emit(str(exc))
            return
        self._name_edit.clear()
        self._refresh_roster()
        self.message.emit("Student added!")

    def _on_add_bulk(self) -> None:
        try:
            added = self._picker.add_bulk(self._bulk_edit.toPlainText())
        except InvalidInputError as exc:
            self.message.emit(str(exc))
            return
        self._bulk_edit.clear()
        self._refresh_roster()
        self.message.emit(f"Added {len(added)} students!")

    def _on_remove(self) -> None:
        item = self._roster.currentItem()
        if item is None:
            return
        self._picker.remove_student(item.text())
        self._refresh_roster()

    def _on_clear(self) -> None:
        self._picker.clear()
        self._result.clear()
        self._refresh_roster()
        self.message.emit("All data cleared")

    def _on_pick(self) -> None:
        try:
            name = self._picker.pick_random(self._rng)
        except InvalidInputError as exc:
            self.message.emit(str(exc))
            return
        self._result.setPlainText(f"Selected: {name}")
        self.message.emit(f"Selected: {name}")

    def _on_make_groups(self) -> None:
        try:
            groups = self._picker.make_groups(self._size_spin.value(), self._rng)
        except InvalidInputError as exc:
            self.message.emit(str(exc))
            return
        self._result.setPlainText("\n".join(
            f"Group {i}: {', '.join(members)}" for i, members in enumerate(groups, start=1)
        ))
        self.message.emit(f"Created {len(groups)} groups!")

    def _refresh_roster(self) -> None:
        self._roster.clear()
        self._roster.addItems(self._picker.students)
        self._count_label.setText(f"Students ({len(self._picker.students)})")

    # ── accessors ─────────────────────────────────────────────────────────

    def set_name(self, name: str) -> None:
        self._name_edit.setText(name)

    def set_bulk_names(self, text: str) -> None:
        self._bulk_edit.setPlainText(text)

    def select_student(self, name: str) -> None:
        matches = self._roster.findItems(name, Qt.MatchFlag.MatchExactly)
        if matches:
            self._roster.setCurrentItem(matches[0])

    @property
    def picker(self) -> GroupPicker:
        return self._picker

    @property
    def result_text(self) -> str:
        return self._result.toPlainText()
