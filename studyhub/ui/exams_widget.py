"""Exam tracker tab.

Left-to-right flow: add an exam, select it, add topics under it, tick
topics off and log revision time against them.  The selected exam's
progress bar and time summary update after every change.
"""

from __future__ import annotations

from datetime import date

from PyQt6.QtCore import Qt, QDate, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QDateEdit,
    QPushButton, QListWidget, QListWidgetItem, QComboBox, QSpinBox,
    QProgressBar,
)

from ..errors import InvalidInputError
from ..tools.exams import Difficulty, Exam, ExamTracker

ID_ROLE = Qt.ItemDataRole.UserRole


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60}h {minutes % 60}m"


class ExamsWidget(QWidget):

    message = pyqtSignal(str)

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        tracker: ExamTracker | None = None,
    ) -> None:
        super().__init__(parent)
        self._tracker = tracker or ExamTracker()
        self._build_ui()
        self._connect_signals()
        self._refresh_exams()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)

        # ── new exam ─────────────────────────────────────────────────
        exam_row = QHBoxLayout()
        self._exam_name = QLineEdit(self)
        self._exam_name.setPlaceholderText("Exam name")
        self._exam_date = QDateEdit(self)
        self._exam_date.setCalendarPopup(True)
        self._exam_date.setDate(QDate.currentDate().addDays(14))
        self._add_exam_btn = QPushButton("Add Exam", self)
        exam_row.addWidget(self._exam_name, stretch=1)
        exam_row.addWidget(self._exam_date)
        exam_row.addWidget(self._add_exam_btn)
        layout.addLayout(exam_row)

        self._exam_list = QListWidget(self)
        self._exam_list.setMaximumHeight(140)
        layout.addWidget(self._exam_list)

        self._remove_exam_btn = QPushButton("Remove Exam", self)
        self._remove_exam_btn.setObjectName("dangerButton")
        layout.addWidget(self._remove_exam_btn)

        # ── selected exam ────────────────────────────────────────────
        self._summary_label = QLabel(self)
        self._summary_label.setObjectName("mutedLabel")
        layout.addWidget(self._summary_label)

        self._progress = QProgressBar(self)
        self._progress.setRange(0, 100)
        self._progress.setTextVisible(False)
        layout.addWidget(self._progress)

        topic_row = QHBoxLayout()
        self._topic_name = QLineEdit(self)
        self._topic_name.setPlaceholderText("Topic")
        self._add_topic_btn = QPushButton("Add Topic", self)
        topic_row.addWidget(self._topic_name, stretch=1)
        topic_row.addWidget(self._add_topic_btn)
        layout.addLayout(topic_row)

        self._topic_list = QListWidget(self)
        layout.addWidget(self._topic_list)

        topic_actions = QHBoxLayout()
        self._difficulty_box = QComboBox(self)
        for level in Difficulty:
            self._difficulty_box.addItem(level.value.capitalize(), level.value)
        self._minutes_spin = QSpinBox(self)
        self._minutes_spin.setRange(0, 600)
        self._minutes_spin.setValue(30)
        self._minutes_spin.setSuffix(" min")
        self._log_time_btn = QPushButton("Log Time", self)
        self._remove_topic_btn = QPushButton("Remove Topic", self)
        self._remove_topic_btn.setObjectName("dangerButton")
        for w in (self._difficulty_box, self._minutes_spin,
                  self._log_time_btn, self._remove_topic_btn):
            topic_actions.addWidget(w)
        layout.addLayout(topic_actions)

    def _connect_signals(self) -> None:
        self._add_exam_btn.clicked.connect(self._on_add_exam)
        self._remove_exam_btn.clicked.connect(self._on_remove_exam)
        self._add_topic_btn.clicked.connect(self._on_add_topic)
        self._remove_topic_btn.clicked.connect(self._on_remove_topic)
        self._log_time_btn.clicked.connect(self._on_log_time)
        self._exam_list.currentRowChanged.connect(lambda _row: self._refresh_topics())
        self._topic_list.currentRowChanged.connect(lambda _row: self._sync_difficulty())
        self._topic_list.itemChanged.connect(self._on_topic_item_changed)
        self._difficulty_box.activated.connect(self._on_difficulty_chosen)

    # ── selection ─────────────────────────────────────────────────────────

    @property
    def tracker(self) -> ExamTracker:
        return self._tracker

    def _selected_exam_id(self) -> int | None:
        item = self._exam_list.currentItem()
        return None if item is None else item.data(ID_ROLE)

    def selected_exam(self) -> Exam | None:
        exam_id = self._selected_exam_id()
        return None if exam_id is None else self._tracker.get(exam_id)

    def _selected_topic_id(self) -> int | None:
        item = self._topic_list.currentItem()
        return None if item is None else item.data(ID_ROLE)

    def select_exam(self, exam_id: int) -> None:
        for row in range(self._exam_list.count()):
            if self._exam_list.item(row).data(ID_ROLE) == exam_id:
                self._exam_list.setCurrentRow(row)
                return

    def select_topic(self, topic_id: int) -> None:
        for row in range(self._topic_list.count()):
            if self._topic_list.item(row).data(ID_ROLE) == topic_id:
                self._topic_list.setCurrentRow(row)
                return

    # ── slots ─────────────────────────────────────────────────────────────

    def add_exam(self, name: str, exam_date: date) -> Exam | None:
        try:
            exam = self._tracker.add_exam(name, exam_date)
        except InvalidInputError as exc:
            self.message.emit(str(exc))
            return None
        self._refresh_exams()
        self.select_exam(exam.id)
        self.message.emit("Exam added successfully!")
        return exam

    def _on_add_exam(self) -> None:
        if self.add_exam(self._exam_name.text(), self._exam_date.date().toPyDate()):
            self._exam_name.clear()

    def _on_remove_exam(self) -> None:
        exam = self.selected_exam()
        if exam is None:
            return
        self._tracker.remove_exam(exam.id)
        self._refresh_exams()
        self.message.emit("Exam removed")

    def _on_add_topic(self) -> None:
        exam = self.selected_exam()
        if exam is None:
            self.message.emit("Select an exam first")
            return
        try:
            self._tracker.add_topic(exam.id, self._topic_name.text())
        except InvalidInputError as exc:
            self.message.emit(str(exc))
            return
        self._topic_name.clear()
        self._refresh_topics()

    def _on_remove_topic(self) -> None:
        exam, topic_id = self.selected_exam(), self._selected_topic_id()
        if exam is None or topic_id is None:
            return
        self._tracker.remove_topic(exam.id, topic_id)
        self._refresh_topics()

    def _on_log_time(self) -> None:
        exam, topic_id = self.selected_exam(), self._selected_topic_id()
        if exam is None or topic_id is None:
            return
        self._tracker.add_study_time(exam.id, topic_id, self._minutes_spin.value())
        self._refresh_topics()

    def _on_difficulty_chosen(self, _index: int) -> None:
        exam, topic_id = self.selected_exam(), self._selected_topic_id()
        if exam is None or topic_id is None:
            return
        self._tracker.set_difficulty(exam.id, topic_id, self._difficulty_box.currentData())
        self._refresh_topics()

    def _on_topic_item_changed(self, item: QListWidgetItem) -> None:
        exam = self.selected_exam()
        if exam is None:
            return
        topic = next(t for t in exam.topics if t.id == item.data(ID_ROLE))
        checked = item.checkState() == Qt.CheckState.Checked
        if checked != topic.completed:
            self._tracker.toggle_topic(exam.id, topic.id)
            self._refresh_summary()

    # ── refresh ───────────────────────────────────────────────────────────

    def _refresh_exams(self) -> None:
        current = self._selected_exam_id()
        self._exam_list.blockSignals(True)
        self._exam_list.clear()
        for exam in self._tracker.exams:
            item = QListWidgetItem(self._exam_label(exam))
            item.setData(ID_ROLE, exam.id)
            self._exam_list.addItem(item)
        self._exam_list.blockSignals(False)
        if current is not None and any(e.id == current for e in self._tracker.exams):
            self.select_exam(current)
        elif self._exam_list.count():
            self._exam_list.setCurrentRow(0)
        self._refresh_topics()

    def _refresh_topics(self) -> None:
        exam = self.selected_exam()
        topic_id = self._selected_topic_id()

        self._topic_list.blockSignals(True)
        self._topic_list.clear()
        if exam is not None:
            for topic in exam.topics:
                text = f"{topic.name} [{topic.difficulty.value}]"
                if topic.minutes_spent:
                    text += f"  {format_minutes(topic.minutes_spent)}"
                item = QListWidgetItem(text)
                item.setData(ID_ROLE, topic.id)
                item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
                item.setCheckState(
                    Qt.CheckState.Checked if topic.completed else Qt.CheckState.Unchecked
                )
                self._topic_list.addItem(item)
        self._topic_list.blockSignals(False)
        if topic_id is not None:
            self.select_topic(topic_id)

        self._refresh_summary()
        self._sync_difficulty()

    def _refresh_summary(self) -> None:
        exam = self.selected_exam()
        has_exam = exam is not None
        for w in (self._remove_exam_btn, self._add_topic_btn, self._topic_name):
            w.setEnabled(has_exam)

        if exam is None:
            self._summary_label.setText("No exams yet")
            self._progress.setValue(0)
        else:
            progress = ExamTracker.progress(exam)
            self._summary_label.setText(
                f"{ExamTracker.days_until(exam)} days left, "
                f"{progress}% complete, "
                f"study time {format_minutes(ExamTracker.total_study_time(exam))}"
            )
            self._progress.setValue(progress)

    def _sync_difficulty(self) -> None:
        exam, topic_id = self.selected_exam(), self._selected_topic_id()
        if exam is None or topic_id is None:
            return
        topic = next(t for t in exam.topics if t.id == topic_id)
        self._difficulty_box.setCurrentIndex(
            self._difficulty_box.findData(topic.difficulty.value)
        )

    @staticmethod
    def _exam_label(exam: Exam) -> str:
        return f"{exam.name} ({exam.date.isoformat()})"

    @property
    def summary_text(self) -> str:
        return self._summary_label.text()

    def topic_texts(self) -> list[str]:
        return [self._topic_list.item(i).text() for i in range(self._topic_list.count())]
