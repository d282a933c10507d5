"""Citations tab: fill in a source, pick a style, get the reference line."""

from __future__ import annotations

from datetime import date

from PyQt6.QtCore import QDate, pyqtSignal
from PyQt6.QtWidgets import (
    QApplication, QWidget, QVBoxLayout, QFormLayout, QLineEdit, QComboBox, QDateEdit,
    QPushButton, QPlainTextEdit,
)

from ..errors import InvalidInputError
from ..tools.citations import CitationData, CitationStyle, SourceType, format_citation

STYLE_LABELS = {
    CitationStyle.MLA: "MLA",
    CitationStyle.APA: "APA",
    CitationStyle.CHICAGO: "Chicago",
}

SOURCE_LABELS = {
    SourceType.BOOK: "Book",
    SourceType.WEBSITE: "Website",
    SourceType.JOURNAL: "Journal Article",
}

# fields shown for each source type, in form order
SOURCE_FIELDS: dict[SourceType, tuple[str, ...]] = {
    SourceType.BOOK: ("author", "title", "year", "publisher"),
    SourceType.WEBSITE: ("author", "title", "year", "url", "access_date"),
    SourceType.JOURNAL: ("author", "title", "year", "journal", "volume", "pages"),
}

TEXT_FIELDS = ("author", "title", "year", "publisher", "url", "journal", "volume", "pages")


class CitationWidget(QWidget):

    message = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)

        self._form = QFormLayout()
        self._style_box = QComboBox(self)
        for style, label in STYLE_LABELS.items():
            self._style_box.addItem(label, style.value)
        self._source_box = QComboBox(self)
        for source, label in SOURCE_LABELS.items():
            self._source_box.addItem(label, source.value)
        self._form.addRow("Citation style", self._style_box)
        self._form.addRow("Source type", self._source_box)

        self._edits: dict[str, QLineEdit] = {}
        for name in TEXT_FIELDS:
            edit = QLineEdit(self)
            self._edits[name] = edit
            self._form.addRow(name.capitalize(), edit)

        self._access_date = QDateEdit(self)
        self._access_date.setCalendarPopup(True)
        self._access_date.setDate(QDate.currentDate())
        self._form.addRow("Access date", self._access_date)
        layout.addLayout(self._form)

        self._generate_btn = QPushButton("Generate Citation", self)
        self._generate_btn.setObjectName("primaryButton")
        layout.addWidget(self._generate_btn)

        self._output = QPlainTextEdit(self)
        self._output.setReadOnly(True)
        layout.addWidget(self._output)

        self._copy_btn = QPushButton("Copy to Clipboard", self)
        layout.addWidget(self._copy_btn)

        self._source_box.currentIndexChanged.connect(self._update_visible_fields)
        self._generate_btn.clicked.connect(self._on_generate)
        self._copy_btn.clicked.connect(self._on_copy)
        self._update_visible_fields()

    # ── form ──────────────────────────────────────────────────────────────

    def _update_visible_fields(self) -> None:
        wanted = SOURCE_FIELDS[SourceType(self._source_box.currentData())]
        for name, edit in self._edits.items():
            self._form.setRowVisible(edit, name in wanted)
        self._form.setRowVisible(self._access_date, "access_date" in wanted)

    def set_source(self, style: CitationStyle | str, source: SourceType | str) -> None:
        self._style_box.setCurrentIndex(self._style_box.findData(CitationStyle(style).value))
        self._source_box.setCurrentIndex(self._source_box.findData(SourceType(source).value))

    def set_field(self, name: str, value: str) -> None:
        self._edits[name].setText(value)

    def set_access_date(self, day: date) -> None:
        self._access_date.setDate(QDate(day.year, day.month, day.day))

    def citation_data(self) -> CitationData:
        values = {name: edit.text().strip() for name, edit in self._edits.items()}
        return CitationData(access_date=self._access_date.date().toPyDate(), **values)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_generate(self) -> None:
        try:
            citation = format_citation(
                self._style_box.currentData(),
                self.citation_data(),
                self._source_box.currentData(),
            )
        except InvalidInputError as exc:
            self.message.emit(str(exc))
            return
        self._output.setPlainText(citation)
        self.message.emit("Citation generated!")

    def _on_copy(self) -> None:
        if not self.output_text:
            return
        QApplication.clipboard().setText(self.output_text)
        self.message.emit("Citation copied to clipboard!")

    @property
    def output_text(self) -> str:
        return self._output.toPlainText()
