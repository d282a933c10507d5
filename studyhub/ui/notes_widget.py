"""Notes tab: paste notes, then summarise or rewrite them."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPlainTextEdit, QPushButton, QLabel,
)

from ..errors import InvalidInputError
from ..tools.rewriter import rewrite
from ..tools.summarizer import summarize


class NotesWidget(QWidget):
    """Runs the text tools over whatever is in the input box.

    ``message`` carries user-facing feedback (success or input errors);
    the main window shows it in the status bar.
    """

    message = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)

        layout.addWidget(QLabel("Your notes", self))
        self._input = QPlainTextEdit(self)
        self._input.setPlaceholderText("Paste lecture notes or an essay draft here")
        layout.addWidget(self._input)

        row = QHBoxLayout()
        self._summarize_btn = QPushButton("Summarize", self)
        self._rewrite_btn = QPushButton("Rewrite", self)
        for btn in (self._summarize_btn, self._rewrite_btn):
            row.addWidget(btn)
        layout.addLayout(row)

        self._output = QPlainTextEdit(self)
        self._output.setReadOnly(True)
        layout.addWidget(self._output)

        self._summarize_btn.clicked.connect(self._on_summarize)
        self._rewrite_btn.clicked.connect(self._on_rewrite)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_summarize(self) -> None:
        self._run(lambda text: summarize(text).as_text(), "Notes summarized successfully!")

    def _on_rewrite(self) -> None:
        self._run(rewrite, "Essay rewritten successfully!")

    def _run(self, tool, success: str) -> None:
        try:
            result = tool(self._input.toPlainText())
        except InvalidInputError as exc:
            self.message.emit(str(exc))
            return
        self._output.setPlainText(result)
        self.message.emit(success)

    # ── accessors (tests, clipboard) ─────────────────────────────────────

    def set_notes(self, text: str) -> None:
        self._input.setPlainText(text)

    @property
    def output_text(self) -> str:
        return self._output.toPlainText()
