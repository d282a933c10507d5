"""Flashcards tab: generate a deck from notes and review it card by card."""

from __future__ import annotations

import random

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPlainTextEdit, QPushButton, QLabel,
)

from ..errors import InvalidInputError
from ..tools.flashcards import FlashcardDeck, generate_flashcards


class FlashcardsWidget(QWidget):
    """One card on screen at a time, question side first."""

    message = pyqtSignal(str)

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(parent)
        self._deck: FlashcardDeck | None = None
        self._rng = rng
        self._build_ui()
        self._connect_signals()
        self._refresh()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)

        layout.addWidget(QLabel("Study notes", self))
        self._input = QPlainTextEdit(self)
        self._input.setPlaceholderText("Paste the notes to turn into flashcards")
        self._input.setMaximumHeight(140)
        layout.addWidget(self._input)

        self._generate_btn = QPushButton("Generate Flashcards", self)
        self._generate_btn.setObjectName("primaryButton")
        layout.addWidget(self._generate_btn)

        self._card_label = QLabel(self)
        self._card_label.setObjectName("cardLabel")
        self._card_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._card_label.setWordWrap(True)
        self._card_label.setMinimumHeight(160)
        layout.addWidget(self._card_label, stretch=1)

        self._position_label = QLabel(self)
        self._position_label.setObjectName("mutedLabel")
        self._position_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._position_label)

        row = QHBoxLayout()
        self._prev_btn = QPushButton("Previous", self)
        self._flip_btn = QPushButton("Flip", self)
        self._next_btn = QPushButton("Next", self)
        self._shuffle_btn = QPushButton("Shuffle", self)
        self._restart_btn = QPushButton("Restart", self)
        for btn in (self._prev_btn, self._flip_btn, self._next_btn,
                    self._shuffle_btn, self._restart_btn):
            row.addWidget(btn)
        layout.addLayout(row)

    def _connect_signals(self) -> None:
        self._generate_btn.clicked.connect(self._on_generate)
        self._prev_btn.clicked.connect(lambda: self._step(FlashcardDeck.previous))
        self._next_btn.clicked.connect(lambda: self._step(FlashcardDeck.next))
        self._flip_btn.clicked.connect(lambda: self._step(FlashcardDeck.flip))
        self._shuffle_btn.clicked.connect(
            lambda: self._step(lambda deck: deck.shuffle(self._rng))
        )
        self._restart_btn.clicked.connect(lambda: self._step(FlashcardDeck.reset))

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_generate(self) -> None:
        try:
            cards = generate_flashcards(self._input.toPlainText())
        except InvalidInputError as exc:
            self.message.emit(str(exc))
            return
        self._deck = FlashcardDeck(cards)
        self._refresh()
        self.message.emit(f"Generated {len(cards)} flashcards!")

    def _step(self, action) -> None:
        if self._deck is None:
            return
        action(self._deck)
        self._refresh()

    def _refresh(self) -> None:
        has_deck = self._deck is not None
        for btn in (self._prev_btn, self._flip_btn, self._next_btn,
                    self._shuffle_btn, self._restart_btn):
            btn.setEnabled(has_deck)

        if not has_deck:
            self._card_label.setText("Generate a deck to start reviewing")
            self._position_label.clear()
            return

        card = self._deck.current
        if self._deck.showing_answer:
            self._card_label.setText(f"Answer: {card.answer}")
            self._flip_btn.setText("Show Question")
        else:
            self._card_label.setText(card.question)
            self._flip_btn.setText("Show Answer")
        self._position_label.setText(f"Card {self._deck.index + 1} of {len(self._deck)}")

    # ── accessors ─────────────────────────────────────────────────────────

    def set_notes(self, text: str) -> None:
        self._input.setPlainText(text)

    @property
    def deck(self) -> FlashcardDeck | None:
        return self._deck

    @property
    def card_text(self) -> str:
        return self._card_label.text()

    @property
    def position_text(self) -> str:
        return self._position_label.text()
