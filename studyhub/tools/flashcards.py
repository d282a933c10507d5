"""Fill-in-the-blank flashcards from study notes, plus a review deck."""

from __future__ import annotations

import random
from dataclasses import dataclass

from loguru import logger

from ..errors import InvalidInputError
from .text import split_sentences

MAX_SOURCE_SENTENCES = 8
MAX_CARDS = 10
MIN_WORDS = 6
BLANK = "____"


@dataclass(frozen=True)
class Flashcard:
    question: str
    answer: str


GENERIC_CARDS: tuple[Flashcard, ...] = (
    Flashcard(
        "What is the main topic discussed in these notes?",
        "Based on your notes, the main focus appears to be on the key "
        "concepts and definitions you've provided.",
    ),
    Flashcard(
        "What are the important terms mentioned?",
        "The important terms include the key vocabulary and concepts "
        "highlighted in your study material.",
    ),
    Flashcard(
        "How can you apply this knowledge?",
        "This knowledge can be applied through practice problems, real-world "
        "examples, and connecting concepts together.",
    ),
)


def _blank_out(sentence: str) -> Flashcard | None:
    words = sentence.split(" ")
    if len(words) < MIN_WORDS:
        return None
    key_word = words[len(words) // 2]
    question = sentence.replace(key_word, BLANK, 1)
    return Flashcard(f"Fill in the blank: {question}", key_word)


def generate_flashcards(notes: str) -> list[Flashcard]:
    """Turn notes into up to :data:`MAX_CARDS` cards.

    The middle word of each of the first few sentences is blanked out; the
    generic review questions fill the rest of the deck.
    """
    if not notes.strip():
        raise InvalidInputError("Please enter some notes to generate flashcards")

    cards = []
    for sentence in split_sentences(notes)[:MAX_SOURCE_SENTENCES]:
        card = _blank_out(sentence)
        if card is not None:
            cards.append(card)

    if not cards:
        return list(GENERIC_CARDS)
    deck = (cards + list(GENERIC_CARDS))[:MAX_CARDS]
    logger.debug("Generated {} flashcards", len(deck))
    return deck


class FlashcardDeck:
    """Walk through a list of cards one at a time."""

    def __init__(self, cards: list[Flashcard]) -> None:
        if not cards:
            raise InvalidInputError("A deck needs at least one card")
        self._cards = list(cards)
        self._index = 0
        self._show_answer = False

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> list[Flashcard]:
        return list(self._cards)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Flashcard:
        return self._cards[self._index]

    @property
    def showing_answer(self) -> bool:
        return self._show_answer

    def flip(self) -> None:
        self._show_answer = not self._show_answer

    def next(self) -> Flashcard:
        self._index = (self._index + 1) % len(self._cards)
        self._show_answer = False
        return self.current

    def previous(self) -> Flashcard:
        self._index = (self._index - 1) % len(self._cards)
        self._show_answer = False
        return self.current

    def shuffle(self, rng: random.Random | None = None) -> None:
        (rng or random).shuffle(self._cards)
        self.reset()

    def reset(self) -> None:
        self._index = 0
        self._show_answer = False
