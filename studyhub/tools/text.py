"""Sentence splitting shared by the note-based tools."""

from __future__ import annotations

import re

_SENTENCE_END = re.compile(r"[.!?]+")

# fragments this short are headings, abbreviations or noise
MIN_SENTENCE_LENGTH = 10


def split_sentences(text: str) -> list[str]:
    """Stripped sentences longer than :data:`MIN_SENTENCE_LENGTH` characters."""
    parts = (part.strip() for part in _SENTENCE_END.split(text))
    return [part for part in parts if len(part) > MIN_SENTENCE_LENGTH]
