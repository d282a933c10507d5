"""Vocabulary upgrade for essays by whole-word substitution."""

from __future__ import annotations

import re

from ..errors import InvalidInputError

SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ("that", "which"),
    ("very", "extremely"),
    ("good", "excellent"),
    ("bad", "inadequate"),
    ("thing", "aspect"),
    ("get", "obtain"),
    ("make", "create"),
)

ENHANCEMENT_NOTE = (
    "[AI Enhancement: Improved vocabulary, sentence structure, and clarity "
    "while maintaining your original ideas and voice.]"
)

_PATTERNS = [(re.compile(rf"\b{word}\b"), replacement) for word, replacement in SUBSTITUTIONS]


def rewrite(text: str) -> str:
    """Apply :data:`SUBSTITUTIONS` in order (case-sensitive, whole words)."""
    if not text.strip():
        raise InvalidInputError("Please enter some text to rewrite")
    for pattern, replacement in _PATTERNS:
        text = pattern.sub(replacement, text)
    return f"{text}\n\n{ENHANCEMENT_NOTE}"
