"""MLA, APA and Chicago citations for books, websites and journal articles.

Fields are dropped into fixed templates as typed; nothing is reordered or
abbreviated.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from ..errors import InvalidInputError


class SourceType(Enum):
    BOOK = "book"
    WEBSITE = "website"
    JOURNAL = "journal"


class CitationStyle(Enum):
    MLA = "mla"
    APA = "apa"
    CHICAGO = "chicago"


MONTHS = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)

MISSING_DATE = "Date"


@dataclass
class CitationData:
    author: str = ""
    title: str = ""
    year: str = ""
    publisher: str = ""
    url: str = ""
    journal: str = ""
    volume: str = ""
    pages: str = ""
    access_date: date | None = None


def _short_date(d: date | None) -> str:
    # 19 Oct 2026
    if d is None:
        return MISSING_DATE
    return f"{d.day} {MONTHS[d.month - 1][:3]} {d.year}"


def _long_date(d: date | None) -> str:
    # October 19, 2026
    if d is None:
        return MISSING_DATE
    return f"{MONTHS[d.month - 1]} {d.day}, {d.year}"


def format_mla(data: CitationData, source: SourceType) -> str:
    d = data
    if source == SourceType.BOOK:
        return f"{d.author}. {d.title}. {d.publisher}, {d.year}."
    if source == SourceType.WEBSITE:
        return f'{d.author}. "{d.title}." Web. {_short_date(d.access_date)}. <{d.url}>.'
    return f'{d.author}. "{d.title}." {d.journal} {d.volume} ({d.year}): {d.pages}.'


def format_apa(data: CitationData, source: SourceType) -> str:
    d = data
    if source == SourceType.BOOK:
        return f"{d.author} ({d.year}). {d.title}. {d.publisher}."
    if source == SourceType.WEBSITE:
        return f"{d.author} ({d.year}). {d.title}. Retrieved from {d.url}"
    return f"{d.author} ({d.year}). {d.title}. {d.journal}, {d.volume}, {d.pages}."


def format_chicago(data: CitationData, source: SourceType) -> str:
    d = data
    if source == SourceType.BOOK:
        return f"{d.author}. {d.title}. {d.publisher}, {d.year}."
    if source == SourceType.WEBSITE:
        return f'{d.author}. "{d.title}." Accessed {_long_date(d.access_date)}. {d.url}.'
    return f'{d.author}. "{d.title}." {d.journal} {d.volume} ({d.year}): {d.pages}.'


_FORMATTERS = {
    CitationStyle.MLA: format_mla,
    CitationStyle.APA: format_apa,
    CitationStyle.CHICAGO: format_chicago,
}


def format_citation(style: CitationStyle | str, data: CitationData, source: SourceType | str) -> str:
    """Dispatch on style; accepts enum members or their string values."""
    try:
        style = CitationStyle(style)
        source = SourceType(source)
    except ValueError as exc:
        raise InvalidInputError(str(exc)) from None
    return _FORMATTERS[style](data, source)
