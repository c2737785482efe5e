"""
Script detection and direction selection.

Used by callers that want an "auto" mode: Ukrainian input is
transliterated to Latin, Latin input back to Ukrainian.
"""

from enum import Enum
from typing import Optional

from .tables import RuleTables, get_tables


class Script(Enum):
    UKRAINIAN = "ukrainian"
    LATIN = "latin"
    UNDETERMINED = "undetermined"


class Direction(Enum):
    """Transliteration direction, valued as stored in saved records."""

    UK_TO_LAT = "uk-to-lat"
    LAT_TO_UK = "lat-to-uk"

    @property
    def label(self) -> str:
        if self is Direction.UK_TO_LAT:
            return "Ukrainian → Latin"
        return "Latin → Ukrainian"

    def swapped(self) -> "Direction":
        if self is Direction.UK_TO_LAT:
            return Direction.LAT_TO_UK
        return Direction.UK_TO_LAT


SOURCE_MODES = ('auto', 'ukrainian', 'latin')


def detect_script(text: str, tables: Optional[RuleTables] = None) -> Script:
    """
    Classify text as Ukrainian or Latin script.

    Args:
        text: Input text

    Returns:
        UNDETERMINED for blank text, UKRAINIAN if any Ukrainian letter is
        present, otherwise LATIN
    """
    if not text or not text.strip():
        return Script.UNDETERMINED

    tables = tables or get_tables()
    if tables.source_letters.search(text):
        return Script.UKRAINIAN
    return Script.LATIN


def resolve_direction(text: str, mode: str = 'auto') -> Direction:
    """
    Pick the direction for ``text`` given a source-language mode.

    Args:
        text: Input text
        mode: 'auto', 'ukrainian' or 'latin'

    Returns:
        Direction; blank input in auto mode defaults to Ukrainian -> Latin
    """
    if mode not in SOURCE_MODES:
        raise ValueError(f"Unknown source mode {mode!r}, expected one of {SOURCE_MODES}")

    if mode == 'ukrainian':
        return Direction.UK_TO_LAT
    if mode == 'latin':
        return Direction.LAT_TO_UK

    if detect_script(text) is Script.LATIN:
        return Direction.LAT_TO_UK
    return Direction.UK_TO_LAT
