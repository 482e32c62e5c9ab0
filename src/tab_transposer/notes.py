"""
Note catalog - chromatic lookup tables for note names

Two index-aligned tables cover the twelve pitch classes: position i in the
natural table and position i in the sharp table name the same pitch. Which
table a note name belongs to decides how transposed notes get spelled.
"""

from enum import Enum
from typing import Optional, Tuple


# Natural/flat spellings, starting from A-flat
NATURAL_NOTES: Tuple[str, ...] = (
    "ab", "a", "bb", "b", "c", "db", "d", "eb", "e", "f", "f#", "g",
)

# Sharp spellings of the same pitch classes
SHARP_NOTES: Tuple[str, ...] = (
    "g#", "a", "a#", "b", "b#", "c#", "d", "d#", "e", "e#", "gb", "g",
)

# Spellings that put a key (or a bare note) in the sharp table
ALTERNATE_SPELLINGS = frozenset({"g#", "a#", "c#", "d#", "gb"})

ACCIDENTALS = ("b", "#")


class Spelling(Enum):
    """Which chromatic table a note name is read from or written to"""
    NATURAL = "natural"
    SHARP = "sharp"

    @property
    def notes(self) -> Tuple[str, ...]:
        return SHARP_NOTES if self is Spelling.SHARP else NATURAL_NOTES


def normalize_note(text: str) -> str:
    """Strip surrounding whitespace and lowercase a note name"""
    return text.strip().lower()


def capitalize_note(note: str) -> str:
    """Uppercase the root letter only: 'bb' -> 'Bb', 'f#' -> 'F#'"""
    return note[:1].upper() + note[1:]


def is_alternate_spelling(note: str) -> bool:
    """True for the five note names that prefer the sharp table"""
    return normalize_note(note) in ALTERNATE_SPELLINGS


def is_valid_note(token: str) -> bool:
    """True if the token names a note in either table"""
    note = normalize_note(token)
    return note in NATURAL_NOTES or note in SHARP_NOTES


def spelling_of(note: str) -> Spelling:
    """
    Table a bare note name belongs to.

    The five alternate spellings, plus b# and e# (which only exist in the
    sharp table), are sharp; everything else is natural.
    """
    note = normalize_note(note)
    if note in ALTERNATE_SPELLINGS:
        return Spelling.SHARP
    if note not in NATURAL_NOTES and note in SHARP_NOTES:
        return Spelling.SHARP
    return Spelling.NATURAL


def note_index(note: str, spelling: Optional[Spelling] = None) -> int:
    """
    Chromatic index (0-11) of a note name.

    With an explicit spelling, only that table is searched. Without one,
    the note's own table is used. Unknown names map to 0; callers that
    care must check is_valid_note() first.
    """
    note = normalize_note(note)
    table = (spelling or spelling_of(note)).notes
    if note in table:
        return table.index(note)
    return 0


def note_at(index: int, spelling: Spelling) -> str:
    """Note name at a chromatic index, reduced modulo 12"""
    return spelling.notes[index % 12]
