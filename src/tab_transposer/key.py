"""
Key - the tonic a tab is written in (or transposed to)
"""

from dataclasses import dataclass

from .notes import (
    Spelling,
    capitalize_note,
    is_alternate_spelling,
    is_valid_note,
    normalize_note,
    note_index,
)


class InvalidKeyError(ValueError):
    """Raised when a key name is not a recognized note"""


@dataclass(frozen=True)
class Key:
    """A tonic note, its chromatic index and its spelling table"""
    name: str
    index: int
    spelling: Spelling

    @classmethod
    def from_name(cls, name: str) -> 'Key':
        """Build a key from a tonic name like 'A', 'bb' or ' F# '"""
        if not is_valid_note(name):
            raise InvalidKeyError(f"Not a valid key: {name!r}")

        note = normalize_note(name)
        spelling = Spelling.SHARP if is_alternate_spelling(note) else Spelling.NATURAL
        return cls(name=note, index=note_index(note), spelling=spelling)

    @property
    def uses_alternate_spelling(self) -> bool:
        return self.spelling is Spelling.SHARP

    @property
    def display_name(self) -> str:
        return capitalize_note(self.name)

    def __str__(self) -> str:
        return f"{self.display_name}, {self.index}"
