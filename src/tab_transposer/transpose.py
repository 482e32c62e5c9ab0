"""
Transposition engine - moves notes and chords between keys

Only note names are rewritten. Chord qualities and separators are copied
exactly as they appear in the source token.
"""

from .chords import parse_chord
from .key import Key
from .notes import Spelling, capitalize_note, note_at, note_index


def interval(old_key: Key, new_key: Key) -> int:
    """Semitones to add to move from old_key to new_key (0-11)"""
    return (new_key.index - old_key.index) % 12


def transpose_note(note: str, semitones: int, use_alternate: bool) -> str:
    """
    Move a note name up by a number of semitones.

    The note is looked up in its own table; the result is spelled from the
    sharp table when use_alternate is set, else from the natural table.
    Returns the lowercase table spelling.
    """
    spelling = Spelling.SHARP if use_alternate else Spelling.NATURAL
    return note_at(note_index(note) + semitones, spelling)


def transpose_chord(token: str, old_key: Key, new_key: Key) -> str:
    """Transpose a chord token; tokens that aren't chords come back unchanged"""
    chord = parse_chord(token)
    if chord is None:
        return token

    semitones = interval(old_key, new_key)
    use_alternate = new_key.uses_alternate_spelling

    new_root = capitalize_note(transpose_note(chord.root, semitones, use_alternate))
    if chord.is_slash_chord:
        new_bass = capitalize_note(transpose_note(chord.bass, semitones, use_alternate))
        return f"{new_root}{chord.quality}/{new_bass}"
    return new_root + chord.quality
