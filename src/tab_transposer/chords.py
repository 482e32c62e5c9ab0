"""
Chord grammar - validates and decomposes chord tokens

A chord token is a root note, an optional quality suffix and an optional
slash bass note: 'A', 'Am7', 'Bbmaj7#11', 'D/F#'. There is no formal grammar
here; the tricky part is that 'b' is both a flat sign and the start of a
flat-five suffix ('Gb5#9' is G with a b5#9 suffix, 'Gbb5#9' is Gb with the
same suffix).

Every function in this module is total: bad input gives False or None,
never an exception.
"""

from dataclasses import dataclass
from typing import Optional

from .notes import ACCIDENTALS, is_valid_note


# Recognized chord qualities, compared lowercase
CHORD_QUALITIES = frozenset({
    "#5#9", "#5b9", "11", "13", "13#11", "13sus", "13sus2", "13sus4",
    "2", "5", "6", "6/9", "7", "7#11", "7#5", "7#9", "7b5", "7b5#9",
    "7b5(#9)", "7b9", "7sus", "7sus2", "7sus4", "9", "9sus", "9sus2",
    "9sus4", "add9", "aug", "aug7#9", "aug9", "b5", "b5#9", "b5b9",
    "dim", "dim7", "m", "m(add9)", "m(maj7)", "m11", "m13", "m6", "m6/9",
    "m7", "m7b5", "m7b9", "m9", "m9(maj7)", "m9m7", "m9b5", "m9maj7",
    "mm7", "madd9", "maj", "maj13", "maj7", "maj7#11", "maj9", "major",
    "mb6", "min", "minor", "mmaj7", "sus", "sus2", "sus4",
})

# Altered fifth + ninth suffixes that can be mistaken for an accidental root
ALTERED_FIFTH_SUFFIXES = ("b5#9", "b5b9", "#5b9", "#5#9")


@dataclass(frozen=True)
class ChordToken:
    """A chord split into root, quality suffix and optional slash bass"""
    root: str
    quality: str = ""
    bass: Optional[str] = None

    @property
    def is_slash_chord(self) -> bool:
        return self.bass is not None

    def __str__(self) -> str:
        text = self.root + self.quality
        if self.bass is not None:
            text += "/" + self.bass
        return text


def _altered_fifth_position(token: str) -> int:
    """Index of the earliest altered-fifth suffix in the token, or -1"""
    lowered = token.lower()
    positions = [lowered.find(suffix) for suffix in ALTERED_FIFTH_SUFFIXES]
    found = [p for p in positions if p != -1]
    return min(found) if found else -1


def get_root(token: str) -> str:
    """
    Return the root portion of a (possibly invalid) chord token.

    Casing is kept: get_root('Bbm7') == 'Bb'.

    An altered-fifth suffix right after the letter wins over the accidental
    reading of its first character, so 'Gb5#9' has root 'G'. When the
    suffix starts one character later ('Gbb5#9'), the first two characters
    are the root. That also makes 'C7b5#9' a 'C7' root, which isn't a note,
    so the token is not a chord.
    """
    position = _altered_fifth_position(token)
    if position == 1:
        return token[:1]
    if position == 2:
        return token[:2]
    if token[1:2].lower() in ACCIDENTALS:
        return token[:2]
    return token[:1]


def is_valid_chord_quality(suffix: str) -> bool:
    """True if the suffix is a recognized chord quality ('m7', 'sus4', ...)"""
    return suffix.strip().lower() in CHORD_QUALITIES


def is_valid_slash_chord(token: str) -> bool:
    """True for '<chord>/<note>' with exactly one slash"""
    if token.count("/") != 1:
        return False
    if token.endswith("/"):
        return False
    head, bass = token.split("/")
    return is_valid_chord(head) and is_valid_note(bass)


def is_valid_chord(token: str) -> bool:
    """True if the token reads as a chord"""
    if is_valid_note(token):
        return True
    if is_valid_slash_chord(token):
        return True

    root = get_root(token)
    if not is_valid_note(root):
        return False
    if root == token:
        return True
    return is_valid_chord_quality(token[len(root):])


def parse_chord(token: str) -> Optional[ChordToken]:
    """Split a chord token into its parts; None if it isn't a chord"""
    token = token.strip()
    if not is_valid_chord(token):
        return None

    if is_valid_slash_chord(token):
        head, bass = token.split("/")
        root = get_root(head)
        return ChordToken(root=root, quality=head[len(root):], bass=bass)

    root = get_root(token)
    return ChordToken(root=root, quality=token[len(root):])
