"""
Tab transposer - rewrites the chord lines of a tab into a new key

A tab is plain text where chord lines sit above lyric lines:

         A          D/F#      E
    Well I woke up this morning

Only chord lines are touched, and on them only the chord tokens. Spacing,
lyrics, blank lines and section labels come out exactly as they went in.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .chords import is_valid_chord
from .key import Key
from .transpose import interval, transpose_chord


@dataclass
class ChordReplacement:
    """A chord that was rewritten, and where it starts in the output line"""
    chord: str
    transposed: str
    position: int


@dataclass
class LineResult:
    """What happened to one line of the tab"""
    line_number: int  # 1-based
    chord_line: bool
    replacements: List[ChordReplacement] = field(default_factory=list)


@dataclass
class TranspositionReport:
    """Summary of a transposition pass"""
    old_key: str
    new_key: str
    interval: int
    lines: List[LineResult] = field(default_factory=list)

    @property
    def chord_line_count(self) -> int:
        return sum(1 for line in self.lines if line.chord_line)

    @property
    def chord_count(self) -> int:
        return sum(len(line.replacements) for line in self.lines)


class ChordLineDetector:
    """Decides whether a line of a tab is a chord line"""

    @staticmethod
    def is_chord_line(line: str) -> bool:
        """
        A line is a chord line when its first two words are both chords.

        One word is not enough: a lyric like "A Movie Script Ending" starts
        with a valid chord, but "Movie" isn't one.
        """
        words = line.split()
        if len(words) < 2:
            return False
        return is_valid_chord(words[0]) and is_valid_chord(words[1])


def split_lines(text: str) -> List[str]:
    """Split text on newlines; a trailing newline doesn't add an empty line"""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


class TabTransposer:
    """Transposes whole tabs from one key to another"""

    def __init__(self, old_key: Key, new_key: Key):
        self.old_key = old_key
        self.new_key = new_key

    @property
    def interval(self) -> int:
        return interval(self.old_key, self.new_key)

    def transpose_line(self, line: str) -> Tuple[str, bool, List[ChordReplacement]]:
        """
        Transpose the chords of one line.

        Returns the new line, whether it was a chord line, and the chords
        that changed. Non-chord lines pass through.
        """
        if not ChordLineDetector.is_chord_line(line):
            return line, False, []

        replacements = []
        cursor = 0
        for word in line.split():
            if not is_valid_chord(word):
                continue
            # Search from the end of the last replacement so a repeated
            # chord isn't rewritten twice
            start = line.find(word, cursor)
            new_chord = transpose_chord(word, self.old_key, self.new_key)
            line = line[:start] + new_chord + line[start + len(word):]
            cursor = start + len(new_chord)
            replacements.append(ChordReplacement(chord=word, transposed=new_chord, position=start))

        return line, True, replacements

    def transpose_with_report(self, tab: str) -> Tuple[str, TranspositionReport]:
        """Transpose a tab and report which lines and chords changed"""
        report = TranspositionReport(
            old_key=self.old_key.display_name,
            new_key=self.new_key.display_name,
            interval=self.interval,
        )

        output = []
        for line_number, line in enumerate(split_lines(tab), start=1):
            new_line, chord_line, replacements = self.transpose_line(line)
            report.lines.append(LineResult(
                line_number=line_number,
                chord_line=chord_line,
                replacements=replacements,
            ))
            output.append(new_line + "\n")

        return "".join(output), report

    def transpose(self, tab: str) -> str:
        """Transpose every chord line of a tab"""
        new_tab, _ = self.transpose_with_report(tab)
        return new_tab


def transpose_tab(tab: str, old_key: Key, new_key: Key) -> str:
    """Convenience wrapper: transpose a tab between two keys"""
    return TabTransposer(old_key, new_key).transpose(tab)
