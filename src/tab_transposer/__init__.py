"""
Tab Transposer - Transpose the chords of plain-text tabs into a new key

This package recognizes the chord lines of a tab (chords above lyrics) and
rewrites every chord into another key, leaving lyrics and layout untouched.
"""

from .notes import (
    NATURAL_NOTES,
    SHARP_NOTES,
    Spelling,
    is_alternate_spelling,
    is_valid_note,
    note_index,
)

from .key import Key, InvalidKeyError

from .chords import (
    CHORD_QUALITIES,
    ChordToken,
    get_root,
    is_valid_chord,
    is_valid_chord_quality,
    is_valid_slash_chord,
    parse_chord,
)

from .transpose import interval, transpose_note, transpose_chord

from .tab import (
    ChordReplacement,
    LineResult,
    TranspositionReport,
    ChordLineDetector,
    TabTransposer,
    transpose_tab,
)

from .sources import read_until_sentinel, extract_tab_from_html, read_tab_file

from .config import TransposerConfig, ConfigError

__version__ = "0.1.0"

__all__ = [
    # Note catalog
    'NATURAL_NOTES',
    'SHARP_NOTES',
    'Spelling',
    'is_alternate_spelling',
    'is_valid_note',
    'note_index',
    # Keys
    'Key',
    'InvalidKeyError',
    # Chord grammar
    'CHORD_QUALITIES',
    'ChordToken',
    'get_root',
    'is_valid_chord',
    'is_valid_chord_quality',
    'is_valid_slash_chord',
    'parse_chord',
    # Transposition
    'interval',
    'transpose_note',
    'transpose_chord',
    # Tabs
    'ChordReplacement',
    'LineResult',
    'TranspositionReport',
    'ChordLineDetector',
    'TabTransposer',
    'transpose_tab',
    # Input
    'read_until_sentinel',
    'extract_tab_from_html',
    'read_tab_file',
    # Configuration
    'TransposerConfig',
    'ConfigError',
]
