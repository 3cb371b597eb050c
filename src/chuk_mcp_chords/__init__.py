"""
CHUK Chords - chord recognition from sets of notes.

    from chuk_mcp_chords import Note, classify

    chord = classify([Note.parse(n) for n in ("E4", "G4", "C5")])
    chord.name()       # 'C'
    chord.inversion    # 1
"""

from chuk_mcp_chords.constants import Accidental, ChordKind
from chuk_mcp_chords.core import (
    Chord,
    ChordType,
    DyadQuality,
    IntervalKind,
    Note,
    PitchClass,
    TetradQuality,
    TriadQuality,
    parse_notes,
)
from chuk_mcp_chords.errors import OutOfInstrumentRangeError, OutOfMidiRangeError, PitchError
from chuk_mcp_chords.inference import classify, find_additions, intervals_of, name_of

__version__ = "0.1.0"

__all__ = [
    "Accidental",
    "Chord",
    "ChordKind",
    "ChordType",
    "DyadQuality",
    "IntervalKind",
    "Note",
    "OutOfInstrumentRangeError",
    "OutOfMidiRangeError",
    "PitchClass",
    "PitchError",
    "TetradQuality",
    "TriadQuality",
    "classify",
    "find_additions",
    "intervals_of",
    "name_of",
    "parse_notes",
]
