"""
Core chord primitives - the Radix layer.

These are the value types everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Note: One of the 128 MIDI keys, totally ordered
- DyadQuality, TriadQuality, TetradQuality: Closed sets of chord qualities
- ChordType: Chord kind plus its quality
- Chord: The analysed result of a set of notes
"""

from chuk_mcp_chords.core.chord import Chord, ChordType
from chuk_mcp_chords.core.pitch import Note, PitchClass, parse_notes
from chuk_mcp_chords.core.quality import (
    DyadQuality,
    IntervalKind,
    Quality,
    TetradQuality,
    TriadQuality,
)

__all__ = [
    # Pitch
    "PitchClass",
    "Note",
    "parse_notes",
    # Quality
    "IntervalKind",
    "DyadQuality",
    "TriadQuality",
    "TetradQuality",
    "Quality",
    # Chord
    "ChordType",
    "Chord",
]
