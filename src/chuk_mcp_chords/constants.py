"""
Constants and enums for the chord system.

No magic strings - use enums for constrained values.
"""

from enum import Enum

# MIDI key range (C-1 .. G9)
MIDI_NOTE_MIN = 0
MIDI_NOTE_MAX = 127

# Semitones in an octave
OCTAVE = 12

# Concert pitch reference
CONCERT_A_MIDI = 69
CONCERT_A_HZ = 440.0

# Instrument key ranges as inclusive MIDI bounds
PIANO_RANGE: tuple[int, int] = (21, 108)  # A0-C8, 88 keys
ORGAN_RANGE: tuple[int, int] = (36, 96)  # C2-C7, 61 keys


class Accidental(str, Enum):
    """
    How black keys are spelled.

    Flat notes take the name of the natural tone above,
    sharp notes take the name of the natural tone below.
    """

    FLAT = "flat"
    SHARP = "sharp"


class ChordKind(str, Enum):
    """Size-based family of a chord."""

    SILENCE = "silence"
    SINGLE_NOTE = "single_note"
    DYAD = "dyad"
    TRIAD = "triad"
    TETRAD = "tetrad"
    UNKNOWN = "unknown"
    COMPLEX = "complex"


class ErrorMessages:
    """Standardized error messages."""

    OUT_OF_MIDI_RANGE = "MIDI key number must be {low}-{high}, got {value}."
    OUT_OF_INSTRUMENT_RANGE = "{note} is outside the {instrument} range."
    INVALID_NOTE = "Unknown note name: '{name}'. Expected a name like 'C4', 'F#3' or 'Bb-1'."
    NO_NOTES_SOUNDING = "No notes sounding at beat {beat}."
