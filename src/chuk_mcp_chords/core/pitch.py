"""
Pitch primitives - PitchClass and Note.

These are the foundational types for all pitch-related operations.
PitchClass represents the 12 chromatic pitches (octave-independent).
Note is one of the 128 MIDI keys - the ordered pitch scale chords are built from.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from chuk_mcp_chords.constants import (
    CONCERT_A_HZ,
    CONCERT_A_MIDI,
    MIDI_NOTE_MAX,
    MIDI_NOTE_MIN,
    OCTAVE,
    ORGAN_RANGE,
    PIANO_RANGE,
    Accidental,
    ErrorMessages,
)
from chuk_mcp_chords.errors import OutOfInstrumentRangeError, OutOfMidiRangeError

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

_NATURALS: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
_ACCIDENTAL_OFFSETS: dict[str, int] = {"": 0, "#": 1, "s": 1, "b": -1}

# Letter, optional accidental, signed octave: "C4", "F#3", "Bb-1", "Cs4"
_NOTE_NAME = re.compile(r"^([A-Ga-g])(#|s|b)?(-?\d+)$")


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    @property
    def is_accidental(self) -> bool:
        """True for the black keys."""
        return len(_SHARP_NAMES[self.value]) > 1

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % OCTAVE)

    def spell(self, accidental: Accidental = Accidental.SHARP) -> str:
        """Get the human-readable name, spelling black keys as flats or sharps."""
        names = _FLAT_NAMES if accidental is Accidental.FLAT else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % OCTAVE)


@dataclass(frozen=True, order=True)
class Note:
    """
    A single MIDI key (0-127).

    Totally ordered by pitch. Subtracting two notes gives the signed
    distance in semitones. C4 (middle C) is 60 and A4 (concert pitch) is 69.

    Immutable and hashable.
    """

    midi: int

    def __post_init__(self) -> None:
        if isinstance(self.midi, bool) or not isinstance(self.midi, int):
            raise TypeError(f"MIDI key number must be an int, got {self.midi!r}")
        if not MIDI_NOTE_MIN <= self.midi <= MIDI_NOTE_MAX:
            raise OutOfMidiRangeError(
                ErrorMessages.OUT_OF_MIDI_RANGE.format(
                    low=MIDI_NOTE_MIN, high=MIDI_NOTE_MAX, value=self.midi
                )
            )

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Note:
        """Build a note from its MIDI key number, rejecting out-of-range values."""
        return cls(ordinal)

    @classmethod
    def parse(cls, name: str) -> Note:
        """
        Parse a note from a name like 'C4', 'C#4', 'Db4', 'Cs4' or 'C-1'.

        Raises:
            ValueError: If the name is malformed
            OutOfMidiRangeError: If the note is outside MIDI 0-127
        """
        match = _NOTE_NAME.match(name.strip())
        if match is None:
            raise ValueError(ErrorMessages.INVALID_NOTE.format(name=name))

        letter, accidental, octave = match.groups()
        midi = (
            _NATURALS[letter.upper()]
            + _ACCIDENTAL_OFFSETS[accidental or ""]
            + (int(octave) + 1) * OCTAVE
        )
        return cls(midi)

    def distance(self, other: Note) -> int:
        """Signed number of semitones from `other` up to this note."""
        return self.midi - other.midi

    def __sub__(self, other: Note) -> int:
        if not isinstance(other, Note):
            return NotImplemented
        return self.distance(other)

    @property
    def pitch_class(self) -> PitchClass:
        return PitchClass.from_midi(self.midi)

    @property
    def octave(self) -> int:
        """Scientific octave number; C-1 is the lowest MIDI octave."""
        return self.midi // OCTAVE - 1

    @property
    def is_sharp(self) -> bool:
        """True for black keys."""
        return self.pitch_class.is_accidental

    @property
    def is_flat(self) -> bool:
        """Same keys as `is_sharp` - black keys are both."""
        return self.is_sharp

    def tone_name(self, accidental: Accidental = Accidental.SHARP) -> str:
        """The natural letter (A-G) this note is spelled from."""
        return self.pitch_class.spell(accidental)[0]

    def name(self, accidental: Accidental = Accidental.SHARP) -> str:
        """
        Get the musician-friendly name, e.g. 'C1', 'F#1' or 'Gb1'.

        Args:
            accidental: Spell black keys as sharps or flats
        """
        return f"{self.pitch_class.spell(accidental)}{self.octave}"

    def frequency(self) -> float:
        """Frequency in Hertz in twelve-tone equal temperament (A4 = 440 Hz)."""
        return CONCERT_A_HZ * 2 ** ((self.midi - CONCERT_A_MIDI) / OCTAVE)

    def transposed(self, half_tones: int) -> Note:
        """
        Create a new note shifted a number of half tones up or down.

        Raises:
            OutOfMidiRangeError: If the result falls off the MIDI keyboard
        """
        return Note(self.midi + half_tones)

    def piano_key_number(self) -> int:
        """Position (1-88) on an 88-key piano."""
        return self._key_number(PIANO_RANGE, "piano")

    def organ_key_number(self) -> int:
        """Position (1-61) on a 61-key organ manual."""
        return self._key_number(ORGAN_RANGE, "organ")

    def _key_number(self, key_range: tuple[int, int], instrument: str) -> int:
        low, high = key_range
        if not low <= self.midi <= high:
            message = ErrorMessages.OUT_OF_INSTRUMENT_RANGE.format(
                note=self.name(), instrument=instrument
            )
            raise OutOfInstrumentRangeError(message)
        return self.midi - low + 1

    def __str__(self) -> str:
        return self.name()

    def __repr__(self) -> str:
        return f"Note({self.midi})"


def parse_notes(values: Iterable[str | int | Note]) -> list[Note]:
    """
    Coerce a mix of note names, MIDI numbers and notes into notes.

    Order and duplicates are preserved.

    Args:
        values: Items like 'C4', 60 or Note(60)

    Returns:
        List of notes in input order
    """
    notes: list[Note] = []
    for value in values:
        if isinstance(value, Note):
            notes.append(value)
        elif isinstance(value, str):
            notes.append(Note.parse(value))
        else:
            notes.append(Note.from_ordinal(value))
    return notes
