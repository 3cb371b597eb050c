"""
Error types for pitch handling.

Chord inference itself never fails - unrecognised input degrades to
Unknown or Indeterminate. Only building pitches can go wrong.
"""


class PitchError(ValueError):
    """Base class for invalid pitch operations."""


class OutOfMidiRangeError(PitchError):
    """A key number or transposition falls outside MIDI 0-127."""


class OutOfInstrumentRangeError(PitchError):
    """A note does not exist on the requested instrument keyboard."""
