"""
Chord quality primitives - DyadQuality, TriadQuality, TetradQuality.

Each chord size has its own closed set of qualities. Qualities are plain
value tags: they carry a short symbol for chord names and nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

INDETERMINATE_SYMBOL = "ind"


class IntervalKind(str, Enum):
    """Interval family used to name a dyad (perfect fifth, major third, ...)."""

    PERFECT = "perfect"
    AUGMENTED = "augmented"
    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    INDETERMINATE = "indeterminate"


_INTERVAL_PREFIXES: dict[IntervalKind, str] = {
    IntervalKind.PERFECT: "P",
    IntervalKind.AUGMENTED: "A",
    IntervalKind.MAJOR: "M",
    IntervalKind.MINOR: "m",
    IntervalKind.DIMINISHED: "d",
}


@dataclass(frozen=True)
class DyadQuality:
    """
    A two-note quality: the (compound) interval between the notes.

    `number` is the interval's diatonic size, e.g. 3 for a third or 9 for
    a ninth. MAJOR_THIRD is DyadQuality(IntervalKind.MAJOR, 3).
    """

    kind: IntervalKind
    number: int = 0

    INDETERMINATE: ClassVar[DyadQuality]

    @property
    def symbol(self) -> str:
        if self.kind is IntervalKind.INDETERMINATE:
            return INDETERMINATE_SYMBOL
        return f"{_INTERVAL_PREFIXES[self.kind]}{self.number}"

    def __str__(self) -> str:
        return self.symbol


DyadQuality.INDETERMINATE = DyadQuality(IntervalKind.INDETERMINATE)


class TriadQuality(str, Enum):
    """Qualities of three-note chords."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    SUSPENDED_2 = "sus2"
    SUSPENDED_4 = "sus4"
    INDETERMINATE = "indeterminate"

    @classmethod
    def suspended(cls, degree: int) -> TriadQuality:
        """Suspended triad replacing the third with a 2nd or a 4th."""
        if degree == 2:
            return cls.SUSPENDED_2
        if degree == 4:
            return cls.SUSPENDED_4
        raise ValueError(f"Suspension must be 2 or 4, got {degree}")

    @property
    def suspension(self) -> int | None:
        """The suspended degree, or None for non-suspended triads."""
        return {TriadQuality.SUSPENDED_2: 2, TriadQuality.SUSPENDED_4: 4}.get(self)

    @property
    def symbol(self) -> str:
        return _TRIAD_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


_TRIAD_SYMBOLS: dict[TriadQuality, str] = {
    TriadQuality.MAJOR: "",
    TriadQuality.MINOR: "m",
    TriadQuality.DIMINISHED: "dim",
    TriadQuality.AUGMENTED: "aug",
    TriadQuality.SUSPENDED_2: "sus2",
    TriadQuality.SUSPENDED_4: "sus4",
    TriadQuality.INDETERMINATE: INDETERMINATE_SYMBOL,
}


class TetradQuality(str, Enum):
    """Qualities of four-note (seventh) chords."""

    SEVENTH_MAJOR = "major 7"  # Tertian
    SEVENTH_MINOR = "minor 7"  # Tertian
    SEVENTH_DOMINANT = "dominant 7"  # Tertian
    SEVENTH_DIMINISHED = "diminished 7"  # Tertian
    SEVENTH_HALF_DIMINISHED = "half-diminished 7"  # Tertian, aka minor 7 flat 5
    SEVENTH_MINOR_MAJOR = "minor-major 7"  # Tertian
    SEVENTH_AUGMENTED_MAJOR = "augmented-major 7"  # Tertian, aka major 7 sharp 5
    SEVENTH_AUGMENTED = "augmented 7"  # Non-tertian, aka 7 sharp 5
    SEVENTH_DIMINISHED_MAJOR = "diminished-major 7"  # Non-tertian
    SEVENTH_DOMINANT_FLAT_FIVE = "dominant 7 flat 5"  # Non-tertian
    SEVENTH_MAJOR_FLAT_FIVE = "major 7 flat 5"  # Non-tertian
    INDETERMINATE = "indeterminate"

    @property
    def symbol(self) -> str:
        return _TETRAD_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


_TETRAD_SYMBOLS: dict[TetradQuality, str] = {
    TetradQuality.SEVENTH_MAJOR: "M7",
    TetradQuality.SEVENTH_MINOR: "m7",
    TetradQuality.SEVENTH_DOMINANT: "7",
    TetradQuality.SEVENTH_DIMINISHED: "dim7",
    TetradQuality.SEVENTH_HALF_DIMINISHED: "m7b5",
    TetradQuality.SEVENTH_MINOR_MAJOR: "mM7",
    TetradQuality.SEVENTH_AUGMENTED_MAJOR: "M7#5",
    TetradQuality.SEVENTH_AUGMENTED: "aug7",
    TetradQuality.SEVENTH_DIMINISHED_MAJOR: "mM7b5",
    TetradQuality.SEVENTH_DOMINANT_FLAT_FIVE: "7b5",
    TetradQuality.SEVENTH_MAJOR_FLAT_FIVE: "M7b5",
    TetradQuality.INDETERMINATE: INDETERMINATE_SYMBOL,
}

Quality = DyadQuality | TriadQuality | TetradQuality
