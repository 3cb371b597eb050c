"""
Quality matchers - dyads, triads and tetrads.

Each matcher takes the distinct notes of a chord (lowest first) and their
intervals, and works out the quality and the root.

Inversions are found by rotation. Closing the stack with the interval
from the top note back up to the bass an octave higher gives one more
interval; starting the stack at each note in turn gives the interval
pattern that note would have if it were the root. For E-G-C (3, 5) the
closing interval is 4, and the rotation starting on C reads (4, 3):
major, root C.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from chuk_mcp_chords.constants import OCTAVE
from chuk_mcp_chords.core.chord import ChordType
from chuk_mcp_chords.core.pitch import Note
from chuk_mcp_chords.core.quality import DyadQuality, IntervalKind, TetradQuality, TriadQuality
from chuk_mcp_chords.inference.additions import find_additions

logger = logging.getLogger(__name__)

# Gap in semitones -> compound interval name. Enharmonic readings in comments.
DYAD_INTERVALS: dict[int, DyadQuality] = {
    0: DyadQuality(IntervalKind.PERFECT, 0),  # P1  d2
    1: DyadQuality(IntervalKind.AUGMENTED, 1),  # A1  m2
    2: DyadQuality(IntervalKind.MAJOR, 2),  # M2  d3
    3: DyadQuality(IntervalKind.MINOR, 3),  # m3  A2
    4: DyadQuality(IntervalKind.MAJOR, 3),  # M3  d4
    5: DyadQuality(IntervalKind.PERFECT, 4),  # P4  A3
    6: DyadQuality(IntervalKind.AUGMENTED, 4),  # A4  d5
    7: DyadQuality(IntervalKind.PERFECT, 5),  # P5  d6
    8: DyadQuality(IntervalKind.MINOR, 6),  # m6  A5
    9: DyadQuality(IntervalKind.MAJOR, 6),  # M6  d7
    10: DyadQuality(IntervalKind.MINOR, 7),  # m7  A6
    11: DyadQuality(IntervalKind.MAJOR, 7),  # M7  d8
    12: DyadQuality(IntervalKind.DIMINISHED, 9),  # d9  P8
    13: DyadQuality(IntervalKind.MINOR, 9),  # m9  A8
    14: DyadQuality(IntervalKind.MAJOR, 9),  # M9  d10
    15: DyadQuality(IntervalKind.MINOR, 10),  # m10 A9
    16: DyadQuality(IntervalKind.MAJOR, 10),  # M10 d11
    17: DyadQuality(IntervalKind.PERFECT, 11),  # P11 A10
    18: DyadQuality(IntervalKind.DIMINISHED, 12),  # d12 A11
    19: DyadQuality(IntervalKind.PERFECT, 12),  # P12 d13
    20: DyadQuality(IntervalKind.MINOR, 13),  # m13 A12
    21: DyadQuality(IntervalKind.MAJOR, 13),  # M13 d14
    22: DyadQuality(IntervalKind.MINOR, 14),  # m14 A13
    23: DyadQuality(IntervalKind.MAJOR, 14),  # M14 d15
    24: DyadQuality(IntervalKind.PERFECT, 15),  # P15 A14
    25: DyadQuality(IntervalKind.AUGMENTED, 15),  # A15
}

# Root-position interval stacks
TRIAD_SHAPES: dict[tuple[int, ...], TriadQuality] = {
    (4, 3): TriadQuality.MAJOR,
    (3, 4): TriadQuality.MINOR,
    (3, 3): TriadQuality.DIMINISHED,
    (4, 4): TriadQuality.AUGMENTED,
    (5, 2): TriadQuality.SUSPENDED_4,
    (2, 5): TriadQuality.SUSPENDED_2,
}

TETRAD_SHAPES: dict[tuple[int, ...], TetradQuality] = {
    (4, 3, 4): TetradQuality.SEVENTH_MAJOR,
    (3, 4, 3): TetradQuality.SEVENTH_MINOR,
    (4, 3, 3): TetradQuality.SEVENTH_DOMINANT,
    (3, 3, 3): TetradQuality.SEVENTH_DIMINISHED,
    (3, 3, 4): TetradQuality.SEVENTH_HALF_DIMINISHED,
    (3, 4, 4): TetradQuality.SEVENTH_MINOR_MAJOR,
    (4, 4, 3): TetradQuality.SEVENTH_AUGMENTED_MAJOR,
    (4, 4, 2): TetradQuality.SEVENTH_AUGMENTED,
    (3, 3, 5): TetradQuality.SEVENTH_DIMINISHED_MAJOR,
    (4, 2, 4): TetradQuality.SEVENTH_DOMINANT_FLAT_FIVE,
    (4, 2, 5): TetradQuality.SEVENTH_MAJOR_FLAT_FIVE,
}

# Gaps that make a third when two seconds are merged
_THIRDS = (3, 4)


@dataclass(frozen=True)
class Match:
    """What a matcher recognised: the chord type, its root and any additions."""

    chord_type: ChordType
    root: Note | None = None
    additions: tuple[Note, ...] | None = None


def rotations(intervals: Sequence[int]) -> list[tuple[int, ...]]:
    """
    Interval patterns for each candidate root, indexed by the root's position.

    Example:
        rotations((3, 5)) -> [(3, 5), (5, 4), (4, 3)]
    """
    closing = OCTAVE - sum(intervals)
    stack = [*intervals, closing]
    size = len(intervals)
    return [tuple((stack[i:] + stack[:i])[:size]) for i in range(len(stack))]


def match_dyad(notes: Sequence[Note], intervals: Sequence[int]) -> Match:
    """
    Name the interval of a two-note chord.

    A dyad has a single reading, so the lower note is always the root.
    """
    quality = DYAD_INTERVALS.get(intervals[0], DyadQuality.INDETERMINATE)
    return Match(ChordType.dyad(quality), root=notes[0])


def match_triad(notes: Sequence[Note], intervals: Sequence[int]) -> Match:
    """
    Recognise a three-note chord in any inversion.

    Rotation 0 is root position, 1 puts the root in the middle (second
    inversion) and 2 puts it on top (first inversion). The first rotation
    found in TRIAD_SHAPES wins. Without a match the quality is
    INDETERMINATE and there is no root.
    """
    for position, shape in enumerate(rotations(intervals)):
        quality = TRIAD_SHAPES.get(shape)
        if quality is not None:
            return Match(ChordType.triad(quality), root=notes[position])

    return Match(ChordType.triad(TriadQuality.INDETERMINATE))


def match_tetrad(notes: Sequence[Note], intervals: Sequence[int]) -> Match:
    """
    Recognise a four-note chord.

    Before trying seventh chords, checks in order whether the notes are a
    triad plus one extra note:

    1. extra bass - the two lowest notes are octaves apart
    2. extra overtone - the top note doubles the bass
    3. extra second - the two lowest gaps add up to a third
    4. extra fourth - the two highest gaps add up to a third

    The first that applies is used, without backtracking; the triad is
    matched on the three skeleton notes and the extra notes are reported
    as additions.
    """
    first, second, third = intervals

    if first % OCTAVE == 0:
        return _triad_with_additions(notes, notes[1:], (second, third))
    if (first + second + third) % OCTAVE == 0:
        return _triad_with_additions(notes, notes[:3], (first, second))
    if first + second in _THIRDS:
        return _triad_with_additions(notes, (notes[0], notes[2], notes[3]), (first + second, third))
    if second + third in _THIRDS:
        return _triad_with_additions(notes, (notes[0], notes[1], notes[3]), (first, second + third))

    for position, shape in enumerate(rotations(intervals)):
        quality = TETRAD_SHAPES.get(shape)
        if quality is not None:
            return Match(ChordType.tetrad(quality), root=notes[position])

    return Match(ChordType.tetrad(TetradQuality.INDETERMINATE))


def _triad_with_additions(
    notes: Sequence[Note],
    skeleton: Sequence[Note],
    shape: tuple[int, int],
) -> Match:
    """Match a triad on the skeleton notes and attach the notes it leaves out."""
    triad = match_triad(skeleton, shape)
    additions = find_additions(notes, shape)
    logger.debug(
        f"Read {[str(n) for n in notes]} as triad {shape} plus {[str(n) for n in additions]}"
    )
    return Match(triad.chord_type, root=triad.root, additions=tuple(additions) or None)
