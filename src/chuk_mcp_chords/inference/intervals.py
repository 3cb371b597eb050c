"""
Interval extraction - the shape of a note set.

Intervals are measured between neighbours, not from the bass: a root
position major triad C-E-G is (4, 3). Absolute pitch is discarded, only
the shape remains, which is what every matcher works from.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_chords.core.pitch import Note


def intervals_of(notes: Sequence[Note]) -> list[int]:
    """
    Compute the semitone gaps between consecutive notes.

    Args:
        notes: Notes ordered by pitch, lowest first

    Returns:
        One gap per neighbouring pair; empty for zero or one note.
        Gaps are signed, so unsorted input yields negative values.

    Example:
        intervals_of([C4, E4, G4]) -> [4, 3]
    """
    return [current.distance(previous) for previous, current in zip(notes, notes[1:])]
