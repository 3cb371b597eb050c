"""
Addition detection - notes that don't belong to a chord skeleton.

A shape match alone can't tell "C major with an added 9th" apart from
"not a chord at all". Given the skeleton a matcher settled on, this finds
the notes it doesn't explain, so four-note clusters like C-D-E-G can be
read as a clean triad plus an extra.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chuk_mcp_chords.core.pitch import Note

logger = logging.getLogger(__name__)


def find_additions(notes: Sequence[Note], intervals: Sequence[int]) -> list[Note]:
    """
    Find the notes not explained by a skeleton built on the bass.

    The skeleton is the bass plus the stacked intervals. When none of the
    notes above the bass fit it, the bass itself is the stray note (a
    doubled root an octave below, say): it is reported and the search
    moves up to the next note.

    Args:
        notes: Notes ordered by pitch, lowest first
        intervals: Stacked intervals of the skeleton (e.g. (4, 3) for major)

    Returns:
        Extraneous notes, lowest first within each step; may be empty

    Example:
        find_additions([C1, C2, E2, G2], [4, 3]) -> [C1]
        find_additions([C4, E4, F4, G4], [4, 3]) -> [F4]
    """
    additions: list[Note] = []
    remaining = list(notes)

    # Each pass drops the bass, so this ends within len(notes) passes
    while remaining:
        bass, upper = remaining[0], remaining[1:]

        expected: set[int] = set()
        pitch = bass.midi
        for interval in intervals:
            pitch += interval
            expected.add(pitch)

        actual = {note.midi for note in upper}
        extras = [Note.from_ordinal(midi) for midi in sorted(actual - expected)]

        if upper and len(extras) == len(remaining) - 1:
            logger.debug(f"Bass {bass} is outside the skeleton {tuple(intervals)}")
            additions.append(bass)
            remaining = upper
            continue

        additions.extend(extras)
        break

    return additions
