"""
Chord assembly - from a bag of notes to a Chord.

Chords are unordered sets of pitches: duplicates are dropped and the rest
sorted, the lowest note being the bass. The number of distinct notes
decides which matcher runs. Nothing here raises - unmatched or oversized
input comes back as an Unknown or Indeterminate chord.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from chuk_mcp_chords.core.chord import Chord, ChordType
from chuk_mcp_chords.core.pitch import Note
from chuk_mcp_chords.inference.intervals import intervals_of
from chuk_mcp_chords.inference.matchers import Match, match_dyad, match_tetrad, match_triad

logger = logging.getLogger(__name__)

Matcher = Callable[[Sequence[Note], Sequence[int]], Match]

# Distinct note count -> matcher
MATCHERS: dict[int, Matcher] = {
    2: match_dyad,
    3: match_triad,
    4: match_tetrad,
}


def classify(notes: Iterable[Note]) -> Chord:
    """
    Work out which chord a set of notes forms.

    Args:
        notes: Notes in any order, duplicates allowed

    Returns:
        A Chord keeping the notes as given, with intervals computed over
        the distinct notes

    Example:
        classify([E1, G1, C2]) -> Triad(major), root C2, intervals (3, 5)
    """
    given = tuple(notes)
    unique = sorted(set(given))
    intervals = intervals_of(unique)

    if not unique:
        match = Match(ChordType.SILENCE)
    elif len(unique) == 1:
        match = Match(ChordType.SINGLE_NOTE, root=unique[0])
    elif len(unique) in MATCHERS:
        match = MATCHERS[len(unique)](unique, intervals)
    else:
        match = Match(ChordType.UNKNOWN)

    chord = Chord(
        intervals=tuple(intervals),
        chord_type=match.chord_type,
        notes=given,
        root=match.root,
        additions=match.additions,
    )
    logger.debug(f"Classified {[str(n) for n in unique]} as {chord.chord_type} (root {chord.root})")
    return chord
