"""
Chord-quality inference engine.

Pure functions from notes to chords:
- intervals_of: Gaps between consecutive notes
- find_additions: Notes left out of a chord skeleton
- match_dyad / match_triad / match_tetrad: Quality and root per chord size
- classify: The entry point - dedup, sort, dispatch, assemble
- name_of: Root plus quality symbol
"""

from chuk_mcp_chords.inference.additions import find_additions
from chuk_mcp_chords.inference.classifier import classify
from chuk_mcp_chords.inference.intervals import intervals_of
from chuk_mcp_chords.inference.matchers import (
    DYAD_INTERVALS,
    TETRAD_SHAPES,
    TRIAD_SHAPES,
    Match,
    match_dyad,
    match_tetrad,
    match_triad,
    rotations,
)
from chuk_mcp_chords.inference.naming import name_of

__all__ = [
    "classify",
    "intervals_of",
    "find_additions",
    "name_of",
    "Match",
    "match_dyad",
    "match_triad",
    "match_tetrad",
    "rotations",
    "DYAD_INTERVALS",
    "TRIAD_SHAPES",
    "TETRAD_SHAPES",
]
