"""
Chord naming - root spelling plus quality symbol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chuk_mcp_chords.constants import Accidental, ChordKind

if TYPE_CHECKING:
    from chuk_mcp_chords.core.chord import Chord

# Kinds whose quality symbol is part of the chord name
_NAMED_QUALITIES = (ChordKind.TRIAD, ChordKind.TETRAD)


def name_of(chord: Chord, accidental: Accidental = Accidental.SHARP) -> str | None:
    """
    Get the musician-friendly name of a chord.

    Args:
        chord: A classified chord
        accidental: Spell a black-key root as a sharp or a flat

    Returns:
        e.g. 'C', 'C#m', 'Dbm', 'Bm7b5'; the bare root for single notes
        and dyads; None when the chord has no root

    Example:
        name_of(classify([CSharp1, F1, GSharp1]), Accidental.FLAT) -> 'Db'
    """
    if chord.root is None:
        return None

    root = chord.root.pitch_class.spell(accidental)
    if chord.kind in _NAMED_QUALITIES and chord.quality is not None:
        return f"{root}{chord.quality.symbol}"
    return root
