"""
Chord primitives - ChordType and Chord.

A Chord is the result of classifying a set of notes: the interval shape,
the recognised type and quality, the harmonic root and any extraneous notes.
Chords are built by `chuk_mcp_chords.inference.classify`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_chords.constants import Accidental, ChordKind
from chuk_mcp_chords.core.pitch import Note
from chuk_mcp_chords.core.quality import DyadQuality, Quality, TetradQuality, TriadQuality

_QUALITY_TYPES: dict[ChordKind, type] = {
    ChordKind.DYAD: DyadQuality,
    ChordKind.TRIAD: TriadQuality,
    ChordKind.TETRAD: TetradQuality,
}


@dataclass(frozen=True)
class ChordType:
    """
    The kind of a chord plus whatever that kind carries.

    Dyads, triads and tetrads carry their quality; complex chords carry
    their component chords. The other kinds carry nothing.

    Immutable and hashable.
    """

    kind: ChordKind
    quality: Quality | None = None
    components: tuple[Chord, ...] = ()

    SILENCE: ClassVar[ChordType]
    SINGLE_NOTE: ClassVar[ChordType]
    UNKNOWN: ClassVar[ChordType]

    def __post_init__(self) -> None:
        expected = _QUALITY_TYPES.get(self.kind)
        if expected is None and self.quality is not None:
            raise ValueError(f"{self.kind.value} chords carry no quality")
        if expected is not None and not isinstance(self.quality, expected):
            raise ValueError(f"{self.kind.value} chords need a {expected.__name__}")
        if self.components and self.kind is not ChordKind.COMPLEX:
            raise ValueError("Only complex chords have components")

    @classmethod
    def dyad(cls, quality: DyadQuality) -> ChordType:
        return cls(ChordKind.DYAD, quality)

    @classmethod
    def triad(cls, quality: TriadQuality) -> ChordType:
        return cls(ChordKind.TRIAD, quality)

    @classmethod
    def tetrad(cls, quality: TetradQuality) -> ChordType:
        return cls(ChordKind.TETRAD, quality)

    @classmethod
    def complex(cls, components: Iterable[Chord]) -> ChordType:
        return cls(ChordKind.COMPLEX, components=tuple(components))

    def __str__(self) -> str:
        if isinstance(self.quality, DyadQuality):
            return f"{self.kind.value}({self.quality.symbol})"
        if self.quality is not None:
            return f"{self.kind.value}({self.quality.value})"
        return self.kind.value


ChordType.SILENCE = ChordType(ChordKind.SILENCE)
ChordType.SINGLE_NOTE = ChordType(ChordKind.SINGLE_NOTE)
ChordType.UNKNOWN = ChordType(ChordKind.UNKNOWN)


@dataclass(frozen=True)
class Chord:
    """
    A set of notes heard as sounding together, with its analysis.

    - intervals: gaps between consecutive distinct notes, lowest first
    - chord_type: the recognised kind and quality
    - notes: the notes as given, duplicates and order included
    - root: the harmonic root, when a quality was recognised
    - additions: notes that don't belong to the recognised skeleton

    The default chord is silence.
    """

    intervals: tuple[int, ...] = ()
    chord_type: ChordType = ChordType.SILENCE
    notes: tuple[Note, ...] = ()
    root: Note | None = None
    additions: tuple[Note, ...] | None = None

    @classmethod
    def from_notes(cls, notes: Iterable[Note]) -> Chord:
        """Classify a set of notes. Same as `chuk_mcp_chords.inference.classify`."""
        from chuk_mcp_chords.inference.classifier import classify

        return classify(notes)

    @property
    def kind(self) -> ChordKind:
        return self.chord_type.kind

    @property
    def quality(self) -> Quality | None:
        return self.chord_type.quality

    @property
    def is_silence(self) -> bool:
        """True when there are no notes at all."""
        return not self.notes

    @property
    def is_single_note(self) -> bool:
        return self.kind is ChordKind.SINGLE_NOTE

    @property
    def is_dyad(self) -> bool:
        return self.kind is ChordKind.DYAD

    @property
    def is_triad(self) -> bool:
        return self.kind is ChordKind.TRIAD

    @property
    def is_tetrad(self) -> bool:
        return self.kind is ChordKind.TETRAD

    @property
    def is_unknown(self) -> bool:
        return self.kind is ChordKind.UNKNOWN

    @property
    def unique_notes(self) -> tuple[Note, ...]:
        """Distinct notes, lowest first."""
        return tuple(sorted(set(self.notes)))

    @property
    def bass(self) -> Note | None:
        """The lowest sounding note."""
        unique = self.unique_notes
        return unique[0] if unique else None

    @property
    def chord_tones(self) -> tuple[Note, ...]:
        """Distinct notes that belong to the skeleton (additions removed)."""
        extra = set(self.additions or ())
        return tuple(note for note in self.unique_notes if note not in extra)

    @property
    def inversion(self) -> int | None:
        """
        Which inversion is sounding.

        0 is root position, 1 first inversion, 2 second, 3 third.
        None for chords without a root or without a triad/tetrad skeleton.
        """
        if self.root is None or self.kind not in (ChordKind.TRIAD, ChordKind.TETRAD):
            return None

        tones = self.chord_tones
        if self.root not in tones:
            return None
        return (len(tones) - tones.index(self.root)) % len(tones)

    def name(self, accidental: Accidental = Accidental.SHARP) -> str | None:
        """Get the musician-friendly name of the chord, e.g. 'C#m' or 'Dbm'."""
        from chuk_mcp_chords.inference.naming import name_of

        return name_of(self, accidental)

    def __str__(self) -> str:
        return self.name() or str(self.chord_type)
