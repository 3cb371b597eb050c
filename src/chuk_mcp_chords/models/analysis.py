"""
Analysis models - serialisable views of notes and chords.

The core types are plain frozen dataclasses; these pydantic models are
what tools hand back as JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_chords.constants import Accidental, ChordKind
from chuk_mcp_chords.core.chord import Chord
from chuk_mcp_chords.core.pitch import Note
from chuk_mcp_chords.core.quality import DyadQuality


class NoteInfo(BaseModel):
    """A single note with its names and frequency."""

    midi: int = Field(..., ge=0, le=127, description="MIDI key number")
    name: str = Field(..., description="Note name with octave (e.g. 'C#4')")
    pitch_class: str = Field(..., description="Note name without octave (e.g. 'C#')")
    octave: int = Field(..., description="Scientific octave number")
    frequency: float = Field(..., gt=0, description="Frequency in Hz (A4 = 440)")

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: Note, accidental: Accidental = Accidental.SHARP) -> NoteInfo:
        return cls(
            midi=note.midi,
            name=note.name(accidental),
            pitch_class=note.pitch_class.spell(accidental),
            octave=note.octave,
            frequency=round(note.frequency(), 3),
        )


class ChordAnalysis(BaseModel):
    """
    Everything the engine found out about a set of notes.

    Mirrors Chord, flattened for JSON: the quality is given both as its
    descriptive value and as the symbol used in chord names.
    """

    kind: ChordKind = Field(..., description="Chord family by size")
    quality: str | None = Field(None, description="Quality (e.g. 'minor', 'dominant 7')")
    symbol: str | None = Field(None, description="Quality symbol (e.g. 'm', '7', 'P5')")
    name: str | None = Field(None, description="Chord name (e.g. 'Cm'), None without a root")
    root: NoteInfo | None = Field(None, description="Harmonic root")
    bass: NoteInfo | None = Field(None, description="Lowest sounding note")
    inversion: int | None = Field(None, ge=0, le=3, description="0 = root position")
    intervals: list[int] = Field(default_factory=list, description="Gaps between distinct notes")
    notes: list[NoteInfo] = Field(default_factory=list, description="Notes as given")
    additions: list[NoteInfo] | None = Field(None, description="Notes outside the skeleton")

    @classmethod
    def from_chord(cls, chord: Chord, accidental: Accidental = Accidental.SHARP) -> ChordAnalysis:
        """Build the analysis view of a classified chord."""

        def info(note: Note | None) -> NoteInfo | None:
            return NoteInfo.from_note(note, accidental) if note is not None else None

        quality = chord.quality
        if quality is None:
            quality_value = None
        elif isinstance(quality, DyadQuality):
            quality_value = f"{quality.kind.value} {quality.number}"
        else:
            quality_value = quality.value

        return cls(
            kind=chord.kind,
            quality=quality_value,
            symbol=quality.symbol if quality is not None else None,
            name=chord.name(accidental),
            root=info(chord.root),
            bass=info(chord.bass),
            inversion=chord.inversion,
            intervals=list(chord.intervals),
            notes=[NoteInfo.from_note(note, accidental) for note in chord.notes],
            additions=(
                [NoteInfo.from_note(note, accidental) for note in chord.additions]
                if chord.additions is not None
                else None
            ),
        )
