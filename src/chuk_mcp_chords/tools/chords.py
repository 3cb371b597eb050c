"""
Chord tools - MCP tools for chord classification and naming.

Notes are passed as names ('C4', 'F#3', 'Bb2') or MIDI numbers (60).
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.config import ChordSettings
from chuk_mcp_chords.constants import Accidental
from chuk_mcp_chords.core.pitch import Note, parse_notes
from chuk_mcp_chords.errors import OutOfInstrumentRangeError
from chuk_mcp_chords.inference import classify, intervals_of, name_of
from chuk_mcp_chords.models import ChordAnalysis, NoteInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(mcp: ChukMCPServer, settings: ChordSettings) -> dict[str, Any]:
    """
    Register chord analysis tools with the MCP server.

    Args:
        mcp: The MCP server instance
        settings: Server settings (default accidental spelling)

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def resolve_accidental(accidental: str | None) -> Accidental:
        return Accidental(accidental) if accidental else settings.accidental

    @mcp.tool  # type: ignore[arg-type]
    async def chord_classify(
        notes: list[str | int],
        accidental: str | None = None,
    ) -> str:
        """
        Identify the chord formed by a set of notes.

        Works out the quality, the root, the inversion and any notes
        that don't belong to the chord. Order and duplicates don't matter.

        Args:
            notes: Note names or MIDI numbers (e.g. ["E4", "G4", "C5"])
            accidental: "sharp" or "flat" spelling (default from settings)

        Returns:
            JSON string with the chord analysis

        Example:
            chord_classify(notes=["C4", "E4", "G4", "Bb4"])
        """
        try:
            spelling = resolve_accidental(accidental)
            chord = classify(parse_notes(notes))
            analysis = ChordAnalysis.from_chord(chord, spelling)

            return json.dumps(
                {
                    "status": "success",
                    "chord": analysis.model_dump(mode="json"),
                    "message": f"Identified {analysis.name or chord.kind.value}",
                }
            )
        except Exception as e:
            logger.exception("Failed to classify chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_classify"] = chord_classify

    @mcp.tool  # type: ignore[arg-type]
    async def chord_intervals(notes: list[str | int]) -> str:
        """
        Get the semitone gaps between consecutive notes.

        Notes are taken in the order given, so pass them lowest first.

        Args:
            notes: Note names or MIDI numbers

        Returns:
            JSON string with the list of intervals

        Example:
            chord_intervals(notes=["C4", "E4", "G4"])
        """
        try:
            intervals = intervals_of(parse_notes(notes))
            return json.dumps({"status": "success", "intervals": intervals})
        except Exception as e:
            logger.exception("Failed to compute intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_intervals"] = chord_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def chord_name(
        notes: list[str | int],
        accidental: str | None = None,
    ) -> str:
        """
        Get the chord symbol for a set of notes (e.g. "Cm7").

        Args:
            notes: Note names or MIDI numbers
            accidental: "sharp" or "flat" spelling (default from settings)

        Returns:
            JSON string with the name, or null when no root was found

        Example:
            chord_name(notes=["C#4", "E4", "G#4"], accidental="flat")
        """
        try:
            name = name_of(classify(parse_notes(notes)), resolve_accidental(accidental))
            return json.dumps({"status": "success", "name": name})
        except Exception as e:
            logger.exception("Failed to name chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_name"] = chord_name

    @mcp.tool  # type: ignore[arg-type]
    async def chord_describe_note(note: str | int, accidental: str | None = None) -> str:
        """
        Describe a single note: names, octave, frequency and keyboard positions.

        Args:
            note: Note name or MIDI number (e.g. "A4" or 69)
            accidental: "sharp" or "flat" spelling (default from settings)

        Returns:
            JSON string with note details

        Example:
            chord_describe_note(note="A4")
        """
        try:
            spelling = resolve_accidental(accidental)
            parsed = parse_notes([note])[0]
            return json.dumps(
                {
                    "status": "success",
                    "note": NoteInfo.from_note(parsed, spelling).model_dump(mode="json"),
                    "piano_key": _key_number_or_none(parsed, "piano"),
                    "organ_key": _key_number_or_none(parsed, "organ"),
                }
            )
        except Exception as e:
            logger.exception("Failed to describe note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_describe_note"] = chord_describe_note

    return tools


def _key_number_or_none(note: Note, instrument: str) -> int | None:
    """Keyboard position, or None when the instrument doesn't reach the note."""
    try:
        if instrument == "piano":
            return note.piano_key_number()
        return note.organ_key_number()
    except OutOfInstrumentRangeError:
        return None
