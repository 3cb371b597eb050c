"""
MIDI tools - MCP tools for reading chords from and writing chords to MIDI.

Reading looks at a single instant of a file; it does not follow a
progression through time.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.config import ChordSettings
from chuk_mcp_chords.constants import ErrorMessages
from chuk_mcp_chords.core.pitch import parse_notes
from chuk_mcp_chords.inference import classify
from chuk_mcp_chords.midi import beats_to_ticks, load_midi, notes_sounding_at, voicing_to_midi
from chuk_mcp_chords.models import ChordAnalysis

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_midi_tools(mcp: ChukMCPServer, settings: ChordSettings) -> dict[str, Any]:
    """
    Register MIDI import/export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        settings: Server settings (output directory, resolution, spelling)

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_classify_midi(
        path: str,
        beat: float = 0.0,
        channel: int | None = None,
    ) -> str:
        """
        Identify the chord sounding at a beat in a MIDI file.

        Collects every note held at that instant across all tracks
        and classifies them together.

        Args:
            path: Path to a .mid file
            beat: Position in beats from the start (quarter notes)
            channel: Only consider this MIDI channel (0-15)

        Returns:
            JSON string with the sounding notes and chord analysis

        Example:
            chord_classify_midi(path="song.mid", beat=8)
        """
        try:
            midi = load_midi(Path(path))
            tick = beats_to_ticks(beat, midi.ticks_per_beat)
            notes = notes_sounding_at(midi, tick, channel)
            if not notes:
                message = ErrorMessages.NO_NOTES_SOUNDING.format(beat=beat)
                return json.dumps({"status": "error", "message": message})

            analysis = ChordAnalysis.from_chord(classify(notes), settings.accidental)
            return json.dumps(
                {
                    "status": "success",
                    "beat": beat,
                    "tick": tick,
                    "chord": analysis.model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to classify MIDI snapshot")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_classify_midi"] = chord_classify_midi

    @mcp.tool  # type: ignore[arg-type]
    async def chord_export_midi(
        notes: list[str | int],
        output_name: str | None = None,
        beats: float = 4.0,
    ) -> str:
        """
        Write a chord voicing to a MIDI file.

        All notes start together and last the given number of beats,
        ready to audition in any DAW.

        Args:
            notes: Note names or MIDI numbers
            output_name: Output filename without .mid (default: the chord name)
            beats: Chord length in beats

        Returns:
            JSON string with the file path and chord analysis

        Example:
            chord_export_midi(notes=["C3", "G3", "E4", "Bb4"], output_name="c7-spread")
        """
        try:
            parsed = parse_notes(notes)
            chord = classify(parsed)
            midi = voicing_to_midi(parsed, beats=beats, ticks_per_beat=settings.ticks_per_beat)

            stem = output_name or chord.name(settings.accidental) or "chord"
            output_dir = settings.output_dir
            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_dir / f"{stem.replace('#', 's')}.mid"
            midi.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "chord": ChordAnalysis.from_chord(chord, settings.accidental).model_dump(
                        mode="json"
                    ),
                    "message": f"Wrote {len(chord.unique_notes)} notes to {output_path}",
                }
            )
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_export_midi"] = chord_export_midi

    return tools
