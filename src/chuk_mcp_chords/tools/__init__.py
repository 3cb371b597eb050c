"""
MCP tool implementations.

Tools are organized by domain:
- chords - Classification, intervals, naming, note details
- midi - Chord snapshots from MIDI files and voicing export
"""

from chuk_mcp_chords.tools.chords import register_chord_tools
from chuk_mcp_chords.tools.midi import register_midi_tools

__all__ = [
    "register_chord_tools",
    "register_midi_tools",
]
