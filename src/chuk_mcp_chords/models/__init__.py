"""
Pydantic models for the chord system.

This module provides:
- NoteInfo: A note with its names and frequency
- ChordAnalysis: JSON-ready view of a classified chord
"""

from chuk_mcp_chords.models.analysis import ChordAnalysis, NoteInfo

__all__ = [
    "ChordAnalysis",
    "NoteInfo",
]
