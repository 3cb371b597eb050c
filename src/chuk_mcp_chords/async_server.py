#!/usr/bin/env python3
"""
Async Chord MCP Server using chuk-mcp-server

This server provides MCP tools for recognising chords from sets of notes.
Give it any notes - in any order, with doublings, in any inversion - and it
works out the quality, the root and the notes that don't belong.

The server provides tools for:
- Classifying note sets into chords (quality, root, inversion, additions)
- Raw interval analysis
- Chord and note naming with sharp or flat spelling
- Reading the chord sounding at a point in a MIDI file
- Exporting chord voicings to MIDI files
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chords.config import CONFIG_ENV_VAR, DEFAULT_CONFIG_NAME, ChordSettings
from chuk_mcp_chords.tools import register_chord_tools, register_midi_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chords")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
CONFIG_PATH = Path(os.environ.get(CONFIG_ENV_VAR, BASE_PATH / DEFAULT_CONFIG_NAME))

settings = ChordSettings.load(CONFIG_PATH)
settings.apply_logging()

# Register all tools
chord_tools = register_chord_tools(mcp, settings)
midi_tools = register_midi_tools(mcp, settings)

# Export tool functions for direct access
chord_classify = chord_tools["chord_classify"]
chord_intervals = chord_tools["chord_intervals"]
chord_name = chord_tools["chord_name"]
chord_describe_note = chord_tools["chord_describe_note"]

chord_classify_midi = midi_tools["chord_classify_midi"]
chord_export_midi = midi_tools["chord_export_midi"]

logger.info("CHUK Chords MCP Server initialized")
logger.info(f"  Config: {CONFIG_PATH if CONFIG_PATH.exists() else 'defaults'}")
logger.info(f"  Output dir: {settings.output_dir}")
