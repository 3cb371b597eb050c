#!/usr/bin/env python3
"""
Example: Export chord voicings to MIDI and read them back.

Each voicing becomes a one-chord MIDI file you can open in any DAW.
The files are then reloaded and the chord at beat 1 is classified
again from the MIDI data.

Usage:
    python examples/export_voicing.py
    # Creates: examples/output/*.mid
"""

from pathlib import Path

from chuk_mcp_chords import classify, parse_notes
from chuk_mcp_chords.midi import beats_to_ticks, load_midi, notes_sounding_at, voicing_to_midi

VOICINGS = [
    ["C4", "E4", "G4", "Bb4"],
    ["A3", "C4", "E4", "G4"],
    ["F#3", "A3", "C4", "E4"],
    [52, 55, 60],
]


def main() -> None:
    """Write each voicing to a file, then classify it from the file."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    for voicing in VOICINGS:
        notes = parse_notes(voicing)
        chord = classify(notes)
        stem = (chord.name() or "chord").replace("#", "s")
        path = output_dir / f"{stem}.mid"

        voicing_to_midi(notes, beats=4, tempo_bpm=90).save(str(path))
        print(f"Created: {path}")

        sounding = notes_sounding_at(load_midi(path), beats_to_ticks(1))
        print(f"  read back: {[str(n) for n in sounding]} -> {classify(sounding).name()}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()
