#!/usr/bin/env python3
"""
Example: Identify chords from sets of notes.

Walks through a handful of voicings (inversions, doubled roots, added
notes and clusters) and prints what the engine makes of each.

Usage:
    python examples/classify_chords.py
"""

from chuk_mcp_chords import Accidental, Note, classify

VOICINGS: dict[str, tuple[str, ...]] = {
    "C major, root position": ("C4", "E4", "G4"),
    "C major, first inversion": ("E4", "G4", "C5"),
    "C major, second inversion": ("G3", "C4", "E4"),
    "C major, doubled bass": ("C3", "C4", "E4", "G4"),
    "C major, added ninth": ("C4", "D4", "E4", "G4"),
    "C dominant 7, third inversion": ("Bb3", "C4", "E4", "G4"),
    "B half-diminished": ("B3", "D4", "F4", "A4"),
    "Db minor": ("C#4", "E4", "G#4"),
    "Perfect fifth": ("C4", "G4"),
    "Cluster": ("C4", "D4", "E4"),
    "Quartal stack": ("C4", "F4", "B4", "E5"),
}


def main() -> None:
    """Classify each voicing and print a one-line summary."""
    for label, names in VOICINGS.items():
        chord = classify([Note.parse(name) for name in names])
        additions = ", ".join(str(note) for note in chord.additions or ()) or "-"

        print(f"{label}")
        print(f"  notes:     {' '.join(names)}")
        print(f"  type:      {chord.chord_type}")
        print(f"  name:      {chord.name()} / {chord.name(Accidental.FLAT)}")
        print(f"  root:      {chord.root}")
        print(f"  inversion: {chord.inversion}")
        print(f"  additions: {additions}")
        print()


if __name__ == "__main__":
    main()
