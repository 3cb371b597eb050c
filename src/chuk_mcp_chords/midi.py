"""
MIDI snapshots - the notes held at one instant, and chords back to MIDI.

Reading takes a single vertical slice of a file: every note whose
note_on has happened and whose note_off hasn't. Writing renders a chord
voicing as one block of simultaneous notes using mido.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from pathlib import Path

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_chords.core.pitch import Note

logger = logging.getLogger(__name__)

# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

DEFAULT_VELOCITY = 100


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)


def load_midi(path: Path) -> MidiFile:
    """
    Open a MIDI file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    if not path.exists():
        raise FileNotFoundError(f"MIDI file not found: {path}")
    return MidiFile(str(path))


def notes_sounding_at(midi: MidiFile, tick: int, channel: int | None = None) -> list[Note]:
    """
    Collect the notes held at an absolute tick, across all tracks.

    A note sounds from its note_on up to, not including, its note_off.
    A note_on with velocity 0 counts as a note_off.

    Args:
        midi: The MIDI file
        tick: Absolute position in ticks
        channel: Only look at this channel (0-15); None for all

    Returns:
        Distinct sounding notes, lowest first
    """
    sounding: set[int] = set()

    for track in midi.tracks:
        held: Counter[int] = Counter()
        position = 0
        for msg in track:
            position += msg.time
            if position > tick:
                break
            if msg.type not in ("note_on", "note_off"):
                continue
            if channel is not None and msg.channel != channel:
                continue

            if msg.type == "note_on" and msg.velocity > 0:
                held[msg.note] += 1
            elif held[msg.note] > 0:
                held[msg.note] -= 1

        sounding.update(pitch for pitch, count in held.items() if count > 0)

    logger.debug(f"{len(sounding)} notes sounding at tick {tick}")
    return [Note.from_ordinal(pitch) for pitch in sorted(sounding)]


def voicing_to_midi(
    notes: Sequence[Note],
    beats: float = 4.0,
    velocity: int = DEFAULT_VELOCITY,
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
    channel: int = 0,
) -> MidiFile:
    """
    Render notes as one block chord.

    Args:
        notes: Notes to sound together; duplicates are played once
        beats: Length of the chord in beats
        velocity: Note-on velocity (1-127)
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)
        channel: MIDI channel (0-15)

    Returns:
        A mido MidiFile ready to be saved

    This function is deterministic: same notes -> same MIDI file.
    """
    if beats <= 0:
        raise ValueError(f"Beats must be positive, got {beats}")
    if not 1 <= velocity <= 127:
        raise ValueError(f"Velocity must be 1-127, got {velocity}")
    if not 0 <= channel <= 15:
        raise ValueError(f"Channel must be 0-15, got {channel}")

    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Set tempo (microseconds per beat)
    track.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))

    pitches = sorted({note.midi for note in notes})
    for pitch in pitches:
        track.append(Message("note_on", channel=channel, note=pitch, velocity=velocity, time=0))

    # First note_off carries the whole duration as its delta, the rest follow at once
    duration = beats_to_ticks(beats, ticks_per_beat)
    for index, pitch in enumerate(pitches):
        track.append(
            Message(
                "note_off",
                channel=channel,
                note=pitch,
                velocity=0,
                time=duration if index == 0 else 0,
            )
        )

    track.append(MetaMessage("end_of_track", time=0))
    return mid
