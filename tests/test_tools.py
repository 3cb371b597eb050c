"""
Tests for MCP tools.

Tests the MCP tool implementations for chord analysis and MIDI
import/export.
"""

import json
from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_chords.config import ChordSettings
from chuk_mcp_chords.core import Note
from chuk_mcp_chords.midi import voicing_to_midi
from chuk_mcp_chords.tools import register_chord_tools, register_midi_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def settings(temp_dir: Path) -> ChordSettings:
    """Settings writing exports to a temporary directory."""
    return ChordSettings(output_dir=temp_dir / "output")


class TestChordTools:
    """Tests for chord analysis tools."""

    def test_registers_tools(self, settings: ChordSettings) -> None:
        """All chord tools are registered with the server."""
        mcp = MockMCPServer("test")
        tools = register_chord_tools(mcp, settings)

        assert set(tools) == {
            "chord_classify",
            "chord_intervals",
            "chord_name",
            "chord_describe_note",
        }
        assert set(mcp.tools) == set(tools)

    @pytest.mark.asyncio
    async def test_classify(self, settings: ChordSettings) -> None:
        """Classify an inverted triad."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        result = await tools["chord_classify"](notes=["E4", "G4", "C5"])
        data = json.loads(result)

        assert data["status"] == "success"
        chord = data["chord"]
        assert chord["kind"] == "triad"
        assert chord["quality"] == "major"
        assert chord["name"] == "C"
        assert chord["root"]["name"] == "C5"
        assert chord["inversion"] == 1
        assert chord["intervals"] == [3, 5]
        assert chord["additions"] is None

    @pytest.mark.asyncio
    async def test_classify_midi_numbers(self, settings: ChordSettings) -> None:
        """MIDI numbers and names can be mixed."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        result = await tools["chord_classify"](notes=[60, "D4", 64, 67])
        data = json.loads(result)

        assert data["status"] == "success"
        assert data["chord"]["name"] == "C"
        assert [n["name"] for n in data["chord"]["additions"]] == ["D4"]

    @pytest.mark.asyncio
    async def test_classify_flat_spelling(self, settings: ChordSettings) -> None:
        """The accidental argument changes the spelling."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        result = await tools["chord_classify"](notes=["C#4", "E4", "G#4"], accidental="flat")
        data = json.loads(result)

        assert data["chord"]["name"] == "Dbm"
        assert data["chord"]["root"]["pitch_class"] == "Db"

    @pytest.mark.asyncio
    async def test_classify_dyad(self, settings: ChordSettings) -> None:
        """Dyads report their interval."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        result = await tools["chord_classify"](notes=["C4", "G4"])
        data = json.loads(result)

        assert data["chord"]["kind"] == "dyad"
        assert data["chord"]["quality"] == "perfect 5"
        assert data["chord"]["symbol"] == "P5"

    @pytest.mark.asyncio
    async def test_classify_silence(self, settings: ChordSettings) -> None:
        """No notes is silence, not an error."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_classify"](notes=[]))

        assert data["status"] == "success"
        assert data["chord"]["kind"] == "silence"
        assert data["chord"]["root"] is None

    @pytest.mark.asyncio
    async def test_classify_invalid_note(self, settings: ChordSettings) -> None:
        """Bad note names give an error envelope."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_classify"](notes=["H4"]))

        assert data["status"] == "error"
        assert "Unknown note name" in data["message"]

    @pytest.mark.asyncio
    async def test_classify_out_of_range(self, settings: ChordSettings) -> None:
        """MIDI numbers outside 0-127 give an error envelope."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_classify"](notes=[60, 128]))

        assert data["status"] == "error"
        assert "0-127" in data["message"]

    @pytest.mark.asyncio
    async def test_intervals(self, settings: ChordSettings) -> None:
        """Intervals follow the given order."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_intervals"](notes=["C4", "E4", "G4", "C5"]))

        assert data["status"] == "success"
        assert data["intervals"] == [4, 3, 5]

    @pytest.mark.asyncio
    async def test_name(self, settings: ChordSettings) -> None:
        """Name a seventh chord."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_name"](notes=["Bb3", "C4", "E4", "G4"]))

        assert data["status"] == "success"
        assert data["name"] == "C7"

    @pytest.mark.asyncio
    async def test_name_without_root(self, settings: ChordSettings) -> None:
        """Chords without a root have a null name."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_name"](notes=["C4", "D4", "E4"]))

        assert data["status"] == "success"
        assert data["name"] is None

    @pytest.mark.asyncio
    async def test_name_uses_settings_spelling(self, temp_dir: Path) -> None:
        """Without an accidental argument, the settings decide."""
        settings = ChordSettings(accidental="flat", output_dir=temp_dir)
        tools = register_chord_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_name"](notes=["F#3", "A#3", "C#4"]))

        assert data["name"] == "Gb"

    @pytest.mark.asyncio
    async def test_name_bad_accidental(self, settings: ChordSettings) -> None:
        """Unknown accidentals give an error envelope."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_name"](notes=["C4"], accidental="natural"))

        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_describe_note(self, settings: ChordSettings) -> None:
        """Describe concert A."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_describe_note"](note="A4"))

        assert data["status"] == "success"
        assert data["note"]["midi"] == 69
        assert data["note"]["octave"] == 4
        assert data["note"]["frequency"] == 440.0
        assert data["piano_key"] == 49
        assert data["organ_key"] == 34

    @pytest.mark.asyncio
    async def test_describe_note_off_the_keyboard(self, settings: ChordSettings) -> None:
        """Notes outside an instrument's range have no key number there."""
        tools = register_chord_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_describe_note"](note=12))

        assert data["status"] == "success"
        assert data["note"]["name"] == "C0"
        assert data["piano_key"] is None
        assert data["organ_key"] is None


class TestMidiTools:
    """Tests for MIDI tools."""

    def test_registers_tools(self, settings: ChordSettings) -> None:
        """All MIDI tools are registered with the server."""
        mcp = MockMCPServer("test")
        tools = register_midi_tools(mcp, settings)

        assert set(tools) == {"chord_classify_midi", "chord_export_midi"}

    @pytest.mark.asyncio
    async def test_classify_midi(self, settings: ChordSettings, temp_midi_path: Path) -> None:
        """Classify the chord held in a MIDI file."""
        notes = [Note.parse(name) for name in ("G3", "C4", "E4")]
        voicing_to_midi(notes, beats=4).save(str(temp_midi_path))
        tools = register_midi_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_classify_midi"](path=str(temp_midi_path), beat=2))

        assert data["status"] == "success"
        assert data["tick"] == 960
        assert data["chord"]["name"] == "C"
        assert data["chord"]["inversion"] == 2

    @pytest.mark.asyncio
    async def test_classify_midi_nothing_sounding(
        self, settings: ChordSettings, temp_midi_path: Path
    ) -> None:
        """A beat after the chord has ended is an error."""
        voicing_to_midi([Note(60)], beats=1).save(str(temp_midi_path))
        tools = register_midi_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_classify_midi"](path=str(temp_midi_path), beat=8))

        assert data["status"] == "error"
        assert "No notes sounding" in data["message"]

    @pytest.mark.asyncio
    async def test_classify_midi_missing_file(
        self, settings: ChordSettings, temp_dir: Path
    ) -> None:
        """A missing file gives an error envelope."""
        tools = register_midi_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_classify_midi"](path=str(temp_dir / "none.mid")))

        assert data["status"] == "error"
        assert "not found" in data["message"]

    @pytest.mark.asyncio
    async def test_export_midi(self, settings: ChordSettings) -> None:
        """Export names the file after the chord."""
        tools = register_midi_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_export_midi"](notes=["C#4", "E4", "G#4"]))

        assert data["status"] == "success"
        path = Path(data["path"])
        assert path == settings.output_dir / "Csm.mid"
        assert path.exists()

        loaded = MidiFile(str(path))
        note_ons = [msg for msg in loaded.tracks[0] if msg.type == "note_on"]
        assert [msg.note for msg in note_ons] == [61, 64, 68]

    @pytest.mark.asyncio
    async def test_export_midi_custom_name(self, settings: ChordSettings) -> None:
        """An explicit output name wins."""
        tools = register_midi_tools(MockMCPServer("test"), settings)

        data = json.loads(
            await tools["chord_export_midi"](notes=["C4", "D4", "E4"], output_name="cluster")
        )

        assert data["status"] == "success"
        assert Path(data["path"]).name == "cluster.mid"

    @pytest.mark.asyncio
    async def test_export_midi_without_name(self, settings: ChordSettings) -> None:
        """Chords without a name fall back to a generic file name."""
        tools = register_midi_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_export_midi"](notes=["C4", "D4", "E4"]))

        assert Path(data["path"]).name == "chord.mid"

    @pytest.mark.asyncio
    async def test_export_midi_bad_length(self, settings: ChordSettings) -> None:
        """Non-positive lengths give an error envelope."""
        tools = register_midi_tools(MockMCPServer("test"), settings)

        data = json.loads(await tools["chord_export_midi"](notes=["C4"], beats=0))

        assert data["status"] == "error"
        assert "Beats must be positive" in data["message"]
