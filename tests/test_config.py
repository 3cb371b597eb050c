"""
Tests for server settings.
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_chords.config import ChordSettings
from chuk_mcp_chords.constants import Accidental


class TestChordSettings:
    """Test ChordSettings defaults and validation."""

    def test_defaults(self) -> None:
        """Defaults spell with sharps and write to ./output."""
        settings = ChordSettings()
        assert settings.accidental == Accidental.SHARP
        assert settings.output_dir == Path("output")
        assert settings.ticks_per_beat == 480
        assert settings.log_level == "INFO"

    def test_log_level_normalised(self) -> None:
        """Log levels are case-insensitive."""
        assert ChordSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        """Unknown log levels are rejected."""
        with pytest.raises(ValidationError, match="Unknown log level"):
            ChordSettings(log_level="chatty")

    def test_invalid_ticks_per_beat(self) -> None:
        """Resolution must be positive."""
        with pytest.raises(ValidationError):
            ChordSettings(ticks_per_beat=0)

    def test_apply_logging(self) -> None:
        """The root logger follows the configured level."""
        root = logging.getLogger()
        previous = root.level
        try:
            ChordSettings(log_level="WARNING").apply_logging()
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)


class TestLoadSettings:
    """Test loading settings from YAML."""

    def test_no_path(self) -> None:
        """No path gives defaults."""
        assert ChordSettings.load(None) == ChordSettings()

    def test_missing_file(self, temp_dir: Path) -> None:
        """A missing file gives defaults."""
        assert ChordSettings.load(temp_dir / "chords.yaml") == ChordSettings()

    def test_empty_file(self, temp_dir: Path) -> None:
        """An empty file gives defaults."""
        path = temp_dir / "chords.yaml"
        path.write_text("")
        assert ChordSettings.load(path) == ChordSettings()

    def test_load_values(self, temp_dir: Path) -> None:
        """Values in the file override defaults."""
        path = temp_dir / "chords.yaml"
        path.write_text("accidental: flat\noutput_dir: exports\nticks_per_beat: 960\n")

        settings = ChordSettings.load(path)
        assert settings.accidental == Accidental.FLAT
        assert settings.output_dir == Path("exports")
        assert settings.ticks_per_beat == 960
        assert settings.log_level == "INFO"

    def test_not_a_mapping(self, temp_dir: Path) -> None:
        """A list at the top level is rejected."""
        path = temp_dir / "chords.yaml"
        path.write_text("- flat\n- sharp\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            ChordSettings.load(path)

    def test_invalid_value(self, temp_dir: Path) -> None:
        """Bad values surface as validation errors."""
        path = temp_dir / "chords.yaml"
        path.write_text("accidental: natural\n")

        with pytest.raises(ValidationError):
            ChordSettings.load(path)
