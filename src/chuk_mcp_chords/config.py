"""
Settings - server defaults loaded from YAML.

A settings file is optional. Missing keys fall back to defaults:

    accidental: flat
    output_dir: output
    ticks_per_beat: 480
    log_level: INFO
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from chuk_mcp_chords.constants import Accidental

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "chords.yaml"
CONFIG_ENV_VAR = "CHUK_MCP_CHORDS_CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ChordSettings(BaseModel):
    """Defaults for naming, MIDI export and logging."""

    accidental: Accidental = Field(Accidental.SHARP, description="Spelling of black keys")
    output_dir: Path = Field(Path("output"), description="Directory for exported MIDI files")
    ticks_per_beat: int = Field(480, gt=0, description="MIDI resolution for exports")
    log_level: str = Field("INFO", description="Root logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}. Expected one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def load(cls, path: Path | None) -> ChordSettings:
        """
        Load settings from a YAML file.

        Args:
            path: Settings file; None or a missing file gives defaults

        Returns:
            Parsed settings

        Raises:
            ValueError: If the file is not a mapping or has invalid values
        """
        if path is None or not path.exists():
            return cls()

        with open(path) as f:
            data: Any = yaml.safe_load(f)

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Settings file must contain a mapping: {path}")

        logger.debug(f"Loaded settings from {path}")
        return cls.model_validate(data)

    def apply_logging(self) -> None:
        """Set the root logger to the configured level."""
        logging.getLogger().setLevel(getattr(logging, self.log_level))
