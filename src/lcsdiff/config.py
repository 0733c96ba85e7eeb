"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str  = "lcsdiff"
    encoding:      str  = Field(default="utf-8", description="Text encoding used to read input files")
    output_format: str  = Field(default="text", pattern="^(text|json)$", description="text or json")
    color:         bool = Field(default=False, description="Highlight changes with ANSI colours")
    word_diff:     bool = Field(default=True,  description="Word-level highlighting for modified pairs")
    show_summary:  bool = Field(default=True,  description="Print the summary line after the diff")
    max_lines:     int  = Field(default=0, ge=0, description="Max lines per input; 0 = unlimited")
    log_level:     str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then LCSDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"LCSDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
