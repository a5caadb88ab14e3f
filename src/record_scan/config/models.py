from __future__ import annotations

import codecs
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Config models map YAML sections to typed structures.

# ASCII, Latin-1, euro sign and a CJK ideograph: multi-byte codecs grow it, single-byte ones do not.
_LAYOUT_SAMPLE = "A\u00e9\u20ac\u65e5"


class SourceConfig(BaseModel):
    # Input file settings; path may come from the CLI instead.
    model_config = ConfigDict(extra="forbid")
    path: str | None = None
    dataset_name: str | None = None
    encoding: str = "latin-1"

    @field_validator("encoding")
    @classmethod
    def _single_byte_codec(cls, value: str) -> str:
        # Unknown codecs fail at load time rather than on the first read.
        try:
            codecs.lookup(value)
            sample = _LAYOUT_SAMPLE.encode(value, errors="replace")
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        # The fixed layout needs one byte per character.
        if len(sample) != len(_LAYOUT_SAMPLE):
            raise ValueError(f"encoding {value} is not one byte per character")
        return value


class DisplayConfig(BaseModel):
    # Display goes to stdout unless a file path is set.
    model_config = ConfigDict(extra="forbid")
    file_path: str | None = None


class LoggingConfig(BaseModel):
    # Structured log sink selection.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stderr", "jsonl", "none"] = "stderr"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    source: SourceConfig = Field(default_factory=SourceConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
