# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors
"""Configuration model for a generation run."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .modes import GenerationMode
from .types import NATIVEDB_CACHE_FILE, NATIVEDB_PREVIOUS_CACHE_FILE, NATIVEDB_URL, OUTPUT_FILE


class GeneratorConfig(BaseModel):
    """Locations and switches for one generation run.

    Paths default to the fixed, working-directory relative locations used by
    the command line tool.
    """

    model_config = ConfigDict(validate_assignment=True)

    source_url: str = NATIVEDB_URL
    cache_path: Path = NATIVEDB_CACHE_FILE
    previous_cache_path: Path = NATIVEDB_PREVIOUS_CACHE_FILE
    output_path: Path = OUTPUT_FILE
    mode: GenerationMode = GenerationMode.CURRENT
    report_new: bool = True
    emoji: bool = True

    @classmethod
    def from_flags(cls, *, legacy: bool) -> GeneratorConfig:
        """Return the configuration selected by the CLI flags."""

        return cls(mode=GenerationMode.from_flag(legacy))


__all__ = ["GeneratorConfig"]
