# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""Shared type aliases and constants for the natives generator."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

NATIVEDB_URL: Final[str] = "https://natives.altv.mp/natives"
NATIVEDB_CACHE_FILE: Final[Path] = Path("natives.json")
NATIVEDB_PREVIOUS_CACHE_FILE: Final[Path] = Path("natives.release-old.json")
OUTPUT_FILE: Final[Path] = Path("dist") / "index.d.ts"

VOID_TYPE: Final[str] = "void"

__all__ = [
    "NATIVEDB_CACHE_FILE",
    "NATIVEDB_PREVIOUS_CACHE_FILE",
    "NATIVEDB_URL",
    "OUTPUT_FILE",
    "VOID_TYPE",
    "JSONPrimitive",
    "JSONValue",
]
