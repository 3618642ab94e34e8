# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors
"""Generate TypeScript declarations for the natives catalog."""

from __future__ import annotations

from importlib import metadata

__all__ = ["__version__"]

try:
    __version__ = metadata.version("natives-dts")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
