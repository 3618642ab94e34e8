# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors
"""Allow ``python -m natives_dts``."""

from __future__ import annotations

from .cli import app

if __name__ == "__main__":
    app()
