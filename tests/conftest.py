# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""Shared pytest fixtures."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from natives_dts.logging import ConsoleLogger


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """Return a small catalog with one documented and one undocumented native."""
    return {
        "ENTITY": {
            "0x3FEF770D40960D5A": {
                "name": "GET_ENTITY_COORDS",
                "params": [
                    {"name": "entity", "type": "Entity", "ref": False},
                    {"name": "alive", "type": "BOOL", "ref": False},
                ],
                "results": "Vector3",
                "comment": "Gets the current coordinates for a specified entity.\n\nReturns */ nothing odd.",
            },
        },
        "PLAYER": {
            "0xD80958FC74E988A6": {
                "name": "_GET_PLAYER_PED_SCRIPT_INDEX",
                "params": [{"name": "player", "type": "Player", "ref": False}],
                "results": "[Ped]",
                "comment": "",
            },
        },
    }


@pytest.fixture
def write_catalog(tmp_path: Path):
    """Return a helper writing a catalog document below ``tmp_path``."""

    def _write(document: Any, name: str = "natives.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def log_stream() -> io.StringIO:
    """Return the buffer backing the ``logger`` fixture."""
    return io.StringIO()


@pytest.fixture
def logger(log_stream: io.StringIO) -> ConsoleLogger:
    """Return a logger writing plain text into ``log_stream``."""
    console = Console(file=log_stream, no_color=True, highlight=False, soft_wrap=True, width=200)
    return ConsoleLogger(console=console, use_emoji=False, debug_enabled=True)
