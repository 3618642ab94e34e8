# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""End-to-end tests for the generation pipeline."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

from natives_dts import loader
from natives_dts.config import GeneratorConfig
from natives_dts.errors import FormatError
from natives_dts.logging import ConsoleLogger
from natives_dts.modes import GenerationMode
from natives_dts.pipeline import generate


def _config(tmp_path: Path, cache: Path, **overrides: Any) -> GeneratorConfig:
    return GeneratorConfig(
        source_url="https://example.invalid/natives",
        cache_path=cache,
        previous_cache_path=tmp_path / "natives.release-old.json",
        output_path=tmp_path / "dist" / "index.d.ts",
        **overrides,
    )


def test_two_entry_catalog_produces_one_module(
    tmp_path: Path,
    write_catalog,
    sample_document: dict[str, Any],
    logger: ConsoleLogger,
) -> None:
    config = _config(tmp_path, write_catalog(sample_document))
    result = generate(config, logger=logger, generated_at=datetime(2026, 1, 2, 3, 4, 5))

    text = result.output_path.read_text(encoding="utf-8")
    assert result.native_count == 2
    assert text.count('declare module "@altv/natives" {') == 1
    assert text.count("export function") == 2
    assert (
        "  /**\n"
        "   * Gets the current coordinates for a specified entity.\n"
        "   * Returns *\\/ nothing odd.\n"
        "   */\n"
        "  export function getEntityCoords(entity: Entity | number, alive: BOOL): Vector3;\n"
        "\n"
        "  export function getPlayerPedScriptIndex(player: Player | number): Ped | Player | number;\n"
        "}\n"
    ) in text
    assert result.new_natives == ("getEntityCoords", "getPlayerPedScriptIndex")


def test_repeated_runs_are_identical_apart_from_timestamp(
    tmp_path: Path,
    write_catalog,
    sample_document: dict[str, Any],
    logger: ConsoleLogger,
) -> None:
    config = _config(tmp_path, write_catalog(sample_document))
    first = generate(config, logger=logger, generated_at=datetime(2026, 1, 1)).output_path.read_text(encoding="utf-8")
    second = generate(config, logger=logger, generated_at=datetime(2026, 2, 2)).output_path.read_text(encoding="utf-8")
    assert first != second
    assert first.splitlines()[1:] == second.splitlines()[1:]


def test_legacy_mode_layout(
    tmp_path: Path,
    write_catalog,
    logger: ConsoleLogger,
) -> None:
    document = {"MISC": {"0x1": {"name": "WAIT", "params": [], "results": "[void]", "comment": "a\n\nb"}}}
    config = _config(tmp_path, write_catalog(document), mode=GenerationMode.LEGACY, report_new=False)
    text = generate(config, logger=logger).output_path.read_text(encoding="utf-8")
    assert 'declare module "natives" {' in text
    assert "   * a\n   * \n   * b\n   */\n  export function wait(): void;" in text


def test_format_error_leaves_previous_output(
    tmp_path: Path,
    write_catalog,
    logger: ConsoleLogger,
) -> None:
    document = {
        "MISC": {
            "0x1": {"name": "WAIT", "params": [], "results": "void", "comment": ""},
            "0x2": {"name": "BROKEN", "params": [], "results": "[int", "comment": ""},
        },
    }
    config = _config(tmp_path, write_catalog(document))
    config.output_path.parent.mkdir(parents=True)
    config.output_path.write_text("previous", encoding="utf-8")
    with pytest.raises(FormatError, match="BROKEN"):
        generate(config, logger=logger)
    assert config.output_path.read_text(encoding="utf-8") == "previous"


def test_generate_fetches_when_cache_missing(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    logger: ConsoleLogger,
) -> None:
    body = b'{"MISC": {"0x1": {"name": "GET_GAME_TIMER", "params": [], "results": "int", "comment": ""}}}'
    monkeypatch.setattr(loader, "fetch_document", lambda url: body)
    config = _config(tmp_path, tmp_path / "natives.json", report_new=False)
    text = generate(config, logger=logger).output_path.read_text(encoding="utf-8")
    assert "export function getGameTimer(): number;" in text
    assert config.cache_path.read_bytes() == body


def test_config_from_flags_selects_mode_only() -> None:
    assert GeneratorConfig.from_flags(legacy=True).mode is GenerationMode.LEGACY
    assert GeneratorConfig.from_flags(legacy=False).mode is GenerationMode.CURRENT
    assert set(GeneratorConfig.model_fields) == {
        "source_url",
        "cache_path",
        "previous_cache_path",
        "output_path",
        "mode",
        "report_new",
        "emoji",
    }
