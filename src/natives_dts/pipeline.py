# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""End-to-end generation: load, report, synthesize, emit."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .config import GeneratorConfig
from .diff import report_new_natives
from .emitter import emit
from .loader import load_catalog
from .logging import ConsoleLogger
from .synthesizer import synthesize_catalog
from .typemap import DEFAULT_TYPE_MAP, TypeMap


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Summary of a completed run."""

    output_path: Path
    native_count: int
    new_natives: tuple[str, ...] = ()


def generate(
    config: GeneratorConfig,
    *,
    logger: ConsoleLogger,
    type_map: TypeMap = DEFAULT_TYPE_MAP,
    generated_at: datetime | None = None,
) -> GenerationResult:
    """Run the full pipeline described by ``config``.

    Every native is rendered before the output file is touched, so a failure
    leaves any previous output in place.

    Args:
        config: Paths, source URL and mode for the run.
        logger: Logger receiving progress and the new-natives report.
        type_map: Type substitutions to apply.
        generated_at: Banner timestamp; defaults to now.

    Returns:
        GenerationResult: Output location and counts.

    Raises:
        NativesError: Any loader, format or write failure.
    """

    catalog = load_catalog(config.cache_path, config.source_url, logger=logger)
    new_natives: tuple[str, ...] = ()
    if config.report_new:
        new_natives = report_new_natives(catalog, config.previous_cache_path, logger=logger)
    rendered = synthesize_catalog(catalog, type_map, config.mode)
    logger.debug(f"rendered natives={len(rendered)} mode={config.mode.value}")
    output_path = emit(rendered, config.mode, config.output_path, generated_at=generated_at)
    return GenerationResult(output_path=output_path, native_count=len(rendered), new_natives=new_natives)


__all__ = ["GenerationResult", "generate"]
