# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors
"""Command line entry point for the declaration generator."""

from __future__ import annotations

from typing import Annotated

import typer

from .config import GeneratorConfig
from .errors import NativesError
from .logging import build_logger
from .pipeline import generate

app = typer.Typer(
    name="natives-dts",
    help="Generate TypeScript declarations for the natives catalog.",
    add_completion=False,
)


@app.command()
def main(
    legacy: Annotated[
        bool,
        typer.Option("--legacy/--no-legacy", help="Emit the legacy 'natives' module layout."),
    ] = False,
) -> None:
    """Download (or reuse) the natives catalog and write ``dist/index.d.ts``."""

    config = GeneratorConfig.from_flags(legacy=legacy)
    logger = build_logger(emoji=config.emoji)
    try:
        result = generate(config, logger=logger)
    except NativesError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    logger.ok(f"Wrote {result.native_count} natives to {result.output_path}")


__all__ = ["app", "main"]
