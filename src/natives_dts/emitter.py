# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""Assemble rendered natives into a single declaration module."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Final

from .errors import CacheIOError
from .modes import GenerationMode
from .synthesizer import RenderedNative

TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
BANNER_PREFIX: Final[str] = "// This file was generated on "
BANNER_SUFFIX: Final[str] = " - DO NOT MODIFY MANUALLY"


def render_module(
    natives: Sequence[RenderedNative],
    mode: GenerationMode = GenerationMode.CURRENT,
    *,
    generated_at: datetime,
) -> str:
    """Return the full text of the declaration module.

    Args:
        natives: Rendered natives in emission order.
        mode: Layout selecting module name, reference and imports.
        generated_at: Timestamp written into the header banner.

    Returns:
        str: Module source ending with a newline.
    """

    profile = mode.profile
    body = "\n\n".join(native.text for native in natives)
    return (
        f"{BANNER_PREFIX}{generated_at.strftime(TIMESTAMP_FORMAT)}{BANNER_SUFFIX}\n"
        "\n"
        f'/// <reference types="{profile.reference}" />\n'
        "\n"
        "/**\n"
        f" * @module {profile.module_name}\n"
        " */\n"
        f'declare module "{profile.module_name}" {{\n'
        f"  {profile.import_statement}\n"
        "\n"
        f"{body}\n"
        "}\n"
    )


def emit(
    natives: Sequence[RenderedNative],
    mode: GenerationMode,
    output_path: Path,
    *,
    generated_at: datetime | None = None,
) -> Path:
    """Render the module and write it to ``output_path``.

    The text is rendered completely before the file is opened, and missing
    parent directories are created.

    Raises:
        CacheIOError: If the output file cannot be written.
    """

    text = render_module(natives, mode, generated_at=generated_at or datetime.now())
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise CacheIOError(f"{output_path}: unable to write declarations: {exc}") from exc
    return output_path


__all__ = ["BANNER_PREFIX", "emit", "render_module"]
