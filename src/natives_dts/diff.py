# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""Report natives added since a previously cached catalog."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .loader import load_optional_catalog
from .logging import ConsoleLogger
from .models import Catalog
from .naming import normalize


def catalog_names(catalog: Catalog) -> tuple[str, ...]:
    """Return the normalised native names of ``catalog`` in document order."""

    return tuple(normalize(entry.name) for entry in catalog.entries())


def diff_names(current: Iterable[str], previous: Iterable[str]) -> tuple[str, ...]:
    """Return names from ``current`` missing in ``previous``, first occurrence order."""

    known = set(previous)
    new_names: list[str] = []
    for name in current:
        if name not in known:
            known.add(name)
            new_names.append(name)
    return tuple(new_names)


def report_new_natives(current: Catalog, previous_path: Path, *, logger: ConsoleLogger) -> tuple[str, ...]:
    """Log the native count and every native absent from ``previous_path``.

    A missing previous catalog counts as empty, so every native is new.

    Raises:
        CacheIOError: If the previous catalog exists but cannot be read.
        ParseError: If the previous catalog is malformed.
    """

    previous = load_optional_catalog(previous_path)
    previous_names = catalog_names(previous) if previous is not None else ()
    if previous is None:
        logger.debug(f"previous catalog missing path={previous_path}")
    new_names = diff_names(catalog_names(current), previous_names)
    logger.info(f"Total natives: {len(current)}")
    logger.info(f"New natives: {len(new_names)}")
    for name in new_names:
        logger.info(f"  + {name}")
    return new_names


__all__ = ["catalog_names", "diff_names", "report_new_natives"]
