# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""Identifier normalisation for native names."""

from __future__ import annotations


def normalize(source_name: str) -> str:
    """Convert a snake_case native name to lowerCamelCase.

    A single leading underscore is dropped first, so ``_SOME_NATIVE`` and
    ``SOME_NATIVE`` both become ``someNative``. Empty segments are not
    validated.

    Args:
        source_name: Native name as written in the catalog.

    Returns:
        str: lowerCamelCase identifier.
    """

    name = source_name[1:] if source_name.startswith("_") else source_name
    first, *rest = name.lower().split("_")
    return first + "".join(word[:1].upper() + word[1:] for word in rest)


__all__ = ["normalize"]
